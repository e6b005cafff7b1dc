"""Apply a theme to every supported application's config files."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from .apps import APPLICATIONS, Application
from .paths import resolve_config_paths
from .themes import Theme

logger = logging.getLogger(__name__)

Resolver = Callable[[Iterable[tuple[str, str]]], list[Path]]

STATUS_UPDATED = "updated"
STATUS_UNCHANGED = "unchanged"
STATUS_WOULD_UPDATE = "would update"
STATUS_FAILED = "failed"


@dataclass(frozen=True)
class FileResult:
    """Outcome of re-theming one config file."""

    app: str
    path: Path
    status: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Return ``True`` unless reading or writing the file failed."""

        return self.status != STATUS_FAILED


@dataclass(frozen=True)
class ActivationReport:
    """Per-file results of one activation run, in processing order."""

    theme: str
    results: tuple[FileResult, ...] = ()
    dry_run: bool = False

    @property
    def failures(self) -> tuple[FileResult, ...]:
        """Return the results for files that could not be processed."""

        return tuple(result for result in self.results if not result.ok)

    @property
    def changed(self) -> tuple[FileResult, ...]:
        """Return the results for files that were (or would be) rewritten."""

        return tuple(
            result
            for result in self.results
            if result.status in (STATUS_UPDATED, STATUS_WOULD_UPDATE)
        )

    @property
    def ok(self) -> bool:
        """Return ``True`` when every file was processed."""

        return not self.failures


def apply_to_file(
    app: Application,
    theme: Theme,
    path: Path,
    *,
    dry_run: bool = False,
) -> FileResult:
    """Read ``path``, convert it for ``app`` and write it back if changed."""

    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            original = handle.read()
    except (OSError, UnicodeError) as exc:
        logger.warning("Could not read %s config %s: %s", app.name, path, exc)
        return FileResult(app.name, path, STATUS_FAILED, f"read: {exc}")

    converted = app.convert(theme, original)
    if converted == original:
        logger.debug("%s config %s already up to date", app.name, path)
        return FileResult(app.name, path, STATUS_UNCHANGED)

    if dry_run:
        return FileResult(app.name, path, STATUS_WOULD_UPDATE)

    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(converted)
    except OSError as exc:
        logger.warning("Could not write %s config %s: %s", app.name, path, exc)
        return FileResult(app.name, path, STATUS_FAILED, f"write: {exc}")

    logger.debug("Rewrote %s config %s", app.name, path)
    return FileResult(app.name, path, STATUS_UPDATED)


def activate(
    theme: Theme,
    applications: Iterable[Application] = APPLICATIONS,
    *,
    dry_run: bool = False,
    resolver: Resolver = resolve_config_paths,
) -> ActivationReport:
    """Apply ``theme`` to every existing config file of ``applications``.

    Applications and their files are processed one at a time. A failure on
    one file is recorded in the report and does not stop the run; files
    rewritten before it stay rewritten.
    """

    results: list[FileResult] = []
    for app in applications:
        paths = resolver(app.config_paths)
        if not paths:
            logger.debug("No %s config files found", app.name)
        for path in paths:
            logger.debug("Processing %s config %s", app.name, path)
            results.append(apply_to_file(app, theme, path, dry_run=dry_run))
    return ActivationReport(
        theme=theme.name,
        results=tuple(results),
        dry_run=dry_run,
    )
