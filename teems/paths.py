"""Platform base directories and config path resolution."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import platform
from typing import Iterable

logger = logging.getLogger(__name__)

BASE_HOME = "home"
BASE_CONFIG = "config"

SUPPORTED_BASES = (BASE_HOME, BASE_CONFIG)


def home_dir() -> Path:
    """Return the current user's home directory."""

    return Path.home()


def config_dir() -> Path:
    """Return the per-user configuration directory for this platform.

    ``$XDG_CONFIG_HOME`` wins when set; otherwise the platform default is
    used: ``~/Library/Application Support`` on macOS, ``%APPDATA%`` on
    Windows and ``~/.config`` on Linux and other Unix systems.
    """

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()
    system = platform.system()
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support"
    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    return Path.home() / ".config"


def base_dir(base: str) -> Path:
    """Return the directory for a named base (``home`` or ``config``)."""

    if base == BASE_HOME:
        return home_dir()
    if base == BASE_CONFIG:
        return config_dir()
    choices = ", ".join(SUPPORTED_BASES)
    raise ValueError(f"Unknown base directory {base!r}. Expected: {choices}.")


def candidate_paths(config_paths: Iterable[tuple[str, str]]) -> list[Path]:
    """Join each ``(base, relative)`` pair into a path, in declared order."""

    return [base_dir(base) / relative for base, relative in config_paths]


def resolve_config_paths(
    config_paths: Iterable[tuple[str, str]],
) -> list[Path]:
    """Return the existing config files, resolved, de-duplicated and sorted.

    Two candidates that point at the same file (for example ``~/.config``
    reached both as the config base and through the home base) collapse to
    one entry so a file is never transformed twice in one run. Candidates that
    cannot be inspected (for example behind an unsearchable directory) are
    logged and skipped.
    """

    files: set[Path] = set()
    for path in candidate_paths(config_paths):
        try:
            if not path.is_file():
                continue
        except OSError as exc:
            logger.warning("Skipping config path %s: %s", path, exc)
            continue
        files.add(path.resolve())
    return sorted(files)
