"""Configuration loading for teems."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .apps import get_application
from .paths import config_dir
from .themes import CatalogError, Theme, find_theme, parse_catalog


class ConfigError(Exception):
    """Raised when the theme catalog cannot be loaded."""


_DEFAULT_CONFIG_ENV = "TEEMS_CONFIG"
_DEFAULT_CONFIG_NAME = Path("teems") / "themes.yaml"


@dataclass(frozen=True)
class AppConfig:
    """In-memory representation of a teems theme catalog document."""

    path: Path
    themes: tuple[Theme, ...] = ()
    apps: Optional[tuple[str, ...]] = None

    @property
    def theme_names(self) -> tuple[str, ...]:
        """Return theme names in document order."""

        return tuple(theme.name for theme in self.themes)

    def find_theme(self, name: str) -> Theme | None:
        """Return the theme called ``name`` if the catalog defines it."""

        return find_theme(self.themes, name)


def default_config_path() -> Path:
    """Return the default catalog path, honoring ``TEEMS_CONFIG``."""

    env_value = os.environ.get(_DEFAULT_CONFIG_ENV)
    if env_value:
        return Path(env_value).expanduser()
    return config_dir() / _DEFAULT_CONFIG_NAME


def load_config(path: Path | None = None) -> AppConfig:
    """Load the theme catalog from ``path`` or the default location.

    The document is either a list of themes or a mapping with a ``themes``
    list and an optional ``apps`` list. JSON documents are accepted too.
    """

    config_path = (path or default_config_path()).expanduser()

    if not config_path.exists():
        raise ConfigError(f"Theme catalog not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw: Any = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        message = f"Failed to parse theme catalog {config_path}: {exc}"
        raise ConfigError(message) from exc
    except OSError as exc:
        message = f"Failed to read theme catalog {config_path}: {exc}"
        raise ConfigError(message) from exc

    if isinstance(raw, list):
        raw = {"themes": raw}
    if not isinstance(raw, dict):
        expected = type(raw).__name__
        message = (
            f"Expected a list or mapping at the top level of {config_path}, "
            f"got {expected}."
        )
        raise ConfigError(message)

    entries = raw.get("themes", [])
    if not isinstance(entries, list):
        message = "Config key 'themes' must be a list"
        raise ConfigError(f"{message} (file: {config_path}).")

    try:
        themes = parse_catalog(entries)
    except CatalogError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc

    apps = _coerce_apps(raw.get("apps"), config_path)
    return AppConfig(path=config_path, themes=themes, apps=apps)


def _coerce_apps(value: Any, config_path: Path) -> Optional[tuple[str, ...]]:
    if value is None:
        return None
    if not isinstance(value, list) or not all(
        isinstance(item, str) for item in value
    ):
        raise ConfigError(
            f"Config key 'apps' must be a list of names (file: {config_path})."
        )
    try:
        return tuple(get_application(item).name for item in value)
    except ValueError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc
