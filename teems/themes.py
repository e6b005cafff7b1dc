"""Theme values and catalog deserialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .colors import RGBA, ColorFormatError, parse_color


class CatalogError(ValueError):
    """Raised when a theme catalog document is malformed."""


@dataclass(frozen=True)
class Theme:
    """A named mapping from color roles to RGBA values."""

    name: str
    colors: Mapping[str, RGBA] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "colors", MappingProxyType(dict(self.colors))
        )

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.colors.items())))

    def get(self, role: str) -> RGBA | None:
        """Return the color for ``role`` or ``None`` if it is not set."""

        return self.colors.get(role)

    def describe(self) -> str:
        """Return a multi-line summary listing every role."""

        lines = [f"Name: {self.name}", "Colors:"]
        for role in sorted(self.colors, key=_role_sort_key):
            lines.append(f"\t{role}: {self.colors[role].to_hex()}")
        return "\n".join(lines)


def parse_theme(payload: Any) -> Theme:
    """Build a ``Theme`` from one catalog entry."""

    if not isinstance(payload, dict):
        typename = type(payload).__name__
        raise CatalogError(f"Theme entries must be mappings, got {typename}.")

    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise CatalogError("Theme key 'name' must be a non-empty string.")

    raw_colors = payload.get("colors")
    if not isinstance(raw_colors, dict):
        raise CatalogError(f"Theme '{name}' key 'colors' must be a mapping.")

    colors: dict[str, RGBA] = {}
    for role, value in raw_colors.items():
        if not isinstance(role, str):
            raise CatalogError(
                f"Theme '{name}' has a non-string role {role!r}."
            )
        try:
            colors[role] = parse_color(value)
        except ColorFormatError as exc:
            raise CatalogError(
                f"Theme '{name}' role '{role}': {exc}"
            ) from exc
    return Theme(name=name, colors=colors)


def parse_catalog(entries: Iterable[Any]) -> tuple[Theme, ...]:
    """Parse a sequence of theme entries, rejecting duplicate names."""

    themes: list[Theme] = []
    seen: set[str] = set()
    for entry in entries:
        theme = parse_theme(entry)
        if theme.name in seen:
            raise CatalogError(f"Duplicate theme name '{theme.name}'.")
        seen.add(theme.name)
        themes.append(theme)
    return tuple(themes)


def find_theme(themes: Iterable[Theme], name: str) -> Theme | None:
    """Return the theme called ``name`` if present."""

    for theme in themes:
        if theme.name == name:
            return theme
    return None


def _role_sort_key(role: str) -> tuple[int, int, str]:
    if role.startswith("color") and role[5:].isdigit():
        return (0, int(role[5:]), role)
    return (1, 0, role)
