"""Supported applications and the transformer each one uses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final

from .formats import alacritty, kitty, termite, xresources, xterm
from .paths import BASE_CONFIG, BASE_HOME
from .themes import Theme

Converter = Callable[[Theme, str], str]


@dataclass(frozen=True)
class Application:
    """A terminal application whose config files can be re-themed."""

    name: str
    config_paths: tuple[tuple[str, str], ...]
    converter: Converter

    def convert(self, theme: Theme, text: str) -> str:
        """Return ``text`` with this application's colors taken from theme."""

        return self.converter(theme, text)


ALACRITTY: Final = Application(
    name="alacritty",
    config_paths=(
        (BASE_CONFIG, "alacritty/alacritty.yml"),
        (BASE_CONFIG, "alacritty.yml"),
        (BASE_HOME, ".config/alacritty/alacritty.yml"),
        (BASE_HOME, ".alacritty.yml"),
    ),
    converter=alacritty.convert,
)
KITTY: Final = Application(
    name="kitty",
    config_paths=(
        (BASE_CONFIG, "kitty/kitty.conf"),
        (BASE_HOME, ".config/kitty/kitty.conf"),
    ),
    converter=kitty.convert,
)
TERMITE: Final = Application(
    name="termite",
    config_paths=(
        (BASE_CONFIG, "termite/config"),
        (BASE_HOME, ".config/termite/config"),
    ),
    converter=termite.convert,
)
XRESOURCES: Final = Application(
    name="x",
    config_paths=(
        (BASE_HOME, ".Xresources"),
        (BASE_HOME, ".Xdefaults"),
    ),
    converter=xresources.convert,
)
XTERM: Final = Application(
    name="xterm",
    config_paths=(
        (BASE_HOME, ".Xresources"),
        (BASE_HOME, ".Xdefaults"),
    ),
    converter=xterm.convert,
)

APPLICATIONS: Final[tuple[Application, ...]] = (
    ALACRITTY,
    KITTY,
    TERMITE,
    XRESOURCES,
    XTERM,
)

_BY_NAME: Final[dict[str, Application]] = {
    app.name: app for app in APPLICATIONS
}


def application_names() -> tuple[str, ...]:
    """Return the names of all supported applications."""

    return tuple(_BY_NAME)


def get_application(name: str) -> Application:
    """Return the application called ``name`` (case-insensitive)."""

    key = name.strip().lower()
    try:
        return _BY_NAME[key]
    except KeyError:
        choices = ", ".join(_BY_NAME)
        raise ValueError(
            f"Unsupported application: {name!r}. Choose one of: {choices}."
        ) from None


def select_applications(
    names: list[str] | tuple[str, ...] | None,
) -> tuple[Application, ...]:
    """Return the applications named in ``names`` or all when empty.

    Duplicates are dropped; registry order is kept.
    """

    if not names:
        return APPLICATIONS
    wanted = {get_application(name).name for name in names}
    return tuple(app for app in APPLICATIONS if app.name in wanted)
