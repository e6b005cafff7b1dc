"""Alacritty YAML color blocks.

Alacritty declares its palette twice, once under ``normal:`` and once under
``bright:``, with the same hue names in both blocks::

    colors:
      primary:
        background: '0x2E3440'
      normal:
        black:      '0x3B4252'
      bright:
        black:      '0x4C566A'

The block a hue appears in decides its role, so lines are read in order
while tracking which block is open.
"""

from __future__ import annotations

import enum
import re

from ..themes import Theme
from .common import join_lines, splice, split_lines

HUES = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)
BRIGHT_OFFSET = len(HUES)

_BRIGHT_PATTERN = re.compile(r"^\s*bright:")
_NORMAL_PATTERN = re.compile(r"^\s*normal:")
_COLOR_LINE_PATTERN = re.compile(
    r"""
    ^
    (?P<leading>\s*)
    (?P<name>black|red|green|yellow|blue|magenta|cyan|white
        |foreground|background)
    (?P<middle>:\s*(?P<quote>['"])0x)
    (?P<value>\w{6})
    (?P<trailing>(?P=quote).*)
    """,
    re.VERBOSE,
)


class Mode(enum.Enum):
    """Palette block currently being read."""

    NORMAL = "normal"
    BRIGHT = "bright"


def next_mode(line: str, mode: Mode) -> Mode:
    """Return the mode in effect for ``line`` given the previous ``mode``."""

    if _BRIGHT_PATTERN.match(line):
        return Mode.BRIGHT
    if _NORMAL_PATTERN.match(line):
        return Mode.NORMAL
    return mode


def role_for(name: str, mode: Mode) -> str:
    """Map an Alacritty color name to a theme role."""

    if name in ("foreground", "background"):
        return name
    index = HUES.index(name)
    if mode is Mode.BRIGHT:
        index += BRIGHT_OFFSET
    return f"color{index}"


def convert(theme: Theme, text: str) -> str:
    """Rewrite Alacritty ``'0xRRGGBB'`` literals with ``theme`` colors."""

    mode = Mode.NORMAL
    results: list[str] = []
    for line in split_lines(text):
        mode = next_mode(line, mode)
        match = _COLOR_LINE_PATTERN.match(line)
        if match is None:
            results.append(line)
            continue
        color = theme.get(role_for(match.group("name"), mode))
        if color is None:
            results.append(line)
            continue
        results.append(splice(line, match, "value", color.to_hex()[1:]))
    return join_lines(results)
