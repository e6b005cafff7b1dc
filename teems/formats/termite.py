"""Termite ``config`` color keys.

Termite accepts both ``#rrggbb`` and ``rgba(r,g,b,a)`` values. Replacements
are always written in the ``rgba()`` form so alpha survives a theme switch.
"""

from __future__ import annotations

import re

from ..themes import Theme
from .common import HEX_VALUE, map_lines, splice

COLOR_KEYS = (
    "foreground_bold",
    "foreground",
    "background",
    "cursor_foreground",
    "cursor",
    "highlight",
)

_KEY_ALTERNATION = "|".join(COLOR_KEYS)

_COLOR_LINE_PATTERN = re.compile(
    rf"""
    ^\s*
    (?P<name>color\d+|{_KEY_ALTERNATION})
    \s*=\s*
    (?P<value>{HEX_VALUE}|rgba\([^)]*\))
    """,
    re.VERBOSE | re.IGNORECASE,
)


def _convert_line(theme: Theme, line: str) -> str:
    match = _COLOR_LINE_PATTERN.match(line)
    if match is None:
        return line
    color = theme.get(match.group("name").lower())
    if color is None:
        return line
    return splice(line, match, "value", color.to_rgba())


def convert(theme: Theme, text: str) -> str:
    """Rewrite Termite color keys with ``theme`` colors as ``rgba()``."""

    return map_lines(text, lambda line: _convert_line(theme, line))
