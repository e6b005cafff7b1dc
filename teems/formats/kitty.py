"""kitty ``kitty.conf`` color keys (``color4 #81a2be``)."""

from __future__ import annotations

import re

from ..themes import Theme
from .common import HEX_VALUE, map_lines, substitute_hex

COLOR_KEYS = (
    "foreground",
    "background",
    "cursor",
    "cursor_text_color",
    "url_color",
    "active_border_color",
    "inactive_border_color",
    "bell_border_color",
    "active_tab_foreground",
    "active_tab_background",
    "inactive_tab_foreground",
    "inactive_tab_background",
    "tab_bar_background",
    "selection_foreground",
    "selection_background",
)

_KEY_ALTERNATION = "|".join(COLOR_KEYS)

_COLOR_LINE_PATTERN = re.compile(
    rf"""
    ^\s*
    (?P<name>color\d+|{_KEY_ALTERNATION})
    \s+
    (?P<value>{HEX_VALUE})
    """,
    re.VERBOSE,
)


def convert(theme: Theme, text: str) -> str:
    """Rewrite kitty color keys with ``theme`` colors."""

    return map_lines(
        text,
        lambda line: substitute_hex(_COLOR_LINE_PATTERN, theme, line),
    )
