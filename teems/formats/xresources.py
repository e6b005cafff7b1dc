"""Wildcard X resources (``*.color0: #2c2d30``) in ``~/.Xresources``.

Only the bare ``*`` namespace is rewritten. Entries scoped to one program,
such as ``URxvt.foreground`` or ``XTerm*foreground``, belong to that program
and are left alone.
"""

from __future__ import annotations

import re

from ..themes import Theme
from .common import HEX_VALUE, map_lines, substitute_hex

_COLOR_LINE_PATTERN = re.compile(
    rf"""
    ^\*\.?
    (?P<name>color\d+|foreground|background)
    :\s*
    (?P<value>{HEX_VALUE})
    """,
    re.VERBOSE,
)


def convert(theme: Theme, text: str) -> str:
    """Rewrite wildcard X resource colors with ``theme`` colors."""

    return map_lines(
        text,
        lambda line: substitute_hex(_COLOR_LINE_PATTERN, theme, line),
    )
