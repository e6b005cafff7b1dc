"""XTerm resources (``XTerm*color0: #2c2d30``).

The class name is matched case-insensitively and always written back as
``XTerm*``.
"""

from __future__ import annotations

import re

from ..themes import Theme
from .common import HEX_VALUE, map_lines, resolve_hex

NAMESPACE = "XTerm*"

_COLOR_LINE_PATTERN = re.compile(
    rf"""
    ^XTerm\*
    (?P<name>color\d+|foreground|background)
    (?P<middle>:\s*)
    (?P<value>{HEX_VALUE})
    (?P<trailing>.*)
    """,
    re.VERBOSE | re.IGNORECASE,
)


def _convert_line(theme: Theme, line: str) -> str:
    match = _COLOR_LINE_PATTERN.match(line)
    if match is None:
        return line
    name = match.group("name")
    value = resolve_hex(theme, name.lower(), match.group("value"))
    return (
        f"{NAMESPACE}{name}{match.group('middle')}{value}"
        f"{match.group('trailing')}"
    )


def convert(theme: Theme, text: str) -> str:
    """Rewrite XTerm colors with ``theme`` colors."""

    return map_lines(text, lambda line: _convert_line(theme, line))
