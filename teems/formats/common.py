"""Helpers shared by the format transformers.

Every format module exposes ``convert(theme, text) -> str``.
"""

from __future__ import annotations

import re
from typing import Callable

from ..themes import Theme

HEX_VALUE = r"\#[0-9A-Fa-f]{6}(?!\w)"


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` only so ``\\r`` stays with its line."""

    return text.split("\n")


def join_lines(lines: list[str]) -> str:
    """Inverse of ``split_lines``."""

    return "\n".join(lines)


def map_lines(text: str, transform: Callable[[str], str]) -> str:
    """Apply ``transform`` to every line of ``text``."""

    return join_lines([transform(line) for line in split_lines(text)])


def splice(line: str, match: re.Match[str], group: str, value: str) -> str:
    """Replace the span of ``group`` in ``line`` with ``value``."""

    start, end = match.span(group)
    return line[:start] + value + line[end:]


def resolve_hex(theme: Theme, role: str, original: str) -> str:
    """Return the theme's ``#rrggbb`` for ``role`` or ``original``."""

    color = theme.get(role)
    if color is None:
        return original
    return color.to_hex()


def substitute_hex(
    pattern: re.Pattern[str],
    theme: Theme,
    line: str,
) -> str:
    """Rewrite the ``value`` group of ``pattern`` with the ``name`` role."""

    match = pattern.match(line)
    if match is None:
        return line
    value = resolve_hex(theme, match.group("name"), match.group("value"))
    return splice(line, match, "value", value)
