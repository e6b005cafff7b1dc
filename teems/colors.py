"""RGBA color values used by themes and config transformers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import math
from typing import Any

from rich.color import Color, ColorParseError
from rich.color_triplet import ColorTriplet

HEX_COLOR_LENGTH = 7


class ColorFormatError(ValueError):
    """Raised when a color entry cannot be parsed."""


@dataclass(frozen=True)
class RGBA:
    """A color with 8-bit red/green/blue channels and a float alpha."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ColorFormatError(
                    f"Color channel {channel} is outside 0-255."
                )
        if not math.isfinite(self.alpha):
            raise ColorFormatError(f"Alpha {self.alpha!r} is not finite.")

    @property
    def triplet(self) -> ColorTriplet:
        """Return the color without alpha as a rich ``ColorTriplet``."""

        return ColorTriplet(self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Render as ``#rrggbb``; alpha is dropped."""

        return self.triplet.hex

    def to_rgba(self) -> str:
        """Render as ``rgba(r,g,b,a)`` without padding or spaces."""

        return (
            f"rgba({self.red},{self.green},{self.blue},"
            f"{_format_alpha(self.alpha)})"
        )


def parse_hex(value: str) -> RGBA:
    """Parse a ``#RRGGBB`` string. Alpha defaults to 1.0."""

    if len(value) != HEX_COLOR_LENGTH or not value.startswith("#"):
        raise ColorFormatError(
            f"Expected a color like '#RRGGBB', got {value!r}."
        )
    try:
        triplet = Color.parse(value).get_truecolor()
    except ColorParseError as exc:
        raise ColorFormatError(f"Invalid hex color {value!r}.") from exc
    return RGBA(triplet.red, triplet.green, triplet.blue, 1.0)


def from_tuple(value: Any) -> RGBA:
    """Build a color from a ``[r, g, b, a]`` sequence."""

    if not isinstance(value, (list, tuple)) or len(value) != 4:
        raise ColorFormatError(
            f"Expected a 4-element [r, g, b, a] list, got {value!r}."
        )
    *channels, alpha = value
    for channel in channels:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise ColorFormatError(
                f"Color channels must be integers, got {channel!r}."
            )
    if isinstance(alpha, bool) or not isinstance(alpha, (int, float)):
        raise ColorFormatError(f"Alpha must be a number, got {alpha!r}.")
    red, green, blue = channels
    return RGBA(red, green, blue, float(alpha))


def parse_color(value: Any) -> RGBA:
    """Parse a catalog color entry: a hex string or an ``[r, g, b, a]`` list.

    The string form is tried first. Any other shape is rejected.
    """

    if isinstance(value, str):
        return parse_hex(value)
    if isinstance(value, (list, tuple)):
        return from_tuple(value)
    typename = type(value).__name__
    raise ColorFormatError(
        f"Expected a hex string or [r, g, b, a] list, got {typename}."
    )


def _format_alpha(alpha: float) -> str:
    # Plain decimal, never exponent notation: 1e-05 -> 0.00001.
    text = format(Decimal(repr(float(alpha))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
