from __future__ import annotations

import math

import pytest

from teems.colors import RGBA, ColorFormatError, from_tuple, parse_color
from teems.colors import parse_hex


def test_parse_hex_reads_channels_and_defaults_alpha():
    color = parse_hex("#FFAABB")

    assert (color.red, color.green, color.blue) == (255, 170, 187)
    assert color.alpha == 1.0


def test_parse_color_accepts_tuple_form():
    assert parse_color([255, 170, 187, 1.0]) == parse_color("#FFAABB")


@pytest.mark.parametrize("value", ["#FFF", "#FFAABBCC", "FFAABB", ""])
def test_parse_hex_rejects_wrong_length(value):
    with pytest.raises(ColorFormatError):
        parse_hex(value)


def test_parse_hex_requires_hash_prefix():
    # Seven characters, but a color name rather than a hex literal.
    with pytest.raises(ColorFormatError):
        parse_hex("magenta")


def test_parse_hex_rejects_non_hex_digits():
    with pytest.raises(ColorFormatError):
        parse_hex("#GGHHII")


@pytest.mark.parametrize(
    "value",
    [
        [255, 170, 187],
        [255, 170, 187, 1.0, 0],
        [255, 170, 187.5, 1.0],
        [True, 0, 0, 1.0],
        [256, 0, 0, 1.0],
        [-1, 0, 0, 1.0],
        [0, 0, 0, "1"],
    ],
)
def test_from_tuple_rejects_malformed_entries(value):
    with pytest.raises(ColorFormatError):
        from_tuple(value)


def test_parse_color_rejects_other_shapes():
    with pytest.raises(ColorFormatError):
        parse_color({"red": 1})
    with pytest.raises(ColorFormatError):
        parse_color(None)


def test_alpha_must_be_finite():
    with pytest.raises(ColorFormatError):
        RGBA(0, 0, 0, math.nan)


def test_to_hex_is_lowercase_and_zero_padded():
    assert RGBA(10, 0, 255, 0.3).to_hex() == "#0a00ff"


def test_to_rgba_uses_shortest_alpha():
    assert RGBA(255, 255, 255, 1.0).to_rgba() == "rgba(255,255,255,1)"
    assert RGBA(1, 2, 3, 0.5).to_rgba() == "rgba(1,2,3,0.5)"
    assert RGBA(1, 2, 3, 0).to_rgba() == "rgba(1,2,3,0)"


def test_channels_are_rendered_in_rgb_order():
    assert RGBA(10, 20, 30).to_rgba() == "rgba(10,20,30,1)"


def test_to_rgba_never_uses_exponent_notation():
    assert RGBA(1, 2, 3, 1e-05).to_rgba() == "rgba(1,2,3,0.00001)"
    assert RGBA(1, 2, 3, 0.25).to_rgba() == "rgba(1,2,3,0.25)"
