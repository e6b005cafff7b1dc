from __future__ import annotations

from teems.colors import RGBA
from teems.formats.termite import convert
from teems.themes import Theme

TERMITE_CONFIG = """
[colors]
#foreground_bold = #ffffff
#cursor = #dcdccc
foreground = rgba(175,183,192,1)
background = rgba(44,45,48,1)
#highlight = #242424
color0 = rgba(44,45,48,1)
color3 = #ffffff
color12 = rgba(117,154,189,1)
"""


def test_convert_replaces_colors_as_rgba(theme):
    expected = """
[colors]
#foreground_bold = #ffffff
#cursor = #dcdccc
foreground = rgba(255,255,255,1)
background = rgba(50,50,50,1)
#highlight = #242424
color0 = rgba(0,0,0,1)
color3 = rgba(3,3,3,1)
color12 = rgba(12,12,12,1)
"""

    assert convert(theme, TERMITE_CONFIG) == expected


def test_hex_source_becomes_functional_form():
    theme = Theme(name="t", colors={"foreground": RGBA(255, 255, 255, 1.0)})

    assert convert(theme, "foreground = #ffffff") == (
        "foreground = rgba(255,255,255,1)"
    )


def test_channel_order_and_alpha_are_kept():
    theme = Theme(name="t", colors={"color1": RGBA(10, 20, 30, 0.8)})

    assert convert(theme, "color1 = #000000") == "color1 = rgba(10,20,30,0.8)"


def test_keys_match_case_insensitively():
    theme = Theme(name="t", colors={"cursor": RGBA(1, 2, 3)})

    assert convert(theme, "Cursor=#000000 ; note") == (
        "Cursor=rgba(1,2,3,1) ; note"
    )


def test_missing_role_keeps_original_form():
    theme = Theme(name="t", colors={})
    text = "color0 = rgba(44,45,48,1)\ncolor3 = #ffffff"

    assert convert(theme, text) == text


def test_convert_does_not_affect_other_apps(theme):
    text = "\nURxvt.foreground: #afb7c0\nURxvt.background: #2c2d30\n"

    assert convert(theme, text) == text


def test_other_settings_are_untouched(theme):
    text = "[options]\nfont = Monospace 9\nscrollback_lines = 10000\n"

    assert convert(theme, text) == text


def test_convert_is_idempotent(theme):
    once = convert(theme, TERMITE_CONFIG)

    assert convert(theme, once) == once
