from __future__ import annotations

import pytest

from teems.colors import RGBA
from teems.themes import Theme


def palette_theme(**overrides: RGBA) -> Theme:
    """Theme where ``colorN`` is ``RGBA(N, N, N)`` plus a few named roles."""

    colors = {f"color{index}": RGBA(index, index, index) for index in range(16)}
    colors.update(
        foreground=RGBA(255, 255, 255),
        background=RGBA(50, 50, 50),
        cursor=RGBA(60, 60, 60),
        text=RGBA(70, 70, 70),
        selection_foreground=RGBA(70, 70, 70),
        selection_background=RGBA(70, 70, 70),
    )
    colors.update(overrides)
    return Theme(name="theme", colors=colors)


@pytest.fixture
def theme() -> Theme:
    return palette_theme()
