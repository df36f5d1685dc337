"""Shared fixtures for layout tests."""

import pytest

from tablepdf.fonts import STANDARD_FAMILIES, FontStyle
from tablepdf.render.recording import RecordingSurface
from tablepdf.utils.dimensions import PageSize


class FakeMetrics:
    """
    Fixed-width metrics: every glyph is the same width.

    With the defaults and a 10pt font, each character is 5pt wide and a line
    is 7pt tall, so a line plus the default 3pt cell margin advances 10pt.
    """

    def __init__(self, glyph_width: float = 500, cap: float = 700) -> None:
        self.glyph_width = glyph_width
        self.cap = cap

    def font_name(self, style: FontStyle) -> str:
        return STANDARD_FAMILIES["times"].font_name(style)

    def string_width(self, style: FontStyle, text: str) -> float:
        return len(text) * self.glyph_width

    def cap_height(self, style: FontStyle) -> float:
        return self.cap


@pytest.fixture
def metrics() -> FakeMetrics:
    return FakeMetrics()


@pytest.fixture
def small_page() -> PageSize:
    """A 200 x 200 point page: with 30pt margins, 140pt of usable height."""
    return PageSize(200.0, 200.0, "test")


@pytest.fixture
def surface(small_page: PageSize) -> RecordingSurface:
    return RecordingSurface(page_size=small_page)
