"""Tests for column heights and gravity offsets."""

import pytest

from tablepdf.fonts import FontStyle
from tablepdf.layout.alignment import horizontal_delta, vertical_delta
from tablepdf.layout.sizing import column_height, line_height, row_height
from tablepdf.layout.state import ColumnState
from tablepdf.template import Column


def _text_column(lines: list[str], font_size: float = 10) -> ColumnState:
    return ColumnState(spec=Column(text="\n".join(lines), font_size=font_size), style=FontStyle.REGULAR,
                       width=100, lines=lines)


def test_line_height_scales_cap_height(metrics) -> None:
    assert line_height(metrics, FontStyle.REGULAR, 10) == pytest.approx(7)


def test_text_column_height_counts_padding_line(metrics) -> None:
    # (7 + 3) per line, plus one more for the padding below the last line
    assert column_height(_text_column(["a", "b"]), metrics, 3) == pytest.approx(30)


def test_image_column_height(metrics) -> None:
    column = ColumnState(spec=Column(content_type="image", image_height=40), style=FontStyle.REGULAR,
                         width=100, image_pending=True)
    assert column_height(column, metrics, 3) == 46


def test_drawn_image_counts_as_empty(metrics) -> None:
    column = ColumnState(
        spec=Column(content_type="image", image_height=40, font_size=10), style=FontStyle.REGULAR, width=100
    )
    assert column_height(column, metrics, 3) == pytest.approx(10)


def test_row_height_is_tallest_column(metrics) -> None:
    short = _text_column(["a"])
    tall = _text_column(["a", "b", "c"])

    assert row_height([short, tall], metrics, 3) == pytest.approx(40)
    assert short.height == pytest.approx(20)
    assert tall.height == pytest.approx(40)


@pytest.mark.parametrize("gravity", ["top", "center", "bottom"])
def test_no_vertical_offset_for_tallest_column(gravity: str) -> None:
    assert vertical_delta(gravity, 40, 40, 3) == 0


def test_vertical_offsets() -> None:
    assert vertical_delta("top", 40, 20, 3) == 0
    assert vertical_delta("center", 40, 20, 3) == 7
    assert vertical_delta("bottom", 40, 20, 3) == 14


def test_horizontal_offsets() -> None:
    assert horizontal_delta("left", 90, 10, 3) == 0
    assert horizontal_delta("center", 90, 10, 3) == 37
    assert horizontal_delta("right", 90, 10, 3) == 74
