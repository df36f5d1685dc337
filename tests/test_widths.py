"""Tests for table and column width distribution."""

import pytest

from tablepdf.errors import InvalidColumnWidthRatio, InvalidTableWidthRatio
from tablepdf.layout.widths import column_widths, table_width


def test_ratios_scale_table_width() -> None:
    assert column_widths(400, [0.75, 0.25], 2) == {0: 300, 1: 100}


def test_no_ratios_split_evenly() -> None:
    widths = column_widths(300, None, 3)
    assert widths == {0: 100, 1: 100, 2: 100}


@pytest.mark.parametrize("ratios", [[0.5, 0.5], [0.2, 0.3, 0.5], [0.1] * 10, [0.25, 0.25, 0.125, 0.375]])
def test_widths_sum_to_table_width(ratios: list[float]) -> None:
    widths = column_widths(517.3, ratios, len(ratios))
    assert sum(widths.values()) == pytest.approx(517.3)


def test_ratio_sum_within_tolerance_is_accepted() -> None:
    widths = column_widths(100, [0.5, 0.505], 2)
    assert widths[1] == pytest.approx(50.5)


@pytest.mark.parametrize("ratios", [[0.5, 0.4], [0.7, 0.4]])
def test_ratio_sum_outside_tolerance_fails(ratios: list[float]) -> None:
    with pytest.raises(InvalidColumnWidthRatio):
        column_widths(100, ratios, 2)


def test_table_width_uses_page_margins_and_ratio() -> None:
    assert table_width(612, 30, 30, 1.0) == 552
    assert table_width(612, 30, 30, 0.5) == 276


@pytest.mark.parametrize("ratio", [0, -0.5, 1.01])
def test_table_width_ratio_must_be_in_range(ratio: float) -> None:
    with pytest.raises(InvalidTableWidthRatio):
        table_width(612, 30, 30, ratio)
