"""Table and column width distribution."""

from tablepdf.errors import InvalidColumnWidthRatio, InvalidTableWidthRatio

# Allowed deviation of the column ratio sum from 1
RATIO_SUM_TOLERANCE = 0.01


def check_ratio_sum(ratios: list[float]) -> None:
    """
    Check that column width ratios add up to 1 within tolerance.

    Raises:
        InvalidColumnWidthRatio: If the sum lies outside [0.99, 1.01].
    """
    total = sum(ratios)
    if total < 1 - RATIO_SUM_TOLERANCE or total > 1 + RATIO_SUM_TOLERANCE:
        raise InvalidColumnWidthRatio(f"{InvalidColumnWidthRatio.description} (got {total:g})")


def table_width(page_width: float, left_margin: float, right_margin: float, width_ratio: float) -> float:
    """
    Calculate the absolute width of a table.

    Args:
        page_width: Page width in points.
        left_margin: Table left margin in points.
        right_margin: Table right margin in points.
        width_ratio: Fraction of the usable width, in (0, 1].

    Returns:
        Table width in points.

    Raises:
        InvalidTableWidthRatio: If width_ratio is outside (0, 1].
    """
    if not 0 < width_ratio <= 1:
        raise InvalidTableWidthRatio()
    return (page_width - (left_margin + right_margin)) * width_ratio


def column_widths(width: float, ratios: list[float] | None, column_count: int) -> dict[int, float]:
    """
    Split a table width into absolute column widths.

    Args:
        width: Table width in points.
        ratios: Per-column fractions of the width, or None for an even split.
        column_count: Number of columns in the table.

    Returns:
        Mapping of column index to width in points.

    Raises:
        InvalidColumnWidthRatio: If the ratios don't add up to 1.
    """
    if not ratios:
        return {index: width / column_count for index in range(column_count)}

    check_ratio_sum(ratios)
    return {index: width * ratio for index, ratio in enumerate(ratios)}
