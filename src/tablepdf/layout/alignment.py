"""Gravity offsets for content smaller than its cell."""

from tablepdf.types import HorizontalGravity, VerticalGravity


def horizontal_delta(
    gravity: HorizontalGravity, column_width: float, content_width: float, cell_x_margin: float
) -> float:
    """
    Offset to add to the content's x origin inside a column.

    Both cell margins are kept free, so right-aligned content still ends one
    margin before the column edge.

    Args:
        gravity: "left", "center" or "right".
        column_width: Column width in points.
        content_width: Measured content width in points.
        cell_x_margin: Horizontal cell margin in points.

    Returns:
        Offset in points (0 for left).
    """
    if gravity == "center":
        return (column_width - content_width - cell_x_margin * 2) / 2
    if gravity == "right":
        return column_width - content_width - cell_x_margin * 2
    return 0.0


def vertical_delta(
    gravity: VerticalGravity, row_height: float, column_height: float, cell_y_margin: float
) -> float:
    """
    Downward offset for a column shorter than its row.

    The tallest column of a row is the reference and never moves.

    Args:
        gravity: "top", "center" or "bottom".
        row_height: Row height in points.
        column_height: The column's own height in points.
        cell_y_margin: Vertical cell margin in points.

    Returns:
        Offset in points (0 for top, or when the column is as tall as the row).
    """
    if column_height >= row_height:
        return 0.0
    if gravity == "center":
        return (row_height - column_height - cell_y_margin * 2) / 2
    if gravity == "bottom":
        return row_height - column_height - cell_y_margin * 2
    return 0.0
