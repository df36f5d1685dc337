"""Column and row height computation."""

from tablepdf.fonts import FontStyle
from tablepdf.fonts.metrics import FontMetrics
from tablepdf.layout.state import ColumnState


def line_height(metrics: FontMetrics, style: FontStyle, font_size: float) -> float:
    """Height of one text line: the cap height at the given size, in points."""
    return font_size * metrics.cap_height(style) / 1000


def column_height(column: ColumnState, metrics: FontMetrics, cell_y_margin: float) -> float:
    """
    Rendered height of a column's remaining content.

    An image still to be drawn takes its height plus both cell margins. Text
    takes one line height plus margin per pending line, plus one more for the
    padding below the last line. A column whose image is already drawn counts
    as empty text.

    Args:
        column: Column state with wrapped lines.
        metrics: Font metrics provider.
        cell_y_margin: Vertical cell margin in points.

    Returns:
        Height in points.
    """
    if column.image_pending:
        return column.spec.image_height + cell_y_margin * 2

    text_height = line_height(metrics, column.style, column.spec.font_size)
    return (text_height + cell_y_margin) * (len(column.lines) + 1)


def row_height(columns: list[ColumnState], metrics: FontMetrics, cell_y_margin: float) -> float:
    """
    Height of a row: the tallest of its columns.

    Each column's own height is stored on the column for vertical alignment.

    Args:
        columns: Column states of the row.
        metrics: Font metrics provider.
        cell_y_margin: Vertical cell margin in points.

    Returns:
        Row height in points.
    """
    height = 0.0
    for column in columns:
        column.height = column_height(column, metrics, cell_y_margin)
        height = max(height, column.height)
    return height
