"""Border lines for tables, rows and columns."""

from tablepdf.layout.state import RowState, TableState
from tablepdf.render.surface import Surface


class BorderComposer:
    """Draws borders against the final geometry of what was laid out."""

    def __init__(self, surface: Surface) -> None:
        self.surface = surface

    def draw_table(self, table: TableState) -> None:
        """
        Draw the table outline for the part of the table on the current page.

        Args:
            table: Table state with its anchor and height on this page.
        """
        spec = table.spec
        if not spec.draw_boundary:
            return

        left = table.left
        right = table.left + table.width
        top = table.y_anchor
        bottom = table.bottom
        color = spec.boundary_color_components
        thickness = spec.boundary_thickness

        self.surface.draw_line(left, top, right, top, color, thickness)
        self.surface.draw_line(left, bottom, right, bottom, color, thickness)
        self.surface.draw_line(left, top, left, bottom, color, thickness)
        self.surface.draw_line(right, top, right, bottom, color, thickness)

    def draw_row(self, row: RowState, table: TableState) -> None:
        """
        Draw a row's bottom line and its columns' vertical lines.

        Must be called after the row's height was added to the table, so the
        row's bottom edge is the table's current bottom.

        Args:
            row: Row state with its height on this page.
            table: Table state the row belongs to.
        """
        bottom = table.bottom
        if row.spec.draw_bottom_line:
            self.surface.draw_line(
                table.left, bottom, table.left + table.width, bottom,
                row.spec.line_color_components, row.spec.line_thickness,
            )

        x = table.left
        for column in row.columns:
            x += column.width
            if column.spec.draw_vertical_line:
                self.surface.draw_line(
                    x, bottom, x, bottom + row.height,
                    column.spec.line_color_components, column.spec.line_thickness,
                )
