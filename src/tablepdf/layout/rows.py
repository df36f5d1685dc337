"""Row rendering and the page overflow protocol.

A row is drawn column by column. When a text line would land on or below the
page's bottom margin, the column stops and reports how far it got; the other
columns of the row are still drawn. Once every column was attempted, a row
that overflowed anywhere is closed on the current page, a new page is opened
and the same row is drawn again from its remaining content only.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from tablepdf.errors import PageCapacityExceeded
from tablepdf.fonts import resolve_font_style
from tablepdf.fonts.metrics import FontMetrics
from tablepdf.layout.alignment import horizontal_delta, vertical_delta
from tablepdf.layout.borders import BorderComposer
from tablepdf.layout.sizing import line_height, row_height
from tablepdf.layout.state import ColumnState, PageState, RowState, TableState
from tablepdf.layout.wrap import usable_text_width, wrap_text
from tablepdf.render.surface import Surface
from tablepdf.template import Row

logger = logging.getLogger(__name__)


class RowPhase(Enum):
    """Phases of drawing one row."""

    EMITTING_ROW = "emitting_row"
    PAGE_OVERFLOW = "page_overflow"
    PAGE_RESET = "page_reset"


@dataclass(frozen=True)
class Fits:
    """The column's remaining content was drawn completely."""

    height: float  # vertical space used on this page
    emitted: int  # lines or images drawn in this pass


@dataclass(frozen=True)
class Overflowed:
    """The column hit the bottom margin before all its lines were drawn."""

    height: float
    emitted: int
    remaining: tuple[str, ...]  # lines still to draw, first undrawn line first


ColumnOutcome = Union[Fits, Overflowed]


class RowRenderer:
    """Draws rows of a table, moving to new pages as needed."""

    def __init__(
        self,
        surface: Surface,
        metrics: FontMetrics,
        borders: BorderComposer,
        open_page: Callable[[], PageState],
        cell_x_margin: float,
        cell_y_margin: float,
        page_top_margin: float,
        page_bottom_margin: float,
    ) -> None:
        """
        Initialize the row renderer.

        Args:
            surface: Drawing surface.
            metrics: Font metrics provider.
            borders: Border composer drawing on the same surface.
            open_page: Callback that starts a new page and returns its state.
            cell_x_margin: Horizontal cell padding in points.
            cell_y_margin: Vertical cell padding in points.
            page_top_margin: Space kept free at the top of each page.
            page_bottom_margin: No text line is drawn at or below this y.
        """
        self.surface = surface
        self.metrics = metrics
        self.borders = borders
        self.open_page = open_page
        self.cell_x_margin = cell_x_margin
        self.cell_y_margin = cell_y_margin
        self.page_top_margin = page_top_margin
        self.page_bottom_margin = page_bottom_margin

    def prepare(self, row: Row, table: TableState) -> RowState:
        """
        Build the layout state of a row: fonts, wrapped lines and heights.

        Args:
            row: Row specification.
            table: Table state with the column widths.

        Returns:
            RowState ready to be drawn.
        """
        columns: list[ColumnState] = []
        for index, column in enumerate(row.columns):
            style = resolve_font_style(column.is_bold, column.is_italic, row.is_header)
            width = table.column_widths[index]
            state = ColumnState(spec=column, style=style, width=width)
            if column.is_image:
                state.image_pending = True
            else:
                max_width = usable_text_width(width, self.cell_x_margin)
                state.lines = wrap_text(self.metrics, style, column.font_size, max_width, column.text)
            columns.append(state)

        row_state = RowState(spec=row, columns=columns)
        row_state.height = row_height(columns, self.metrics, self.cell_y_margin)
        return row_state

    def render(self, row: Row, table: TableState, table_index: int = 0, row_index: int = 0) -> RowState:
        """
        Draw a row completely, continuing on new pages when it overflows.

        Args:
            row: Row specification.
            table: Table state, updated with the height drawn on each page.
            table_index: Position of the table in the template (for errors).
            row_index: Position of the row in the table (for errors).

        Returns:
            Final RowState, with its height on the last page it touched.

        Raises:
            PageCapacityExceeded: If nothing of the row fits on a new page.
        """
        state = self.prepare(row, table)
        phase = RowPhase.EMITTING_ROW
        fresh_page = False
        outcomes: list[ColumnOutcome] = []

        while True:
            if phase is RowPhase.EMITTING_ROW:
                outcomes = self._emit_columns(state, table)
                if any(isinstance(outcome, Overflowed) for outcome in outcomes):
                    phase = RowPhase.PAGE_OVERFLOW
                    continue
                self._close_portion(state, table)
                return state

            if phase is RowPhase.PAGE_OVERFLOW:
                if fresh_page and not any(outcome.emitted for outcome in outcomes):
                    raise PageCapacityExceeded(table_index, row_index)
                logger.info(f"Page height exceeded while creating row{row_index + 1} of table{table_index + 1}")
                # On this page the row only covers what was actually drawn
                state.height = max(outcome.height for outcome in outcomes)
                self._close_portion(state, table)
                self.borders.draw_table(table)
                phase = RowPhase.PAGE_RESET
                continue

            page = self.open_page()
            table.reset_for_page(page.height - self.page_top_margin)
            state.height = row_height(state.columns, self.metrics, self.cell_y_margin)
            fresh_page = True
            phase = RowPhase.EMITTING_ROW

    def _close_portion(self, row: RowState, table: TableState) -> None:
        table.height += row.height
        self.borders.draw_row(row, table)

    def _emit_columns(self, row: RowState, table: TableState) -> list[ColumnOutcome]:
        outcomes: list[ColumnOutcome] = []
        x = table.left + self.cell_x_margin
        top = table.bottom - self.cell_y_margin

        for index, column in enumerate(row.columns):
            if column.spec.is_image:
                outcome = self._emit_image(column, row, x, top)
                # Drawn once, even if another column sends the row to a new page
                column.image_pending = False
            else:
                outcome = self._emit_text(column, row, x, top)
                if isinstance(outcome, Overflowed):
                    logger.debug(f"column{index + 1} :: overflow after {outcome.emitted} line(s)")
                    column.lines = list(outcome.remaining)
                else:
                    column.lines = []
            outcomes.append(outcome)
            x += column.width

        return outcomes

    def _emit_image(self, column: ColumnState, row: RowState, x: float, top: float) -> ColumnOutcome:
        if not column.image_pending:
            return Fits(height=column.height, emitted=0)

        spec = column.spec
        image_width = spec.image_width
        available = column.width - 2 * self.cell_x_margin
        if available < image_width:
            image_width = available

        image_x = x + horizontal_delta(spec.horizontal_gravity, column.width, image_width, self.cell_x_margin)
        image_y = (
            top
            - (spec.image_height + self.cell_y_margin)
            - vertical_delta(spec.vertical_gravity, row.height, column.height, self.cell_y_margin)
        )

        source = spec.image_source
        if source is None:
            logger.warning("Image column has neither an image url nor an image file, skipping")
        else:
            logger.debug(f"drawing image :: width = {image_width}, height = {spec.image_height}")
            self.surface.draw_image(image_x, image_y, image_width, spec.image_height, source)
        return Fits(height=column.height, emitted=1)

    def _emit_text(self, column: ColumnState, row: RowState, x: float, top: float) -> ColumnOutcome:
        spec = column.spec
        font_name = self.metrics.font_name(column.style)
        text_height = line_height(self.metrics, column.style, spec.font_size)
        offset = vertical_delta(spec.vertical_gravity, row.height, column.height, self.cell_y_margin)

        consumed = text_height + self.cell_y_margin
        for index, line in enumerate(column.lines):
            text_width = spec.font_size * self.metrics.string_width(column.style, line) / 1000
            line_x = x + horizontal_delta(spec.horizontal_gravity, column.width, text_width, self.cell_x_margin)
            line_y = top - consumed - offset
            if line_y <= self.page_bottom_margin:
                return Overflowed(height=consumed, emitted=index, remaining=tuple(column.lines[index:]))

            if line:
                logger.debug(f"writing text :: x = {line_x} y = {line_y}")
                self.surface.draw_text(line_x, line_y, line, font_name, spec.font_size, spec.text_color_components)
            consumed += text_height + self.cell_y_margin

        return Fits(height=consumed, emitted=len(column.lines))
