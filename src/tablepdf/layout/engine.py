"""Lays out a whole template onto a drawing surface."""

import logging

from tablepdf.config import RenderSettings
from tablepdf.errors import InvalidPageMargins
from tablepdf.fonts.metrics import FontMetrics, ReportLabMetrics
from tablepdf.layout.borders import BorderComposer
from tablepdf.layout.rows import RowRenderer
from tablepdf.layout.state import PageState, TableState
from tablepdf.layout.widths import column_widths, table_width
from tablepdf.render.surface import Surface
from tablepdf.template import Table, Template

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Drives tables, rows and pages for one template.

    Tables are stacked from the top of the first page downwards. Each table
    starts below the previous one on the same page; rows that don't fit
    continue at the top of a new page.
    """

    def __init__(
        self,
        surface: Surface,
        settings: RenderSettings | None = None,
        metrics: FontMetrics | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            surface: Surface receiving pages and drawing calls.
            settings: Render settings. Defaults to RenderSettings().
            metrics: Font metrics. Defaults to ReportLab metrics for the settings' font family.
        """
        self.surface = surface
        self.settings = settings or RenderSettings()
        self.metrics = metrics or ReportLabMetrics(self.settings.font_family)
        self.borders = BorderComposer(surface)
        self.page: PageState | None = None
        self._template: Template | None = None

    def render(self, template: Template) -> int:
        """
        Lay out the template and close the surface.

        Args:
            template: Validated template.

        Returns:
            Number of pages produced.

        Raises:
            InvalidPageMargins: If the page margins leave no room on the page.
            PageCapacityExceeded: If a row cannot fit even on an empty page.
        """
        self._template = template
        self.page = None
        self._open_page()
        logger.info(
            f"Input template top margin = {template.top_margin} and bottom margin = {template.bottom_margin}"
        )

        rows = RowRenderer(
            surface=self.surface,
            metrics=self.metrics,
            borders=self.borders,
            open_page=self._open_page,
            cell_x_margin=self.settings.cell_x_margin,
            cell_y_margin=self.settings.cell_y_margin,
            page_top_margin=template.top_margin,
            page_bottom_margin=template.bottom_margin,
        )

        for index, table in enumerate(template.tables):
            state = self._start_table(table)
            for row_index, row in enumerate(table.rows):
                rows.render(row, state, table_index=index, row_index=row_index)
            self.borders.draw_table(state)
            logger.info(f"Table content created successfully for :: table{index + 1}")
            logger.debug(f"table{index + 1} height in the current page = {state.height}")

            self.page.used_height += state.height + state.top_margin
            logger.info(f"Page used height = {self.page.used_height}")

        self.surface.close()
        return self.page.number

    def _start_table(self, table: Table) -> TableState:
        width = table_width(self.page.width, table.left_margin, table.right_margin, table.width_ratio)
        y_anchor = self._table_anchor(table)
        if y_anchor <= self._template.bottom_margin and self.page.used_height > 0:
            logger.info(f"No room left on page {self.page.number} for the next table, starting a new page")
            self._open_page()
            y_anchor = self._table_anchor(table)

        return TableState(
            spec=table,
            left=table.left_margin,
            width=width,
            column_widths=column_widths(width, table.column_width_ratios, table.total_column_count),
            y_anchor=y_anchor,
            top_margin=table.top_margin,
        )

    def _table_anchor(self, table: Table) -> float:
        return self.page.height - self._template.top_margin - table.top_margin - self.page.used_height

    def _open_page(self) -> PageState:
        geometry = self.surface.new_page()
        number = self.page.number + 1 if self.page else 1

        margins = self._template.top_margin + self._template.bottom_margin
        if margins >= geometry.height:
            raise InvalidPageMargins(
                f"Top and bottom margins ({margins:g}) must be less than the page height ({geometry.height:g})"
            )

        self.page = PageState(number=number, width=geometry.width, height=geometry.height)
        logger.info(f"Page {number} created: height = {geometry.height}, width = {geometry.width}")
        return self.page


def layout_template(
    template: Template,
    surface: Surface,
    settings: RenderSettings | None = None,
    metrics: FontMetrics | None = None,
) -> int:
    """
    Lay out a template onto a surface.

    Args:
        template: Validated template.
        surface: Surface receiving pages and drawing calls; closed when done.
        settings: Render settings.
        metrics: Font metrics override (mainly for tests).

    Returns:
        Number of pages produced.
    """
    return LayoutEngine(surface, settings, metrics).render(template)
