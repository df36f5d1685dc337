"""Mutable layout state kept apart from the immutable template.

The pagination loop consumes content from these objects (pending lines,
pending images) and moves the table anchor from page to page. The template
models themselves are never modified, so rendering the same template twice
gives the same result.
"""

from dataclasses import dataclass, field

from tablepdf.fonts import FontStyle
from tablepdf.template import Column, Row, Table


@dataclass
class PageState:
    """The page currently being drawn on."""

    number: int  # 1-based
    width: float  # points
    height: float  # points
    used_height: float = 0.0  # height taken by finished tables


@dataclass
class ColumnState:
    """Content of one column still waiting to be drawn."""

    spec: Column
    style: FontStyle
    width: float  # points
    lines: list[str] = field(default_factory=list)
    image_pending: bool = False
    height: float = 0.0  # rendered height of the remaining content


@dataclass
class RowState:
    """A row being drawn, possibly across several pages."""

    spec: Row
    columns: list[ColumnState]
    height: float = 0.0  # height of the row on the current page


@dataclass
class TableState:
    """Geometry of a table on the current page."""

    spec: Table
    left: float  # x of the left edge, points
    width: float  # points
    column_widths: dict[int, float]
    y_anchor: float  # y of the top edge, points from page bottom
    top_margin: float  # space above the table on this page
    height: float = 0.0  # height drawn on the current page

    @property
    def bottom(self) -> float:
        """y of the lowest edge drawn so far on this page."""
        return self.y_anchor - self.height

    def reset_for_page(self, y_anchor: float) -> None:
        """Continue the table at the top of a new page."""
        self.y_anchor = y_anchor
        self.height = 0.0
        self.top_margin = 0.0
