"""Drawing surface contract used by the layout engine."""

from dataclasses import dataclass
from typing import Protocol

from tablepdf.types import RGBColor


@dataclass(frozen=True)
class PageGeometry:
    """Size of a page in points."""

    width: float
    height: float


class Surface(Protocol):
    """
    Page lifecycle and drawing primitives.

    Coordinates are PDF points with the origin at the bottom-left corner of
    the page. Colors are RGB in 0-255 range, None meaning black.
    """

    def new_page(self) -> PageGeometry:
        """Start a new page and return its size."""
        ...

    def close(self) -> None:
        """Finish the document."""
        ...

    def draw_text(
        self, x: float, y: float, text: str, font_name: str, font_size: float, color: RGBColor | None
    ) -> None:
        ...

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: RGBColor | None, thickness: float
    ) -> None:
        ...

    def draw_image(self, x: float, y: float, width: float, height: float, source: str) -> None:
        ...
