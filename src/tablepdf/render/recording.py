"""Surface that records placement instructions instead of drawing them."""

from dataclasses import asdict, dataclass, field
from typing import Union

from tablepdf.render.surface import PageGeometry
from tablepdf.types import RGBColor
from tablepdf.utils.dimensions import PageSize, get_page_size


@dataclass(frozen=True)
class TextPlacement:
    page: int
    x: float
    y: float
    text: str
    font_name: str
    font_size: float
    color: RGBColor | None


@dataclass(frozen=True)
class ImagePlacement:
    page: int
    x: float
    y: float
    width: float
    height: float
    source: str


@dataclass(frozen=True)
class LinePlacement:
    page: int
    x1: float
    y1: float
    x2: float
    y2: float
    color: RGBColor | None
    thickness: float


Placement = Union[TextPlacement, ImagePlacement, LinePlacement]


def placement_to_dict(placement: Placement) -> dict:
    """Convert a placement to a JSON-ready dict tagged with its kind."""
    kinds = {TextPlacement: "text", ImagePlacement: "image", LinePlacement: "line"}
    return {"kind": kinds[type(placement)], **asdict(placement)}


@dataclass
class RecordingSurface:
    """Collects every placement, numbered by page."""

    page_size: PageSize = field(default_factory=lambda: get_page_size("letter"))
    placements: list[Placement] = field(default_factory=list)
    page_count: int = 0
    closed: bool = False

    def new_page(self) -> PageGeometry:
        self.page_count += 1
        return PageGeometry(self.page_size.width, self.page_size.height)

    def close(self) -> None:
        self.closed = True

    def draw_text(
        self, x: float, y: float, text: str, font_name: str, font_size: float, color: RGBColor | None
    ) -> None:
        self.placements.append(TextPlacement(self.page_count, x, y, text, font_name, font_size, color))

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: RGBColor | None, thickness: float
    ) -> None:
        self.placements.append(LinePlacement(self.page_count, x1, y1, x2, y2, color, thickness))

    def draw_image(self, x: float, y: float, width: float, height: float, source: str) -> None:
        self.placements.append(ImagePlacement(self.page_count, x, y, width, height, source))

    def texts(self, page: int | None = None) -> list[TextPlacement]:
        """Text placements, optionally only those on one page."""
        return [
            p for p in self.placements
            if isinstance(p, TextPlacement) and (page is None or p.page == page)
        ]

    def lines(self, page: int | None = None) -> list[LinePlacement]:
        """Line placements, optionally only those on one page."""
        return [
            p for p in self.placements
            if isinstance(p, LinePlacement) and (page is None or p.page == page)
        ]

    def images(self, page: int | None = None) -> list[ImagePlacement]:
        """Image placements, optionally only those on one page."""
        return [
            p for p in self.placements
            if isinstance(p, ImagePlacement) and (page is None or p.page == page)
        ]
