"""Font metrics used by the layout engine.

Widths and cap heights are expressed in glyph-space units (1/1000 of the font
size), so callers scale with ``font_size * units / 1000``.
"""

from typing import Protocol

from reportlab.pdfbase import pdfmetrics

from tablepdf.fonts import FontFamily, FontStyle, get_font_family

# CapHeight from the Adobe AFM files of the base-14 fonts
STANDARD_CAP_HEIGHTS: dict[str, float] = {
    "Times-Roman": 662,
    "Times-Bold": 676,
    "Times-Italic": 653,
    "Times-BoldItalic": 669,
    "Helvetica": 718,
    "Helvetica-Bold": 718,
    "Helvetica-Oblique": 718,
    "Helvetica-BoldOblique": 718,
    "Courier": 562,
    "Courier-Bold": 562,
    "Courier-Oblique": 562,
    "Courier-BoldOblique": 562,
}


class FontMetrics(Protocol):
    """Measurement queries for a resolved font style."""

    def font_name(self, style: FontStyle) -> str:
        ...

    def string_width(self, style: FontStyle, text: str) -> float:
        ...

    def cap_height(self, style: FontStyle) -> float:
        ...


class ReportLabMetrics:
    """FontMetrics backed by ReportLab's registered fonts."""

    def __init__(self, family: FontFamily | str = "Times") -> None:
        """
        Initialize metrics for a font family.

        Args:
            family: FontFamily or family name understood by get_font_family().
        """
        self.family = get_font_family(family) if isinstance(family, str) else family
        self._cap_heights: dict[str, float] = {}

    def font_name(self, style: FontStyle) -> str:
        return self.family.font_name(style)

    def string_width(self, style: FontStyle, text: str) -> float:
        """Width of text in glyph-space units."""
        return pdfmetrics.stringWidth(text, self.font_name(style), 1000)

    def cap_height(self, style: FontStyle) -> float:
        """Cap height in glyph-space units."""
        name = self.font_name(style)
        if name not in self._cap_heights:
            self._cap_heights[name] = self._lookup_cap_height(name)
        return self._cap_heights[name]

    @staticmethod
    def _lookup_cap_height(name: str) -> float:
        if name in STANDARD_CAP_HEIGHTS:
            return STANDARD_CAP_HEIGHTS[name]
        # TrueType faces carry their own cap height, already scaled to 1000 units
        face = pdfmetrics.getFont(name).face
        return getattr(face, "capHeight", None) or face.ascent
