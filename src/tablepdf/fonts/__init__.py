"""Font family registration and font style resolution."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

logger = logging.getLogger(__name__)


class FontStyle(Enum):
    """The four variants a column can be rendered in."""

    REGULAR = "regular"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


def resolve_font_style(bold: bool, italic: bool, is_header: bool = False) -> FontStyle:
    """
    Resolve the font style for a column.

    Header rows always use the bold variant, whatever the column asks for.

    Args:
        bold: Column bold flag.
        italic: Column italic flag.
        is_header: Whether the column belongs to a header row.

    Returns:
        FontStyle to render the column with.
    """
    if is_header:
        return FontStyle.BOLD
    if bold and italic:
        return FontStyle.BOLD_ITALIC
    if bold:
        return FontStyle.BOLD
    if italic:
        return FontStyle.ITALIC
    return FontStyle.REGULAR


@dataclass(frozen=True)
class FontFamily:
    """ReportLab font names for each style of one family."""

    name: str
    regular: str
    bold: str
    italic: str
    bold_italic: str

    def font_name(self, style: FontStyle) -> str:
        """Registered ReportLab font name for a style."""
        return {
            FontStyle.REGULAR: self.regular,
            FontStyle.BOLD: self.bold,
            FontStyle.ITALIC: self.italic,
            FontStyle.BOLD_ITALIC: self.bold_italic,
        }[style]


# PDF base-14 families, always available without registration
STANDARD_FAMILIES: dict[str, FontFamily] = {
    "times": FontFamily("Times", "Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "helvetica": FontFamily(
        "Helvetica", "Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"
    ),
    "courier": FontFamily("Courier", "Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}

# Families registered from TrueType files at runtime
_REGISTERED_FAMILIES: dict[str, FontFamily] = {}


def register_font_family(
    name: str,
    regular: Path,
    bold: Path | None = None,
    italic: Path | None = None,
    bold_italic: Path | None = None,
) -> FontFamily:
    """
    Register a TrueType font family with ReportLab.

    Missing variants fall back to the regular file. Each variant is registered
    as "<Name>-<Style>" (e.g., "Roboto-Bold").

    Args:
        name: Family name used to look the family up later (case-insensitive).
        regular: Path to the regular TTF file.
        bold: Optional path to the bold TTF file.
        italic: Optional path to the italic TTF file.
        bold_italic: Optional path to the bold italic TTF file.

    Returns:
        The registered FontFamily.

    Raises:
        FileNotFoundError: If a given font file doesn't exist.
    """
    paths = {
        "Regular": regular,
        "Bold": bold or regular,
        "Italic": italic or regular,
        "BoldItalic": bold_italic or bold or italic or regular,
    }

    font_names: dict[str, str] = {}
    for style, path in paths.items():
        if not path.exists():
            raise FileNotFoundError(f"Font file not found: {path}")
        font_name = f"{name}-{style}"
        pdfmetrics.registerFont(TTFont(font_name, str(path)))
        font_names[style] = font_name
        logger.info(f"Registered font: {font_name} from {path.name}")

    pdfmetrics.registerFontFamily(
        name,
        normal=font_names["Regular"],
        bold=font_names["Bold"],
        italic=font_names["Italic"],
        boldItalic=font_names["BoldItalic"],
    )

    family = FontFamily(
        name=name,
        regular=font_names["Regular"],
        bold=font_names["Bold"],
        italic=font_names["Italic"],
        bold_italic=font_names["BoldItalic"],
    )
    _REGISTERED_FAMILIES[name.lower()] = family
    return family


def get_font_family(name: str) -> FontFamily:
    """
    Look up a font family by name (case-insensitive).

    Registered families win over the built-in ones. Unknown names fall back
    to Times with a warning.

    Args:
        name: Family name (e.g., "Times", "helvetica", or a registered name).

    Returns:
        FontFamily for the name.
    """
    key = name.lower()
    if key in _REGISTERED_FAMILIES:
        return _REGISTERED_FAMILIES[key]
    if key in STANDARD_FAMILIES:
        return STANDARD_FAMILIES[key]

    logger.warning(f"Unknown font family '{name}', falling back to Times")
    return STANDARD_FAMILIES["times"]
