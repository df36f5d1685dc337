"""Page sizes in points."""

from dataclasses import dataclass as _dataclass

from reportlab.lib.pagesizes import A4, A5, LEGAL, LETTER


@_dataclass(frozen=True)
class PageSize:
    """Page size specification."""

    width: float   # points
    height: float  # points
    label: str     # display label for CLI/help


# Registry of standard page sizes (portrait)
PAGE_SIZES = {
    "letter": PageSize(LETTER[0], LETTER[1], "Letter (8.5×11)"),
    "legal": PageSize(LEGAL[0], LEGAL[1], "Legal (8.5×14)"),
    "half": PageSize(LETTER[0], LETTER[1] / 2, "Half Sheet (8.5×5.5)"),
    "a4": PageSize(A4[0], A4[1], "A4 (210×297mm)"),
    "a5": PageSize(A5[0], A5[1], "A5 (148×210mm)"),
}

DEFAULT_PAGE_SIZE = "letter"


def get_page_size(name: str) -> PageSize:
    """
    Get page size by name.

    Args:
        name: Page size name (e.g., "letter", "a4").

    Returns:
        PageSize object. Defaults to letter if name not found.
    """
    return PAGE_SIZES.get(name.lower(), PAGE_SIZES[DEFAULT_PAGE_SIZE])
