"""Utility modules."""

from tablepdf.utils.dimensions import (
    DEFAULT_PAGE_SIZE,
    PAGE_SIZES,
    PageSize,
    get_page_size,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "PAGE_SIZES",
    "PageSize",
    "get_page_size",
]
