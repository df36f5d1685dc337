"""Render settings loading and validation."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from tablepdf.utils.dimensions import DEFAULT_PAGE_SIZE, PageSize, get_page_size


class RenderSettings(BaseModel):
    """
    Settings applied to every page of a rendered document.

    All parameters have sensible defaults. Override only what you need using
    Pydantic's model_copy():

        base = RenderSettings(page_size="a4")
        variant = base.model_copy(update={"font_family": "Helvetica"})
    """

    # ========================================================================
    # Page
    # ========================================================================
    page_size: str = DEFAULT_PAGE_SIZE
    """Page size name (letter, legal, half, a4, a5). Default: letter."""

    # ========================================================================
    # Fonts
    # ========================================================================
    font_family: str = "Times"
    """Font family for all text. Built-in: Times, Helvetica, Courier, or a registered TTF family."""

    # ========================================================================
    # Cells
    # ========================================================================
    cell_x_margin: float = Field(default=3.0, ge=0)
    """Horizontal padding inside every column, in points."""

    cell_y_margin: float = Field(default=3.0, ge=0)
    """Vertical padding inside every column, in points."""

    # ========================================================================
    # Images
    # ========================================================================
    image_timeout: float = Field(default=10.0, gt=0)
    """Timeout in seconds for downloading remote images."""

    # ========================================================================
    # Document metadata
    # ========================================================================
    title: str | None = None
    """Document title. Defaults to the output file name without extension."""

    author: str | None = None
    subject: str | None = None
    """Document subject. Defaults to the title."""

    creator: str = "tablepdf"
    keywords: str | None = None

    @property
    def page(self) -> PageSize:
        """Resolved page size in points."""
        return get_page_size(self.page_size)


def load_settings(settings_path: Path | None = None) -> RenderSettings:
    """
    Load render settings from a TOML file.

    The settings live in a [render] table:

        [render]
        page_size = "a4"
        font_family = "Helvetica"

    Args:
        settings_path: Path to settings file. If None, looks for tablepdf.toml in current directory.

    Returns:
        Validated RenderSettings.

    Raises:
        FileNotFoundError: If settings file doesn't exist.
        ValueError: If settings are invalid.
    """
    if settings_path is None:
        settings_path = Path.cwd() / "tablepdf.toml"

    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, "rb") as f:
        settings_dict = tomllib.load(f)

    return RenderSettings(**settings_dict.get("render", {}))
