"""Template data model and loading.

A template is an ordered list of tables, each table an ordered list of rows,
each row one column per declared table column. The models are immutable
specifications: layout never writes back into them, it keeps its progress in
:mod:`tablepdf.layout.state` instead.

JSON keys are the camelCase form of the field names (``totalColumnCount``,
``textColorComponents``, ``isHeader``, ...). snake_case names are accepted too.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from tablepdf.errors import (
    ColumnCountMismatch,
    InvalidColumnRatioCount,
    InvalidRgbComponents,
    InvalidTableWidthRatio,
    InvalidTemplate,
    NoColumnsDefined,
    NoRowsDefined,
    TotalColumnCountEmpty,
)
from tablepdf.layout.widths import check_ratio_sum
from tablepdf.types import ContentType, HorizontalGravity, RGBColor, VerticalGravity

logger = logging.getLogger(__name__)

# Defaults applied when a value is not given in the template
DEFAULT_PAGE_MARGIN = 30.0
DEFAULT_TABLE_MARGIN = 30.0
DEFAULT_FONT_SIZE = 7.0
DEFAULT_IMAGE_WIDTH = 50.0
DEFAULT_IMAGE_HEIGHT = 50.0
DEFAULT_LINE_THICKNESS = 0.5
DEFAULT_WIDTH_RATIO = 1.0


def validate_rgb(value: Any) -> RGBColor | None:
    """
    Validate an RGB triple.

    Args:
        value: Raw value from the template, or None for "use black".

    Returns:
        Tuple of three floats in 0-255 range, or None.

    Raises:
        InvalidRgbComponents: If the value is not exactly three numbers in [0, 255].
    """
    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 3:
        raise InvalidRgbComponents()
    for component in value:
        if isinstance(component, bool) or not isinstance(component, (int, float)):
            raise InvalidRgbComponents()
        if component < 0 or component > 255:
            raise InvalidRgbComponents()
    return (float(value[0]), float(value[1]), float(value[2]))


class _Spec(BaseModel):
    """Shared model configuration: frozen, camelCase aliases, no unknown keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class Column(_Spec):
    """The smallest content unit: text or a single image."""

    content_type: ContentType = "text"
    """Either "text" or "image"."""

    text: str = ""
    """Raw text. May contain newlines; carriage returns are dropped."""

    is_bold: bool = False
    is_italic: bool = False

    font_size: float = Field(default=DEFAULT_FONT_SIZE, gt=0)
    """Font size in points."""

    text_color_components: RGBColor | None = None
    """Text color as RGB in 0-255 range. None means black."""

    image_url: str | None = None
    """Remote image location. Takes precedence over image_file."""

    image_file: str | None = None
    """Local image path, used when no image_url is set."""

    image_width: float = Field(default=DEFAULT_IMAGE_WIDTH, gt=0)
    image_height: float = Field(default=DEFAULT_IMAGE_HEIGHT, gt=0)

    draw_vertical_line: bool = False
    """Draw a vertical line at the right edge of the column."""

    line_color_components: RGBColor | None = None
    line_thickness: float = Field(default=DEFAULT_LINE_THICKNESS, gt=0)

    horizontal_gravity: HorizontalGravity = "left"
    vertical_gravity: VerticalGravity = "top"

    @field_validator("text", mode="before")
    @classmethod
    def _none_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("text_color_components", "line_color_components", mode="before")
    @classmethod
    def _check_rgb(cls, value: Any) -> RGBColor | None:
        return validate_rgb(value)

    @property
    def is_image(self) -> bool:
        return self.content_type == "image"

    @property
    def image_source(self) -> str | None:
        """Image reference to draw: the URL when set, otherwise the file path."""
        return self.image_url if self.image_url is not None else self.image_file


class Row(_Spec):
    """A horizontal slice of a table holding one column per table column."""

    columns: list[Column] | None = None

    is_header: bool = False
    """Header rows render every column in the bold font."""

    draw_bottom_line: bool = False
    line_color_components: RGBColor | None = None
    line_thickness: float = Field(default=DEFAULT_LINE_THICKNESS, gt=0)

    @field_validator("line_color_components", mode="before")
    @classmethod
    def _check_rgb(cls, value: Any) -> RGBColor | None:
        return validate_rgb(value)

    @model_validator(mode="after")
    def _require_columns(self) -> "Row":
        if not self.columns:
            raise NoColumnsDefined()
        return self


class Table(_Spec):
    """A rectangular section of rows, optionally bordered."""

    rows: list[Row] | None = None

    total_column_count: int = 0
    """Number of columns every row must have."""

    draw_boundary: bool = False
    boundary_color_components: RGBColor | None = None
    boundary_thickness: float = Field(default=DEFAULT_LINE_THICKNESS, gt=0)

    width_ratio: float = DEFAULT_WIDTH_RATIO
    """Fraction of the usable page width taken by the table, in (0, 1]."""

    column_width_ratios: list[float] | None = None
    """Per-column fractions of the table width. None splits the width evenly."""

    left_margin: float = Field(default=DEFAULT_TABLE_MARGIN, ge=0)
    right_margin: float = Field(default=DEFAULT_TABLE_MARGIN, ge=0)
    top_margin: float = Field(default=0.0, ge=0)
    """Space above the table on the page where it starts."""

    @field_validator("boundary_color_components", mode="before")
    @classmethod
    def _check_rgb(cls, value: Any) -> RGBColor | None:
        return validate_rgb(value)

    @model_validator(mode="after")
    def _check_structure(self) -> "Table":
        if not self.rows:
            raise NoRowsDefined()
        if self.total_column_count <= 0:
            raise TotalColumnCountEmpty()
        if self.column_width_ratios is not None and len(self.column_width_ratios) != self.total_column_count:
            raise InvalidColumnRatioCount()
        if not 0 < self.width_ratio <= 1:
            raise InvalidTableWidthRatio()
        if self.column_width_ratios is not None:
            check_ratio_sum(self.column_width_ratios)
        for index, row in enumerate(self.rows):
            if len(row.columns) != self.total_column_count:
                raise ColumnCountMismatch(
                    f"Row {index + 1} has {len(row.columns)} columns "
                    f"but the table declares {self.total_column_count}"
                )
        return self


class Template(_Spec):
    """Root of a document: tables laid out top to bottom across pages."""

    tables: list[Table]
    top_margin: float = Field(default=DEFAULT_PAGE_MARGIN, gt=0)
    bottom_margin: float = Field(default=DEFAULT_PAGE_MARGIN, gt=0)


def parse_template(data: str | bytes | dict) -> Template:
    """
    Build a Template from JSON text or an already decoded mapping.

    Args:
        data: JSON document (str or bytes) or a dict with the same structure.

    Returns:
        Validated Template.

    Raises:
        InvalidTemplate: If the input is malformed or has values of the wrong type.
        TemplateError: Any more specific validation failure (NoRowsDefined, ...).
    """
    try:
        if isinstance(data, dict):
            return Template.model_validate(data)
        return Template.model_validate_json(data)
    except ValidationError as e:
        logger.debug(f"Template validation failed: {e}")
        raise InvalidTemplate(f"{InvalidTemplate.description}: {e.error_count()} error(s), first: "
                              f"{_first_error(e)}") from e


def load_template(path: Path) -> Template:
    """
    Load a template from a JSON file.

    Args:
        path: Path to the template file.

    Returns:
        Validated Template.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        InvalidTemplate: If the file is not a valid template.
    """
    if not path.exists():
        raise FileNotFoundError(f"Template file not found: {path}")

    logger.info(f"Loading template from {path}")
    return parse_template(path.read_bytes())


def _first_error(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', '')}" if location else first.get("msg", "")
