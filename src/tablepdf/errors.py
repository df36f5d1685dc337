"""Errors raised while loading templates and laying them out."""


class TemplateError(Exception):
    """
    Base class for template validation failures.

    Each subclass carries a fixed description which is used when no
    message is given.
    """

    description = "The template is not valid"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.description)


class InvalidTemplate(TemplateError):
    description = "The template structure is not valid"


class InvalidPageMargins(InvalidTemplate):
    description = "The page top and bottom margins must leave room on the page"


class NoRowsDefined(TemplateError):
    description = "No rows are defined in the table. Please define rows"


class NoColumnsDefined(TemplateError):
    description = "No columns are defined in the row. Please define columns"


class TotalColumnCountEmpty(TemplateError):
    description = "Total column value is zero. Please provide a value for it"


class InvalidColumnRatioCount(TemplateError):
    description = "The total number of columns and column ratio must be same"


class ColumnCountMismatch(TemplateError):
    description = "The number of columns in a row must match the table's total column count"


class InvalidColumnWidthRatio(TemplateError):
    description = "The sum of column width ratio must be 1"


class InvalidTableWidthRatio(TemplateError):
    description = "The table width ratio value must be greater than 0 and at most 1"


class InvalidRgbComponents(TemplateError):
    description = (
        "The color component should be a list of size 3 and should contain "
        "RGB value from (0,0,0) to (255,255,255)"
    )


class InvalidOutputTarget(TemplateError):
    description = "The output pdf target is not valid"


class LayoutError(Exception):
    """Base class for failures of the layout engine itself."""


class PageCapacityExceeded(LayoutError):
    """Raised when row content cannot fit on an empty page."""

    def __init__(self, table_index: int, row_index: int) -> None:
        self.table_index = table_index
        self.row_index = row_index
        super().__init__(
            f"Row {row_index + 1} of table {table_index + 1} does not fit "
            "between the page margins, even on a new page"
        )
