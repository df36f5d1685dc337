"""Tests for template parsing and validation."""

import json

import pytest
from pydantic import ValidationError

from tablepdf.errors import (
    ColumnCountMismatch,
    InvalidColumnRatioCount,
    InvalidColumnWidthRatio,
    InvalidRgbComponents,
    InvalidTableWidthRatio,
    InvalidTemplate,
    NoColumnsDefined,
    NoRowsDefined,
    TemplateError,
    TotalColumnCountEmpty,
)
from tablepdf.template import Column, Row, Table, load_template, parse_template

INVOICE = {
    "topMargin": 40,
    "bottomMargin": 40,
    "tables": [
        {
            "totalColumnCount": 2,
            "columnWidthRatios": [0.75, 0.25],
            "drawBoundary": True,
            "rows": [
                {
                    "isHeader": True,
                    "drawBottomLine": True,
                    "columns": [{"text": "Item"}, {"text": "Qty", "horizontalGravity": "right"}],
                },
                {
                    "columns": [
                        {"text": "Apple", "textColorComponents": [255, 0, 0]},
                        {"contentType": "image", "imageUrl": "https://example.com/a.png", "imageFile": "a.png"},
                    ]
                },
            ],
        }
    ],
}


def _table(columns_per_row: int = 2, **fields) -> dict:
    fields.setdefault("totalColumnCount", 2)
    fields.setdefault("rows", [{"columns": [{"text": "x"}] * columns_per_row}])
    return {"tables": [fields]}


def test_parses_camel_case_json() -> None:
    template = parse_template(json.dumps(INVOICE))

    assert template.top_margin == 40
    table = template.tables[0]
    assert table.total_column_count == 2
    assert table.column_width_ratios == [0.75, 0.25]
    assert table.rows[0].is_header
    assert table.rows[0].columns[1].horizontal_gravity == "right"
    assert table.rows[1].columns[0].text_color_components == (255.0, 0.0, 0.0)


def test_defaults_are_applied() -> None:
    template = parse_template(_table())
    table = template.tables[0]
    column = table.rows[0].columns[0]

    assert (template.top_margin, template.bottom_margin) == (30, 30)
    assert (table.left_margin, table.right_margin, table.width_ratio) == (30, 30, 1)
    assert column.font_size == 7
    assert (column.image_width, column.image_height) == (50, 50)
    assert column.line_thickness == 0.5
    assert (column.horizontal_gravity, column.vertical_gravity) == ("left", "top")
    assert column.text_color_components is None


def test_image_url_takes_precedence_over_file() -> None:
    column = parse_template(INVOICE).tables[0].rows[1].columns[1]
    assert column.is_image
    assert column.image_source == "https://example.com/a.png"


def test_image_file_used_without_url() -> None:
    assert Column(content_type="image", image_file="a.png").image_source == "a.png"


def test_null_text_is_empty() -> None:
    assert Column(text=None).text == ""


def test_models_are_frozen() -> None:
    column = Column(text="x")
    with pytest.raises(ValidationError):
        column.text = "y"


@pytest.mark.parametrize("color", [[300, 0, 0], [0, -1, 0], [1, 2], [1, 2, 3, 4], "red"])
def test_invalid_rgb_components(color) -> None:
    with pytest.raises(InvalidRgbComponents):
        Column(text="x", text_color_components=color)


def test_invalid_rgb_in_nested_json() -> None:
    data = _table(rows=[{"columns": [{"text": "x"}, {"text": "y"}], "lineColorComponents": [0, 0, 256]}])
    with pytest.raises(InvalidRgbComponents):
        parse_template(data)


def test_row_without_columns() -> None:
    with pytest.raises(NoColumnsDefined):
        Row(columns=[])
    with pytest.raises(NoColumnsDefined):
        parse_template(_table(rows=[{"isHeader": True}]))


def test_table_without_rows() -> None:
    with pytest.raises(NoRowsDefined):
        Table(total_column_count=1)
    with pytest.raises(NoRowsDefined):
        parse_template(_table(rows=[]))


def test_total_column_count_required() -> None:
    with pytest.raises(TotalColumnCountEmpty):
        parse_template(_table(totalColumnCount=0))


def test_ratio_count_must_match_column_count() -> None:
    with pytest.raises(InvalidColumnRatioCount):
        parse_template(_table(columnWidthRatios=[0.5, 0.25, 0.25]))


def test_ratio_sum_must_be_one() -> None:
    with pytest.raises(InvalidColumnWidthRatio):
        parse_template(_table(columnWidthRatios=[0.5, 0.4]))


@pytest.mark.parametrize("ratio", [0, 1.5, -1])
def test_table_width_ratio_range(ratio: float) -> None:
    with pytest.raises(InvalidTableWidthRatio):
        parse_template(_table(widthRatio=ratio))


def test_row_with_more_columns_than_declared() -> None:
    with pytest.raises(ColumnCountMismatch) as excinfo:
        parse_template(_table(columns_per_row=3))
    assert "Row 1 has 3 columns" in str(excinfo.value)


def test_ratio_count_checked_before_column_count() -> None:
    with pytest.raises(InvalidColumnRatioCount):
        parse_template(_table(columns_per_row=3, columnWidthRatios=[0.5, 0.3, 0.2]))


@pytest.mark.parametrize(
    "data",
    [
        "not json",
        b"{\"tables\": 3}",
        {"tables": [{"totalColumnCount": 1, "rows": "x"}]},
        {"tables": [], "unknownKey": 1},
        {"tables": [], "topMargin": 0},
    ],
)
def test_malformed_templates(data) -> None:
    with pytest.raises(InvalidTemplate):
        parse_template(data)


def test_errors_share_a_base_class() -> None:
    with pytest.raises(TemplateError) as excinfo:
        parse_template(_table(totalColumnCount=0))
    assert str(excinfo.value) == TotalColumnCountEmpty.description


def test_load_template(tmp_path) -> None:
    path = tmp_path / "invoice.json"
    path.write_text(json.dumps(INVOICE))

    assert len(load_template(path).tables[0].rows) == 2


def test_load_missing_template(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_template(tmp_path / "missing.json")
