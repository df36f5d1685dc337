"""Tests for font style resolution and ReportLab metrics."""

import pytest

from tablepdf.fonts import FontStyle, get_font_family, register_font_family, resolve_font_style
from tablepdf.fonts.metrics import ReportLabMetrics


@pytest.mark.parametrize(
    ("bold", "italic", "header", "expected"),
    [
        (False, False, False, FontStyle.REGULAR),
        (True, False, False, FontStyle.BOLD),
        (False, True, False, FontStyle.ITALIC),
        (True, True, False, FontStyle.BOLD_ITALIC),
        (False, True, True, FontStyle.BOLD),
        (True, True, True, FontStyle.BOLD),
    ],
)
def test_resolve_font_style(bold: bool, italic: bool, header: bool, expected: FontStyle) -> None:
    assert resolve_font_style(bold, italic, header) is expected


def test_family_lookup_is_case_insensitive() -> None:
    assert get_font_family("HELVETICA").bold == "Helvetica-Bold"


def test_unknown_family_falls_back_to_times(caplog) -> None:
    family = get_font_family("Comic Sans")

    assert family.regular == "Times-Roman"
    assert "falling back to Times" in caplog.text


def test_register_missing_font_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        register_font_family("Missing", tmp_path / "missing.ttf")


def test_reportlab_metrics_for_times() -> None:
    metrics = ReportLabMetrics()

    assert metrics.font_name(FontStyle.ITALIC) == "Times-Italic"
    assert metrics.cap_height(FontStyle.REGULAR) == 662
    assert metrics.string_width(FontStyle.REGULAR, "") == 0
    assert metrics.string_width(FontStyle.BOLD, "WWW") > metrics.string_width(FontStyle.BOLD, "iii")


def test_reportlab_metrics_for_courier_are_monospaced() -> None:
    metrics = ReportLabMetrics("Courier")

    assert metrics.string_width(FontStyle.REGULAR, "iiii") == metrics.string_width(FontStyle.REGULAR, "WWWW")
    assert metrics.string_width(FontStyle.REGULAR, "a") == pytest.approx(600)
