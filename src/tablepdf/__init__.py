"""Table template to paginated PDF generator."""

__version__ = "0.1.0"

# High-level Python API
from tablepdf.builder import create_pdf, create_pdf_bytes, record_layout
from tablepdf.config import RenderSettings, load_settings
from tablepdf.errors import LayoutError, PageCapacityExceeded, TemplateError
from tablepdf.fonts import FontStyle, register_font_family
from tablepdf.layout.engine import LayoutEngine, layout_template
from tablepdf.render.pdf import PDFRenderer
from tablepdf.render.recording import RecordingSurface
from tablepdf.template import Column, Row, Table, Template, load_template, parse_template

__all__ = [
    "Column",
    "FontStyle",
    "LayoutEngine",
    "LayoutError",
    "PDFRenderer",
    "PageCapacityExceeded",
    "RecordingSurface",
    "RenderSettings",
    "Row",
    "Table",
    "Template",
    "TemplateError",
    "create_pdf",
    "create_pdf_bytes",
    "layout_template",
    "load_settings",
    "load_template",
    "parse_template",
    "record_layout",
    "register_font_family",
]
