"""High-level API for programmatic PDF creation."""

import logging
from pathlib import Path
from typing import BinaryIO

from tablepdf.config import RenderSettings
from tablepdf.fonts.metrics import FontMetrics
from tablepdf.layout.engine import layout_template
from tablepdf.render.pdf import PDFRenderer
from tablepdf.render.recording import RecordingSurface
from tablepdf.template import Template, parse_template

logger = logging.getLogger(__name__)


def _as_template(template: Template | str | bytes | dict) -> Template:
    if isinstance(template, Template):
        return template
    return parse_template(template)


def create_pdf(
    template: Template | str | bytes | dict,
    output: Path | str | BinaryIO,
    settings: RenderSettings | None = None,
) -> int:
    """
    Create a PDF document from a template.

    Args:
        template: Template object, its JSON text, or a decoded mapping.
        output: Output file path or writable binary file-like object.
        settings: Optional render settings. If None, uses RenderSettings() defaults.

    Returns:
        Number of pages written.

    Raises:
        TemplateError: If the template is invalid or the output target unusable.
        LayoutError: If some content can never fit on a page.

    Example:
        ```python
        from tablepdf import RenderSettings, create_pdf, load_template

        template = load_template(Path("invoice.json"))
        create_pdf(template, "invoice.pdf", RenderSettings(page_size="a4"))
        ```
    """
    return PDFRenderer(settings).render(_as_template(template), output)


def create_pdf_bytes(
    template: Template | str | bytes | dict,
    settings: RenderSettings | None = None,
    file_name: str | None = None,
) -> bytes:
    """
    Create a PDF document from a template and return its bytes.

    Args:
        template: Template object, its JSON text, or a decoded mapping.
        settings: Optional render settings.
        file_name: Name recorded as the document title.

    Returns:
        PDF document bytes.
    """
    return PDFRenderer(settings).render_bytes(_as_template(template), file_name)


def record_layout(
    template: Template | str | bytes | dict,
    settings: RenderSettings | None = None,
    metrics: FontMetrics | None = None,
) -> RecordingSurface:
    """
    Lay out a template without producing a PDF.

    Args:
        template: Template object, its JSON text, or a decoded mapping.
        settings: Optional render settings (page size, font family, cell margins).
        metrics: Font metrics override.

    Returns:
        RecordingSurface holding every placement instruction.
    """
    settings = settings or RenderSettings()
    surface = RecordingSurface(page_size=settings.page)
    pages = layout_template(_as_template(template), surface, settings, metrics)
    logger.info(f"Recorded {len(surface.placements)} placement(s) on {pages} page(s)")
    return surface
