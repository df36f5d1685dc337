"""PDF generation using ReportLab."""

import io
import logging
from pathlib import Path
from typing import BinaryIO

from reportlab.pdfgen import canvas

from tablepdf.config import RenderSettings
from tablepdf.errors import InvalidOutputTarget
from tablepdf.fonts.metrics import FontMetrics
from tablepdf.layout.engine import layout_template
from tablepdf.render.image import load_image
from tablepdf.render.surface import PageGeometry
from tablepdf.template import Template
from tablepdf.types import RGBColor

logger = logging.getLogger(__name__)


def _unit_rgb(color: RGBColor | None) -> tuple[float, float, float]:
    """Convert a 0-255 color (None for black) to ReportLab's 0-1 range."""
    if color is None:
        return (0.0, 0.0, 0.0)
    return (color[0] / 255, color[1] / 255, color[2] / 255)


class CanvasSurface:
    """Surface drawing onto a ReportLab canvas."""

    def __init__(self, target: str | BinaryIO, settings: RenderSettings, title: str | None = None) -> None:
        """
        Initialize the canvas surface.

        Args:
            target: Output file path or binary file-like object.
            settings: Render settings (page size, metadata, image timeout).
            title: Document title used when settings don't set one.
        """
        self.settings = settings
        page = settings.page
        self.page_width = page.width
        self.page_height = page.height
        self.canvas = canvas.Canvas(target, pagesize=(page.width, page.height))
        self._page_open = False
        self._set_metadata(settings.title or title or "")

    def _set_metadata(self, title: str) -> None:
        c = self.canvas
        c.setTitle(title)
        c.setSubject(self.settings.subject or title)
        c.setCreator(self.settings.creator)
        if self.settings.author:
            c.setAuthor(self.settings.author)
        if self.settings.keywords:
            c.setKeywords(self.settings.keywords)

    def new_page(self) -> PageGeometry:
        if self._page_open:
            self.canvas.showPage()
        self._page_open = True
        return PageGeometry(self.page_width, self.page_height)

    def close(self) -> None:
        """
        Write the finished document.

        Raises:
            InvalidOutputTarget: If the target cannot be written.
        """
        try:
            self.canvas.save()
        except OSError as e:
            raise InvalidOutputTarget(f"{InvalidOutputTarget.description}: {e}") from e

    def draw_text(
        self, x: float, y: float, text: str, font_name: str, font_size: float, color: RGBColor | None
    ) -> None:
        c = self.canvas
        c.setFillColorRGB(*_unit_rgb(color))
        c.setFont(font_name, font_size)
        c.drawString(x, y, text)

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, color: RGBColor | None, thickness: float
    ) -> None:
        c = self.canvas
        c.setStrokeColorRGB(*_unit_rgb(color))
        c.setLineWidth(thickness)
        c.line(x1, y1, x2, y2)

    def draw_image(self, x: float, y: float, width: float, height: float, source: str) -> None:
        reader = load_image(source, timeout=self.settings.image_timeout)
        if reader is None:
            return
        self.canvas.drawImage(reader, x, y, width=width, height=height, mask="auto")


def _check_output_target(output: Path | str | BinaryIO) -> str | BinaryIO:
    """
    Validate an output target and normalize paths to strings.

    Raises:
        InvalidOutputTarget: If the target cannot receive a PDF.
    """
    if isinstance(output, (str, Path)):
        path = Path(output)
        if not path.name or path.is_dir():
            raise InvalidOutputTarget(f"{InvalidOutputTarget.description}: {output} is a directory")
        if not path.parent.exists():
            raise InvalidOutputTarget(f"{InvalidOutputTarget.description}: {path.parent} does not exist")
        return str(path)
    if not hasattr(output, "write"):
        raise InvalidOutputTarget()
    return output


class PDFRenderer:
    """Renders templates to PDF using ReportLab."""

    def __init__(self, settings: RenderSettings | None = None, metrics: FontMetrics | None = None) -> None:
        """
        Initialize PDF renderer.

        Args:
            settings: Render settings. Defaults to RenderSettings().
            metrics: Font metrics override. Defaults to ReportLab metrics for the font family.
        """
        self.settings = settings or RenderSettings()
        self.metrics = metrics

    def render(self, template: Template, output: Path | str | BinaryIO) -> int:
        """
        Render a template to a PDF file or binary stream.

        Args:
            template: Validated template.
            output: Output file path or writable binary file-like object.

        Returns:
            Number of pages written.

        Raises:
            InvalidOutputTarget: If the output cannot receive a PDF.
        """
        target = _check_output_target(output)
        title = Path(target).stem if isinstance(target, str) else None

        surface = CanvasSurface(target, self.settings, title=title)
        logger.info("Document created")
        pages = layout_template(template, surface, self.settings, self.metrics)
        logger.info(f"saving pdf :: {target if isinstance(target, str) else 'stream'} ({pages} page(s))")
        return pages

    def render_bytes(self, template: Template, file_name: str | None = None) -> bytes:
        """
        Render a template and return the PDF bytes.

        Args:
            template: Validated template.
            file_name: Name recorded as the document title when settings don't set one.

        Returns:
            PDF document bytes.
        """
        buffer = io.BytesIO()
        surface = CanvasSurface(buffer, self.settings, title=file_name)
        logger.info("Document created")
        layout_template(template, surface, self.settings, self.metrics)
        logger.info("saving pdf byte array...")
        return buffer.getvalue()
