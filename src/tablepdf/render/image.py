"""Image acquisition for image columns."""

import logging
from io import BytesIO
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError
from reportlab.lib.utils import ImageReader

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    """Whether an image reference is an http(s) URL."""
    return source.lower().startswith(("http://", "https://"))


def fetch_image_bytes(source: str, timeout: float = 10.0) -> bytes:
    """
    Fetch raw image bytes from a URL or a local file.

    Args:
        source: http(s) URL or file path.
        timeout: Timeout in seconds for remote fetches.

    Returns:
        Raw image bytes.

    Raises:
        requests.RequestException: If the download fails.
        OSError: If the file cannot be read.
    """
    if is_remote(source):
        logger.info(f"Downloading image from {source}")
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        return response.content

    return Path(source).read_bytes()


def pil_to_image_reader(image: Image.Image) -> ImageReader:
    """
    Convert a PIL Image to a ReportLab ImageReader.

    Args:
        image: PIL Image object to convert.

    Returns:
        ImageReader object ready for canvas.drawImage().
    """
    img_buffer = BytesIO()
    image.save(img_buffer, format="PNG")
    img_buffer.seek(0)
    return ImageReader(img_buffer)


def load_image(source: str, timeout: float = 10.0) -> ImageReader | None:
    """
    Fetch and decode an image for drawing.

    Failures are logged and reported as None so the document is still
    produced without the image.

    Args:
        source: http(s) URL or file path.
        timeout: Timeout in seconds for remote fetches.

    Returns:
        ImageReader, or None if the image could not be fetched or decoded.
    """
    try:
        image = Image.open(BytesIO(fetch_image_bytes(source, timeout)))
        image.load()
        if image.mode not in ("RGB", "RGBA", "L"):
            image = image.convert("RGBA")
        return pil_to_image_reader(image)
    except (requests.RequestException, OSError, UnidentifiedImageError, ValueError) as e:
        logger.warning(f"unable to draw image for {source}: {e}")
        return None
