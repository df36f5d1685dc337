"""Tests for image loading from files and URLs."""

import io

import pytest
import requests
from PIL import Image
from reportlab.lib.utils import ImageReader

from tablepdf.render import image as image_module
from tablepdf.render.image import is_remote, load_image


def _png_bytes(mode: str = "RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, (4, 3), color=0).save(buffer, format="PNG")
    return buffer.getvalue()


class FakeResponse:
    def __init__(self, content: bytes, status: int = 200) -> None:
        self.content = content
        self.status = status

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


@pytest.mark.parametrize(
    ("source", "expected"),
    [("https://example.com/a.png", True), ("HTTP://example.com/a.png", True), ("images/a.png", False)],
)
def test_is_remote(source: str, expected: bool) -> None:
    assert is_remote(source) is expected


def test_load_local_file(tmp_path) -> None:
    path = tmp_path / "logo.png"
    path.write_bytes(_png_bytes())

    reader = load_image(str(path))

    assert isinstance(reader, ImageReader)
    assert reader.getSize() == (4, 3)


def test_palette_image_is_converted(tmp_path) -> None:
    path = tmp_path / "palette.png"
    path.write_bytes(_png_bytes("P"))

    assert load_image(str(path)) is not None


def test_missing_file_is_skipped(tmp_path, caplog) -> None:
    assert load_image(str(tmp_path / "missing.png")) is None
    assert "unable to draw image" in caplog.text


def test_corrupt_file_is_skipped(tmp_path) -> None:
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")

    assert load_image(str(path)) is None


def test_remote_image(monkeypatch) -> None:
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(_png_bytes())

    monkeypatch.setattr(image_module.requests, "get", fake_get)

    assert load_image("https://example.com/a.png", timeout=3) is not None
    assert calls == [("https://example.com/a.png", 3)]


def test_remote_http_error_is_skipped(monkeypatch) -> None:
    monkeypatch.setattr(image_module.requests, "get", lambda url, timeout: FakeResponse(b"", status=404))

    assert load_image("https://example.com/missing.png") is None


def test_remote_connection_error_is_skipped(monkeypatch) -> None:
    def fail(url, timeout):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(image_module.requests, "get", fail)

    assert load_image("https://example.com/a.png") is None
