# -*- coding: utf-8 -*-
"""Тесты приёма входа: изображения, PDF"""
import io

import numpy as np
import pytest
from PIL import Image

from passport_mrz import config, ingest
from passport_mrz.errors import ImageLoadError, PdfConversionError
from passport_mrz.ingest import is_pdf, load_image, load_pages, pdf_to_pages


def _png_bytes(color=(255, 0, 0), size=(8, 4)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color=color).save(buf, format="PNG")
    return buf.getvalue()


def test_load_png_bytes_is_rgb():
    img = load_image(_png_bytes())
    assert img.shape == (4, 8, 3)
    assert img.dtype == np.uint8
    assert tuple(img[0, 0]) == (255, 0, 0)


def test_load_from_path(tmp_path):
    path = tmp_path / "page.png"
    path.write_bytes(_png_bytes(color=(0, 0, 255)))
    assert tuple(load_image(path)[1, 1]) == (0, 0, 255)
    assert tuple(load_image(str(path))[1, 1]) == (0, 0, 255)


def test_load_pil_and_rgba_array():
    assert load_image(Image.new("RGBA", (3, 2))).shape == (2, 3, 3)
    assert load_image(np.zeros((2, 3, 4), dtype=np.uint8)).shape == (2, 3, 3)
    assert load_image(np.zeros((2, 3), dtype=np.uint8)).shape == (2, 3)


@pytest.mark.parametrize("bad", [
    b"",
    b"garbage bytes",
    np.zeros((0, 0, 3), dtype=np.uint8),
    np.zeros((2, 2, 2), dtype=np.uint8),
    12345,
])
def test_load_invalid(bad):
    with pytest.raises(ImageLoadError):
        load_image(bad)


def test_missing_file(tmp_path):
    with pytest.raises(ImageLoadError):
        load_image(tmp_path / "nope.jpg")


def test_size_limit(monkeypatch):
    monkeypatch.setattr(config, "MAX_FILE_MB", 0)
    with pytest.raises(ImageLoadError):
        load_image(_png_bytes())
    with pytest.raises(PdfConversionError):
        pdf_to_pages(b"%PDF-1.4 ...")


def test_is_pdf(tmp_path):
    assert is_pdf(b"%PDF-1.7\n...")
    assert not is_pdf(_png_bytes())
    assert is_pdf(tmp_path / "scan.PDF")
    assert not is_pdf("scan.jpg")
    assert not is_pdf(np.zeros((2, 2), dtype=np.uint8))


def test_image_is_single_page():
    data = _png_bytes()
    assert load_pages(data) == [data]


def test_pdf_pages_in_order(monkeypatch):
    calls = {}

    def fake_convert(data, dpi):
        calls["dpi"] = dpi
        return [Image.new("RGB", (4, 4), color=c) for c in ("red", "blue")]

    import pdf2image
    monkeypatch.setattr(pdf2image, "convert_from_bytes", fake_convert)
    pages = load_pages(b"%PDF-1.4 fake")
    assert calls["dpi"] == 144
    assert [tuple(p[0, 0]) for p in pages] == [(255, 0, 0), (0, 0, 255)]


def test_pdf_without_pages(monkeypatch):
    import pdf2image
    monkeypatch.setattr(pdf2image, "convert_from_bytes", lambda data, dpi: [])
    with pytest.raises(PdfConversionError):
        pdf_to_pages(b"%PDF-1.4 fake")


def test_broken_pdf():
    with pytest.raises(PdfConversionError):
        pdf_to_pages(b"%PDF-1.4 this is not really a pdf")


def test_missing_image_path_fails_early(tmp_path):
    with pytest.raises(ImageLoadError):
        load_pages(tmp_path / "missing.jpg")
    with pytest.raises(ImageLoadError):
        load_pages(str(tmp_path))


def test_existing_image_path_is_single_page(tmp_path):
    path = tmp_path / "page.png"
    path.write_bytes(_png_bytes())
    assert load_pages(path) == [path]


def test_unreadable_pdf_path(tmp_path):
    with pytest.raises(PdfConversionError):
        load_pages(tmp_path / "missing.pdf")


def test_module_uses_config_scale(monkeypatch):
    import pdf2image
    seen = []
    monkeypatch.setattr(config, "PDF_SCALE", 3.0)
    monkeypatch.setattr(pdf2image, "convert_from_bytes", lambda data, dpi: seen.append(dpi) or [Image.new("RGB", (1, 1))])
    ingest.pdf_to_pages(b"%PDF-1.4 fake")
    assert seen == [216]
