# -*- coding: utf-8 -*-
"""
A. Ingest — приём входа: изображение или PDF → список страниц
"""
import io
import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from passport_mrz import config
from passport_mrz.errors import ImageLoadError, PdfConversionError

logger = logging.getLogger(__name__)

RawImage = Union[np.ndarray, Image.Image, bytes, str, Path]

PDF_MAGIC = b"%PDF"


def _max_bytes() -> int:
    return config.MAX_FILE_MB * 1024 * 1024


def _from_pil(pil: Image.Image) -> np.ndarray:
    if pil.mode not in ("RGB", "L"):
        pil = pil.convert("RGB")
    return np.array(pil)


def _decode_bytes(data: bytes) -> np.ndarray:
    """Декодировать bytes в RGB: сначала OpenCV, затем PIL"""
    if not data:
        raise ImageLoadError("Пустые данные изображения")
    if len(data) > _max_bytes():
        raise ImageLoadError(
            f"Файл слишком большой ({len(data) / 1024 / 1024:.1f} MB, макс {config.MAX_FILE_MB} MB)"
        )
    buf = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buf, cv2.IMREAD_COLOR)
    if img is not None:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    try:
        with Image.open(io.BytesIO(data)) as pil:
            return _from_pil(pil)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"Не удалось декодировать изображение: {e}") from e


def _check_array(arr: np.ndarray) -> np.ndarray:
    if arr.size == 0 or arr.ndim not in (2, 3):
        raise ImageLoadError(f"Некорректный массив изображения: shape={arr.shape}")
    if arr.ndim == 3:
        channels = arr.shape[2]
        if channels == 4:
            arr = arr[:, :, :3]
        elif channels == 1:
            arr = arr[:, :, 0]
        elif channels != 3:
            raise ImageLoadError(f"Неподдерживаемое число каналов: {channels}")
    if arr.dtype != np.uint8:
        arr = np.clip(arr, 0, 255).astype(np.uint8)
    return arr


def load_image(source: RawImage) -> np.ndarray:
    """
    Привести RawImage к numpy uint8 (H×W×3 RGB или H×W gray).
    Единственная ошибка — ImageLoadError.
    """
    if isinstance(source, np.ndarray):
        return _check_array(source)
    if isinstance(source, Image.Image):
        return _check_array(_from_pil(source))
    if isinstance(source, (bytes, bytearray)):
        return _check_array(_decode_bytes(bytes(source)))
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise ImageLoadError(f"Файл не найден: {source}")
        return _check_array(_decode_bytes(path.read_bytes()))
    raise ImageLoadError(f"Неподдерживаемый тип изображения: {type(source).__name__}")


def pdf_to_pages(pdf_bytes: bytes, scale: float | None = None) -> list[np.ndarray]:
    """
    Растрировать PDF постранично (порядок документа).
    Масштаб 2.0 соответствует 144 DPI.
    """
    if len(pdf_bytes) > _max_bytes():
        raise PdfConversionError(
            f"Файл слишком большой ({len(pdf_bytes) / 1024 / 1024:.1f} MB, макс {config.MAX_FILE_MB} MB)"
        )
    scale = scale or config.PDF_SCALE
    try:
        import pdf2image
        from pdf2image.exceptions import PDFInfoNotInstalledError, PDFPageCountError, PDFSyntaxError
    except ImportError as e:
        raise PdfConversionError("PDF не поддерживается: установите pdf2image и poppler") from e

    try:
        pages = pdf2image.convert_from_bytes(pdf_bytes, dpi=int(72 * scale))
    except (PDFInfoNotInstalledError, PDFPageCountError, PDFSyntaxError, OSError, ValueError) as e:
        raise PdfConversionError(f"Не удалось растрировать PDF: {e}") from e

    if not pages:
        raise PdfConversionError("Не удалось извлечь страницы из PDF")
    logger.info("PDF rasterized: %d page(s) at scale %.1f", len(pages), scale)
    return [_from_pil(p.convert("RGB")) for p in pages]


def is_pdf(source: RawImage) -> bool:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source[:4]) == PDF_MAGIC
    if isinstance(source, (str, Path)):
        return Path(source).suffix.lower() == ".pdf"
    return False


def load_pages(source: RawImage) -> list[RawImage]:
    """
    Нормализовать вход в список страниц.
    PDF растрируется сразу; изображение остаётся одной «сырой» страницей
    и декодируется уже внутри прохода. Несуществующий путь к изображению
    сразу даёт ImageLoadError, до создания OCR-движка.
    """
    if not is_pdf(source):
        if isinstance(source, (str, Path)) and not Path(source).is_file():
            raise ImageLoadError(f"Файл не найден: {source}")
        return [source]
    if isinstance(source, (str, Path)):
        try:
            data = Path(source).read_bytes()
        except OSError as e:
            raise PdfConversionError(f"Не удалось прочитать PDF: {source}") from e
    else:
        data = bytes(source)
    return pdf_to_pages(data)
