# -*- coding: utf-8 -*-
"""Плагинные OCR-движки"""
import logging

from passport_mrz import config
from passport_mrz.ocr_engines.base import MRZ_WHITELIST, OCREngine, OCRResult
from passport_mrz.ocr_engines.easyocr_engine import HAS_EASYOCR, EasyOCREngine
from passport_mrz.ocr_engines.tesseract_engine import TesseractEngine

logger = logging.getLogger(__name__)

__all__ = ["MRZ_WHITELIST", "OCREngine", "OCRResult", "TesseractEngine", "EasyOCREngine", "get_engine"]


def get_engine(name: str | None = None) -> OCREngine:
    """Получить OCR-движок по имени. name: tesseract|easyocr"""
    engine = (name or config.OCR_ENGINE).lower()
    if engine == "easyocr":
        if HAS_EASYOCR:
            return EasyOCREngine()
        logger.warning("easyocr not installed, falling back to tesseract")
    return TesseractEngine()
