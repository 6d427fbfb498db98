# -*- coding: utf-8 -*-
"""
Passport MRZ — извлечение полей паспорта из машиночитаемой зоны (ICAO 9303, TD3)
"""
from passport_mrz.errors import (
    ExtractionError,
    ImageLoadError,
    MrzNotFound,
    OcrEngineError,
    PdfConversionError,
)
from passport_mrz.pipeline import extract_pages, extract_passport
from passport_mrz.schemas import MrzLinePair, PassportRecord, PreprocessingVariant

__version__ = "1.0.0"

__all__ = [
    "PassportRecord",
    "MrzLinePair",
    "PreprocessingVariant",
    "extract_passport",
    "extract_pages",
    "ExtractionError",
    "ImageLoadError",
    "PdfConversionError",
    "OcrEngineError",
    "MrzNotFound",
]
