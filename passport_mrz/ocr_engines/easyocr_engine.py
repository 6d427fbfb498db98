# -*- coding: utf-8 -*-
"""EasyOCR engine (опционально: pip install passport-mrz[easyocr])"""
import logging
from typing import Optional

import numpy as np

from passport_mrz.errors import OcrEngineError
from passport_mrz.ocr_engines.base import MRZ_WHITELIST, EngineProgress, OCREngine, OCRResult

try:
    import easyocr
    HAS_EASYOCR = True
except ImportError:
    HAS_EASYOCR = False

logger = logging.getLogger(__name__)


class EasyOCREngine(OCREngine):
    """EasyOCR; модель грузится один раз при создании"""

    def __init__(self, gpu: bool = False):
        if not HAS_EASYOCR:
            raise OcrEngineError("easyocr не установлен")
        self._reader = easyocr.Reader(["en"], gpu=gpu, verbose=False)

    @property
    def name(self) -> str:
        return "easyocr"

    def recognize(
        self,
        image: np.ndarray,
        whitelist: str = MRZ_WHITELIST,
        on_progress: Optional[EngineProgress] = None,
    ) -> OCRResult:
        if self._reader is None:
            raise OcrEngineError("EasyOCR engine is closed")
        if on_progress:
            on_progress("recognizing text", 0.0)
        try:
            results = self._reader.readtext(image, allowlist=whitelist, paragraph=False)
        except (RuntimeError, ValueError) as e:
            raise OcrEngineError(f"EasyOCR: {e}") from e
        lines = []
        total_conf = 0.0
        for (_, text, conf) in results:
            if text:
                lines.append(text)
                total_conf += conf
        if on_progress:
            on_progress("recognizing text", 1.0)
        avg_conf = total_conf / len(lines) if lines else 0.0
        return OCRResult(text="\n".join(lines), confidence=min(1.0, avg_conf), engine=self.name)

    def close(self) -> None:
        self._reader = None
