# -*- coding: utf-8 -*-
"""Tesseract OCR engine"""
import logging
from typing import Optional

import numpy as np
import pytesseract

from passport_mrz import config
from passport_mrz.errors import OcrEngineError
from passport_mrz.ocr_engines.base import MRZ_WHITELIST, EngineProgress, OCREngine, OCRResult

logger = logging.getLogger(__name__)


class TesseractEngine(OCREngine):
    """Tesseract через pytesseract (нужен бинарь tesseract + eng)"""

    def __init__(
        self,
        lang: Optional[str] = None,
        psm: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        self.lang = lang or config.OCR_LANG
        self.psm = psm if psm is not None else config.TESSERACT_PSM
        self.timeout = timeout if timeout is not None else config.OCR_TIMEOUT_SEC
        if config.TESSERACT_CMD:
            pytesseract.pytesseract.tesseract_cmd = config.TESSERACT_CMD
        try:
            version = pytesseract.get_tesseract_version()
        except (pytesseract.TesseractNotFoundError, OSError) as e:
            raise OcrEngineError(f"Tesseract не установлен или не в PATH: {e}") from e
        logger.debug("Tesseract %s (lang=%s, psm=%s)", version, self.lang, self.psm)

    @property
    def name(self) -> str:
        return "tesseract"

    def _build_config(self, whitelist: str) -> str:
        return f"--psm {self.psm} -c tessedit_char_whitelist={whitelist}"

    def recognize(
        self,
        image: np.ndarray,
        whitelist: str = MRZ_WHITELIST,
        on_progress: Optional[EngineProgress] = None,
    ) -> OCRResult:
        if on_progress:
            on_progress("recognizing text", 0.0)
        try:
            text = pytesseract.image_to_string(
                image,
                lang=self.lang,
                config=self._build_config(whitelist),
                timeout=self.timeout or 0,
            )
        except (pytesseract.TesseractError, RuntimeError, OSError) as e:
            # RuntimeError — таймаут pytesseract
            raise OcrEngineError(f"Tesseract: {e}") from e
        if on_progress:
            on_progress("recognizing text", 1.0)
        return OCRResult(text=text or "", engine=self.name)
