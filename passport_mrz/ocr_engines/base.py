# -*- coding: utf-8 -*-
"""
Базовый интерфейс OCR-движка
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

# Без '<' в белом списке движок «угадывает» похожую букву
MRZ_WHITELIST = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789<"

EngineProgress = Callable[[str, float], None]


@dataclass
class OCRResult:
    """Результат OCR"""
    text: str
    confidence: float = 0.0
    engine: str = ""


class OCREngine(ABC):
    """
    Абстрактный OCR-движок.
    Один экземпляр живёт весь прогон извлечения и закрывается ровно один раз.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def recognize(
        self,
        image: np.ndarray,
        whitelist: str = MRZ_WHITELIST,
        on_progress: Optional[EngineProgress] = None,
    ) -> OCRResult:
        """Распознать текст; при сбое — OcrEngineError"""
        pass

    def close(self) -> None:
        """Освободить ресурсы движка"""
        pass

    def __enter__(self) -> "OCREngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
