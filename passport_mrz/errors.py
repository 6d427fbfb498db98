# -*- coding: utf-8 -*-
"""
Ошибки извлечения MRZ
"""

MRZ_NOT_FOUND_MESSAGE = (
    "Не удалось найти машиночитаемую зону (MRZ). "
    "Убедитесь, что изображение чёткое и две нижние строки MRZ паспорта видны полностью."
)


class ExtractionError(Exception):
    """Базовая ошибка извлечения"""
    pass


class ImageLoadError(ExtractionError):
    """Изображение не удалось загрузить/декодировать (проход пропускается)"""
    pass


class PdfConversionError(ExtractionError):
    """PDF не удалось растрировать (фатально)"""
    pass


class OcrEngineError(ExtractionError):
    """Сбой внешнего OCR-движка (проход пропускается)"""
    pass


class MrzNotFound(ExtractionError):
    """Ни один проход ни на одной странице не нашёл MRZ"""

    def __init__(self, message: str = MRZ_NOT_FOUND_MESSAGE):
        super().__init__(message)
