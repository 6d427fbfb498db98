# -*- coding: utf-8 -*-
"""Общие данные для тестов: образец ICAO 9303 и скриптованный OCR-движок"""
from passport_mrz.ocr_engines.base import OCREngine, OCRResult

ICAO_LINE1 = "P<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<"
ICAO_LINE2 = "L898902C36UTO7408122F1204159ZE184226B<<<<<10"
ICAO_TRANSCRIPT = f"UTOPIA\nPASSPORT NO L898902C3\n{ICAO_LINE1}\n{ICAO_LINE2}\n"


class ScriptedEngine(OCREngine):
    """Отдаёт заранее заданные ответы по порядку вызовов"""

    def __init__(self, responses, progress_steps=()):
        self.responses = list(responses)
        self.progress_steps = progress_steps
        self.images = []
        self.whitelists = []
        self.closed = 0

    @property
    def name(self) -> str:
        return "scripted"

    def recognize(self, image, whitelist=None, on_progress=None):
        self.images.append(image)
        self.whitelists.append(whitelist)
        if on_progress:
            for p in self.progress_steps:
                on_progress("recognizing text", p)
        response = self.responses.pop(0) if self.responses else ""
        if isinstance(response, Exception):
            raise response
        return OCRResult(text=response, engine=self.name)

    def close(self) -> None:
        self.closed += 1
