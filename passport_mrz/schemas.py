# -*- coding: utf-8 -*-
"""
Схемы: варианты предобработки, пара строк MRZ, результат по паспорту
"""
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

MRZ_LINE_LENGTH = 44
FILLER = "<"

Sex = Literal["Male", "Female", "Unspecified"]


class PreprocessingVariant(Enum):
    """Какое преобразование применено к странице перед OCR"""
    FULL_ENHANCED = "вся страница, улучшено"
    CROPPED_ENHANCED = "нижняя полоса, улучшено"
    ORIGINAL = "оригинал"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class MrzLinePair:
    """Две строки TD3 по 44 символа, первая начинается с P"""
    line1: str
    line2: str

    def __post_init__(self):
        if len(self.line1) != MRZ_LINE_LENGTH or len(self.line2) != MRZ_LINE_LENGTH:
            raise ValueError("MRZ lines must be exactly 44 characters")
        if not self.line1.startswith("P"):
            raise ValueError("MRZ line 1 must start with 'P'")


class PassportRecord(BaseModel):
    """Поля паспорта, декодированные из MRZ"""
    model_config = ConfigDict(frozen=True)

    passport_number: str = ""
    surname: str = ""
    given_names: str = ""
    nationality: str = ""
    issuing_country: str = ""
    date_of_birth: str = ""
    date_of_expiry: str = ""
    sex: Sex = "Unspecified"
    # исправленные строки, для показа и аудита
    mrz_line1: str = ""
    mrz_line2: str = ""

    def to_dict(self) -> dict:
        return self.model_dump()
