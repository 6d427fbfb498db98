# -*- coding: utf-8 -*-
"""
D. Коррекция строки 1 MRZ: OCR читает '<' как C/E/L/A (шрифт OCR-B)
"""
import re

from passport_mrz.schemas import FILLER, MRZ_LINE_LENGTH

PREFIX_LENGTH = 5  # тип документа + код страны выдачи
SEPARATOR = FILLER * 2

TRAILING_FILLER = re.compile(r"[CELA]{3,}$")
MISREAD_SEPARATOR = re.compile(r"(?<=[A-Z])CC(?=[A-Z])")


def restore_trailing_filler(name_section: str) -> str:
    """Хвост из 3+ символов {C,E,L,A} считается заполнителем"""
    return TRAILING_FILLER.sub(lambda m: FILLER * len(m.group(0)), name_section)


def restore_separator(name_section: str) -> str:
    """Первое буква-CC-буква → буква<<буква"""
    return MISREAD_SEPARATOR.sub(SEPARATOR, name_section, count=1)


def correct_line1(line1: str) -> str:
    """
    Вернуть строку 1 с восстановленными '<'. Длина сохраняется.
    Если в имени уже есть "<<", заполнитель прочитан верно: строка не меняется.
    """
    if len(line1) < MRZ_LINE_LENGTH:
        return line1
    prefix, names = line1[:PREFIX_LENGTH], line1[PREFIX_LENGTH:]
    if SEPARATOR in names:
        return line1

    names = restore_trailing_filler(names)
    if SEPARATOR not in names:
        names = restore_separator(names)
    return prefix + names
