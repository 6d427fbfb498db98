# -*- coding: utf-8 -*-
"""
E. Декодирование TD3 по фиксированным позициям.
Никогда не падает: нечитаемые поля становятся пустыми строками.
"""
from datetime import date
from typing import Optional

from passport_mrz.schemas import FILLER, PassportRecord, Sex

# OCR путает цифры с буквами в числовых полях
DIGIT_CONFUSIONS = str.maketrans({"O": "0", "I": "1", "S": "5", "Z": "2"})

# год <= cy + 10: 20xx, иначе 19xx
YEAR_PIVOT_AHEAD = 10

SEX_CODES: dict[str, Sex] = {"M": "Male", "F": "Female"}


def _strip_filler(s: str) -> str:
    return s.replace(FILLER, "")


def _name_part(s: str) -> str:
    return s.replace(FILLER, " ").strip()


def format_mrz_date(yymmdd: str, current_year: Optional[int] = None) -> str:
    """YYMMDD → YYYY-MM-DD; месяц и день не проверяются"""
    if not yymmdd or len(yymmdd) != 6 or FILLER in yymmdd:
        return ""
    clean = yymmdd.translate(DIGIT_CONFUSIONS)
    yy, month, day = clean[:2], clean[2:4], clean[4:6]
    if not (yy.isascii() and yy.isdigit()):
        return clean

    cy = (current_year or date.today().year) % 100
    year = int(yy)
    full_year = 1900 + year if year > cy + YEAR_PIVOT_AHEAD else 2000 + year
    return f"{full_year}-{month}-{day}"


def sex_from_code(code: str) -> Sex:
    return SEX_CODES.get(code, "Unspecified")


def decode_mrz(line1: str, line2: str, current_year: Optional[int] = None) -> PassportRecord:
    """Строки MRZ (уже исправленные, по 44 символа) → PassportRecord"""
    issuing_country = _strip_filler(line1[2:5])

    names = line1[5:].split(FILLER * 2, 1)
    surname = _name_part(names[0])
    given_names = _name_part(names[1]) if len(names) > 1 else ""

    nationality = _strip_filler(line2[10:13])

    return PassportRecord(
        passport_number=_strip_filler(line2[0:9]),
        surname=surname,
        given_names=given_names,
        nationality=nationality or issuing_country,
        issuing_country=issuing_country,
        date_of_birth=format_mrz_date(line2[13:19], current_year),
        date_of_expiry=format_mrz_date(line2[21:27], current_year),
        sex=sex_from_code(line2[20:21]),
        mrz_line1=line1,
        mrz_line2=line2,
    )
