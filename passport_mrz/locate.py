# -*- coding: utf-8 -*-
"""
C. Поиск MRZ (TD3) в сыром OCR-тексте
"""
import re
from typing import Optional

from passport_mrz.schemas import FILLER, MRZ_LINE_LENGTH, MrzLinePair

# OCR-двойники символа-заполнителя '<'
FILLER_LOOKALIKES = {
    "Â«": "<<",  # '«' из UTF-8, прочитанный как Latin-1
    "«": "<<",
    "[": "<",
    "]": "<",
    "(": "<",
    ")": "<",
}

MIN_LINE_LENGTH = 40
MIN_LINE2_DIGITS = 6

CONTINUOUS_TD3 = re.compile(r"(P[A-Z<][A-Z0-9<]{42})([A-Z0-9<]{44})")


def normalize_lines(transcript: str) -> list[str]:
    """Верхний регистр, без пробельных символов, двойники '<' заменены"""
    lines = []
    for raw in transcript.replace("\r", "\n").split("\n"):
        ln = re.sub(r"\s", "", raw.upper())
        for src, dst in FILLER_LOOKALIKES.items():
            ln = ln.replace(src, dst)
        lines.append(ln)
    return lines


def _fit(line: str) -> str:
    return line.ljust(MRZ_LINE_LENGTH, FILLER)[:MRZ_LINE_LENGTH]


def _scan_line_pairs(lines: list[str]) -> Optional[MrzLinePair]:
    for l1, l2 in zip(lines, lines[1:]):
        if not l1.startswith("P"):
            continue
        if len(l1) < MIN_LINE_LENGTH or len(l2) < MIN_LINE_LENGTH:
            continue
        l2 = _fit(l2)
        # отсекает строки, которые просто начинаются с P
        if sum(c.isdigit() for c in l2) >= MIN_LINE2_DIGITS:
            return MrzLinePair(_fit(l1), l2)
    return None


def _scan_continuous(lines: list[str]) -> Optional[MrzLinePair]:
    m = CONTINUOUS_TD3.search("".join(lines))
    if m:
        return MrzLinePair(m.group(1), m.group(2))
    return None


def locate_mrz(transcript: str) -> Optional[MrzLinePair]:
    """
    Найти пару строк MRZ. Сначала по соседним строкам (первая сверху),
    затем в склеенном тексте. None — обычный исход «не найдено».
    """
    if not transcript:
        return None
    lines = normalize_lines(transcript)
    return _scan_line_pairs(lines) or _scan_continuous(lines)
