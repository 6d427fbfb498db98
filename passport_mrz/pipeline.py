# -*- coding: utf-8 -*-
"""
Главный пайплайн: Ingest → (на страницу, до трёх проходов)
Preprocess → OCR → Locate → Correct → Decode → PassportRecord
"""
import logging
import time
from typing import Callable, Optional, Sequence

import numpy as np

from passport_mrz.correct import correct_line1
from passport_mrz.errors import ImageLoadError, MrzNotFound, OcrEngineError
from passport_mrz.ingest import RawImage, is_pdf, load_image, load_pages
from passport_mrz.locate import locate_mrz
from passport_mrz.ocr_engines import MRZ_WHITELIST, OCREngine, get_engine
from passport_mrz.parse import decode_mrz
from passport_mrz.preprocess import prepare_with_info
from passport_mrz.schemas import PassportRecord, PreprocessingVariant

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]

# 1: уже вырезанная MRZ, 2: фото целой страницы, 3: предобработка испортила чистый скан
PASSES = (
    PreprocessingVariant.FULL_ENHANCED,
    PreprocessingVariant.CROPPED_ENHANCED,
    PreprocessingVariant.ORIGINAL,
)


def _silent(_msg: str) -> None:
    pass


def _image_for_pass(page: RawImage, variant: PreprocessingVariant) -> np.ndarray:
    if variant is PreprocessingVariant.ORIGINAL:
        return load_image(page)
    image, info = prepare_with_info(
        page, crop_to_bottom_band=variant is PreprocessingVariant.CROPPED_ENHANCED
    )
    logger.debug("Preprocess %s: %s", variant.name, info)
    return image


def _try_pass(
    engine: OCREngine,
    page: RawImage,
    variant: PreprocessingVariant,
    on_engine_progress,
) -> Optional[PassportRecord]:
    """Один проход: None — MRZ не найдена"""
    image = _image_for_pass(page, variant)
    t0 = time.perf_counter()
    ocr = engine.recognize(image, whitelist=MRZ_WHITELIST, on_progress=on_engine_progress)
    logger.debug(
        "OCR %s: %d chars in %.1f ms",
        variant.name, len(ocr.text), (time.perf_counter() - t0) * 1000,
    )
    pair = locate_mrz(ocr.text)
    if pair is None:
        return None
    return decode_mrz(correct_line1(pair.line1), pair.line2)


def extract_pages(
    pages: Sequence[RawImage],
    engine: Optional[OCREngine] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> PassportRecord:
    """
    Страницы по порядку, на каждой до трёх проходов; первый найденный
    PassportRecord завершает прогон. Движок закрывается ровно один раз
    на любом исходе. Ничего не найдено — MrzNotFound.
    """
    report = on_progress or _silent
    if engine is None:
        report("Инициализация OCR-движка...")
        engine = get_engine()

    total_steps = max(1, len(pages) * len(PASSES))
    try:
        for page_idx, page in enumerate(pages):
            page_no = page_idx + 1
            report(f"Сканирование страницы {page_no} из {len(pages)}...")
            for pass_idx, variant in enumerate(PASSES):
                step = page_idx * len(PASSES) + pass_idx
                percent = round(step * 100 / total_steps)
                report(f"Страница {page_no} из {len(pages)}: {variant.label} ({percent}%)")

                def on_engine_progress(status: str, progress: float, _page_no=page_no) -> None:
                    if status == "recognizing text":
                        report(f"Сканирование страницы {_page_no}: {round(progress * 100)}%")

                try:
                    record = _try_pass(engine, page, variant, on_engine_progress)
                except (ImageLoadError, OcrEngineError) as e:
                    logger.warning("Page %d, pass %s failed: %s", page_no, variant.name, e)
                    continue
                if record is not None:
                    logger.info("MRZ found on page %d (pass %s)", page_no, variant.name)
                    report("MRZ найдена (100%)")
                    return record
                logger.debug("No MRZ on page %d (pass %s)", page_no, variant.name)
        raise MrzNotFound()
    finally:
        engine.close()


def extract_passport(
    source: RawImage,
    engine_name: Optional[str] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> PassportRecord:
    """
    Изображение или PDF (bytes / путь / массив) → PassportRecord.
    PdfConversionError фатальна; ничего не сохраняется между вызовами.
    """
    report = on_progress or _silent
    if is_pdf(source):
        report("Конвертация PDF в изображения...")
    pages = load_pages(source)
    report("Инициализация OCR-движка...")
    engine = get_engine(engine_name)
    return extract_pages(pages, engine=engine, on_progress=report)
