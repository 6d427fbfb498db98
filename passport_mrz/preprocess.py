# -*- coding: utf-8 -*-
"""
B. Preprocess — подготовка страницы для OCR строк MRZ:
обрезка нижней полосы, оттенки серого, бинаризация по Otsu, увеличение ×3
"""
import time

import cv2
import numpy as np

from passport_mrz.ingest import RawImage, load_image

# MRZ печатается в нижней части страницы
BOTTOM_BAND_FRACTION = 0.35
UPSCALE_FACTOR = 3
DEFAULT_THRESHOLD = 128


def crop_bottom_band(img: np.ndarray, fraction: float = BOTTOM_BAND_FRACTION) -> np.ndarray:
    """Оставить нижние `fraction` высоты (минимум одна строка пикселей)"""
    h = img.shape[0]
    keep = max(1, int(round(h * fraction)))
    return img[h - keep:]


def to_grayscale(img: np.ndarray) -> np.ndarray:
    """Яркость Y = 0.299R + 0.587G + 0.114B"""
    if img.ndim == 2:
        return img.astype(np.uint8, copy=False)
    rgb = img[:, :, :3].astype(np.float64)
    y = 0.299 * rgb[:, :, 0] + 0.587 * rgb[:, :, 1] + 0.114 * rgb[:, :, 2]
    return np.clip(np.rint(y), 0, 255).astype(np.uint8)


def otsu_threshold(gray: np.ndarray) -> int:
    """
    Порог Otsu по 256-бинной гистограмме.
    Фон: пиксели ≤ t, объект: > t; максимизируем w_bg * w_fg * (m_bg - m_fg)^2.
    При равенстве берётся наименьший t; если ни один t не разделяет классы, 128.
    """
    hist = np.bincount(gray.ravel(), minlength=256)[:256].astype(np.float64)
    levels = np.arange(256, dtype=np.float64)

    w_bg = np.cumsum(hist)
    w_fg = w_bg[-1] - w_bg
    sum_bg = np.cumsum(hist * levels)
    sum_fg = sum_bg[-1] - sum_bg

    valid = (w_bg > 0) & (w_fg > 0)
    score = np.zeros(256, dtype=np.float64)
    mean_bg = sum_bg[valid] / w_bg[valid]
    mean_fg = sum_fg[valid] / w_fg[valid]
    score[valid] = w_bg[valid] * w_fg[valid] * (mean_bg - mean_fg) ** 2

    best = int(np.argmax(score))
    if score[best] <= 0:
        return DEFAULT_THRESHOLD
    return best


def binarize(gray: np.ndarray, threshold: int) -> np.ndarray:
    """Чисто чёрно-белое: > threshold → 255, иначе 0"""
    return np.where(gray > threshold, 255, 0).astype(np.uint8)


def upscale(img: np.ndarray, factor: int = UPSCALE_FACTOR) -> np.ndarray:
    """Увеличение ближайшим соседом, без сглаживания краёв глифов"""
    return cv2.resize(img, None, fx=factor, fy=factor, interpolation=cv2.INTER_NEAREST)


def prepare(image: RawImage, crop_to_bottom_band: bool = False) -> np.ndarray:
    """Полная предобработка одного прохода. Ошибка только ImageLoadError."""
    return prepare_with_info(image, crop_to_bottom_band)[0]


def prepare_with_info(image: RawImage, crop_to_bottom_band: bool = False) -> tuple[np.ndarray, dict]:
    """
    То же, что prepare, плюс отладочная информация (порог, размеры, время).
    """
    t0 = time.perf_counter()
    img = load_image(image)
    info = {"source_shape": tuple(img.shape), "cropped": crop_to_bottom_band}
    if crop_to_bottom_band:
        img = crop_bottom_band(img)
    gray = to_grayscale(img)
    threshold = otsu_threshold(gray)
    out = upscale(binarize(gray, threshold))
    info["threshold"] = threshold
    info["output_shape"] = tuple(out.shape)
    info["time_ms"] = round((time.perf_counter() - t0) * 1000, 1)
    return out, info
