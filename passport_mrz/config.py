# -*- coding: utf-8 -*-
"""Конфигурация из окружения / .env"""
import os

from dotenv import load_dotenv

load_dotenv()

# OCR
OCR_ENGINE = os.environ.get("OCR_ENGINE", "tesseract")
OCR_LANG = os.environ.get("OCR_LANG", "eng")
TESSERACT_PSM = int(os.environ.get("TESSERACT_PSM", "6"))
TESSERACT_CMD = os.environ.get("TESSERACT_CMD") or None
OCR_TIMEOUT_SEC = float(os.environ.get("OCR_TIMEOUT_SEC", "30"))

# Ingest
PDF_SCALE = float(os.environ.get("PDF_SCALE", "2.0"))
MAX_FILE_MB = int(os.environ.get("MAX_FILE_MB", "20"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
