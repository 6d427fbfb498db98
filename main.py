#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Точка входа: извлечение данных паспорта из MRZ.
Принимает изображение или PDF → OCR → JSON с полями паспорта.
"""
import argparse
import json
import logging
import sys

from passport_mrz import ExtractionError, extract_passport
from passport_mrz.config import LOG_LEVEL


def setup_logging(level_name: str = LOG_LEVEL):
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("PIL").setLevel(logging.WARNING)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Извлечение данных паспорта из MRZ (TD3)")
    parser.add_argument("path", help="Изображение (JPG/PNG/...) или PDF")
    parser.add_argument("--engine", default=None, help="OCR-движок: tesseract|easyocr")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG|INFO|WARNING|ERROR")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    def progress(msg: str) -> None:
        print(msg, file=sys.stderr)

    try:
        record = extract_passport(args.path, engine_name=args.engine, on_progress=progress)
    except ExtractionError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1

    print(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
