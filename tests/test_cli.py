# -*- coding: utf-8 -*-
"""Тесты командной строки"""
import json

import main
from passport_mrz.errors import MrzNotFound
from passport_mrz.parse import decode_mrz

from tests.conftest import ICAO_LINE1, ICAO_LINE2


def test_prints_record_json(monkeypatch, capsys):
    record = decode_mrz(ICAO_LINE1, ICAO_LINE2)
    monkeypatch.setattr(main, "extract_passport", lambda path, engine_name=None, on_progress=None: record)
    assert main.main(["passport.jpg"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["passport_number"] == "L898902C3"
    assert out["given_names"] == "ANNA MARIA"


def test_not_found_exit_code(monkeypatch, capsys):
    def not_found(path, engine_name=None, on_progress=None):
        raise MrzNotFound()

    monkeypatch.setattr(main, "extract_passport", not_found)
    assert main.main(["blank.png", "--engine", "tesseract"]) == 1
    assert "MRZ" in capsys.readouterr().err
