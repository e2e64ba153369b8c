import json
import sys

import pytest

from word_complete.__main__ import main


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("app\napple\napplication\nbanana\n", encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def _log_to_tmp(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(
        "word_complete.logging._DEFAULT_LOG", tmp_path / "word_complete.log"
    )


def test_prints_suggestions(word_file, tmp_path, capsys):
    settings = str(tmp_path / "settings.json")
    main(["app", "--words-file", word_file, "--settings", settings])
    assert capsys.readouterr().out.split() == ["apple", "application"]


def test_limit_override(word_file, tmp_path, capsys):
    settings = str(tmp_path / "settings.json")
    main(["a", "--words-file", word_file, "--settings", settings, "--limit", "1"])
    assert capsys.readouterr().out.split() == ["app"]


def test_add_and_clear_custom_words(word_file, tmp_path, capsys):
    settings = tmp_path / "settings.json"
    main(["--words-file", word_file, "--settings", str(settings), "--add", "Bandana"])
    assert json.loads(settings.read_text())["custom_dict"] == ["bandana"]

    main(["band", "--words-file", word_file, "--settings", str(settings)])
    assert capsys.readouterr().out.split() == ["bandana"]

    main(["--words-file", word_file, "--settings", str(settings), "--clear-custom"])
    assert json.loads(settings.read_text())["custom_dict"] == []


def test_missing_word_file(tmp_path):
    with pytest.raises(SystemExit):
        main([
            "app",
            "--words-file", str(tmp_path / "missing.txt"),
            "--settings", str(tmp_path / "settings.json"),
        ])
