import logging
import sys

import pytest

from word_complete import logging as wc_logging


@pytest.fixture
def bare_root(monkeypatch):
    """Root logger with no handlers, restored afterwards."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def _clear_handlers(root):
    # pytest's logging plugin attaches its capture handlers to the root
    # logger for the call phase, after the fixture ran; drop them so
    # basicConfig() sees a bare root.
    for handler in root.handlers[:]:
        root.removeHandler(handler)


def _flushed_text(root, path):
    for handler in root.handlers:
        handler.flush()
    return path.read_text(encoding="utf-8")


def test_setup_writes_to_log_file(bare_root, tmp_path):
    log_file = tmp_path / "wc.log"
    _clear_handlers(bare_root)
    wc_logging.setup(logging.DEBUG, log_file=log_file)
    assert any(isinstance(h, logging.FileHandler) for h in bare_root.handlers)

    logging.getLogger("word_complete.vocabulary").info("Loaded 3 words")
    text = _flushed_text(bare_root, log_file)
    assert "INFO" in text
    assert "word_complete.vocabulary: Loaded 3 words" in text


def test_excepthook_logs_critical(bare_root, tmp_path):
    log_file = tmp_path / "wc.log"
    _clear_handlers(bare_root)
    wc_logging.setup(log_file=log_file)
    try:
        raise ValueError("boom")
    except ValueError:
        sys.excepthook(*sys.exc_info())

    text = _flushed_text(bare_root, log_file)
    assert "CRITICAL" in text
    assert "Unhandled exception" in text
    assert "ValueError: boom" in text


def test_unwritable_log_file_falls_back_to_console(bare_root, tmp_path):
    _clear_handlers(bare_root)
    wc_logging.setup(log_file=tmp_path / "missing" / "wc.log")
    assert bare_root.handlers
    assert not any(isinstance(h, logging.FileHandler) for h in bare_root.handlers)
