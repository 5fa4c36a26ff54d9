"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from readmegen.core.observability.logging_config import cli_level, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCliLevel:
    def test_flags_win(self, monkeypatch):
        monkeypatch.setenv("READMEGEN_LOG_LEVEL", "ERROR")
        assert cli_level(debug=True) == "DEBUG"
        assert cli_level(verbose=True) == "INFO"
        assert cli_level(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("READMEGEN_LOG_LEVEL", "INFO")
        assert cli_level() == "INFO"

    def test_default_warning(self, monkeypatch):
        monkeypatch.delenv("READMEGEN_LOG_LEVEL", raising=False)
        assert cli_level() == "WARNING"


class TestSetupLogging:
    def test_console_level(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.WARNING

    def test_log_file_captures_detail(self, tmp_path: Path):
        log_file = tmp_path / "readmegen.log"
        setup_logging(level="ERROR", log_file=str(log_file))

        logging.getLogger("readmegen.test").info("rendered 3 lines")
        for handler in logging.getLogger().handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "[INFO " in text
        assert "readmegen.test: rendered 3 lines" in text

    def test_third_party_quieted(self):
        setup_logging(level="INFO")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_third_party_loud_in_debug(self):
        logging.getLogger("httpcore").setLevel(logging.NOTSET)
        setup_logging(level="DEBUG")
        assert logging.getLogger("httpcore").level == logging.NOTSET
