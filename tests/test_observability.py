"""
Tests for observability — logging setup.
"""

import logging
from pathlib import Path

from image_lister.core.observability.logging_config import _parse_level, setup_logging


class TestParseLevel:
    def test_names(self):
        assert _parse_level("DEBUG") == logging.DEBUG
        assert _parse_level("info") == logging.INFO

    def test_unknown_falls_back(self):
        assert _parse_level("LOUD") == logging.WARNING
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_default_warning(self, restore_logging):
        setup_logging()
        assert restore_logging.level == logging.WARNING
        assert len(restore_logging.handlers) == 1

    def test_debug_format_has_lineno(self, restore_logging):
        setup_logging(level="DEBUG")
        fmt = restore_logging.handlers[0].formatter._fmt
        assert "%(lineno)d" in fmt

    def test_warning_format_minimal(self, restore_logging):
        setup_logging(level="WARNING")
        assert restore_logging.handlers[0].formatter._fmt == "%(message)s"

    def test_repeat_does_not_stack_handlers(self, restore_logging):
        setup_logging()
        setup_logging()
        assert len(restore_logging.handlers) == 1

    def test_file_handler(self, tmp_path: Path, restore_logging):
        log_file = tmp_path / "gen.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        assert restore_logging.level == logging.DEBUG

        logging.getLogger("image_lister.test").debug("hello file")
        for handler in restore_logging.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
