"""Tests for the JSON logger singleton."""

import json
import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbind.logger import LOGGER_NAME, TgBindLogger, _JsonFormatter


@pytest.fixture(autouse=True)
def _reset_logger():
    TgBindLogger.reset()
    yield
    TgBindLogger.reset()


class TestJsonFormatter:
    def test_extra_fields_merged(self) -> None:
        record = logging.LogRecord("tgbind.client", logging.WARNING, __file__, 1, "Bot API error", (), None)
        record.api_endpoint = "sendMessage"
        record.error_code = 429
        entry = json.loads(_JsonFormatter().format(record))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "tgbind.client"
        assert entry["message"] == "Bot API error"
        assert entry["api_endpoint"] == "sendMessage"
        assert entry["error_code"] == 429

    def test_exception_included(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord("tgbind", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        entry = json.loads(_JsonFormatter().format(record))
        assert "RuntimeError: boom" in entry["exc_info"]


class TestTgBindLogger:
    def test_singleton(self) -> None:
        first = TgBindLogger.get_logger()
        second = TgBindLogger.get_logger(level=logging.DEBUG)
        assert first is second
        assert first.name == LOGGER_NAME
        assert first.level == logging.INFO
        assert len(first.handlers) == 1

    def test_file_handler(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "tgbind.log"
        logger = TgBindLogger.get_logger(log_file=str(log_file))
        logging.getLogger("tgbind.client").info("Client ready", extra={"api_endpoint": "getMe"})
        for handler in logger.handlers:
            handler.flush()
        entry = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert entry["message"] == "Client ready"
        assert entry["api_endpoint"] == "getMe"

    def test_reset_removes_handlers(self) -> None:
        logger = TgBindLogger.get_logger()
        TgBindLogger.reset()
        assert logger.handlers == []
        assert logger.level == logging.NOTSET
