"""Tests for the stock logger configuration."""

import io
import logging
import sys

from stock.infrastructure.logger import (
    build_console_handler,
    configure_logging,
    get_logger,
    logger,
)


class TestConsoleHandler:

    def test_writes_to_stderr(self, monkeypatch):
        fake_stderr = io.StringIO()
        monkeypatch.setattr(sys, "stderr", fake_stderr)
        handler = build_console_handler()
        assert handler.stream is fake_stderr
        assert handler.stream is not sys.stdout

    def test_message_format(self):
        handler = build_console_handler()
        record = logging.LogRecord("stock.test", logging.INFO, __file__, 1, "hello", None, None)
        assert handler.format(record).endswith(" - stock.test - INFO - hello")


class TestStockLogger:

    def test_single_handler_no_propagation(self):
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_child_names(self):
        assert get_logger("api.products").name == "stock.api.products"
        assert get_logger() is logger

    def test_configure_level(self):
        previous = logger.level
        try:
            configure_logging("debug")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
