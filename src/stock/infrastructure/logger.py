"""
Logging configuration for the stock service.

Provides a centralized ``stock`` logger. Its level comes from settings
(``STOCK_LOG_LEVEL``) and is applied by ``configure_logging``.
"""
from __future__ import annotations

import logging
import sys

from stock.infrastructure.config import get_settings

logger = logging.getLogger("stock")


def build_console_handler() -> logging.Handler:
    """Stderr handler with the service log format."""
    console_handler = logging.StreamHandler(sys.stderr)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(formatter)
    return console_handler


if not logger.handlers:
    logger.addHandler(build_console_handler())

# Prevent propagation to root logger (avoid duplicate logs)
logger.propagate = False


def configure_logging(level: str | None = None) -> logging.Logger:
    """Apply the configured log level to the ``stock`` logger."""
    logger.setLevel((level or get_settings().log_level).upper())
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger (will be appended to 'stock')

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"stock.{name}")
    return logger
