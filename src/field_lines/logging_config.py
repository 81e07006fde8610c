# MIT License (see LICENSE)
"""
Logging setup for applications embedding the engine.

The library only creates module loggers under the "field_lines" namespace;
it never installs handlers on import. Call setup_logging() from an
application or script to see pass summaries.
"""
from __future__ import annotations
import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the "field_lines" logger.

    Args:
        level: Logging level (e.g. logging.DEBUG for per-pass summaries).
        log_file: Optional path to also write logs to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("field_lines")
    logger.setLevel(level)

    # Avoid duplicate output when called more than once.
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
