"""Logging configuration for applications built on raysphere.

The library itself only creates module loggers under the "raysphere"
namespace. Call setup_logging() from an application or a debugging session
to see them.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Configure the "raysphere" logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO).
        log_file: Optional path to also write log records to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("raysphere")
    logger.setLevel(level)

    # Drop handlers from a previous call so records are not emitted twice
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
