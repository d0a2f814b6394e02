"""Unit tests for logging setup."""

import logging

import pytest

from raysphere.logging_config import setup_logging


@pytest.fixture
def restore_package_logger():
    """Put the package logger back the way the library leaves it."""
    logger = logging.getLogger("raysphere")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved_level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level_and_console_handler(self, restore_package_logger):
        logger = setup_logging(logging.DEBUG)
        assert logger is restore_package_logger
        assert logger.level == logging.DEBUG
        stream_handlers = [
            h for h in logger.handlers if type(h) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1

    def test_repeat_calls_do_not_duplicate_handlers(self, restore_package_logger):
        setup_logging()
        setup_logging()
        logger = setup_logging()
        stream_handlers = [
            h for h in logger.handlers if type(h) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1

    def test_writes_log_file(self, restore_package_logger, tmp_path):
        log_file = tmp_path / "raysphere.log"
        logger = setup_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("raysphere.geometry.sphere").info("hello from the kernel")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from the kernel" in log_file.read_text(encoding="utf-8")
