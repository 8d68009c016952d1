"""
Unit tests for logging configuration.
"""

import logging

import pytest

from movie_catalog.utils.logging_config import QUIET_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = [h for h in root.handlers if not type(h).__module__.startswith("_pytest")]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only(self):
        assert setup_logging(level="debug") is None

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_log_file_is_written(self, tmp_path):
        log_dir = tmp_path / "logs"

        log_path = setup_logging(log_file="catalog.log", log_dir=str(log_dir))
        logging.getLogger("movie_catalog.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_path == log_dir / "catalog.log"
        assert "hello" in log_path.read_text()

    def test_noisy_loggers_are_quieted(self):
        setup_logging(level="DEBUG")

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(level="LOUD")
