"""
Tests for the logging setup.
"""

import logging

import pytest

from dollar_quote.logging_config import LoggingSettings, configure_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_logs_to_stdout_and_file(self, tmp_path, restore_root_logger):
        """Test that records reach the log file, creating its directory."""
        log_file = tmp_path / "logs" / "dollar_quote.log"
        settings = LoggingSettings(
            log_level="debug", log_file=str(log_file), log_to_file=True
        )

        configure_logging(settings)
        logging.getLogger("dollar_quote.test").debug("Dólar: 5.43")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 2
        assert "Dólar: 5.43" in log_file.read_text(encoding="utf-8")

    def test_stdout_only(self, tmp_path, restore_root_logger):
        """Test that disabling the file keeps a single stream handler."""
        log_file = tmp_path / "dollar_quote.log"
        settings = LoggingSettings(log_file=str(log_file), log_to_file=False)

        configure_logging(settings)

        assert [type(h) for h in restore_root_logger.handlers] == [
            logging.StreamHandler
        ]
        assert not log_file.exists()

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        """Test that an unrecognised level name means INFO."""
        configure_logging(LoggingSettings(log_level="chatty", log_to_file=False))

        assert restore_root_logger.level == logging.INFO
