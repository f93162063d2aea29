"""Tests for Logger."""

import logging

from minds_mcp.utils.logger import Logger


class TestLogger:
    """Test Logger."""

    def test_logger_creation(self):
        """Should create logger instance."""
        logger = Logger("test", level="INFO")
        assert logger is not None

    def test_logger_levels(self):
        """Should support different log levels."""
        logger_debug = Logger("test", level="DEBUG")
        assert logger_debug.logger.level == logging.DEBUG

        logger_error = Logger("test", level="ERROR")
        assert logger_error.logger.level == logging.ERROR

    def test_unknown_level_defaults_to_info(self):
        logger = Logger("test", level="LOUD")
        assert logger.logger.level == logging.INFO

    def test_set_level(self):
        logger = Logger("test", level="INFO")
        logger.set_level("debug")
        assert logger.isEnabledFor(logging.DEBUG)

    def test_single_handler(self):
        """Creating the same logger twice should not duplicate handlers."""
        Logger("test.handlers")
        logger = Logger("test.handlers")
        assert len(logger.logger.handlers) == 1

    def test_meta_rendered_as_json(self, caplog):
        """Metadata is appended to the message as JSON."""
        logger = Logger("test.meta", level="DEBUG")
        logger.logger.propagate = True

        with caplog.at_level(logging.INFO, logger="test.meta"):
            logger.info("Loaded mind", {"mind": "git-commit", "ms": 3})

        assert 'Loaded mind {"mind": "git-commit", "ms": 3}' in caplog.text

    def test_logger_methods(self):
        """Should have logging methods."""
        logger = Logger("test")

        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message", {"code": 1})
