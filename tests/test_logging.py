"""Tests for structured logging system."""

import logging
import tempfile
from pathlib import Path

import pytest

from resource_generator.utils.logging import (
    LOGGER_NAME,
    Logger,
    ColoredFormatter,
    get_logger,
    configure_logging,
    reset_logger,
)
from resource_generator.utils.colors import Colors


def make_record(level, msg='Test message'):
    return logging.LogRecord(
        name='test',
        level=level,
        pathname='',
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None
    )


class TestColoredFormatter:
    """Test cases for ColoredFormatter."""

    def test_format_without_colors(self):
        """Formatter without colors should return plain text."""
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=False)
        result = formatter.format(make_record(logging.WARNING))
        assert result == 'Test message'

    def test_format_with_colors(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True)
        result = formatter.format(make_record(logging.WARNING))
        assert result == f'{Colors.WARNING}Test message{Colors.ENDC}'

    def test_info_is_plain(self):
        """Info lines are not colored."""
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True)
        assert formatter.format(make_record(logging.INFO)) == 'Test message'

    def test_level_colors(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True)

        levels = [
            (logging.DEBUG, Colors.DIM),
            (logging.WARNING, Colors.WARNING),
            (logging.ERROR, Colors.FAIL),
        ]

        for level, expected_color in levels:
            result = formatter.format(make_record(level, 'Test'))
            assert expected_color in result, f"Level {level} should use color {expected_color}"


class TestLogger:
    """Test cases for Logger class."""

    def setup_method(self):
        """Reset logger before each test."""
        reset_logger()

    def teardown_method(self):
        """Clean up after each test."""
        reset_logger()

    def test_singleton_pattern(self):
        """Logger should be a singleton."""
        assert Logger() is Logger()

    def test_get_logger_returns_same_instance(self):
        assert get_logger() is get_logger()

    def test_does_not_propagate(self):
        get_logger()
        assert logging.getLogger(LOGGER_NAME).propagate is False

    def test_configure_default(self):
        """Default mode shows warnings and errors only."""
        logger = get_logger()
        configure_logging()
        assert logger.console_level == logging.WARNING

    def test_configure_verbose(self):
        logger = get_logger()
        configure_logging(verbose=True)
        assert logger.console_level == logging.DEBUG

    def test_configure_quiet(self):
        logger = get_logger()
        configure_logging(quiet=True)
        assert logger.console_level == logging.ERROR

    def test_reconfigure_keeps_one_console_handler(self):
        logger = get_logger()
        configure_logging(verbose=True)
        configure_logging(quiet=True)
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1
        assert logger.console_level == logging.ERROR

    def test_get_module_logger(self):
        """Should be able to get module-specific logger."""
        module_logger = get_logger().get_logger('generator')
        assert module_logger.name == 'resource_generator.generator'

    def test_module_loggers_reach_console(self, capfd):
        """Loggers created with __name__ go through the package handler."""
        configure_logging(verbose=True, use_colors=False)
        logging.getLogger('resource_generator.core.generator').debug("Generated 3 kinds")
        captured = capfd.readouterr()
        assert "Generated 3 kinds" in captured.err

    def test_console_writes_to_stderr(self, capfd):
        configure_logging(use_colors=False)
        get_logger().warning("Warning message")
        captured = capfd.readouterr()
        assert "Warning message" in captured.err
        assert "Warning message" not in captured.out

    def test_info_hidden_by_default(self, capfd):
        configure_logging()
        get_logger().info("Info message")
        captured = capfd.readouterr()
        assert "Info message" not in captured.err

    def test_info_shown_when_verbose(self, capfd):
        configure_logging(verbose=True)
        get_logger().info("Info message")
        captured = capfd.readouterr()
        assert "Info message" in captured.err

    def test_quiet_shows_errors(self, capfd):
        configure_logging(quiet=True)
        logger = get_logger()
        logger.warning("Warning message")
        logger.error("Error message")
        captured = capfd.readouterr()
        assert "Warning message" not in captured.err
        assert "Error message" in captured.err


class TestFileLogging:
    """Test cases for file logging functionality."""

    def setup_method(self):
        reset_logger()

    def teardown_method(self):
        reset_logger()

    def test_log_file_format(self):
        """File log should have timestamp and level."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / 'test.log'
            configure_logging(log_file=log_file)
            logger = get_logger()

            logger.info("Test message")
            logger.warning("Warning message")

            logger._file_handler.flush()
            logger._file_handler.close()

            content = log_file.read_text()
            assert "[INFO]" in content
            assert "[WARNING]" in content
            assert "Test message" in content
            assert '\033[' not in content

    def test_log_file_records_debug(self):
        """The file gets every level regardless of the console level."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / 'subdir' / 'test.log'
            configure_logging(quiet=True, log_file=log_file)
            logger = get_logger()

            logger.debug("Debug message")
            logger._file_handler.close()

            assert "Debug message" in log_file.read_text()


class TestResetLogger:
    """Test cases for reset_logger function."""

    def test_reset_clears_handlers(self):
        get_logger()
        reset_logger()

        from resource_generator.utils import logging as log_module
        assert log_module._logger is None
        assert logging.getLogger(LOGGER_NAME).handlers == []

    def test_new_instance_after_reset(self):
        first = get_logger()
        reset_logger()
        assert get_logger() is not first
        reset_logger()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
