"""Tests for console log formatting and setup."""

import logging
import sys
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from cmd_runner.config import Settings
from cmd_runner.utils.console import PACKAGE_LOGGER, ColorfulFormatter, configure_logging


def make_record(name: str, level: int, msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after configure_logging()."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (logger.handlers[:], logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    logger.handlers[:], logger.level, logger.propagate = saved


class TestColorfulFormatter:
    """Tests for ColorfulFormatter."""

    def test_plain_output(self) -> None:
        """Without colors the line has no escape codes."""
        formatter = ColorfulFormatter(use_colors=False)
        record = make_record(
            "cmd_runner.services.tail", logging.WARNING, "failed to fstat: %s", "EBADF"
        )

        line = formatter.format(record)

        assert "\033[" not in line
        assert "WARNING " in line
        assert "services.tail" in line
        assert "cmd_runner.services" not in line
        assert line.endswith("| failed to fstat: EBADF")

    def test_colored_output_highlights_outcome(self) -> None:
        """Exit outcomes are highlighted when colors are on."""
        formatter = ColorfulFormatter(use_colors=True)
        record = make_record(
            "cmd_runner.services.runner", logging.DEBUG, "true exited: ExitOutcome(code=0)"
        )

        line = formatter.format(record)

        assert "\033[93mExitOutcome(code=0)\033[0m" in line

    def test_foreign_logger_names_kept(self) -> None:
        """Names outside the package are not shortened."""
        formatter = ColorfulFormatter(use_colors=False)
        line = formatter.format(make_record("asyncio", logging.INFO, "hello"))

        assert "asyncio" in line

    def test_includes_exception(self) -> None:
        """Tracebacks are appended below the line."""
        formatter = ColorfulFormatter(use_colors=False)
        try:
            raise RuntimeError("kaboom")
        except RuntimeError:
            record = logging.LogRecord(
                "cmd_runner", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        line = formatter.format(record)

        assert "RuntimeError: kaboom" in line


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_adds_single_handler(self, package_logger: logging.Logger) -> None:
        """Calling twice does not duplicate handlers."""
        configure_logging(Settings(log_level="DEBUG"))
        configure_logging(Settings(log_level="DEBUG"))

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False
        assert isinstance(package_logger.handlers[0].formatter, ColorfulFormatter)

    def test_no_colors_without_tty(self, package_logger: logging.Logger) -> None:
        """Colors are dropped when stderr is not a terminal."""
        with patch("cmd_runner.utils.console.sys.stderr") as stderr:
            stderr.isatty.return_value = False
            configure_logging(Settings(log_colors=True))

        formatter = package_logger.handlers[0].formatter
        assert isinstance(formatter, ColorfulFormatter)
        assert formatter.use_colors is False
