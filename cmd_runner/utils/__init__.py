"""Utilities for cmd_runner."""

from cmd_runner.utils.console import ColorfulFormatter, configure_logging
from cmd_runner.utils.shell import join_command, quote_arg

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "join_command",
    "quote_arg",
]
