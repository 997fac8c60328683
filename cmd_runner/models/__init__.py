"""Data models for cmd_runner."""

from cmd_runner.models.command import Command, as_command
from cmd_runner.models.outcome import ExitOutcome

__all__ = [
    "as_command",
    "Command",
    "ExitOutcome",
]
