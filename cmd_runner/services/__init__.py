"""Services for cmd_runner."""

from cmd_runner.services.async_runner import run_async
from cmd_runner.services.errors import (
    CommandError,
    CommandFailedError,
    ExecutionError,
    OutputDecodeError,
)
from cmd_runner.services.runner import run, run_and_parse_json
from cmd_runner.services.state import get_settings, reset_state, set_settings
from cmd_runner.services.status import check_status
from cmd_runner.services.tail import MAX_STDERR_BYTES, last_utf8_content

__all__ = [
    "check_status",
    "CommandError",
    "CommandFailedError",
    "ExecutionError",
    "get_settings",
    "last_utf8_content",
    "MAX_STDERR_BYTES",
    "OutputDecodeError",
    "reset_state",
    "run",
    "run_and_parse_json",
    "run_async",
    "set_settings",
]
