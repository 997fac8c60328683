"""cmd_runner

Run external commands with captured stderr diagnostics.

Primary entrypoints:
- cmd_runner.run / cmd_runner.run_async
- cmd_runner.run_and_parse_json
- console script: cmd-runner
"""

from cmd_runner.models import Command, ExitOutcome
from cmd_runner.services import (
    CommandError,
    CommandFailedError,
    ExecutionError,
    OutputDecodeError,
    check_status,
    last_utf8_content,
    run,
    run_and_parse_json,
    run_async,
)

__all__ = [
    "__version__",
    "check_status",
    "Command",
    "CommandError",
    "CommandFailedError",
    "ExecutionError",
    "ExitOutcome",
    "last_utf8_content",
    "OutputDecodeError",
    "run",
    "run_and_parse_json",
    "run_async",
]

__version__ = "0.1.0"
