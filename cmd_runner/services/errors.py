"""Exceptions raised by the command runners."""

from cmd_runner.models import ExitOutcome


class CommandError(RuntimeError):
    """Base class for every error raised while running a command."""


class ExecutionError(CommandError):
    """The command could not be run at all.

    Covers creating the capture file, spawning the process and waiting
    for it. These point at the environment, not at the command.
    """

    def __init__(self, stage: str, original_error: Exception):
        """Initialize execution error.

        Args:
            stage: What was being attempted ("create sink", "spawn", "wait")
            original_error: Original exception that caused the failure
        """
        self.stage = stage
        self.original_error = original_error
        super().__init__(f"Failed to {stage}: {original_error}")


class CommandFailedError(CommandError):
    """The command ran and exited unsuccessfully.

    The message deliberately leaves out the command line; callers add it
    if they want it.
    """

    def __init__(self, outcome: ExitOutcome, stderr_tail: str):
        """Initialize command failure.

        Args:
            outcome: Exit status of the child
            stderr_tail: Trailing stderr text captured from the child
        """
        self.outcome = outcome
        self.stderr_tail = stderr_tail
        super().__init__(f"Subprocess failed: {outcome!r}\n{stderr_tail}")


class OutputDecodeError(CommandError):
    """The command succeeded but its stdout did not match the schema."""
