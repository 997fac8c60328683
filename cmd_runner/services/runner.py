"""Blocking command runners.

Both runners capture the child's stderr in an anonymous temporary file
and only read it back when the child fails. The helpers at the top are
shared with the asyncio runner, which differs only in how it spawns the
child and waits for it.
"""

import logging
import subprocess
import tempfile
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any, BinaryIO, TypeVar

from pydantic import TypeAdapter, ValidationError

from cmd_runner.models import Command, ExitOutcome, as_command
from cmd_runner.services.errors import ExecutionError, OutputDecodeError
from cmd_runner.services.status import check_status

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def redirected_sink(stream: str) -> Iterator[BinaryIO]:
    """Create an anonymous temporary file for capturing a child stream.

    The file is closed, and so reclaimed, when the block exits by any
    path, including a failed spawn.

    Args:
        stream: Name of the captured stream, used in error messages.

    Raises:
        ExecutionError: If the temporary file cannot be created.
    """
    try:
        sink = tempfile.TemporaryFile()
    except OSError as e:
        raise ExecutionError(f"create {stream} sink", e) from e
    with sink:
        yield sink


def spawn_options(
    command: Command,
    *,
    stdout: BinaryIO | None,
    stderr: BinaryIO,
) -> dict[str, Any]:
    """Keyword arguments shared by Popen and create_subprocess_exec.

    The child gets its own descriptors for the passed files; the caller
    keeps the originals for reading back afterwards.
    """
    return {
        "cwd": command.cwd,
        "env": command.spawn_env(),
        "stdout": stdout,
        "stderr": stderr,
    }


def finish(command: Command, returncode: int, stderr: BinaryIO) -> None:
    """Turn a returncode into success or CommandFailedError."""
    outcome = ExitOutcome(returncode)
    logger.debug("%s exited: %r", command.program, outcome)
    check_status(outcome, stderr)


def run(
    command: Command | Sequence[str],
    *,
    stdout: BinaryIO | None = None,
) -> None:
    """Run a command to completion, blocking the calling thread.

    Stdout is inherited unless a file is passed.

    Raises:
        ExecutionError: If the process could not be spawned or waited on.
        CommandFailedError: If the process exited unsuccessfully.
    """
    command = as_command(command)

    with redirected_sink("stderr") as stderr:
        logger.debug("Spawning %s", command.program)
        try:
            proc = subprocess.Popen(
                command.argv,
                **spawn_options(command, stdout=stdout, stderr=stderr),
            )
        except (OSError, ValueError) as e:
            raise ExecutionError("spawn", e) from e

        try:
            returncode = proc.wait()
        except OSError as e:
            raise ExecutionError("wait", e) from e

        finish(command, returncode, stderr)


def run_and_parse_json(command: Command | Sequence[str], schema: type[T]) -> T:
    """Run a command and decode its stdout as JSON matching ``schema``.

    ``schema`` is anything pydantic can validate against: a BaseModel,
    a dataclass, a TypedDict or a plain type such as ``dict[str, Any]``.
    Stdout is only decoded once the command has succeeded.

    Raises:
        ExecutionError: If the process could not be spawned or waited on.
        CommandFailedError: If the process exited unsuccessfully.
        OutputDecodeError: If stdout could not be read or does not match.
    """
    with redirected_sink("stdout") as stdout:
        run(command, stdout=stdout)

        try:
            stdout.seek(0)
            data = stdout.read()
        except (OSError, ValueError) as e:
            raise OutputDecodeError(f"Failed to read stdout: {e}") from e

        try:
            return TypeAdapter(schema).validate_json(data)
        except ValidationError as e:
            raise OutputDecodeError(
                f"Failed to decode stdout as {getattr(schema, '__name__', schema)}: {e}"
            ) from e
