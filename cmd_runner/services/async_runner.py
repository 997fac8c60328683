"""Asyncio command runner."""

import asyncio
import logging
from collections.abc import Sequence
from contextlib import suppress
from typing import BinaryIO

from cmd_runner.models import Command, as_command
from cmd_runner.services.errors import ExecutionError
from cmd_runner.services.runner import finish, redirected_sink, spawn_options
from cmd_runner.services.state import get_settings

logger = logging.getLogger(__name__)


def _abandon(proc: asyncio.subprocess.Process, kill: bool) -> None:
    """Apply the cancellation policy to a child nobody is waiting for."""
    if proc.returncode is not None:
        return
    if not kill:
        logger.warning("Wait cancelled, leaving child pid=%d running", proc.pid)
        return
    logger.warning("Wait cancelled, killing child pid=%d", proc.pid)
    # Already gone between the check and the signal
    with suppress(ProcessLookupError):
        proc.kill()


async def run_async(
    command: Command | Sequence[str],
    *,
    stdout: BinaryIO | None = None,
    kill_on_cancel: bool | None = None,
) -> None:
    """Run a command to completion without blocking the event loop.

    Same contract as cmd_runner.run. Waiting for the child is the only
    point where the task waits on the process.

    If the task is cancelled while the child is still running, the child
    is killed (asyncio's child watcher reaps it) and the cancellation
    propagates. With ``kill_on_cancel=False`` the child is left running.
    ``None`` uses Settings.kill_on_cancel.

    Raises:
        ExecutionError: If the process could not be spawned or waited on.
        CommandFailedError: If the process exited unsuccessfully.
    """
    command = as_command(command)
    if kill_on_cancel is None:
        kill_on_cancel = get_settings().kill_on_cancel

    with redirected_sink("stderr") as stderr:
        logger.debug("Spawning %s", command.program)
        try:
            proc = await asyncio.create_subprocess_exec(
                *command.argv,
                **spawn_options(command, stdout=stdout, stderr=stderr),
            )
        except (OSError, ValueError) as e:
            raise ExecutionError("spawn", e) from e

        try:
            returncode = await proc.wait()
        except asyncio.CancelledError:
            _abandon(proc, kill_on_cancel)
            raise
        except OSError as e:
            raise ExecutionError("wait", e) from e

        finish(command, returncode, stderr)
