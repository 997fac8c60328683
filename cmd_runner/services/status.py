"""Exit status checking."""

from typing import BinaryIO

from cmd_runner.models import ExitOutcome
from cmd_runner.services.errors import CommandFailedError
from cmd_runner.services.tail import last_utf8_content


def check_status(outcome: ExitOutcome, stderr: BinaryIO) -> None:
    """Raise if the child did not exit successfully.

    The stderr file is only read on failure.

    Raises:
        CommandFailedError: With the outcome and the tail of stderr.
    """
    if outcome.success:
        return
    raise CommandFailedError(outcome, last_utf8_content(stderr))
