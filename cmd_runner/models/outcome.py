"""Exit status model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExitOutcome:
    """Termination status of a finished child process.

    Wraps a ``subprocess``-style returncode: zero for success, a positive
    exit code, or the negated signal number when the child was killed.
    """

    returncode: int

    @property
    def success(self) -> bool:
        """Whether the child exited with status 0."""
        return self.returncode == 0

    @property
    def code(self) -> int | None:
        """Exit code, or None when the child died from a signal."""
        if self.returncode < 0:
            return None
        return self.returncode

    @property
    def signal(self) -> int | None:
        """Signal number that killed the child, if any."""
        if self.returncode < 0:
            return -self.returncode
        return None

    def __repr__(self) -> str:
        if self.signal is not None:
            return f"ExitOutcome(signal={self.signal})"
        return f"ExitOutcome(code={self.returncode})"
