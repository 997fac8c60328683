"""Command model."""

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from cmd_runner.utils.shell import join_command


@dataclass(frozen=True)
class Command:
    """A program to run, with its arguments and spawn options.

    ``env`` holds overrides applied on top of the parent environment;
    leaving it unset lets the child inherit the environment unchanged.
    """

    program: str
    args: tuple[str, ...] = ()
    cwd: str | os.PathLike[str] | None = None
    env: Mapping[str, str] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if not self.program:
            raise ValueError("Command program cannot be empty")
        # Freeze whatever containers the caller passed
        object.__setattr__(self, "args", tuple(str(a) for a in self.args))
        if self.env is not None:
            object.__setattr__(self, "env", MappingProxyType(dict(self.env)))

    @classmethod
    def from_argv(cls, argv: Sequence[str], **kwargs: Any) -> "Command":
        """Build a Command from ``[program, *args]``.

        Raises:
            ValueError: If argv is empty
        """
        if not argv:
            raise ValueError("argv must contain at least the program name")
        return cls(str(argv[0]), tuple(argv[1:]), **kwargs)

    @property
    def argv(self) -> list[str]:
        """Full argument vector passed to the OS."""
        return [self.program, *self.args]

    def with_args(self, *args: str) -> "Command":
        """Return a copy with extra arguments appended."""
        return replace(self, args=(*self.args, *args))

    def spawn_env(self) -> dict[str, str] | None:
        """Environment for the child, or None to inherit the parent's."""
        if self.env is None:
            return None
        env = dict(os.environ)
        env.update(self.env)
        return env

    def display(self) -> str:
        """Shell-quoted command line, for callers adding error context."""
        return join_command(self.argv)


def as_command(command: "Command | Sequence[str]") -> Command:
    """Accept either a Command or a plain argument vector."""
    if isinstance(command, Command):
        return command
    if isinstance(command, str):
        raise TypeError("Pass an argument list, not a shell string")
    return Command.from_argv(command)
