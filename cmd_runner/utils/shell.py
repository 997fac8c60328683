"""Shell quoting helpers for rendering command lines."""

import shlex
from collections.abc import Iterable


def quote_arg(arg: str) -> str:
    """Safely quote a shell argument.

    Args:
        arg: Argument to quote

    Returns:
        Shell-safe quoted argument
    """
    return shlex.quote(arg)


def join_command(argv: Iterable[str]) -> str:
    """Render an argument vector as a copy-pasteable shell command line.

    Args:
        argv: Program name followed by its arguments

    Returns:
        Space separated, individually quoted arguments
    """
    return " ".join(quote_arg(str(arg)) for arg in argv)
