"""Entry point for the cmd-runner command line tool."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from cmd_runner.models import Command
from cmd_runner.services import CommandError, get_settings, run, run_and_parse_json
from cmd_runner.utils.console import configure_logging

logger = logging.getLogger(__name__)


def _env_item(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, val


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmd-runner",
        description="Run a command, reporting the tail of its stderr if it fails.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Decode the command's stdout as JSON and pretty-print it",
    )
    parser.add_argument("--cwd", default=None, help="Working directory for the command")
    parser.add_argument(
        "--env",
        action="append",
        type=_env_item,
        default=[],
        metavar="KEY=VALUE",
        help="Environment override (repeatable)",
    )
    parser.add_argument("argv", nargs=argparse.REMAINDER, help="Program and arguments")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    command_argv = list(args.argv)
    if command_argv and command_argv[0] == "--":
        command_argv = command_argv[1:]
    if not command_argv:
        parser.error("no command given")

    configure_logging(get_settings())

    command = Command.from_argv(
        command_argv,
        cwd=args.cwd,
        env=dict(args.env) if args.env else None,
    )

    try:
        if args.json:
            value: Any = run_and_parse_json(command, Any)  # type: ignore[arg-type]
            print(json.dumps(value, indent=2, sort_keys=True))
        else:
            run(command)
    except CommandError as e:
        # The runners leave the command line out; add it here
        logger.error("%s: %s", command.display(), e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
