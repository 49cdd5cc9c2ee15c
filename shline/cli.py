"""Command-line interface for shline."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .shell import CommandResult, Shell

LOG = logging.getLogger("shline.cli")

PROMPT = "$ "


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Define a variable for $NAME expansion (repeatable).",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Read NAME=VALUE lines from a file before applying --set.",
    )
    parser.add_argument(
        "--no-inherit-env",
        action="store_true",
        help="Start from an empty mapping instead of the current environment.",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("SHLINE_LOG", "WARNING"),
        help="Logging level (default WARNING)",
    )


def _split_assignment(item: str) -> tuple[str, str]:
    if "=" not in item:
        raise ValueError(f"Invalid assignment '{item}'. Expected NAME=VALUE")
    name, value = item.split("=", 1)
    if not name:
        raise ValueError(f"Invalid assignment '{item}'. Missing name")
    return name, value


def _read_env_file(path: Path) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        name, value = _split_assignment(line)
        values[name] = value
    return values


def build_env(args: argparse.Namespace) -> dict[str, str]:
    """Collect the variable mapping handed to the parser."""

    env: dict[str, str] = {} if args.no_inherit_env else dict(os.environ)
    if args.env_file is not None:
        env.update(_read_env_file(args.env_file))
    for item in args.assignments:
        name, value = _split_assignment(item)
        env[name] = value
    return env


def _write_result(result: CommandResult) -> None:
    if result.stdout:
        sys.stdout.write(result.stdout)
    if result.stderr:
        sys.stderr.write(result.stderr if result.stderr.endswith("\n") else f"{result.stderr}\n")


def _run_exec(args: argparse.Namespace) -> int:
    shell = Shell(build_env(args))
    result = shell.exec(args.command)
    _write_result(result)
    return result.exit_code


def _run_shell(args: argparse.Namespace) -> int:
    shell = Shell(build_env(args))
    try:
        while not shell.exit_requested:
            line = input(PROMPT)
            result = shell.exec(line)
            _write_result(result)
            if result.spawned:
                print(f"process exited with code {result.exit_code}")
    except EOFError:
        print()
    except KeyboardInterrupt:
        print()
        return 0
    print("Bye!")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="shline")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    exec_parser = subparsers.add_parser("exec", help="Run a single command line")
    _add_common_flags(exec_parser)
    exec_parser.add_argument("command", help="Command line to parse and run")
    exec_parser.set_defaults(func=_run_exec)

    shell_parser = subparsers.add_parser("shell", help="Start an interactive shell")
    _add_common_flags(shell_parser)
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        exit_code = args.func(args)
    except (OSError, ValueError) as exc:
        LOG.debug("startup failed", exc_info=True)
        parser.error(str(exc))
    raise SystemExit(exit_code)


__all__ = ["main", "build_env"]
