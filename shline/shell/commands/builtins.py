"""Builtins that must run inside the shell process."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import BUILTIN_REGISTRY
from ...exceptions import ExecutionError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@BUILTIN_REGISTRY.builtin("cd", description="Change working directory")
def cd(shell: "Shell", args: list[str]) -> CommandResult:
    if len(args) > 1:
        return CommandResult(stderr="cd expects at most one path", exit_code=2)
    target = args[0] if args else shell.env.get("HOME")
    if not target:
        return CommandResult(stderr="cd: HOME not set", exit_code=1)
    try:
        os.chdir(target)
    except OSError as exc:
        raise ExecutionError(f"cd: {exc}") from exc
    return CommandResult()


@BUILTIN_REGISTRY.builtin("env", description="Print the variables available for $NAME")
def env(shell: "Shell", _: list[str]) -> str:
    return "".join(f"{name}={value}\n" for name, value in sorted(shell.env.items()))


@BUILTIN_REGISTRY.builtin("exit", "quit", description="Leave the shell")
def exit_(shell: "Shell", _: list[str]) -> None:
    shell.exit_requested = True


@BUILTIN_REGISTRY.builtin("help", description="Show builtins")
def help(shell: "Shell", _: list[str]) -> CommandResult:  # noqa: A001
    lines = ["Builtins:"]
    for name in shell.available_builtins():
        desc = shell.builtin_docs.get(name, "")
        if desc:
            lines.append(f"  {name} - {desc}")
        else:
            lines.append(f"  {name}")
    lines.append("Anything else runs as a program; 'a | b' pipes a into b.")
    return CommandResult(stdout="\n".join(lines) + "\n")
