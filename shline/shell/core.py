"""Core Shell implementation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..exceptions import ParseError, ShlineError
from ..parser import Process
from ..pipeline import Pipe, parse_command_line
from .common import BuiltinHandler, CommandResult
from .host import run_pipe, run_process
from .registry import BUILTIN_REGISTRY

LOGGER = logging.getLogger("shline.shell")


class Shell:
    """Parses command lines and runs them as host processes."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        *,
        capture: bool = False,
        allowed_commands: Iterable[str] | None = None,
    ) -> None:
        self.env: dict[str, str] = dict(env or {})
        self.capture = capture
        self.allowed_commands: set[str] | None = set(allowed_commands) if allowed_commands else None
        self.builtins: dict[str, BuiltinHandler] = {}
        self.builtin_docs: dict[str, str] = {}
        self.exit_requested = False
        self._register_builtins()

    # ------------------------------------------------------------------
    # Builtin registration
    # ------------------------------------------------------------------
    def register_builtin(
        self,
        name: str,
        handler: BuiltinHandler,
        *,
        description: str = "",
    ) -> None:
        self.builtins[name] = handler
        if description:
            self.builtin_docs[name] = description

    def available_builtins(self) -> list[str]:
        return sorted(self.builtins)

    def _register_builtins(self) -> None:
        # Import builtin modules for their side effects (registration)
        from . import commands  # noqa: F401

        for builtin in BUILTIN_REGISTRY.iter_builtins():
            self.register_builtin(builtin.name, builtin.handler, description=builtin.description)

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def exec(self, command_line: str) -> CommandResult:
        if not command_line.strip():
            return CommandResult()
        try:
            parsed = parse_command_line(command_line, self.env)
        except ParseError as exc:
            LOGGER.debug("parse error for %r: %s", command_line, exc)
            return CommandResult(stderr=str(exc), exit_code=2)
        if isinstance(parsed, Pipe):
            for stage in parsed.stages:
                if denied := self._check_allowed(stage.path):
                    return denied
            return run_pipe(parsed, capture=self.capture, env=self.env)
        return self._exec_process(parsed)

    def _check_allowed(self, name: str) -> CommandResult | None:
        if self.allowed_commands is not None and name not in self.allowed_commands:
            return CommandResult(stderr=f"Command '{name}' is disabled in this shell", exit_code=1)
        return None

    def _exec_process(self, process: Process) -> CommandResult:
        name = process.path
        if denied := self._check_allowed(name):
            return denied
        handler = self.builtins.get(name)
        if handler is None:
            return run_process(process, capture=self.capture, env=self.env)
        try:
            result = handler(self, list(process.args))
        except ShlineError as exc:
            return CommandResult(stderr=str(exc), exit_code=1)
        if isinstance(result, CommandResult):
            return result
        if result is None:
            return CommandResult()
        return CommandResult(stdout=str(result))


__all__ = ["Shell"]
