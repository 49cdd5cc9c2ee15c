"""Registry of shell builtins."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .common import BuiltinHandler


@dataclass(frozen=True, slots=True)
class Builtin:
    name: str
    handler: BuiltinHandler
    description: str = ""


class BuiltinRegistry:
    """Collects builtins at import time; shells bind them on construction."""

    def __init__(self) -> None:
        self._builtins: dict[str, Builtin] = {}

    def register(
        self,
        handler: BuiltinHandler,
        *names: str,
        description: str = "",
    ) -> BuiltinHandler:
        for name in names:
            self._builtins[name] = Builtin(name, handler, description)
        return handler

    def builtin(self, *names: str, description: str = "") -> Callable[[BuiltinHandler], BuiltinHandler]:
        """Decorator variant of :meth:`register`."""

        def decorator(func: BuiltinHandler) -> BuiltinHandler:
            return self.register(func, *names, description=description)

        return decorator

    def iter_builtins(self) -> Iterable[Builtin]:
        return tuple(self._builtins.values())


BUILTIN_REGISTRY = BuiltinRegistry()


__all__ = ["BUILTIN_REGISTRY", "Builtin", "BuiltinRegistry"]
