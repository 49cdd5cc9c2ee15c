"""Import builtin modules for their registration side-effects."""

from . import builtins as _builtins  # noqa: F401

__all__ = []
