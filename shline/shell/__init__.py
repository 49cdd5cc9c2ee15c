"""Interactive shell package."""

from .common import CommandResult
from .core import Shell

__all__ = ["Shell", "CommandResult"]
