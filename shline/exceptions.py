"""Exception hierarchy for shline."""

from __future__ import annotations


class ShlineError(Exception):
    """Base error for the package."""


class ParseError(ShlineError):
    """A command line could not be turned into a process descriptor."""

    message = "parse error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NoTokens(ParseError):
    message = "empty command line"


class MalformedPath(ParseError):
    message = "command line must start with a program name"


class UnexpectedEndOfInput(ParseError):
    message = "unexpected end of input after escape"


class UnterminatedDoubleQuote(ParseError):
    message = "unterminated double quote"


class UnterminatedSingleQuote(ParseError):
    message = "unterminated single quote"


class UnexpectedToken(ParseError):
    message = "unexpected token"


class EmptyResult(ParseError):
    message = "parser produced no path"


class NotAPipeline(ParseError):
    message = "expected exactly one unquoted '|'"


class UndefinedVariable(ParseError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"undefined variable: ${name}")


class ExecutionError(ShlineError):
    """Raised by the shell layer, never by the parser."""


__all__ = [
    "ShlineError",
    "ParseError",
    "NoTokens",
    "MalformedPath",
    "UnexpectedEndOfInput",
    "UnterminatedDoubleQuote",
    "UnterminatedSingleQuote",
    "UnexpectedToken",
    "EmptyResult",
    "NotAPipeline",
    "UndefinedVariable",
    "ExecutionError",
]
