"""shline: parse shell-style command lines into process descriptors."""

from .exceptions import (
    MalformedPath,
    NoTokens,
    NotAPipeline,
    ParseError,
    ShlineError,
    UndefinedVariable,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnterminatedDoubleQuote,
    UnterminatedSingleQuote,
)
from .lexer import lex
from .parser import Process, parse
from .pipeline import Pipe, parse_command_line, split_pipe
from .shell import CommandResult, Shell
from .tokens import Token, TokenKind

__all__ = [
    "lex",
    "parse",
    "split_pipe",
    "parse_command_line",
    "Process",
    "Pipe",
    "Token",
    "TokenKind",
    "Shell",
    "CommandResult",
    "ShlineError",
    "ParseError",
    "NoTokens",
    "MalformedPath",
    "UnexpectedEndOfInput",
    "UnterminatedDoubleQuote",
    "UnterminatedSingleQuote",
    "UnexpectedToken",
    "UndefinedVariable",
    "NotAPipeline",
]
