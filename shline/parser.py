"""Reduce a lexed command line to a program path and its arguments."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .exceptions import (
    EmptyResult,
    MalformedPath,
    NoTokens,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnterminatedDoubleQuote,
    UnterminatedSingleQuote,
)
from .expand import expand
from .lexer import lex
from .tokens import Token, TokenKind

LOGGER = logging.getLogger("shline.parser")


@dataclass(frozen=True, slots=True)
class Process:
    """A program to run and its argument vector."""

    path: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.path, *self.args]


class TokenCursor:
    """Forward-only position over an immutable token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tuple(tokens)
        self._index = 0

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._tokens)

    def next(self) -> Token | None:
        if self.exhausted:
            return None
        token = self._tokens[self._index]
        self._index += 1
        return token


def _escaped(cursor: TokenCursor) -> str:
    token = cursor.next()
    if token is None:
        raise UnexpectedEndOfInput()
    return token.text


def _double_quoted(cursor: TokenCursor, env: Mapping[str, str]) -> str:
    parts: list[str] = []
    while (token := cursor.next()) is not None:
        match token.kind:
            case TokenKind.DOUBLE_QUOTE:
                return "".join(parts)
            case TokenKind.TEXT:
                parts.append(expand(token.text, env))
            case TokenKind.ESCAPE:
                parts.append(_escaped(cursor))
            case TokenKind.WHITESPACE | TokenKind.SINGLE_QUOTE:
                parts.append(token.text)
            case _:
                raise UnexpectedToken(f"unexpected {token!r} inside double quotes")
    raise UnterminatedDoubleQuote()


def _single_quoted(cursor: TokenCursor) -> str:
    parts: list[str] = []
    while (token := cursor.next()) is not None:
        match token.kind:
            case TokenKind.SINGLE_QUOTE:
                return "".join(parts)
            case TokenKind.ESCAPE:
                parts.append(_escaped(cursor))
            case TokenKind.TEXT | TokenKind.WHITESPACE | TokenKind.DOUBLE_QUOTE:
                parts.append(token.text)
            case _:
                raise UnexpectedToken(f"unexpected {token!r} inside single quotes")
    raise UnterminatedSingleQuote()


def _flush(buffer: list[str], result: list[Token]) -> None:
    arg = "".join(buffer)
    buffer.clear()
    if arg:
        result.append(Token(TokenKind.ARG, arg))


def parse_tokens(tokens: Sequence[Token] | None, env: Mapping[str, str]) -> list[Token]:
    """Turn lexer output into one PATH token followed by ARG tokens."""

    if not tokens:
        raise NoTokens()
    cursor = TokenCursor(tokens)
    first = cursor.next()
    assert first is not None
    if first.kind is not TokenKind.TEXT:
        raise MalformedPath(f"command line starts with {first!r}")
    result = [Token(TokenKind.PATH, expand(first.text, env))]

    buffer: list[str] = []
    while (token := cursor.next()) is not None:
        match token.kind:
            case TokenKind.TEXT:
                buffer.append(expand(token.text, env))
            case TokenKind.ESCAPE:
                buffer.append(_escaped(cursor))
            case TokenKind.DOUBLE_QUOTE:
                buffer.append(_double_quoted(cursor, env))
            case TokenKind.SINGLE_QUOTE:
                buffer.append(_single_quoted(cursor))
            case TokenKind.WHITESPACE:
                _flush(buffer, result)
            case _:
                raise UnexpectedToken(f"unexpected {token!r}")
    _flush(buffer, result)

    if not result:
        raise EmptyResult()
    return result


def parse_to_tokens(command_line: str, env: Mapping[str, str]) -> list[Token]:
    return parse_tokens(lex(command_line), env)


def _build_process(tokens: list[Token]) -> Process:
    path, *args = tokens
    if path.kind is not TokenKind.PATH:
        raise EmptyResult()
    return Process(path=path.text, args=tuple(arg.text for arg in args))


def parse(command_line: str, env: Mapping[str, str] | None = None) -> Process:
    """Parse one command line into a :class:`Process`.

    ``env`` supplies the values for ``$NAME`` references and is never
    modified. Raises a :class:`~shline.exceptions.ParseError` subclass on the
    first problem found.
    """

    process = _build_process(parse_to_tokens(command_line, env or {}))
    LOGGER.debug("parsed %r -> %r", command_line, process)
    return process


def process_from_tokens(tokens: Sequence[Token] | None, env: Mapping[str, str]) -> Process:
    return _build_process(parse_tokens(tokens, env))


__all__ = ["Process", "TokenCursor", "parse", "parse_tokens", "parse_to_tokens", "process_from_tokens"]
