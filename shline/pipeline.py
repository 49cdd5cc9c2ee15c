"""Two-stage pipelines split on a top-level ``|``."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, auto

from .exceptions import NotAPipeline
from .lexer import iter_graphemes, lex
from .parser import Process, process_from_tokens
from .tokens import HORIZONTAL_WHITESPACE, Token, TokenKind

LOGGER = logging.getLogger("shline.pipeline")

PIPE_CHAR = "|"


@dataclass(frozen=True, slots=True)
class Pipe:
    """Producer whose output feeds the consumer's input."""

    producer: Process
    consumer: Process

    @property
    def stages(self) -> tuple[Process, Process]:
        return (self.producer, self.consumer)


class _Quote(Enum):
    NONE = auto()
    DOUBLE = auto()
    SINGLE = auto()


def find_separators(tokens: Sequence[Token]) -> list[tuple[int, int]]:
    """Locate unquoted, unescaped ``|`` characters.

    Returns ``(token_index, offset)`` pairs where ``offset`` is the string
    index of the ``|`` inside that TEXT token.
    """

    found: list[tuple[int, int]] = []
    quote = _Quote.NONE
    escaped = False
    for idx, token in enumerate(tokens):
        if escaped:
            escaped = False
            continue
        kind = token.kind
        if kind is TokenKind.ESCAPE:
            escaped = True
        elif quote is _Quote.DOUBLE:
            if kind is TokenKind.DOUBLE_QUOTE:
                quote = _Quote.NONE
        elif quote is _Quote.SINGLE:
            if kind is TokenKind.SINGLE_QUOTE:
                quote = _Quote.NONE
        elif kind is TokenKind.DOUBLE_QUOTE:
            quote = _Quote.DOUBLE
        elif kind is TokenKind.SINGLE_QUOTE:
            quote = _Quote.SINGLE
        elif kind is TokenKind.TEXT:
            offset = 0
            for grapheme in iter_graphemes(token.text):
                if grapheme == PIPE_CHAR:
                    found.append((idx, offset))
                offset += len(grapheme)
    return found


def _split_at(tokens: Sequence[Token], index: int, offset: int) -> tuple[list[Token], list[Token]]:
    text = tokens[index].text
    left = list(tokens[:index])
    if before := text[:offset]:
        left.append(Token(TokenKind.TEXT, before))
    right: list[Token] = []
    if after := text[offset + len(PIPE_CHAR) :]:
        right.append(Token(TokenKind.TEXT, after))
    right.extend(tokens[index + 1 :])
    # whitespace right after the separator can never be an escape target
    while right and right[0].kind is TokenKind.WHITESPACE and right[0].text in HORIZONTAL_WHITESPACE:
        right.pop(0)
    return left, right


def _pipe_from_tokens(
    tokens: Sequence[Token], separator: tuple[int, int], env: Mapping[str, str]
) -> Pipe:
    left, right = _split_at(tokens, *separator)
    pipe = Pipe(
        producer=process_from_tokens(left, env),
        consumer=process_from_tokens(right, env),
    )
    LOGGER.debug("split pipeline -> %r", pipe)
    return pipe


def split_pipe(command_line: str, env: Mapping[str, str] | None = None) -> Pipe:
    """Parse ``producer | consumer`` into a :class:`Pipe`.

    Raises :class:`~shline.exceptions.NotAPipeline` unless exactly one
    top-level ``|`` is present; each side may fail like :func:`parse`.
    """

    tokens = lex(command_line) or []
    separators = find_separators(tokens)
    if len(separators) != 1:
        raise NotAPipeline(f"expected exactly one unquoted '|', found {len(separators)}")
    return _pipe_from_tokens(tokens, separators[0], env or {})


def parse_command_line(command_line: str, env: Mapping[str, str] | None = None) -> Process | Pipe:
    """Parse a line that may or may not be a two-stage pipeline."""

    env = env or {}
    tokens = lex(command_line)
    separators = find_separators(tokens or [])
    if not separators:
        return process_from_tokens(tokens, env)
    if len(separators) > 1:
        raise NotAPipeline(f"only two-stage pipelines are supported, found {len(separators)} '|'")
    return _pipe_from_tokens(tokens or [], separators[0], env)


__all__ = ["Pipe", "find_separators", "parse_command_line", "split_pipe"]
