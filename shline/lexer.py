"""Grapheme-aware lexer for command lines."""

from __future__ import annotations

from collections.abc import Iterator

import regex

from .tokens import SPECIAL_GRAPHEMES, Token, TokenKind

_GRAPHEME_RE = regex.compile(r"\X")


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text`` in order."""

    for match in _GRAPHEME_RE.finditer(text):
        yield match.group(0)


def lex(command_line: str) -> list[Token] | None:
    """Split ``command_line`` into text runs and single-grapheme delimiters.

    Returns ``None`` when there is nothing to lex. Joining the payloads of the
    returned tokens reproduces the input exactly.
    """

    tokens: list[Token] = []
    run: list[str] = []
    for grapheme in iter_graphemes(command_line):
        kind = SPECIAL_GRAPHEMES.get(grapheme)
        if kind is None:
            run.append(grapheme)
            continue
        if run:
            tokens.append(Token(TokenKind.TEXT, "".join(run)))
            run.clear()
        tokens.append(Token(kind, grapheme))
    if run:
        tokens.append(Token(TokenKind.TEXT, "".join(run)))
    return tokens or None


__all__ = ["lex", "iter_graphemes"]
