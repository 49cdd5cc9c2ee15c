"""Token kinds and the grapheme classification table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class TokenKind(Enum):
    # produced by the parser
    PATH = "path"
    ARG = "arg"

    # produced by the lexer
    TEXT = "text"
    WHITESPACE = "whitespace"
    ESCAPE = "escape"
    DOUBLE_QUOTE = "double_quote"
    SINGLE_QUOTE = "single_quote"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        return f"{self.kind.name}({self.text!r})"


SPECIAL_GRAPHEMES: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        '"': TokenKind.DOUBLE_QUOTE,
        "'": TokenKind.SINGLE_QUOTE,
        "\\": TokenKind.ESCAPE,
        " ": TokenKind.WHITESPACE,
        "\t": TokenKind.WHITESPACE,
        "\n": TokenKind.WHITESPACE,
        "\r": TokenKind.WHITESPACE,
        "\r\n": TokenKind.WHITESPACE,  # one extended grapheme cluster
    }
)

HORIZONTAL_WHITESPACE: Final = frozenset({" ", "\t"})


__all__ = ["Token", "TokenKind", "SPECIAL_GRAPHEMES", "HORIZONTAL_WHITESPACE"]
