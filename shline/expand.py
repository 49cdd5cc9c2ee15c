"""``$NAME`` substitution for text runs."""

from __future__ import annotations

from collections.abc import Mapping

from .exceptions import UndefinedVariable
from .lexer import iter_graphemes


def _is_name_grapheme(grapheme: str) -> bool:
    return len(grapheme) == 1 and grapheme.isascii() and grapheme.isalpha()


def expand(text: str, env: Mapping[str, str]) -> str:
    """Replace every ``$name`` in ``text`` with ``env[name]``.

    ``name`` is one or more ASCII letters. A ``$`` that is not followed by a
    letter is kept as is. Substituted values are not scanned again.
    """

    if "$" not in text:
        return text
    graphemes = list(iter_graphemes(text))
    out: list[str] = []
    idx = 0
    while idx < len(graphemes):
        grapheme = graphemes[idx]
        if grapheme != "$":
            out.append(grapheme)
            idx += 1
            continue
        end = idx + 1
        while end < len(graphemes) and _is_name_grapheme(graphemes[end]):
            end += 1
        if end == idx + 1:
            out.append(grapheme)
            idx += 1
            continue
        name = "".join(graphemes[idx + 1 : end])
        try:
            out.append(env[name])
        except KeyError:
            raise UndefinedVariable(name) from None
        idx = end
    return "".join(out)


__all__ = ["expand"]
