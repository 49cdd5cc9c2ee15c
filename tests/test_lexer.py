from shline.lexer import iter_graphemes, lex
from shline.tokens import SPECIAL_GRAPHEMES, Token, TokenKind


def test_lex_empty_returns_none():
    assert lex("") is None


def test_lex_splits_text_and_whitespace():
    assert lex("echo hi") == [
        Token(TokenKind.TEXT, "echo"),
        Token(TokenKind.WHITESPACE, " "),
        Token(TokenKind.TEXT, "hi"),
    ]


def test_lex_each_delimiter_is_its_own_token():
    tokens = lex('a\\"b  \'c\'')
    assert [token.kind for token in tokens] == [
        TokenKind.TEXT,
        TokenKind.ESCAPE,
        TokenKind.DOUBLE_QUOTE,
        TokenKind.TEXT,
        TokenKind.WHITESPACE,
        TokenKind.WHITESPACE,
        TokenKind.SINGLE_QUOTE,
        TokenKind.TEXT,
        TokenKind.SINGLE_QUOTE,
    ]


def test_lex_is_lossless():
    line = 'echo "a b" \'c\\\'d\'\t$HOME\\ x | wc -l\r\n'
    assert "".join(token.text for token in lex(line)) == line


def test_lex_keeps_combining_marks_with_their_base():
    tokens = lex("cafe\u0301 ok")
    assert tokens[0] == Token(TokenKind.TEXT, "cafe\u0301")


def test_lex_quote_with_combining_mark_is_text():
    # '"' followed by U+0301 is a single grapheme cluster, not a quote
    assert lex('a"\u0301b') == [Token(TokenKind.TEXT, 'a"\u0301b')]


def test_lex_crlf_is_one_whitespace_token():
    assert lex("ls\r\n") == [
        Token(TokenKind.TEXT, "ls"),
        Token(TokenKind.WHITESPACE, "\r\n"),
    ]


def test_iter_graphemes_groups_emoji_sequences():
    family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
    assert list(iter_graphemes(f"a{family}b")) == ["a", family, "b"]


def test_special_table_is_read_only():
    try:
        SPECIAL_GRAPHEMES["|"] = TokenKind.TEXT  # type: ignore[index]
    except TypeError:
        pass
    else:  # pragma: no cover - failure path
        raise AssertionError("special grapheme table must not be writable")
