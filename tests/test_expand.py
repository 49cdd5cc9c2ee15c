import pytest

from shline.exceptions import UndefinedVariable
from shline.expand import expand


def test_expand_replaces_reference():
    assert expand("a$X-b", {"X": "1"}) == "a1-b"


def test_expand_takes_longest_alphabetic_name():
    assert expand("$HOMEdir", {"HOMEdir": "x", "HOME": "y"}) == "x"


def test_expand_stops_at_non_letters():
    assert expand("$HOME/bin", {"HOME": "/root"}) == "/root/bin"
    assert expand("$A_B", {"A": "1"}) == "1_B"


def test_expand_bare_dollar_is_literal():
    assert expand("$", {}) == "$"
    assert expand("cost: 5$", {}) == "cost: 5$"
    assert expand("$1", {}) == "$1"


def test_expand_double_dollar():
    assert expand("$$X", {"X": "v"}) == "$v"


def test_expand_is_single_pass():
    assert expand("$A", {"A": "$B", "B": "nope"}) == "$B"


def test_expand_undefined_reports_name():
    with pytest.raises(UndefinedVariable) as exc:
        expand("pre $MISSING post", {})
    assert exc.value.name == "MISSING"
    assert "MISSING" in str(exc.value)


def test_expand_name_ends_before_multi_codepoint_grapheme():
    assert expand("$Xe\u0301", {"X": "1"}) == "1e\u0301"
