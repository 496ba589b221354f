import pytest

from jslexpy.lexer import (
    KEYWORDS,
    KeywordFlag,
    TokenKind,
    classify,
    is_keyword_kind,
    keyword_count,
    tokenize,
)


def test_value_keywords() -> None:
    for spelling in ("true", "false", "null", "this"):
        entry = classify(spelling)
        assert entry is not None
        assert entry.flag is KeywordFlag.VALUE
        assert entry.is_value


def test_reserved_keyword() -> None:
    entry = classify("return")
    assert entry is not None
    assert entry.kind == TokenKind.KW_RETURN
    assert entry.flag is KeywordFlag.RESERVED
    assert not entry.is_value


@pytest.mark.parametrize("spelling", ["foo", "This", "NULL", "undefined", "", "var "])
def test_non_keywords_are_absent(spelling: str) -> None:
    assert classify(spelling) is None


def test_table_covers_every_keyword_kind() -> None:
    keyword_kinds = [kind for kind in TokenKind if is_keyword_kind(kind)]
    assert keyword_count() == len(keyword_kinds) == 61
    assert {entry.kind for entry in KEYWORDS.values()} == set(keyword_kinds)
    assert not is_keyword_kind(TokenKind.IDENTIFIER)
    assert not is_keyword_kind(TokenKind.OPERATOR)


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        KEYWORDS["foo"] = KEYWORDS["var"]  # type: ignore[index]


def test_every_keyword_lexes_to_its_kind() -> None:
    for spelling, entry in KEYWORDS.items():
        tokens = tokenize(spelling)
        assert tokens[0].kind == entry.kind
        assert tokens[0].text == spelling
