"""JavaScript keyword classification.

The reverse table (spelling -> entry) is built once at import and is
read-only afterwards, so every lexer instance shares it.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from jslexpy.lexer.tokens import TokenKind


class KeywordFlag(Enum):
    """Whether a keyword can end a value expression (e.g. `this`, `null`)."""

    VALUE = "value"
    RESERVED = "reserved"


@dataclass(frozen=True, slots=True)
class KeywordEntry:
    spelling: str
    kind: TokenKind
    flag: KeywordFlag

    @property
    def is_value(self) -> bool:
        return self.flag is KeywordFlag.VALUE


_VALUE_KEYWORDS: Final[frozenset[str]] = frozenset({"false", "null", "this", "true"})


def _build_keyword_table() -> Mapping[str, KeywordEntry]:
    table: dict[str, KeywordEntry] = {}
    for kind in TokenKind:
        if not kind.is_keyword:
            continue
        spelling = kind.name.removeprefix("KW_").lower()
        flag = KeywordFlag.VALUE if spelling in _VALUE_KEYWORDS else KeywordFlag.RESERVED
        table[spelling] = KeywordEntry(spelling=spelling, kind=kind, flag=flag)
    return MappingProxyType(table)


KEYWORDS: Final[Mapping[str, KeywordEntry]] = _build_keyword_table()


def classify(spelling: str) -> KeywordEntry | None:
    """Look up an identifier spelling; `None` means a plain identifier.

    Matching is exact, so `This` or `NULL` are identifiers.
    """
    return KEYWORDS.get(spelling)


def keyword_count() -> int:
    return len(KEYWORDS)


def is_keyword_kind(kind: TokenKind) -> bool:
    return kind.is_keyword
