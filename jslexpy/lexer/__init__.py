"""Lexer."""

from jslexpy.lexer.keywords import (
    KEYWORDS,
    KeywordEntry,
    KeywordFlag,
    classify,
    is_keyword_kind,
    keyword_count,
)
from jslexpy.lexer.lexer import ConsumeRule, Lexer, ScanState, dump_tokens, reconstruct, tokenize
from jslexpy.lexer.tokens import Token, TokenKind

__all__ = [
    "KEYWORDS",
    "ConsumeRule",
    "KeywordEntry",
    "KeywordFlag",
    "Lexer",
    "ScanState",
    "Token",
    "TokenKind",
    "classify",
    "dump_tokens",
    "is_keyword_kind",
    "keyword_count",
    "reconstruct",
    "tokenize",
]
