"""Lex-once carrier for consumers that walk the same token stream repeatedly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from jslexpy.diagnostics import has_errors
from jslexpy.lexer import TokenKind, reconstruct

if TYPE_CHECKING:
    from jslexpy.diagnostics import Diagnostic
    from jslexpy.lexer import Token


@dataclass(slots=True)
class JsLexResult:
    """Tokens (ending with EOF) and diagnostics for one script."""

    source_text: str
    tokens: list[Token]
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def significant_tokens(self) -> list[Token]:
        """Tokens other than whitespace, line separators, comments and EOF."""
        return [token for token in self.tokens if not token.is_trivia and token.kind != TokenKind.EOF]

    def reconstruct(self) -> str:
        return reconstruct(self.tokens)
