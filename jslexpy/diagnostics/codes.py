"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the same quote character that opened it.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_REGEX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_REGEX",
    message="Unterminated regular expression literal.",
    hint="Close the regular expression with an unescaped `/` outside any `[...]` class.",
    severity="error",
    category="lexer",
)

LEXER_NEWLINE_IN_REGEX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_NEWLINE_IN_REGEX",
    message="Regular expression literal cannot span lines.",
    hint="Escape the line break or build the pattern with `new RegExp(...)`.",
    severity="error",
    category="lexer",
)
