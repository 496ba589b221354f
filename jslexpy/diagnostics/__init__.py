"""Diagnostics."""

from jslexpy.diagnostics.codes import (
    LEXER_NEWLINE_IN_REGEX,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_REGEX,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from jslexpy.diagnostics.diagnostic import Diagnostic, Severity
from jslexpy.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "LEXER_NEWLINE_IN_REGEX",
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_REGEX",
    "LEXER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
