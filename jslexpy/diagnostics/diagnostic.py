"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from jslexpy.diagnostics.codes import DiagnosticSpec
from jslexpy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
