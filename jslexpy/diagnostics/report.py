"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from jslexpy.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """One-line rendering used by the debug printers and scripts."""
    return (
        f"{diagnostic.severity.upper()} {diagnostic.code} "
        f"range={diagnostic.range.as_tuple()} message={diagnostic.message}"
    )
