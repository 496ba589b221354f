"""Entrypoints that run the lexer once and hand back a reusable result."""

from __future__ import annotations

from jslexpy.lexer import Lexer
from jslexpy.pipeline.result import JsLexResult


def lex_javascript(text: str, *, lexer: Lexer | None = None) -> JsLexResult:
    """Lex a whole script.

    Pass `lexer` to reuse one instance across many scripts; it is reloaded
    with `text` first.
    """
    if lexer is None:
        lexer = Lexer(text)
    else:
        lexer.load(text)
    tokens = lexer.lex()
    return JsLexResult(source_text=text, tokens=tokens, diagnostics=list(lexer.diagnostics))
