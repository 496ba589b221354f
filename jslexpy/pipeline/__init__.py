"""Lex result carrier and pipeline entrypoints."""

from jslexpy.pipeline.entrypoints import lex_javascript
from jslexpy.pipeline.result import JsLexResult

__all__ = [
    "JsLexResult",
    "lex_javascript",
]
