#!/usr/bin/env python
"""Print the token stream of a JavaScript file."""

import argparse
from pathlib import Path

from jslexpy.lexer import dump_tokens
from jslexpy.pipeline import lex_javascript


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump JavaScript tokens with kind, range and text")
    parser.add_argument("path", type=Path, help="JavaScript file to lex")
    parser.add_argument(
        "--significant-only",
        action="store_true",
        help="Skip whitespace, line separators and comments",
    )
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8", errors="surrogateescape")
    result = lex_javascript(text)
    tokens = result.significant_tokens() if args.significant_only else result.tokens
    dump_tokens(tokens, result.diagnostics)

    if result.reconstruct() != text and not result.has_errors:
        print("\nWARNING: token stream does not reproduce the input")
        return 1
    return 1 if result.has_errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
