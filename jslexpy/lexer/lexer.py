"""Permissive JavaScript lexer.

Accepts every legal script and as much illegal input as it can without
guessing. Whitespace, line breaks and comments are tokens too, so joining the
text of every emitted token gives back the input unchanged.

Telling a division `/` from the start of a regex literal needs a parser; the
lexer approximates it with one flag, "the last significant token may end a
value". The heuristic is knowingly imperfect (e.g. `if (x) /re/.test(s)`).

A block comment closes only on a `*/` after its opening `/*`, so `/*/` on
its own is an unterminated comment.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Final

from jslexpy.diagnostics import (
    LEXER_NEWLINE_IN_REGEX,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_REGEX,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
    format_diagnostic,
)
from jslexpy.lexer.keywords import classify
from jslexpy.lexer.tokens import Token, TokenKind
from jslexpy.text import TextRange, TextSize, slice_text_range

_SPACE_CHARS: Final[frozenset[str]] = frozenset(" \t\f")
_LINE_SEPARATOR_CHARS: Final[frozenset[str]] = frozenset("\n\r")
_CLOSING_CHARS: Final[frozenset[str]] = frozenset(")]}")
_DOUBLED_OPERATOR_STARTS: Final[frozenset[str]] = frozenset("+-")
_ASSIGN_OPERATOR_STARTS: Final[frozenset[str]] = frozenset("+-*/")
_HTML_COMMENT_OPEN: Final[str] = "<!--"


class ConsumeRule(Enum):
    """Per-character acceptance rules understood by `Lexer._consume`."""

    SPACE = auto()
    LINE_SEPARATOR = auto()
    NUMBER = auto()
    IDENTIFIER = auto()
    STRING = auto()
    REGEX = auto()
    BLOCK_COMMENT = auto()
    LINE_COMMENT = auto()
    OPERATOR = auto()


_UNTERMINATED: Final[dict[ConsumeRule, DiagnosticSpec]] = {
    ConsumeRule.STRING: LEXER_UNTERMINATED_STRING,
    ConsumeRule.BLOCK_COMMENT: LEXER_UNTERMINATED_BLOCK_COMMENT,
    ConsumeRule.REGEX: LEXER_UNTERMINATED_REGEX,
}


@dataclass(slots=True)
class ScanState:
    """Everything that changes while scanning one buffer."""

    position: int = 0
    token_start_index: int = 0
    prev_char: str = "\0"
    token_start: str = "\0"
    last_kind: TokenKind = TokenKind.EOF
    last_token_may_end_value: bool = False
    within_brackets: bool = False
    backslash_mode: bool = False
    seen_a_dot: bool = False
    error: bool = False


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Single-pass lexer over one buffer at a time.

    Reuse an instance with `load()`; never share one between threads.
    """

    def __init__(self, source: str = "") -> None:
        self._rules: dict[ConsumeRule, Callable[[str, int], bool]] = {
            ConsumeRule.SPACE: self._is_space,
            ConsumeRule.LINE_SEPARATOR: self._is_line_separator,
            ConsumeRule.NUMBER: self._is_number,
            ConsumeRule.IDENTIFIER: self._in_identifier,
            ConsumeRule.STRING: self._in_string,
            ConsumeRule.REGEX: self._in_regex,
            ConsumeRule.BLOCK_COMMENT: self._in_block_comment,
            ConsumeRule.LINE_COMMENT: self._in_single_line_comment,
            ConsumeRule.OPERATOR: self._in_operator,
        }
        self._source = ""
        self._state = ScanState()
        self._diagnostics: list[Diagnostic] = []
        self.load(source)

    def load(self, source: str) -> None:
        """Start over on a new buffer."""
        self._source = source
        self._state = ScanState()
        self._diagnostics = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._state.position

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """At most one diagnostic: the construct that latched the error flag."""
        return self._diagnostics

    @property
    def last_token_may_end_value(self) -> bool:
        return self._state.last_token_may_end_value

    def has_error(self) -> bool:
        return self._state.error

    def next_token(self) -> Token:
        state = self._state
        start = state.position
        if state.error or start >= len(self._source):
            return Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(start)), "")

        state.token_start_index = start
        state.backslash_mode = False
        kind = self._lex_token()
        state.last_kind = kind

        token_range = TextRange.new(TextSize.from_int(start), TextSize.from_int(state.position))
        return Token(kind, token_range, slice_text_range(self._source, token_range))

    def lex(self) -> list[Token]:
        """Drain the buffer, returning every token including the final EOF."""
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        state = self._state
        ch = self._source[state.position]
        state.token_start = ch

        if ch in _SPACE_CHARS:
            self._consume(ConsumeRule.SPACE, include_last_char=False, ok_to_terminate_with_eof=True)
            return TokenKind.WHITESPACE

        if ch in _LINE_SEPARATOR_CHARS:
            self._consume(ConsumeRule.LINE_SEPARATOR, include_last_char=False, ok_to_terminate_with_eof=True)
            return TokenKind.LINE_SEPARATOR

        if _is_digit(ch) or ch == ".":
            # A number never directly follows a number: in `1.2.3` the second
            # dot is its own token.
            if ch == "." and state.last_kind == TokenKind.NUMBER:
                self._consume(ConsumeRule.OPERATOR, include_last_char=False, ok_to_terminate_with_eof=True)
            else:
                state.seen_a_dot = ch == "."
                self._consume(ConsumeRule.NUMBER, include_last_char=False, ok_to_terminate_with_eof=True)
                state.seen_a_dot = False
            return self._number_or_dot(self._current_text())

        if ch == "/":
            return self._lex_slash()

        if ch == '"' or ch == "'":
            self._consume(ConsumeRule.STRING, include_last_char=True, ok_to_terminate_with_eof=False)
            state.last_token_may_end_value = True
            return TokenKind.STRING_LITERAL

        if self._identifier_start(ch):
            self._consume(ConsumeRule.IDENTIFIER, include_last_char=False, ok_to_terminate_with_eof=True)
            return self._identifier_or_keyword(self._current_text())

        if self._source.startswith(_HTML_COMMENT_OPEN, state.position):
            self._consume(ConsumeRule.LINE_COMMENT, include_last_char=False, ok_to_terminate_with_eof=True)
            return TokenKind.COMMENT

        return self._lex_operator()

    def _lex_slash(self) -> TokenKind:
        # A slash may open a line comment, a block comment or a regex literal,
        # or be a division operator. A trailing slash is always an operator.
        state = self._state
        if state.position < len(self._source) - 1:
            next_char = self._source[state.position + 1]
            if next_char == "/":
                self._consume(ConsumeRule.LINE_COMMENT, include_last_char=False, ok_to_terminate_with_eof=True)
                return TokenKind.COMMENT
            if next_char == "*":
                self._consume(ConsumeRule.BLOCK_COMMENT, include_last_char=True, ok_to_terminate_with_eof=False)
                return TokenKind.COMMENT
            if not state.last_token_may_end_value:
                state.within_brackets = False
                self._consume(ConsumeRule.REGEX, include_last_char=True, ok_to_terminate_with_eof=False)
                return TokenKind.REGEX
        return self._lex_operator()

    def _lex_operator(self) -> TokenKind:
        self._consume(ConsumeRule.OPERATOR, include_last_char=False, ok_to_terminate_with_eof=True)
        self._state.last_token_may_end_value = self._current_text() in _CLOSING_CHARS
        return TokenKind.OPERATOR

    def _identifier_or_keyword(self, name: str) -> TokenKind:
        entry = classify(name)
        if entry is None:
            self._state.last_token_may_end_value = True
            return TokenKind.IDENTIFIER
        self._state.last_token_may_end_value = entry.is_value
        return entry.kind

    def _number_or_dot(self, number_or_dot: str) -> TokenKind:
        if number_or_dot == ".":
            self._state.last_token_may_end_value = False
            return TokenKind.OPERATOR
        self._state.last_token_may_end_value = True
        return TokenKind.NUMBER

    def _consume(self, rule: ConsumeRule, *, include_last_char: bool, ok_to_terminate_with_eof: bool) -> None:
        """Advance over the maximal run accepted by `rule`.

        The current character always belongs to the token; the rule is first
        asked about the character after it, with index 1.
        """
        state = self._state
        source = self._source
        end = len(source)
        accept = self._rules[rule]

        start = state.position
        state.prev_char = source[start]
        p = start + 1
        index = 1
        while p < end and accept(source[p], index):
            state.prev_char = source[p]
            p += 1
            index += 1

        if p == end:
            if not ok_to_terminate_with_eof:
                self._latch_error(_UNTERMINATED[rule], start, p)
        elif include_last_char:
            p += 1
        state.position = p

    def _latch_error(self, spec: DiagnosticSpec, start: int, end: int) -> None:
        self._state.error = True
        self._diagnostics.append(
            Diagnostic.from_spec(spec, TextRange.new(TextSize.from_int(start), TextSize.from_int(end)))
        )

    def _current_text(self) -> str:
        return self._source[self._state.token_start_index : self._state.position]

    # -------------------------
    # Acceptance rules: (char, index from token start) -> keep going?
    # -------------------------

    def _is_space(self, ch: str, index: int) -> bool:
        return ch in _SPACE_CHARS

    def _is_line_separator(self, ch: str, index: int) -> bool:
        return ch in _LINE_SEPARATOR_CHARS

    def _is_number(self, ch: str, index: int) -> bool:
        # TODO: hex, octal and exponent forms (`0xff`, `1e5`) lex as a number
        # followed by an identifier.
        if ch == ".":
            if self._state.seen_a_dot:
                return False
            self._state.seen_a_dot = True
            return True
        return _is_digit(ch)

    def _in_block_comment(self, ch: str, index: int) -> bool:
        # The closing `*` may not be the one from the opening `/*`.
        return not (index >= 3 and self._state.prev_char == "*" and ch == "/")

    def _in_single_line_comment(self, ch: str, index: int) -> bool:
        return ch not in _LINE_SEPARATOR_CHARS

    def _process_backslash(self, ch: str) -> bool:
        state = self._state
        if state.backslash_mode:
            state.backslash_mode = False
            return True
        if ch == "\\":
            state.backslash_mode = True
            return True
        return False

    def _identifier_start(self, ch: str) -> bool:
        # Backslashes show up in identifiers as unicode escapes (`\u03c0`).
        # The escape is kept verbatim, never decoded.
        if self._process_backslash(ch):
            return True
        return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_" or ch == "$" or ord(ch) >= 127

    def _in_identifier(self, ch: str, index: int) -> bool:
        return self._identifier_start(ch) or _is_digit(ch)

    def _in_operator(self, ch: str, index: int) -> bool:
        state = self._state
        start = state.token_start
        if (start in _DOUBLED_OPERATOR_STARTS and ch == start) or (ch == "=" and start in _ASSIGN_OPERATOR_STARTS):
            # No `+++` or `++=`.
            state.token_start = "\0"
            return True
        return False

    def _in_string(self, ch: str, index: int) -> bool:
        if self._process_backslash(ch):
            return True
        return ch != self._state.token_start

    def _in_regex(self, ch: str, index: int) -> bool:
        state = self._state
        if self._process_backslash(ch):
            return True
        if ch == "/":
            # Slashes inside a class are implicitly escaped.
            return state.within_brackets
        if ch == "[":
            # Classes don't nest, a bool is enough.
            state.within_brackets = True
        elif ch == "]":
            state.within_brackets = False
        elif ch == "\n":
            start = state.token_start_index
            self._latch_error(LEXER_NEWLINE_IN_REGEX, start, start + index + 1)
            return False
        return True


def tokenize(source: str) -> list[Token]:
    """Lex a whole buffer with a fresh lexer."""
    return Lexer(source).lex()


def reconstruct(tokens: list[Token]) -> str:
    """Join token texts back into source text."""
    return "".join(token.text for token in tokens)


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<18} range={tok.range.as_tuple()} text={tok.text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {format_diagnostic(d)}")
