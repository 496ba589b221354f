"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from jslexpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer, never change the value-ending flag)
    # -------------------------
    WHITESPACE = 10
    LINE_SEPARATOR = 11
    COMMENT = 12

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    NUMBER = 21
    STRING_LITERAL = 22
    REGEX = 23

    # -------------------------
    # Punctuation (single char, or one of ++ -- += -= *= /=)
    # -------------------------
    OPERATOR = 30

    # -------------------------
    # Keywords, one kind per spelling (see jslexpy.lexer.keywords)
    # -------------------------
    KW_ABSTRACT = 100
    KW_BOOLEAN = 101
    KW_BREAK = 102
    KW_BYTE = 103
    KW_CASE = 104
    KW_CATCH = 105
    KW_CHAR = 106
    KW_CLASS = 107
    KW_CONST = 108
    KW_CONTINUE = 109
    KW_DEBUGGER = 110
    KW_DEFAULT = 111
    KW_DELETE = 112
    KW_DO = 113
    KW_DOUBLE = 114
    KW_ELSE = 115
    KW_ENUM = 116
    KW_EXPORT = 117
    KW_EXTENDS = 118
    KW_FALSE = 119
    KW_FINAL = 120
    KW_FINALLY = 121
    KW_FLOAT = 122
    KW_FOR = 123
    KW_FUNCTION = 124
    KW_GOTO = 125
    KW_IF = 126
    KW_IMPLEMENTS = 127
    KW_IMPORT = 128
    KW_IN = 129
    KW_INSTANCEOF = 130
    KW_INT = 131
    KW_INTERFACE = 132
    KW_LET = 133
    KW_LONG = 134
    KW_NATIVE = 135
    KW_NEW = 136
    KW_NULL = 137
    KW_PACKAGE = 138
    KW_PRIVATE = 139
    KW_PROTECTED = 140
    KW_PUBLIC = 141
    KW_RETURN = 142
    KW_SHORT = 143
    KW_STATIC = 144
    KW_SUPER = 145
    KW_SWITCH = 146
    KW_SYNCHRONIZED = 147
    KW_THIS = 148
    KW_THROW = 149
    KW_THROWS = 150
    KW_TRANSIENT = 151
    KW_TRUE = 152
    KW_TRY = 153
    KW_TYPEOF = 154
    KW_VAR = 155
    KW_VOID = 156
    KW_VOLATILE = 157
    KW_WHILE = 158
    KW_WITH = 159
    KW_YIELD = 160

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.LINE_SEPARATOR,
            TokenKind.COMMENT,
        )

    @property
    def is_keyword(self) -> bool:
        return self.value >= TokenKind.KW_ABSTRACT.value


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token: its kind, where it sits and the exact source slice."""

    kind: TokenKind
    range: TextRange
    text: str

    @property
    def is_trivia(self) -> bool:
        return self.kind.is_trivia
