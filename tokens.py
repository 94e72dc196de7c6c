"""Token definitions for the lexer.

This module defines the `TokenType` enum for every token kind the lexer can
produce and a small immutable `Token` dataclass pairing a type with the
literal text it was scanned from. The vocabulary is wider than what the
parser currently understands: arithmetic, comparison and control-flow tokens
are recognized lexically so that programs using them still tokenize cleanly.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    # Special
    EOF = auto()
    ILLEGAL = auto()

    # Identifiers and literals
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    EQ = auto()
    NEQ = auto()
    LT = auto()
    LTE = auto()
    GT = auto()
    GTE = auto()

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    LET = auto()
    PRINT = auto()
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    TRUE = auto()
    FALSE = auto()
    FUNC = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS = {
    "let": TokenType.LET,
    "print": TokenType.PRINT,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "func": TokenType.FUNC,
}


def lookup_ident(ident: str) -> TokenType:
    """Classify an identifier-shaped lexeme as a keyword or a plain identifier."""
    return KEYWORDS.get(ident, TokenType.IDENTIFIER)


@dataclass(frozen=True)
class Token:
    type: TokenType
    literal: str = ""

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.literal)})"
