"""
Lexer for the Tiger scripting language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner)
    that turns a source string into `Token` objects defined in `tokens.py`,
    one token per call to `get_next_token()`.
- It recognizes keywords (`let`, `print`, `if`, `else`, `while`, `true`,
    `false`, `func`), identifiers, integer and float literals, double-quoted
    string literals, single- and two-character operators (`==`, `!=`, `<=`,
    `>=`) and punctuation. Whitespace is skipped.

Examples:
    Input:  'let greeting = "hello";'
    Tokens: [LET, IDENTIFIER('greeting'), ASSIGN, STRING('hello'), SEMICOLON, EOF]

Implementation notes:
- The lexer never fails. A character it does not recognize becomes an
    `ILLEGAL` token carrying that character, and scanning carries on.
- Once the input is exhausted every further call returns `EOF`.
- String literals have no escape sequences; an unterminated string runs to
    the end of the input.
- A number may contain at most one `.`; a second one ends the literal, so
    `1.2.3` scans as `1.2` followed by an illegal `.` and the integer `3`.
- Whitespace is the Unicode White_Space set, so the U+001C..U+001F
    separators that `str.isspace` accepts are illegal characters here.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, lookup_ident


def is_letter(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def is_whitespace(ch: str) -> bool:
    return ch.isspace() and not ("\x1c" <= ch <= "\x1f")


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and is_whitespace(self.current_char):
            self.advance()

    def identifier(self) -> str:
        """Scan an identifier or keyword."""
        start = self.pos
        while self.current_char is not None and (
            is_letter(self.current_char) or is_digit(self.current_char)
        ):
            self.advance()
        return self.text[start : self.pos]

    def number(self) -> Token:
        """Scan an integer or float literal, keeping its source text."""
        start = self.pos
        is_float = False

        while self.current_char is not None:
            if self.current_char == ".":
                # A second decimal point ends the literal.
                if is_float:
                    break
                is_float = True
            elif not is_digit(self.current_char):
                break
            self.advance()

        literal = self.text[start : self.pos]
        return Token(TokenType.FLOAT if is_float else TokenType.INTEGER, literal)

    def string(self) -> str:
        """Scan a double-quoted string literal and return it without quotes."""
        # current_char is the opening quote
        self.advance()
        start = self.pos

        while self.current_char is not None and self.current_char != '"':
            self.advance()

        result = self.text[start : self.pos]

        # Closing quote, unless the string ran to the end of the input.
        if self.current_char == '"':
            self.advance()
        return result

    def two_char(self, second: str, double: TokenType, single: TokenType) -> Token:
        """Match `<first><second>` as `double`, otherwise `<first>` as `single`."""
        first = self.current_char
        if self.peek_char() == second:
            self.advance()
            self.advance()
            return Token(double, first + second)
        self.advance()
        return Token(single, first)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()

        if self.current_char is None:
            return Token(TokenType.EOF, "")

        # Two-character operators first so `==` is not lexed as `=` `=`.
        match self.current_char:
            case "=":
                return self.two_char("=", TokenType.EQ, TokenType.ASSIGN)
            case "<":
                return self.two_char("=", TokenType.LTE, TokenType.LT)
            case ">":
                return self.two_char("=", TokenType.GTE, TokenType.GT)
            case "!":
                # There is no boolean-not operator; a bare `!` is illegal.
                return self.two_char("=", TokenType.NEQ, TokenType.ILLEGAL)

        # Single character tokens: operators and delimiters.
        match self.current_char:
            case "+":
                self.advance()
                return Token(TokenType.PLUS, "+")
            case "-":
                self.advance()
                return Token(TokenType.MINUS, "-")
            case "*":
                self.advance()
                return Token(TokenType.STAR, "*")
            case "/":
                self.advance()
                return Token(TokenType.SLASH, "/")
            case ",":
                self.advance()
                return Token(TokenType.COMMA, ",")
            case ";":
                self.advance()
                return Token(TokenType.SEMICOLON, ";")
            case "(":
                self.advance()
                return Token(TokenType.LPAREN, "(")
            case ")":
                self.advance()
                return Token(TokenType.RPAREN, ")")
            case "{":
                self.advance()
                return Token(TokenType.LBRACE, "{")
            case "}":
                self.advance()
                return Token(TokenType.RBRACE, "}")
            case '"':
                return Token(TokenType.STRING, self.string())

        if is_letter(self.current_char):
            ident = self.identifier()
            return Token(lookup_ident(ident), ident)

        if is_digit(self.current_char):
            return self.number()

        # Anything else is carried through as an illegal token.
        ch = self.current_char
        self.advance()
        return Token(TokenType.ILLEGAL, ch)

    def tokenize(self) -> List[Token]:
        """Return all tokens up to and including the first EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
