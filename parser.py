"""
Parser for the Tiger scripting language.

Overview and approach:
- This is a small hand-written recursive-descent parser that pulls tokens
    from a `Lexer` on demand. It keeps exactly two tokens of state: the
    `current` token and one token of lookahead in `peek_token`. Both are
    primed at construction and shifted together by `advance()`.

Grammar recognized:
    program   := statement*
    statement := "let" <name> "=" <value> ";"
               | "print" <name> ";"

Key points:
- `parse_program()` dispatches on the current token and always advances once
    after each attempt, whether or not a statement was recognized. Any token
    that does not start a `let` or `print` (semicolons, braces, `if`,
    `while`, illegal characters, ...) is therefore skipped silently.
- The statement parsers do not check the tokens they step over. The binding
    name of a `let` is the literal of whatever token sits in that position,
    the `=` is assumed rather than matched, and the bound value is the
    literal text of the next token wrapped as a string literal, whatever its
    type (`let n = 42;` binds the text "42").
- `print` always takes the literal of the following token as a variable
    name, so `print "hi";` prints the variable called `hi`.
- Parsing never raises: every input yields a `ProgramNode`.

Examples:
    'let x = "hi"; print x;'
        -> Program[Let(x, StringLiteral("hi")), Print(Identifier(x))]
"""

from __future__ import annotations
from typing import List, Optional
from lexer import Lexer
from tokens import Token, TokenType
from ast_nodes import *


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current = Token(TokenType.ILLEGAL, "")
        self.peek_token = Token(TokenType.ILLEGAL, "")

        # Fill current and peek_token.
        self.advance()
        self.advance()

    def advance(self) -> Token:
        """Shift the lookahead into current and pull a new lookahead."""
        self.current = self.peek_token
        self.peek_token = self.lexer.get_next_token()
        return self.current

    def parse_let_statement(self) -> LetStatementNode:
        """Parse let statement: let <name> = <value>"""
        self.advance()  # binding name
        name = IdentifierNode(name=self.current.literal)

        self.advance()  # '='
        self.advance()  # value
        value = StringLiteralNode(value=self.current.literal)

        return LetStatementNode(name=name, value=value)

    def parse_print_statement(self) -> PrintStatementNode:
        """Parse print statement: print <name>"""
        self.advance()
        return PrintStatementNode(value=IdentifierNode(name=self.current.literal))

    def parse_statement(self) -> Optional[Statement]:
        """Parse a statement, or return None if the current token starts none."""
        match self.current.type:
            case TokenType.LET:
                return self.parse_let_statement()
            case TokenType.PRINT:
                return self.parse_print_statement()
            case _:
                return None

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        statements: List[Statement] = []

        while self.current.type != TokenType.EOF:
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.advance()

        return ProgramNode(statements=tuple(statements))
