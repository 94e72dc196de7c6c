from lexer import Lexer
from parser import Parser


def lex_types(text: str):
    """Return the token types for the given source text, EOF included."""
    return [t.type for t in Lexer(text).tokenize()]


def parse_text(text: str):
    """Convenience: lex+parse a source text into a ProgramNode."""
    return Parser(Lexer(text)).parse_program()
