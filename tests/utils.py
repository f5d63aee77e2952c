from lexer import Lexer
from parser import Parser
from pretty_printer import PrettyPrinter
from source import string_source


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(string_source(text, "test.c")).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(string_source(text, "test.c"))).parse()


def print_text(text: str) -> str:
    """Parse a source text and return its canonical rendering."""
    return PrettyPrinter.print_source(parse_text(text))
