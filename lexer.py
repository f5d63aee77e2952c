"""
Lexer for the tiny declaration language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    reads characters from the stream of a `SourceContext` and produces
    `Token` objects defined in `tokens.py`, one at a time, on demand.
- It recognizes the reserved type name `int`, identifiers, decimal digit runs
    and the statement terminator `;`, skipping whitespace between tokens.

Examples:
    Input:  "int x; 42;"
    Tokens: [TypeKeyword(int), Symbol('x'), Semicolon, Number('42'), Semicolon]

Implementation notes:
- Characters are pulled from the stream one at a time with a single slot of
    pushback, so `peek_char()` never consumes input. `None` stands for
    end-of-input.
- The first character of a token decides its class; the lexer then consumes
    the maximal run of characters belonging to that class.
- Number tokens keep their raw digit text. Turning the text into a value is
    left to the parser.
- End-of-input is not a token: `next_token()` returns `None` once the stream
    is exhausted.
"""

from __future__ import annotations
from typing import Callable, Iterator, List, Optional
from errors import LexError, ResourceError
from source import SourceContext
from tokens import MAX_TOKEN_LENGTH, TYPE_KEYWORDS, Token, TokenType


def is_identifier_start(c: str) -> bool:
    return c.isalpha() or c == "_"


def is_identifier_char(c: str) -> bool:
    return c.isalnum() or c == "_"


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class Lexer:
    def __init__(self, context: SourceContext):
        self.context = context
        self.line = 1
        self.column = 1
        self._pending: Optional[str] = None
        self._has_pending = False

    @property
    def source_name(self) -> str:
        return self.context.name

    def error(self, message: str, line: int = 0, column: int = 0) -> LexError:
        return LexError(
            message,
            source_name=self.source_name,
            line=line or self.line,
            column=column or self.column,
        )

    def _read(self) -> Optional[str]:
        try:
            c = self.context.stream.read(1)
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceError(str(e), source_name=self.source_name) from e
        return c if c else None

    def peek_char(self) -> Optional[str]:
        """Look at the next character without consuming it."""
        if not self._has_pending:
            self._pending = self._read()
            self._has_pending = True
        return self._pending

    def shift_char(self) -> Optional[str]:
        """Consume and return the next character (`None` at end-of-input)."""
        c = self.peek_char()
        self._pending = None
        self._has_pending = False

        if c == "\n":
            self.line += 1
            self.column = 1
        elif c is not None:
            self.column += 1
        return c

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while True:
            c = self.peek_char()
            if c is None or not c.isspace():
                break
            self.shift_char()

    def _scan_run(self, belongs: Callable[[str], bool]) -> str:
        """Consume the maximal run of characters accepted by `belongs`."""
        line, column = self.line, self.column
        result = []

        while True:
            c = self.peek_char()
            if c is None or not belongs(c):
                break
            if len(result) == MAX_TOKEN_LENGTH:
                raise self.error("token too long", line, column)
            result.append(c)
            self.shift_char()

        return "".join(result)

    def next_token(self) -> Optional[Token]:
        """Return the next token, or `None` once the input is exhausted."""
        self.skip_whitespace()

        c = self.peek_char()
        if c is None:
            return None

        line, column = self.line, self.column

        if c == ";":
            self.shift_char()
            return Token(TokenType.SEMICOLON, ";", line, column)

        # Identifiers and type keywords: scan the word, then see whether it is
        # one of the reserved type names.
        if is_identifier_start(c):
            word = self._scan_run(is_identifier_char)
            primitive = TYPE_KEYWORDS.get(word)
            if primitive is not None:
                return Token(TokenType.TYPE_KEYWORD, primitive, line, column)
            return Token(TokenType.SYMBOL, word, line, column)

        if is_digit(c):
            digits = self._scan_run(is_digit)
            return Token(TokenType.NUMBER, digits, line, column)

        raise self.error(f"unexpected character `{c}'", line, column)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """Return all remaining tokens from the source."""
        return list(self)
