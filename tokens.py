"""Token definitions for the lexer.

This module defines the `TokenType` enum for the four token kinds recognized
by the lexer, the `PrimitiveType` enum for the built-in types a type keyword
can name, and a small `Token` dataclass that holds a token type and its
payload. Tokens are the atomic units produced by the lexer and consumed
(exactly once) by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Optional, Union

# Longest raw text a single token may carry.
MAX_TOKEN_LENGTH = 999

END_OF_INPUT = "end-of-input"


class TokenType(Enum):
    TYPE_KEYWORD = auto()
    SYMBOL = auto()
    NUMBER = auto()
    SEMICOLON = auto()

    def __str__(self) -> str:
        return _TOKEN_NAMES[self]


_TOKEN_NAMES = {
    TokenType.TYPE_KEYWORD: "TypeKeyword",
    TokenType.SYMBOL: "Symbol",
    TokenType.NUMBER: "Number",
    TokenType.SEMICOLON: "Semicolon",
}


class PrimitiveType(Enum):
    INT = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Reserved type names and the primitive each one resolves to.
TYPE_KEYWORDS: Dict[str, PrimitiveType] = {
    "int": PrimitiveType.INT,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    # PrimitiveType for TYPE_KEYWORD, identifier text for SYMBOL, digit text
    # for NUMBER, ";" for SEMICOLON.
    value: Optional[Union[PrimitiveType, str]] = None
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return str(self.value)


def describe_token(token: Optional[Token]) -> str:
    """Name the class of `token` for diagnostics, `None` meaning end-of-input."""
    if token is None:
        return END_OF_INPUT
    return str(token.type)
