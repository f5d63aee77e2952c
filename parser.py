"""
Parser for the tiny declaration language.

Overview and approach:
- This parser is a hand-written recursive-descent parser with one method per
    grammar rule. It pulls tokens through a `TokenStream`, which gives it a
    single token of lookahead; no rule needs more than that.

Grammar:
    program     := statement*
    statement   := (declaration | expression) ';'
    declaration := type_ref symbol
    type_ref    := "int"
    expression  := symbol | number

Key points:
- `parse_program()` keeps calling `parse_statement()` until the stream is
    exhausted. An empty (or all-whitespace) source is a program with no
    statements.
- `parse_statement()` peeks one token: a type keyword starts a declaration,
    anything else is parsed as an expression. Every statement must end in `;`.
- Leaf rules go through `expect()`, which consumes exactly one token of the
    required class or raises a `ParseError` naming the expected and actual
    classes ("end-of-input" when nothing is left).
- Number tokens carry raw digit text; `decode_number()` turns it into an
    integer when the `NumberNode` is built.

Examples:
    - Declaration: `int x;`
    - Expression statements: `x;`, `42;`
    - `float x;` is the expression `float` followed by a stray symbol, so it
        fails with "expected Semicolon, got Symbol".
"""

from __future__ import annotations
from typing import Iterable, Optional, Union
from ast_nodes import *
from errors import InternalDefect, ParseError
from lexer import Lexer
from token_stream import TokenStream
from tokens import PrimitiveType, Token, TokenType, describe_token


def decode_number(text: str) -> int:
    """Decode the digit text of a Number token.

    A literal of more than one digit starting with `0` is octal, as in C;
    anything else is decimal.
    """
    if not text or not all("0" <= c <= "9" for c in text):
        raise InternalDefect(f"number token with non-digit text {text!r}")

    if len(text) > 1 and text[0] == "0":
        try:
            return int(text, 8)
        except ValueError:
            raise ParseError(f"invalid octal literal `{text}'") from None

    return int(text, 10)


class Parser:
    def __init__(
        self,
        tokens: Union[Lexer, TokenStream[Token], Iterable[Token]],
        source_name: Optional[str] = None,
    ):
        if source_name is None and isinstance(tokens, Lexer):
            source_name = tokens.source_name
        self.source_name = source_name
        if isinstance(tokens, TokenStream):
            self.stream = tokens
        else:
            self.stream = TokenStream(tokens)

    def peek(self) -> Optional[Token]:
        """Return next token without consuming it."""
        return self.stream.peek()

    def shift(self) -> Optional[Token]:
        """Consume and return the next token."""
        return self.stream.shift()

    def error(self, message: str, token: Optional[Token] = None) -> ParseError:
        line = token.line if token is not None else 0
        column = token.column if token is not None else 0
        return ParseError(message, source_name=self.source_name, line=line, column=column)

    def expect(self, expected_type: TokenType) -> Token:
        """Expect and consume token of given type."""
        token = self.peek()
        if token is not None and token.type == expected_type:
            self.shift()
            return token

        raise self.error(
            f"expected {expected_type}, got {describe_token(token)}", token
        )

    def parse_type_ref(self) -> TypeRefNode:
        """Parse a type: int."""
        token = self.expect(TokenType.TYPE_KEYWORD)
        if not isinstance(token.value, PrimitiveType):
            raise InternalDefect(
                f"type keyword without a primitive type: {token!r}",
                source_name=self.source_name,
            )
        return TypeRefNode(primitive=token.value, line=token.line, column=token.column)

    def parse_symbol(self) -> SymbolNode:
        token = self.expect(TokenType.SYMBOL)
        return SymbolNode(name=token.value, line=token.line, column=token.column)

    def parse_number(self) -> NumberNode:
        token = self.expect(TokenType.NUMBER)
        try:
            value = decode_number(token.value)
        except ParseError as e:
            raise self.error(e.message, token) from None
        return NumberNode(value=value, line=token.line, column=token.column)

    def parse_expression(self) -> ExpressionNode:
        """Parse an expression: symbol | number."""
        token = self.peek()
        if token is not None and token.type == TokenType.NUMBER:
            return self.parse_number()
        # Anything else must be a symbol; `expect` reports the mismatch.
        return self.parse_symbol()

    def parse_declaration(self) -> DeclarationNode:
        """Parse variable declaration: type identifier"""
        type_ref = self.parse_type_ref()
        symbol = self.parse_symbol()
        return DeclarationNode(
            type_ref=type_ref,
            symbol=symbol,
            line=type_ref.line,
            column=type_ref.column,
        )

    def parse_statement(self) -> StatementNode:
        """Parse a statement: (declaration | expression) ';'"""
        token = self.peek()

        match token:
            case Token(type=TokenType.TYPE_KEYWORD):
                body = self.parse_declaration()
            case _:
                body = self.parse_expression()

        self.expect(TokenType.SEMICOLON)
        return StatementNode(body=body, line=body.line, column=body.column)

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        statements = []

        while not self.stream.at_end():
            statements.append(self.parse_statement())

        return ProgramNode(statements=tuple(statements), line=1, column=1)

    def parse(self) -> ProgramNode:
        return self.parse_program()
