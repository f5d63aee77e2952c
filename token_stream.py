"""One-token lookahead over a token iterator.

`TokenStream` wraps any iterator of tokens (normally a `Lexer`) and adds a
single buffered slot: `peek()` pulls the next token into the slot without
consuming it, `shift()` hands out the buffered token (or pulls a fresh one)
and empties the slot. A `peek()` followed by `shift()` returns the very same
token object; nothing is lexed twice.

`None` stands for end-of-input in both directions.
"""

from __future__ import annotations
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_EMPTY = object()


class TokenStream(Generic[T]):
    def __init__(self, tokens: Iterable[T]):
        self._it: Iterator[T] = iter(tokens)
        self._slot: object = _EMPTY

    def peek(self) -> Optional[T]:
        """Return the next token without consuming it."""
        if self._slot is _EMPTY:
            self._slot = next(self._it, None)
        return self._slot  # type: ignore[return-value]

    def shift(self) -> Optional[T]:
        """Consume and return the next token."""
        token = self.peek()
        self._slot = _EMPTY
        return token

    def at_end(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> TokenStream[T]:
        return self

    def __next__(self) -> T:
        token = self.shift()
        if token is None:
            raise StopIteration
        return token
