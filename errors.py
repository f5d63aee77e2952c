"""Error kinds raised by the front end.

Every failure is fatal: nothing in the lexer, parser or printer catches these.
They propagate to the driver, which reports them with `describe()` and picks
the exit status.

- `ResourceError`: the named source could not be opened or read.
- `LexError`: a character starts no token, or a token is too long.
- `ParseError`: the next token is not what the grammar requires.
- `InternalDefect`: the tree model and the printer disagree (a bug, not bad
  input).
"""

from __future__ import annotations
from typing import Optional


class CompileError(Exception):
    """Base class for all front-end failures."""

    def __init__(
        self,
        message: str,
        source_name: Optional[str] = None,
        line: int = 0,
        column: int = 0,
    ):
        super().__init__(message)
        self.message = message
        self.source_name = source_name
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return self.message

    def describe(self, progname: str) -> str:
        """Format the diagnostic line: `prog: source: message`."""
        parts = [progname]
        if self.source_name:
            parts.append(self.source_name)
        parts.append(self.message)
        return ": ".join(parts)


class ResourceError(CompileError, OSError):
    pass


class LexError(CompileError, SyntaxError):
    pass


class ParseError(CompileError, SyntaxError):
    pass


class InternalDefect(CompileError, RuntimeError):
    pass
