"""Source context handed to the lexer.

A `SourceContext` bundles the name of the source being compiled with the
character stream it is read from. One context is created per parse and
threaded through the lexer and parser, so diagnostics can name the source
without any module-level state.
"""

from __future__ import annotations
import io
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO

from errors import ResourceError


@dataclass
class SourceContext:
    name: str
    stream: TextIO


def string_source(text: str, name: str = "<string>") -> SourceContext:
    return SourceContext(name=name, stream=io.StringIO(text))


@contextmanager
def open_source(path: str) -> Iterator[SourceContext]:
    """Open `path` for reading and yield a context over it.

    The file is closed when the block exits. Failure to open is reported as a
    `ResourceError` carrying the operating system's reason.
    """
    try:
        fh = open(path, "r", encoding="utf-8")
    except OSError as e:
        reason = e.strerror or str(e)
        raise ResourceError(reason, source_name=path) from e

    with fh:
        yield SourceContext(name=path, stream=fh)
