"""Build command argument lists from lines of standard input."""

from __future__ import annotations

from typing import Iterator, List, Sequence, TextIO

from .params import MAXPATH

_LINE_LIMIT = MAXPATH - 1
_CHUNK = 512


class LineTooLong(ValueError):
    """Raised when an input line does not fit the line buffer."""


def build_argvs(base: Sequence[str], stream: TextIO) -> Iterator[List[str]]:
    """Yield base plus one input line for each non-empty newline-terminated line.

    A final line without a newline is dropped. A line of MAXPATH - 1 or
    more characters raises LineTooLong when it is reached.
    """
    if not base:
        raise ValueError("xargs: No command to execute.")
    base = list(base)
    pending = ""
    while True:
        chunk = stream.read(_CHUNK)
        if not chunk:
            return
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if len(line) >= _LINE_LIMIT:
                raise LineTooLong("xargs: line too long!")
            if line:
                yield [*base, line]
        if len(pending) >= _LINE_LIMIT:
            raise LineTooLong("xargs: line too long!")