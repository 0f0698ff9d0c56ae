"""Count lines, words and bytes."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_WHITESPACE = frozenset(b" \r\t\n\v")


@dataclass(frozen=True)
class Counts:
    """Line, word and byte totals."""

    lines: int = 0
    words: int = 0
    chars: int = 0


def count(data: bytes | str) -> Counts:
    """Count newlines, words separated by space, CR, tab, LF or VT, and bytes."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    words = 0
    inword = False
    for ch in raw:
        if ch in _WHITESPACE:
            inword = False
        elif not inword:
            words += 1
            inword = True
    return Counts(raw.count(b"\n"), words, len(raw))


def _report(counts: Counts, name: str) -> None:
    sys.stdout.write(f"{counts.lines} {counts.words} {counts.chars} {name}\n")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        _report(count(sys.stdin.buffer.read()), "")
        return 0
    for path in args:
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError:
            sys.stdout.write(f"wc: cannot open {path}\n")
            return 1
        _report(count(data), path)
    return 0