"""Line search with a tiny regular-expression matcher: ^ . * $ only."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

_BUFSZ = 1024


def match(re: str, text: str) -> bool:
    """Search for re anywhere in text."""
    if re.startswith("^"):
        return _match_here(re, 1, text, 0)
    return any(_match_here(re, 0, text, i) for i in range(len(text) + 1))


def _match_here(re: str, ri: int, text: str, ti: int) -> bool:
    if ri == len(re):
        return True
    if ri + 1 < len(re) and re[ri + 1] == "*":
        return _match_star(re[ri], re, ri + 2, text, ti)
    if re[ri] == "$" and ri + 1 == len(re):
        return ti == len(text)
    if ti < len(text) and (re[ri] == "." or re[ri] == text[ti]):
        return _match_here(re, ri + 1, text, ti + 1)
    return False


def _match_star(c: str, re: str, ri: int, text: str, ti: int) -> bool:
    while True:
        if _match_here(re, ri, text, ti):
            return True
        if ti < len(text) and (text[ti] == c or c == "."):
            ti += 1
        else:
            return False


def grep(pattern: str, stream: TextIO) -> Iterator[str]:
    """Yield each newline-terminated line of stream that matches pattern.

    A final line without a newline is never reported, and a line of
    1023 or more characters ends the search.
    """
    pending = ""
    while True:
        room = _BUFSZ - 1 - len(pending)
        chunk = stream.read(room) if room > 0 else ""
        if not chunk:
            return
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                yield line + "\n"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, paths = args[0], args[1:]
    if not paths:
        sys.stdout.writelines(grep(pattern, sys.stdin))
        return 0
    for path in paths:
        try:
            f = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError:
            sys.stdout.write(f"grep: cannot open {path}\n")
            return 1
        with f:
            sys.stdout.writelines(grep(pattern, f))
    return 0