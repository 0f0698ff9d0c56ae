"""Concatenate files to standard output."""

from __future__ import annotations

import sys
from typing import BinaryIO

_CHUNK = 512


def cat(src: BinaryIO, dst: BinaryIO) -> None:
    """Copy all of src to dst; raise OSError on a short write."""
    while True:
        chunk = src.read(_CHUNK)
        if not chunk:
            return
        written = dst.write(chunk)
        if written is not None and written != len(chunk):
            raise OSError("cat: write error")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    out = sys.stdout.buffer
    try:
        if not args:
            cat(sys.stdin.buffer, out)
            return 0
        for path in args:
            try:
                f = open(path, "rb")
            except OSError:
                sys.stderr.write(f"cat: cannot open {path}\n")
                return 1
            with f:
                try:
                    cat(f, out)
                except OSError as exc:
                    if str(exc) == "cat: write error":
                        raise
                    sys.stderr.write("cat: read error\n")
                    return 1
        return 0
    except OSError:
        sys.stderr.write("cat: write error\n")
        return 1
    finally:
        out.flush()