"""Small string and stream helpers with the user library's exact semantics."""

from __future__ import annotations

from typing import BinaryIO, Union

Text = Union[str, bytes]


def _as_bytes(s: Text) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def atoi(s: Text) -> int:
    """Value of the leading decimal digits of s; 0 if there are none.

    No sign and no leading whitespace are accepted.
    """
    n = 0
    for ch in _as_bytes(s):
        if not 0x30 <= ch <= 0x39:
            break
        n = n * 10 + (ch - 0x30)
    return n


def strcmp(p: Text, q: Text) -> int:
    """Compare two NUL-terminated strings as unsigned bytes.

    Returns the difference of the first differing bytes, or 0 if equal.
    """
    a = _as_bytes(p).split(b"\0", 1)[0] + b"\0"
    b = _as_bytes(q).split(b"\0", 1)[0] + b"\0"
    for x, y in zip(a, b):
        if x != y or x == 0:
            return x - y
    return 0


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes of a and b; difference of the first mismatch."""
    if len(a) < n or len(b) < n:
        raise ValueError(f"both buffers must hold at least {n} bytes")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def gets(stream: BinaryIO, max_len: int) -> bytes:
    """Read one line of at most max_len - 1 bytes from a binary stream.

    Reading stops after a newline or carriage return, which is kept,
    or at end of input.
    """
    out = bytearray()
    while len(out) + 1 < max_len:
        c = stream.read(1)
        if not c:
            break
        out += c
        if c in (b"\n", b"\r"):
            break
    return bytes(out)