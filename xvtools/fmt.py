"""A minimal printf that understands %d, %u, %x, %p, %s and their l/ll forms."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_DIGITS = "0123456789ABCDEF"
_U32 = (1 << 32) - 1
_U64 = (1 << 64) - 1


def _int32(value: int) -> int:
    value &= _U32
    return value - (1 << 32) if value >= 1 << 31 else value


def _format_int(value: int, base: int, signed: bool) -> str:
    xx = _int32(value)
    neg = signed and xx < 0
    x = (-xx if neg else xx) & _U32
    out = []
    while True:
        out.append(_DIGITS[x % base])
        x //= base
        if x == 0:
            break
    if neg:
        out.append("-")
    return "".join(reversed(out))


def _format_ptr(value: int) -> str:
    x = value & _U64
    return "0x" + "".join(_DIGITS[(x >> shift) & 0xF] for shift in range(60, -4, -4))


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).split(b"\0", 1)[0].decode("latin-1")
    return str(value)


_INT_CONVERSIONS = {"d": (10, True), "u": (10, False), "x": (16, False)}


def format_string(fmt: str, *args: Any) -> str:
    """Render fmt with args.

    Integers pass through a 32-bit int as the original routine does, so
    the l and ll forms behave like the plain ones. An unknown conversion
    is emitted as written; a trailing lone % is dropped.
    """
    remaining = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    i = 0
    n = len(fmt)
    while i < n:
        c0 = fmt[i]
        if c0 != "%":
            out.append(c0)
            i += 1
            continue
        i += 1
        if i >= n:
            break
        c0 = fmt[i]
        c1 = fmt[i + 1] if i + 1 < n else ""
        c2 = fmt[i + 2] if i + 2 < n else ""
        if c0 in _INT_CONVERSIONS:
            out.append(_format_int(take(), *_INT_CONVERSIONS[c0]))
        elif c0 == "l" and c1 in _INT_CONVERSIONS:
            out.append(_format_int(take(), *_INT_CONVERSIONS[c1]))
            i += 1
        elif c0 == "l" and c1 == "l" and c2 in _INT_CONVERSIONS:
            out.append(_format_int(take(), *_INT_CONVERSIONS[c2]))
            i += 2
        elif c0 == "p":
            out.append(_format_ptr(take()))
        elif c0 == "s":
            out.append(_format_str(take()))
        elif c0 == "%":
            out.append("%")
        else:
            out.append("%" + c0)
        i += 1
    return "".join(out)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> None:
    """Write the formatted text to a text stream."""
    stream.write(format_string(fmt, *args))


def printf(fmt: str, *args: Any) -> None:
    """Write the formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)