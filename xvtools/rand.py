"""Park-Miller minimal standard pseudo-random number generator."""

from __future__ import annotations

from typing import Iterator

_U64 = (1 << 64) - 1
_M = 0x7FFFFFFF


def do_rand(ctx: int) -> int:
    """Advance state ctx and return the next value, which is also the new state.

    Computes (7**5 * x) mod (2**31 - 1) without overflowing 31 bits.
    Results lie in [0, 0x7ffffffd].
    """
    x = ((ctx & _U64) % 0x7FFFFFFE) + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += _M
    return x - 1


class ParkMiller:
    """A stateful generator around do_rand."""

    def __init__(self, seed: int = 1) -> None:
        self.state = seed & _U64

    def next(self) -> int:
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()