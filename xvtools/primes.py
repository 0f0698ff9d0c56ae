"""Prime numbers by a pipeline of filtering stages."""

from __future__ import annotations

import sys
from typing import Iterator, List

LIMIT = 280


def primes(limit: int = LIMIT) -> Iterator[int]:
    """Yield the primes from 2 to limit.

    Each number passes through a chain of stages; the first number to reach
    the end of the chain is prime and becomes a new stage filtering its multiples.
    """
    stages: List[int] = []
    for n in range(2, limit + 1):
        if all(n % p for p in stages):
            stages.append(n)
            yield n


def main(argv: list[str] | None = None) -> int:
    for p in primes():
        sys.stdout.write(f"prime {p}\n")
    return 0