"""Print arguments separated by spaces."""

from __future__ import annotations

import sys
from typing import Sequence


def echo(args: Sequence[str]) -> str:
    """Arguments joined by single spaces and ended by a newline; empty for none."""
    if not args:
        return ""
    return " ".join(args) + "\n"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    sys.stdout.write(echo(args))
    return 0