"""Command line entry: read integers, print the operations that sort them."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.chars import is_digit
from pushswap.output import printf
from pushswap.sorter import solve
from pushswap.strings import atoi, split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputError(ValueError):
    """Raised when the arguments are not distinct 32-bit integers."""


def is_valid_number(text: str) -> bool:
    """True if ``text`` is an optional sign followed by one or more digits."""
    if not text:
        return False
    first, rest = text[0], text[1:]
    if first in "+-":
        if not rest or not is_digit(rest[0]):
            return False
    elif not is_digit(first):
        return False
    return all(is_digit(ch) for ch in rest)


def parse_args(argv: Sequence[str]) -> list[str]:
    """A single argument is split on spaces; several are taken as they are."""
    if len(argv) == 1:
        return split(argv[0], " ")
    return list(argv)


def parse_numbers(tokens: Sequence[str]) -> list[int]:
    """Convert tokens to integers, rejecting malformed, out-of-range and repeated ones."""
    numbers: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if not is_valid_number(token):
            raise InputError(f"not a number: {token!r}")
        number = atoi(token)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError(f"out of range: {token!r}")
        if number in seen:
            raise InputError(f"duplicate number: {token!r}")
        seen.add(number)
        numbers.append(number)
    return numbers


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sorting operations for the given numbers; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    try:
        numbers = parse_numbers(parse_args(args))
    except InputError:
        printf("Error\n")
        return 1
    for op in solve(numbers):
        printf("%s\n", op)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())