"""Conversion of integers to Roman numerals."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def int_to_roman(num: int) -> str:
    """Return *num* written in Roman numerals; empty for numbers below 1."""
    parts = []
    for value, symbol in _NUMERALS:
        count, num = divmod(num, value) if num >= value else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Roman numeral for a number given as argument or on stdin."""
    parser = argparse.ArgumentParser(description="Convert an integer to Roman numerals.")
    parser.add_argument("number", nargs="?", type=int)
    options = parser.parse_args(argv)
    number = options.number
    if number is None:
        try:
            number = int(input().split()[0])
        except (EOFError, IndexError, ValueError):
            parser.error("an integer is required")
    print(int_to_roman(number))
    return 0