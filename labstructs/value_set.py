"""A chained hash set of strings and a small command loop over it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from .errors import NotFoundError
from .hash_table import TABLE_SIZE, hash_key


class HashSet:
    """A set of strings stored in ``TABLE_SIZE`` chained buckets.

    New values go to the front of their bucket's chain.
    """

    def __init__(self) -> None:
        self._buckets: list[list[str]] = [[] for _ in range(TABLE_SIZE)]
        self._count = 0

    def add(self, value: str) -> bool:
        """Add *value*; return False if it was already present."""
        chain = self._buckets[hash_key(value)]
        if value in chain:
            return False
        chain.insert(0, value)
        self._count += 1
        return True

    def remove(self, value: str) -> None:
        """Remove *value* from the set."""
        chain = self._buckets[hash_key(value)]
        try:
            chain.remove(value)
        except ValueError:
            raise NotFoundError("This value is not in the table") from None
        self._count -= 1

    def clear(self) -> None:
        """Remove every value."""
        for chain in self._buckets:
            chain.clear()
        self._count = 0

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        return value in self._buckets[hash_key(value)]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        """Yield values bucket by bucket, in chain order."""
        for chain in self._buckets:
            yield from chain


def main(argv: Sequence[str] | None = None) -> int:
    """Read set commands from standard input until ``exit``."""
    parser = argparse.ArgumentParser(description="Interactive string set.")
    parser.parse_args(argv)
    values = HashSet()
    while True:
        try:
            line = input("< ")
        except EOFError:
            return 0
        words = line.split()
        command = words[0] if words else ""
        value = words[1] if len(words) > 1 else ""
        if command == "exit":
            return 0
        if command == "SETADD":
            values.add(value)
        elif command == "SETDEL":
            try:
                values.remove(value)
            except NotFoundError as exc:
                print(exc)
        elif command == "SET_AT":
            state = "is" if value in values else "is not"
            print(f"Element {value} {state} in the table")
        else:
            print("Incorrect query", file=sys.stderr)