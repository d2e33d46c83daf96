"""A chained hash table of string pairs kept in step with a data file."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .errors import CapacityError, EmptyStructureError, NotFoundError
from .persist import read_lines, write_lines

TABLE_SIZE = 500
_PRIME = 43
_SEPARATOR = ":"


def hash_key(key: str) -> int:
    """Return the bucket index of *key*, in ``range(TABLE_SIZE)``."""
    result = 0
    for byte in key.encode("utf-8"):
        result = (result * _PRIME + byte) % TABLE_SIZE
    return result


class HashTable:
    """A map from string keys to string values with separate chaining.

    The table holds at most ``TABLE_SIZE`` entries.  The data file stores
    one ``key:value`` pair per line, bucket by bucket.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = path
        self._buckets: list[dict[str, str]] = [{} for _ in range(TABLE_SIZE)]
        self._count = 0
        self.load()

    def push(self, key: str, value: str) -> None:
        """Set *key* to *value*, adding the key if it is new."""
        bucket = self._buckets[hash_key(key)]
        if key not in bucket:
            if self._count >= TABLE_SIZE:
                raise CapacityError("Table is full")
            self._count += 1
        bucket[key] = value
        self.save()

    def get(self, key: str) -> str:
        """Return the value stored under *key*."""
        if not self._count:
            raise EmptyStructureError("Table is empty")
        try:
            return self._buckets[hash_key(key)][key]
        except KeyError:
            raise NotFoundError(f"Key not found: {key}") from None

    def pop(self, key: str) -> str:
        """Remove *key* and return the value it held."""
        try:
            value = self._buckets[hash_key(key)].pop(key)
        except KeyError:
            raise NotFoundError("This value is not in the table") from None
        self._count -= 1
        self.save()
        return value

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0
        self.save()

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(key, value)`` pairs bucket by bucket, in chain order."""
        for bucket in self._buckets:
            yield from bucket.items()

    def __len__(self) -> int:
        return self._count

    def load(self) -> None:
        """Replace the contents with the pairs in the data file.

        Lines without a ``:`` are ignored; the key ends at the first one.
        """
        if self.path is None:
            return
        try:
            lines = read_lines(self.path)
        except FileNotFoundError:
            return
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0
        for line in lines:
            key, sep, value = line.partition(_SEPARATOR)
            if sep:
                self.push(key, value)
        self.save()

    def save(self) -> None:
        """Write every pair to the data file as ``key:value``."""
        if self.path is not None:
            write_lines(self.path, (f"{key}{_SEPARATOR}{value}" for key, value in self.items()))