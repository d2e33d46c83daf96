"""A bounded array of strings kept in step with a data file."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .errors import CapacityError, EmptyStructureError
from .persist import read_lines, write_lines


class BoundedArray:
    """An array of strings with a fixed capacity.

    When a path is given the contents are loaded from it on creation and
    written back after every change.
    """

    def __init__(self, capacity: int, path: str | os.PathLike[str] | None = None) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.path = path
        self._items: list[str] = []
        self.load()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Index invalid")

    def insert(self, index: int, value: str) -> None:
        """Insert *value* before position *index* (0..len inclusive)."""
        if not 0 <= index <= len(self._items):
            raise IndexError("Index invalid")
        if len(self._items) >= self.capacity:
            raise CapacityError("Array is full")
        self._items.insert(index, value)
        self.save()

    def append(self, value: str) -> None:
        """Add *value* at the end."""
        if len(self._items) >= self.capacity:
            raise CapacityError("Array is full")
        self._items.append(value)
        self.save()

    def get(self, index: int) -> str:
        """Return the element at *index*."""
        if not self._items:
            raise EmptyStructureError("Array is empty")
        self._check_index(index)
        return self._items[index]

    def remove(self, index: int) -> str:
        """Remove and return the element at *index*."""
        self._check_index(index)
        value = self._items.pop(index)
        self.save()
        return value

    def replace(self, index: int, value: str) -> None:
        """Overwrite the element at *index* with *value*."""
        self._check_index(index)
        self._items[index] = value
        self.save()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def load(self) -> None:
        """Replace the contents with the file's lines, up to capacity."""
        if self.path is None:
            return
        try:
            lines = read_lines(self.path)
        except FileNotFoundError:
            return
        self._items = lines[: self.capacity]

    def save(self) -> None:
        """Write the contents to the file, one element per line."""
        if self.path is not None:
            write_lines(self.path, self._items)