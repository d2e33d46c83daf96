"""A generic array with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .errors import CapacityError

T = TypeVar("T")


class FixedArray(Generic[T]):
    """An ordered sequence that never holds more than *capacity* items."""

    def __init__(self, capacity: int, values: Iterable[T] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise CapacityError("Initializer list size exceeds capacity!")
        self.capacity = capacity
        self._items: list[T] = items

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Index invalid")

    def insert(self, index: int, value: T) -> None:
        """Insert *value* before position *index* (0..len inclusive)."""
        if not 0 <= index <= len(self._items):
            raise IndexError("Index invalid")
        if len(self._items) >= self.capacity:
            raise CapacityError("Array is full")
        self._items.insert(index, value)

    def append(self, value: T) -> None:
        """Add *value* at the end."""
        if len(self._items) >= self.capacity:
            raise CapacityError("Array is full")
        self._items.append(value)

    def remove(self, index: int) -> T:
        """Remove and return the element at *index*."""
        self._check_index(index)
        return self._items.pop(index)

    def replace(self, index: int, value: T) -> None:
        """Overwrite the element at *index* with *value*."""
        self._check_index(index)
        self._items[index] = value

    def shell_sort(self) -> None:
        """Sort the elements in place, largest first, with Shell's method."""
        items = self._items
        gap = len(items) // 2
        while gap > 0:
            for start in range(gap, len(items)):
                current = items[start]
                pos = start
                while pos >= gap and items[pos - gap] < current:
                    items[pos] = items[pos - gap]
                    pos -= gap
                items[pos] = current
            gap //= 2

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of bounds")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items