"""A last-in first-out stack of strings kept in step with a data file."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .errors import EmptyStructureError
from .persist import read_lines, write_lines


class Stack:
    """A LIFO stack; the data file holds one element per line, top first."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = path
        self._items: list[str] = []
        self.load()

    def push(self, value: str) -> None:
        """Put *value* on top."""
        self._items.append(value)
        self.save()

    def pop(self) -> str:
        """Remove and return the top element."""
        if not self._items:
            raise EmptyStructureError("Stack is empty, value cannot be deleted")
        value = self._items.pop()
        self.save()
        return value

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()
        self.save()

    def __iter__(self) -> Iterator[str]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def load(self) -> None:
        """Replace the contents with the lines of the data file."""
        if self.path is None:
            return
        try:
            lines = read_lines(self.path)
        except FileNotFoundError:
            return
        self._items = lines[::-1]
        self.save()

    def save(self) -> None:
        """Write the contents to the data file, top first."""
        if self.path is not None:
            write_lines(self.path, reversed(self._items))