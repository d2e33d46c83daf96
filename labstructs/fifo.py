"""A first-in first-out queue of strings kept in step with a data file."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterator

from .errors import EmptyStructureError
from .persist import read_lines, write_lines


class Queue:
    """A FIFO queue; the data file holds one element per line, front first."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = path
        self._items: deque[str] = deque()
        self.load()

    def push(self, value: str) -> None:
        """Add *value* at the back."""
        self._items.append(value)
        self.save()

    def pop(self) -> str:
        """Remove and return the front element."""
        if not self._items:
            raise EmptyStructureError("Queue is empty")
        value = self._items.popleft()
        self.save()
        return value

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

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
        self._items = deque(lines)
        self.save()

    def save(self) -> None:
        """Write the contents to the data file, front first."""
        if self.path is not None:
            write_lines(self.path, self._items)