"""A singly linked list of strings kept in step with a data file."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterator

from .errors import EmptyStructureError, NotFoundError
from .persist import read_lines, write_lines

_EMPTY = "Deletion is not possible: the list is empty"


class LinkedList:
    """A list with cheap insertion at the head.

    The data file holds one element per line; when loading, every
    whitespace-separated word becomes an element.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = path
        self._items: deque[str] = deque()
        self.load()

    def push_head(self, value: str) -> None:
        """Add *value* at the head."""
        self._items.appendleft(value)
        self.save()

    def push_tail(self, value: str) -> None:
        """Add *value* at the tail."""
        self._items.append(value)
        self.save()

    def pop_head(self) -> str:
        """Remove and return the head element."""
        if not self._items:
            raise EmptyStructureError(_EMPTY)
        value = self._items.popleft()
        self.save()
        return value

    def pop_tail(self) -> str:
        """Remove and return the tail element."""
        if not self._items:
            raise EmptyStructureError(_EMPTY)
        value = self._items.pop()
        self.save()
        return value

    def remove(self, value: str) -> None:
        """Remove the first element equal to *value*."""
        if not self._items:
            raise EmptyStructureError(_EMPTY)
        try:
            self._items.remove(value)
        except ValueError:
            raise NotFoundError("This value is not in the list") from None
        self.save()

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def load(self) -> None:
        """Replace the contents with the words of the data file."""
        if self.path is None:
            return
        try:
            lines = read_lines(self.path)
        except FileNotFoundError:
            return
        self._items = deque(word for line in lines for word in line.split())
        self.save()

    def save(self) -> None:
        """Write the contents to the data file, head first."""
        if self.path is not None:
            write_lines(self.path, self._items)