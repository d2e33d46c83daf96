"""A doubly linked list of strings kept in step with a data file."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterator

from .errors import EmptyStructureError, NotFoundError
from .persist import read_lines, write_lines

_EMPTY = "Deletion is not possible: the list is empty"


class DoublyLinkedList:
    """A list with cheap insertion and removal at both ends.

    The data file holds one element per line, head first.
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
        """Remove one element equal to *value*.

        The head is checked first, then the tail, then the rest from the
        head onwards.
        """
        if not self._items:
            raise EmptyStructureError(_EMPTY)
        if self._items[0] == value:
            self._items.popleft()
        elif self._items[-1] == value:
            self._items.pop()
        else:
            try:
                self._items.remove(value)
            except ValueError:
                raise NotFoundError("This value is not in the list") from None
        self.save()

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()
        self.save()

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[str]:
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
        self._items = deque(lines)
        self.save()

    def save(self) -> None:
        """Write the contents to the data file, head first."""
        if self.path is not None:
            write_lines(self.path, self._items)