"""An interactive command shell over a set of file-backed containers."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import TextIO

from .array import BoundedArray
from .avl_tree import AVLTree
from .doubly_linked_list import DoublyLinkedList
from .errors import CapacityError, StructureError
from .fifo import Queue
from .hash_table import HashTable
from .linked_list import LinkedList
from .stack import Stack

ARRAY_CAPACITY = 10

_Handler = Callable[[Sequence[str]], None]


def _arg(args: Sequence[str], position: int) -> str:
    """Return the argument at *position*, or an empty string if it is missing."""
    return args[position] if position < len(args) else ""


def _index(args: Sequence[str], position: int) -> int:
    try:
        return int(args[position])
    except (IndexError, ValueError):
        raise IndexError("Index invalid") from None


class Workspace:
    """All the containers, each kept in its own data file in *directory*.

    Queries are whitespace-separated words: a command followed by its
    arguments.  Results and error messages are written to *out*.
    """

    def __init__(self, directory: str | os.PathLike[str] = ".", out: TextIO | None = None) -> None:
        base = Path(directory)
        self.out = out if out is not None else sys.stdout
        self.array = BoundedArray(ARRAY_CAPACITY, base / "array.data")
        self.linked_list = LinkedList(base / "linkedlist.data")
        self.doubly_linked_list = DoublyLinkedList(base / "DLList.data")
        self.queue = Queue(base / "queue.data")
        self.stack = Stack(base / "stack.data")
        self.tree = AVLTree(base / "AVLtree.data")
        self.hash_table = HashTable(base / "hashtable.data")
        self._handlers: dict[str, _Handler] = {
            "APUSH": lambda a: self.array.append(_arg(a, 0)),
            "AINSERT": self._array_insert,
            "APOP": lambda a: self.array.remove(_index(a, 0)),
            "AREPLACE": lambda a: self.array.replace(_index(a, 0), _arg(a, 1)),
            "ALENGTH": lambda a: self._say(f"Size of the array is: {len(self.array)}"),
            "AGET": self._array_get,
            "AREAD": lambda a: self._show_array(),
            "DLPUSH_HEAD": lambda a: self.doubly_linked_list.push_head(_arg(a, 0)),
            "DLPUSH_TAIL": lambda a: self.doubly_linked_list.push_tail(_arg(a, 0)),
            "DLPOP_HEAD": lambda a: self.doubly_linked_list.pop_head(),
            "DLPOP_TAIL": lambda a: self.doubly_linked_list.pop_tail(),
            "DLPOP_VALUE": lambda a: self.doubly_linked_list.remove(_arg(a, 0)),
            "DLSEARCH": lambda a: self._search(self.doubly_linked_list, _arg(a, 0)),
            "DLREAD": lambda a: self._show_doubly_linked_list(),
            "LPUSH_HEAD": lambda a: self.linked_list.push_head(_arg(a, 0)),
            "LPUSH_TAIL": lambda a: self.linked_list.push_tail(_arg(a, 0)),
            "LPOP_HEAD": lambda a: self.linked_list.pop_head(),
            "LPOP_TAIL": lambda a: self.linked_list.pop_tail(),
            "LPOP_VALUE": lambda a: self.linked_list.remove(_arg(a, 0)),
            "LSEARCH": lambda a: self._search(self.linked_list, _arg(a, 0)),
            "LREAD": lambda a: self._show_linked_list(),
            "QPUSH": lambda a: self.queue.push(_arg(a, 0)),
            "QPOP": lambda a: self.queue.pop(),
            "QREAD": lambda a: self._show_queue(),
            "SPUSH": lambda a: self.stack.push(_arg(a, 0)),
            "SPOP": lambda a: self.stack.pop(),
            "SREAD": lambda a: self._show_stack(),
            "HPUSH": lambda a: self.hash_table.push(_arg(a, 0), _arg(a, 1)),
            "HPOP": self._hash_pop,
            "HGET": self._hash_get,
            "TPUSH": lambda a: self.tree.insert(_arg(a, 0)),
            "TSEARCH": lambda a: self._say("Found" if _arg(a, 0) in self.tree else "Not Found"),
            "TPOP": lambda a: self.tree.remove(_arg(a, 0)),
            "TREAD": lambda a: self._show_tree(),
            "PRINT": lambda a: self._show_all(),
        }

    def execute(self, query: str) -> None:
        """Run one query, writing any output or error message."""
        command, *args = query.split() or [""]
        handler = self._handlers.get(command)
        if handler is None:
            self._say("Unknown command")
            return
        try:
            handler(args)
        except (StructureError, IndexError) as exc:
            self._say(str(exc))

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def _show(self, items: Iterable[str], empty_message: str) -> None:
        values = list(items)
        self._say(" ".join(values) if values else empty_message)

    def _show_array(self) -> None:
        self._show(self.array, "Array is empty")

    def _show_linked_list(self) -> None:
        self._show(self.linked_list, "Linked list is empty")

    def _show_doubly_linked_list(self) -> None:
        self._show(self.doubly_linked_list, "Doubly linked list is empty")

    def _show_queue(self) -> None:
        self._show(self.queue, "Queue is empty")

    def _show_stack(self) -> None:
        self._show(self.stack, "Stack is empty")

    def _show_tree(self) -> None:
        self._say(" ".join(self.tree))

    def _show_all(self) -> None:
        self._show_array()
        self._show_doubly_linked_list()
        self._show_linked_list()
        self._show_queue()
        self._show_stack()
        self._show_tree()

    def _array_insert(self, args: Sequence[str]) -> None:
        try:
            self.array.insert(_index(args, 0), _arg(args, 1))
        except (IndexError, CapacityError):
            self._say("Index invalid or array is full")

    def _array_get(self, args: Sequence[str]) -> None:
        index = _index(args, 0) if self.array else 0
        self._say(f"Element by index {index}: {self.array.get(index)}")

    def _search(self, container: Iterable[str], value: str) -> None:
        if value in container:
            self._say(f"Value {value} is in the list")
        else:
            self._say(f"There is no {value} in the list")

    def _hash_get(self, args: Sequence[str]) -> None:
        key = _arg(args, 0)
        self._say(f"Element by key: {key} is: {self.hash_table.get(key)}")

    def _hash_pop(self, args: Sequence[str]) -> None:
        if len(self.hash_table):
            self.hash_table.pop(_arg(args, 0))


def main(argv: Sequence[str] | None = None) -> int:
    """Read queries from standard input until ``exit`` or end of input."""
    parser = argparse.ArgumentParser(description="Interactive container shell.")
    parser.add_argument("directory", nargs="?", default=".", help="where the data files live")
    options = parser.parse_args(argv)
    workspace = Workspace(options.directory)
    print("Enter the command (or 'exit' to exit):")
    while True:
        try:
            query = input("> ")
        except EOFError:
            break
        if query == "exit":
            break
        workspace.execute(query)
    return 0