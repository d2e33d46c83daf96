"""An unbalanced binary search tree that reports insertion depths."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

DEMO_VALUES = (7, 3, 2, 1, 9, 5, 4, 6, 8, 0)


@dataclass(slots=True)
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A search tree of unique keys; the key 0 is never stored."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: Any) -> int | None:
        """Add *key* and return its depth (the root is at depth 1).

        Returns None when *key* is 0 or already present.
        """
        if key == 0:
            return None
        if self._root is None:
            self._root = _Node(key)
            return 1
        node = self._root
        depth = 1
        while True:
            depth += 1
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    return depth
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    return depth
                node = node.right
            else:
                return None

    def clear(self) -> None:
        """Remove every key."""
        self._root = None

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right


def _depths_line(depths: Sequence[int | None]) -> str:
    return " ".join(str(depth) for depth in depths if depth is not None)


def main(argv: Sequence[str] | None = None) -> int:
    """Read tree commands from standard input until ``exit``."""
    parser = argparse.ArgumentParser(description="Insert integers and print their depths.")
    parser.parse_args(argv)
    tree = BinarySearchTree()
    while True:
        try:
            line = input("< ")
        except EOFError:
            return 0
        words = line.split()
        command = words[0] if words else ""
        if command == "exit":
            return 0
        if command == "TPUSH":
            try:
                value = int(words[1])
            except (IndexError, ValueError):
                print("incorrect command")
                continue
            print(_depths_line([tree.insert(value)]))
        elif command == "TEST":
            print(_depths_line([tree.insert(value) for value in DEMO_VALUES]))
        else:
            print("incorrect command")