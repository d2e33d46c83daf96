"""A self-balancing search tree of strings kept in step with a data file."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

from .persist import read_lines, write_lines


@dataclass(slots=True)
class _Node:
    key: str
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, key: str) -> tuple[_Node, bool]:
    if node is None:
        return _Node(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False
    return _rebalance(node), added


def _remove(node: _Node | None, key: str) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _remove(node.left, key)
    elif key > node.key:
        node.right, removed = _remove(node.right, key)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right, _ = _remove(node.right, successor.key)
        removed = True
    return _rebalance(node), removed


def _inorder(node: _Node | None) -> Iterator[str]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _preorder(node: _Node | None) -> Iterator[str]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


class AVLTree:
    """An AVL tree of unique strings.

    The data file holds the keys in pre-order, one per line.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = path
        self._root: _Node | None = None
        self._size = 0
        self.load()

    def insert(self, key: str) -> bool:
        """Add *key*; return False if it was already present."""
        self._root, added = _insert(self._root, key)
        if added:
            self._size += 1
        self.save()
        return added

    def remove(self, key: str) -> bool:
        """Remove *key*; return False if it was not present."""
        self._root, removed = _remove(self._root, key)
        if removed:
            self._size -= 1
        self.save()
        return removed

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._size = 0
        self.save()

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[str]:
        """Iterate over the keys in ascending order."""
        return _inorder(self._root)

    def __len__(self) -> int:
        return self._size

    def preorder(self) -> list[str]:
        """Return the keys in pre-order (node, left, right)."""
        return list(_preorder(self._root))

    def height(self) -> int:
        """Return the height of the tree; 0 when empty."""
        return _height(self._root)

    def load(self) -> None:
        """Replace the contents with the keys listed in the data file."""
        if self.path is None:
            return
        try:
            lines = read_lines(self.path)
        except FileNotFoundError:
            return
        self._root = None
        self._size = 0
        for key in lines:
            self._root, added = _insert(self._root, key)
            if added:
                self._size += 1

    def save(self) -> None:
        """Write the keys to the data file in pre-order."""
        if self.path is not None:
            write_lines(self.path, _preorder(self._root))