import io
import sys

import pytest

from labstructs.bst import BinarySearchTree, main


def test_first_insert_is_depth_one():
    tree = BinarySearchTree()
    assert tree.insert(7) == 1


def test_depths_grow_along_path():
    tree = BinarySearchTree()
    tree.insert(7)
    assert tree.insert(3) == 2
    assert tree.insert(2) == 3
    assert tree.insert(9) == 2


def test_duplicate_and_zero_are_skipped():
    tree = BinarySearchTree()
    tree.insert(5)
    assert tree.insert(5) is None
    assert tree.insert(0) is None
    assert list(tree) == [5]
    assert 0 not in tree


def test_iteration_is_sorted():
    tree = BinarySearchTree()
    values = [7, 3, 2, 1, 9, 5, 4, 6, 8]
    for value in values:
        tree.insert(value)
    assert list(tree) == sorted(values)


def test_contains_and_clear():
    tree = BinarySearchTree()
    for value in (4, 2, 6):
        tree.insert(value)
    assert 6 in tree
    assert 5 not in tree
    tree.clear()
    assert list(tree) == []
    assert 4 not in tree


def test_string_keys():
    tree = BinarySearchTree()
    for word in ("pear", "apple", "zebra"):
        tree.insert(word)
    assert list(tree) == ["apple", "pear", "zebra"]


def _run(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_main_demo(monkeypatch, capsys):
    assert _run(monkeypatch, "TEST\nexit\n") == 0
    out = capsys.readouterr().out
    assert "1 2 3 4 2 3 4 4 3" in out


def test_main_push_and_unknown(monkeypatch, capsys):
    assert _run(monkeypatch, "TPUSH 10\nTPUSH 4\nBOGUS\n") == 0
    out = capsys.readouterr().out
    assert "incorrect command" in out
    assert "2" in out


@pytest.mark.parametrize("line", ["TPUSH", "TPUSH abc"])
def test_main_bad_number(monkeypatch, capsys, line):
    _run(monkeypatch, line + "\nexit\n")
    assert "incorrect command" in capsys.readouterr().out