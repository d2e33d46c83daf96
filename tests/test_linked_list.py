import pytest

from labstructs.errors import EmptyStructureError, NotFoundError
from labstructs.linked_list import LinkedList


def test_push_order():
    lst = LinkedList()
    lst.push_tail("b")
    lst.push_head("a")
    lst.push_tail("c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_pop_head_and_tail():
    lst = LinkedList()
    for value in ["a", "b", "c"]:
        lst.push_tail(value)
    assert lst.pop_head() == "a"
    assert lst.pop_tail() == "c"
    assert list(lst) == ["b"]
    assert lst.pop_tail() == "b"
    assert len(lst) == 0


def test_pop_empty():
    lst = LinkedList()
    with pytest.raises(EmptyStructureError):
        lst.pop_head()
    with pytest.raises(EmptyStructureError):
        lst.pop_tail()


def test_remove_first_match():
    lst = LinkedList()
    for value in ["a", "b", "a", "c"]:
        lst.push_tail(value)
    lst.remove("a")
    assert list(lst) == ["b", "a", "c"]
    lst.remove("c")
    assert list(lst) == ["b", "a"]


def test_remove_errors():
    lst = LinkedList()
    with pytest.raises(EmptyStructureError):
        lst.remove("a")
    lst.push_tail("a")
    with pytest.raises(NotFoundError):
        lst.remove("z")
    assert list(lst) == ["a"]


def test_contains():
    lst = LinkedList()
    lst.push_tail("x")
    assert "x" in lst
    assert "y" not in lst


def test_persists(tmp_path):
    path = tmp_path / "linkedlist.data"
    lst = LinkedList(path)
    lst.push_tail("one")
    lst.push_head("zero")
    again = LinkedList(path)
    assert list(again) == ["zero", "one"]


def test_load_splits_words(tmp_path):
    path = tmp_path / "linkedlist.data"
    path.write_text("a b\n c\n", encoding="utf-8")
    lst = LinkedList(path)
    assert list(lst) == ["a", "b", "c"]
    assert path.read_text(encoding="utf-8") == "a\nb\nc\n"