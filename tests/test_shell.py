import io

import pytest

from labstructs.shell import Workspace, main


@pytest.fixture
def workspace(tmp_path):
    return Workspace(tmp_path, io.StringIO())


def run(ws, *queries):
    start = ws.out.tell()
    for query in queries:
        ws.execute(query)
    ws.out.seek(start)
    text = ws.out.read()
    return text.splitlines()


def test_array_push_read_and_length(workspace, tmp_path):
    lines = run(workspace, "APUSH a", "APUSH b", "AREAD", "ALENGTH", "AGET 1")
    assert lines == ["a b", "Size of the array is: 2", "Element by index 1: b"]
    assert (tmp_path / "array.data").read_text() == "a\nb\n"


def test_array_insert_invalid_index(workspace):
    assert run(workspace, "AINSERT 5 x") == ["Index invalid or array is full"]
    assert len(workspace.array) == 0


def test_array_insert_remove_replace(workspace):
    run(workspace, "APUSH a", "APUSH c", "AINSERT 1 b", "AREPLACE 0 z", "APOP 2")
    assert list(workspace.array) == ["z", "b"]


def test_array_full(workspace):
    for n in range(10):
        workspace.execute(f"APUSH v{n}")
    assert run(workspace, "APUSH extra") == ["Array is full"]
    assert len(workspace.array) == 10


def test_array_get_empty_and_invalid(workspace):
    assert run(workspace, "AGET 0") == ["Array is empty"]
    assert run(workspace, "APUSH a", "AGET 3", "APOP 7") == ["Index invalid", "Index invalid"]


def test_linked_list_commands(workspace):
    lines = run(workspace, "LPUSH_TAIL b", "LPUSH_HEAD a", "LPUSH_TAIL c", "LREAD",
                "LSEARCH b", "LSEARCH q", "LPOP_VALUE q")
    assert lines == [
        "a b c",
        "Value b is in the list",
        "There is no q in the list",
        "This value is not in the list",
    ]


def test_linked_list_pop_empty(workspace):
    assert run(workspace, "LPOP_HEAD", "LREAD") == [
        "Deletion is not possible: the list is empty",
        "Linked list is empty",
    ]


def test_doubly_linked_list_commands(workspace):
    run(workspace, "DLPUSH_TAIL b", "DLPUSH_HEAD a", "DLPUSH_TAIL c", "DLPOP_VALUE b")
    assert list(workspace.doubly_linked_list) == ["a", "c"]
    assert run(workspace, "DLPOP_HEAD", "DLPOP_TAIL", "DLREAD") == ["Doubly linked list is empty"]


def test_queue_commands(workspace):
    assert run(workspace, "QPUSH a", "QPUSH b", "QPOP", "QREAD") == ["b"]
    assert run(workspace, "QPOP", "QPOP") == ["Queue is empty"]


def test_stack_reads_top_first(workspace):
    assert run(workspace, "SPUSH a", "SPUSH b", "SREAD") == ["b a"]
    assert run(workspace, "SPOP", "SPOP", "SPOP") == ["Stack is empty, value cannot be deleted"]


def test_hash_table_commands(workspace):
    assert run(workspace, "HGET k") == ["Table is empty"]
    assert run(workspace, "HPOP k") == []
    lines = run(workspace, "HPUSH k v", "HGET k", "HGET z")
    assert lines == ["Element by key: k is: v", "Key not found: z"]
    assert run(workspace, "HPOP z") == ["This value is not in the table"]
    run(workspace, "HPOP k")
    assert len(workspace.hash_table) == 0


def test_tree_commands(workspace):
    lines = run(workspace, "TPUSH m", "TPUSH a", "TPUSH z", "TREAD", "TSEARCH a", "TPOP a", "TSEARCH a")
    assert lines == ["a m z", "Found", "Not Found"]


def test_unknown_and_empty_commands(workspace):
    assert run(workspace, "NOPE", "") == ["Unknown command", "Unknown command"]


def test_print_empty_workspace(workspace):
    assert run(workspace, "PRINT") == [
        "Array is empty",
        "Doubly linked list is empty",
        "Linked list is empty",
        "Queue is empty",
        "Stack is empty",
        "",
    ]


def test_state_survives_new_workspace(tmp_path):
    first = Workspace(tmp_path, io.StringIO())
    for query in ("APUSH a", "QPUSH q", "SPUSH s", "TPUSH t", "HPUSH k v", "LPUSH_TAIL l", "DLPUSH_TAIL d"):
        first.execute(query)
    second = Workspace(tmp_path, io.StringIO())
    assert list(second.array) == ["a"]
    assert list(second.queue) == ["q"]
    assert list(second.stack) == ["s"]
    assert list(second.tree) == ["t"]
    assert list(second.hash_table.items()) == [("k", "v")]
    assert list(second.linked_list) == ["l"]
    assert list(second.doubly_linked_list) == ["d"]


def test_main_runs_until_exit(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("QPUSH x\nQREAD\nexit\nQPUSH y\n"))
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Enter the command" in out
    assert (tmp_path / "queue.data").read_text() == "x\n"


def test_main_stops_at_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("SPUSH a\n"))
    assert main([str(tmp_path)]) == 0
    assert (tmp_path / "stack.data").read_text() == "a\n"