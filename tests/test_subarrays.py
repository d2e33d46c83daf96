import io

import pytest

from labstructs.subarrays import (
    SIMILAR_DEMO,
    SUBARRAY_DEMO,
    similar_main,
    split_similar,
    subarray_main,
    subarrays_with_sum,
)


def _is_contiguous_slice(run, values):
    width = len(run)
    return any(values[start : start + width] == run for start in range(len(values) - width + 1))


def test_single_matching_value():
    assert subarrays_with_sum([5], 5) == [[5]]


def test_no_match():
    assert subarrays_with_sum([1, 2], 10) == []


def test_zero_extends_a_match():
    assert subarrays_with_sum([5, 0], 5) == [[5], [5, 0]]


def test_demo_runs_sum_to_target_and_are_slices():
    values = list(SUBARRAY_DEMO)
    runs = subarrays_with_sum(values, 5)
    assert runs
    for run in runs:
        assert sum(run) == 5
        assert _is_contiguous_slice(run, values)


def test_every_prefix_sum_match_is_found():
    values = [2, 3, 5]
    runs = subarrays_with_sum(values, 5)
    assert [2, 3] in runs and [5] in runs
    assert len(runs) == 2


def test_split_of_sorted_demo():
    assert split_similar([14, 8, 7, 5, 1]) == ([14, 5], [8, 7, 1])


@pytest.mark.parametrize("values", [[], [3], [9, 4, 4, 2, 1], list(SIMILAR_DEMO)])
def test_split_keeps_every_value(values):
    first, second = split_similar(values)
    assert sorted(first + second) == sorted(values)
    assert sum(first) + sum(second) == sum(values)


def test_split_empty():
    assert split_similar([]) == ([], [])


def test_similar_main_demo(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("TEST\nSIMILAR\nexit\n"))
    assert similar_main([]) == 0
    out = capsys.readouterr().out
    ordered = sorted(SIMILAR_DEMO, reverse=True)
    first, second = split_similar(ordered)
    assert " ".join(map(str, ordered)) in out
    assert f"Sum first subarray: {sum(first)}" in out
    assert f"Sum second subarray: {sum(second)}" in out


def test_similar_main_reports_full_array(monkeypatch, capsys):
    commands = "".join(f"SETADD {n}\n" for n in range(1, 12)) + "exit\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(commands))
    assert similar_main([]) == 0
    assert "Array is full" in capsys.readouterr().out


def test_subarray_main_unknown_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("bogus\nexit\n"))
    assert subarray_main([]) == 0
    assert "incorrect command" in capsys.readouterr().out