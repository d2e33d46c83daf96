"""Searches over small integer arrays: subarrays with a given sum and balanced splits."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import accumulate

from .errors import CapacityError
from .fixed_array import FixedArray

CAPACITY = 10
DEFAULT_TARGET = 5
SUBARRAY_DEMO = (4, -7, 1, 5, -4, 0, -3, 2, 4, 1)
SIMILAR_DEMO = (5, 8, 1, 14, 7)


def subarrays_with_sum(values: Iterable[int], target: int) -> list[list[int]]:
    """Return every contiguous run of *values* whose sum is *target*.

    Runs are ordered by start position, then by length.
    """
    items = list(values)
    found = []
    for start in range(len(items)):
        for end, total in enumerate(accumulate(items[start:]), start + 1):
            if total == target:
                found.append(items[start:end])
    return found


def split_similar(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Greedily split *values* into two lists with close sums.

    Each value goes to the first list when its sum does not exceed the
    second's, or when the second already holds at least half the total;
    otherwise it goes to the second list.
    """
    items = list(values)
    total = sum(items)
    half = abs(total) // 2 if total >= 0 else -(abs(total) // 2)
    first: list[int] = []
    second: list[int] = []
    first_sum = second_sum = 0
    for value in items:
        if first_sum <= second_sum or second_sum >= half:
            first.append(value)
            first_sum += value
        else:
            second.append(value)
            second_sum += value
    return first, second


def _render(items: Iterable[int]) -> str:
    text = " ".join(str(item) for item in items)
    return text if text else "Array is empty"


def _append(array: FixedArray[int], value: int) -> None:
    try:
        array.append(value)
    except CapacityError as exc:
        print(exc)


def _commands(prompt: str):
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        words = line.split()
        if words and words[0] == "exit":
            return
        yield words


def subarray_main(argv: Sequence[str] | None = None) -> int:
    """Read array commands from stdin and print subarrays summing to the target."""
    parser = argparse.ArgumentParser(description="Find contiguous subarrays with a given sum.")
    parser.add_argument("--target", type=int, default=DEFAULT_TARGET)
    options = parser.parse_args(argv)
    array: FixedArray[int] = FixedArray(CAPACITY)
    for words in _commands("< "):
        command = words[0] if words else ""
        if command == "APUSH":
            try:
                value = int(words[1])
            except (IndexError, ValueError):
                value = 0
            _append(array, value)
        elif command == "TEST":
            array = FixedArray(CAPACITY, SUBARRAY_DEMO)
        elif command == "subarray":
            for run in subarrays_with_sum(array, options.target):
                print(" ".join(str(item) for item in run))
        else:
            print("incorrect command")
    return 0


def similar_main(argv: Sequence[str] | None = None) -> int:
    """Read set-like commands from stdin and split the values into two similar halves."""
    parser = argparse.ArgumentParser(description="Split natural numbers into two similar sums.")
    parser.parse_args(argv)
    array: FixedArray[int] = FixedArray(CAPACITY)
    for words in _commands("< "):
        command = words[0] if words else ""
        if command == "SETADD":
            try:
                value = int(words[1])
            except (IndexError, ValueError):
                value = 0
            if value <= 0:
                print("The number must be natural", file=sys.stderr)
            if value not in array:
                _append(array, value)
        elif command == "TEST":
            for value in SIMILAR_DEMO:
                _append(array, value)
        elif command == "SIMILAR":
            array.shell_sort()
            print(_render(array))
            first, second = split_similar(array)
            print(f"Sum first subarray: {sum(first)} and the array is: {_render(first)}")
            print()
            print(f"Sum second subarray: {sum(second)} and the array is: {_render(second)}")
        elif command == "DISPLAY":
            print(_render(array))
        else:
            print("Incorrect query", file=sys.stderr)
    return 0