"""Reading and writing the line-per-element data files."""

from __future__ import annotations

import os
from collections.abc import Iterable

PathLike = "str | os.PathLike[str]"


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a data file, without their line endings.

    Lines are split on ``\\n`` only; a final newline does not produce an
    extra empty line.  A missing file raises ``FileNotFoundError``.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_lines(path: str | os.PathLike[str], lines: Iterable[str]) -> None:
    """Replace the file at *path* with *lines*, each followed by a newline."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.writelines(f"{line}\n" for line in lines)