"""Listing the strings made by picking one entry from each row of a matrix."""

from __future__ import annotations

import sys
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

_FIXED_MATRIX: tuple[tuple[str, ...], ...] = (
    ("1", "2", "3", "4"),
    ("x", "y", "z", ""),
    ("9", "8", "7", "6"),
)


def fixed_matrix_lines() -> Iterator[str]:
    """Yield every pick from the built-in three-row matrix, the short middle row padded with ''."""
    first, middle, last = _FIXED_MATRIX
    for a in first:
        for b in middle:
            for c in last:
                yield a + b + c


def odometer_lines(rows: Sequence[Sequence[str]]) -> Iterator[str]:
    """Yield lines from an odometer-style walk over ``rows``.

    The walk stops once a line equals the last entry of the first row followed
    by the last entry of the final row; for many inputs that never happens, so
    the generator may be infinite.
    """
    table = [list(row) for row in rows]
    if not table or not table[0] or not table[-1]:
        raise ValueError("rows must be non-empty, with non-empty first and last rows")
    size = len(table)
    end = table[0][-1] + table[-1][-1]
    limits: defaultdict[int, int] = defaultdict(int, {i: len(row) - 1 for i, row in enumerate(table)})
    positions: defaultdict[int, int] = defaultdict(int, {i: 0 for i in range(size)})

    while True:
        line = "".join(
            row[positions[i]] for i, row in enumerate(table) if positions[i] <= limits[i]
        )
        yield line
        if line == end:
            return
        for u in range(size, -1, -1):
            if positions[u] == limits[u]:
                positions[u] = 0
                positions[u - 1] += 1
            elif positions[u + 1] != limits[u + 1]:
                positions[u] += 1


def combination_lines(rows: Sequence[Sequence[str]]) -> Iterator[str]:
    """Yield each string built by taking one entry or nothing from every row,
    keeping those whose length equals the number of rows."""
    table = [list(row) for row in rows]
    size = len(table)
    if size == 0:
        return

    def walk(depth: int, prefix: str) -> Iterator[str]:
        for choice in (*table[depth], ""):
            text = prefix + choice
            if depth == size - 1:
                if len(text) == size:
                    yield text
            else:
                yield from walk(depth + 1, text)

    yield from walk(0, "")


def print_lines(lines: Iterable[str], file: TextIO | None = None) -> None:
    """Write each line to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    for line in lines:
        print(line, file=out)