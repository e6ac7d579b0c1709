"""Convert a sparse matrix to its compact row/column/value form."""

from collections.abc import Iterable, Sequence
from typing import NamedTuple


class Entry(NamedTuple):
    """One non-zero cell of a matrix."""

    row: int
    col: int
    value: int


def count_nonzero(matrix: Sequence[Sequence[int]]) -> int:
    """Number of non-zero cells in ``matrix``."""
    return sum(1 for row in matrix for value in row if value != 0)


def compact(matrix: Sequence[Sequence[int]]) -> list[Entry]:
    """Non-zero cells of ``matrix`` in row-major order."""
    return [
        Entry(i, j, value)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value != 0
    ]


def format_compact(triplets: Iterable[tuple[int, int, int]]) -> str:
    """Three lines: the rows, the columns and the values of the entries."""
    entries = list(triplets)
    lines = (
        "".join(f"{entry[k]} " for entry in entries) for k in range(3)
    )
    return "".join(f"{line}\n" for line in lines)