"""Row and column extremes, the two diagonals, and the four triangular
parts of a matrix."""

import enum
from collections.abc import Sequence

from loopgrid.matrix_ops import transpose


class Triangle(enum.Enum):
    """The four triangular halves of a matrix, named by the corner they hold."""

    LEFT_UPPER = "left-upper"
    LEFT_LOWER = "left-lower"
    RIGHT_UPPER = "right-upper"
    RIGHT_LOWER = "right-lower"


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), (widths.pop() if widths else 0)


def _non_empty(matrix: Sequence[Sequence[int]]) -> None:
    rows, cols = _shape(matrix)
    if rows == 0 or cols == 0:
        raise ValueError("the matrix must not be empty")


def _square(matrix: Sequence[Sequence[int]]) -> int:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("the diagonals are defined for square matrices only")
    return rows


def row_maxima(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Largest item of each row."""
    _non_empty(matrix)
    return [max(row) for row in matrix]


def column_maxima(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Largest item of each column."""
    _non_empty(matrix)
    return [max(column) for column in transpose(matrix)]


def row_minima(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Smallest item of each row."""
    _non_empty(matrix)
    return [min(row) for row in matrix]


def column_minima(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Smallest item of each column."""
    _non_empty(matrix)
    return [min(column) for column in transpose(matrix)]


def principal_diagonal(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Items from the top-left corner to the bottom-right corner."""
    _square(matrix)
    return [row[i] for i, row in enumerate(matrix)]


def secondary_diagonal(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Items from the top-right corner to the bottom-left corner."""
    size = _square(matrix)
    return [row[size - i - 1] for i, row in enumerate(matrix)]


def in_triangle(kind: Triangle | str, i: int, j: int, size: int) -> bool:
    """True if cell ``(i, j)`` of a matrix with ``size`` rows lies in the triangle."""
    kind = Triangle(kind)
    if kind is Triangle.LEFT_UPPER:
        return i + j <= size - 1
    if kind is Triangle.LEFT_LOWER:
        return i >= j
    if kind is Triangle.RIGHT_UPPER:
        return i <= j
    return i + j >= size - 1


def triangle(
    matrix: Sequence[Sequence[int]], kind: Triangle | str
) -> list[list[int | None]]:
    """The matrix with every cell outside the triangle replaced by ``None``."""
    kind = Triangle(kind)
    size, _ = _shape(matrix)
    return [
        [value if in_triangle(kind, i, j, size) else None for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def format_triangle(matrix: Sequence[Sequence[int]], kind: Triangle | str) -> str:
    """The triangle as text: items followed by tabs, blank cells as bare tabs."""
    return "".join(
        "".join("\t" if value is None else f"{value}\t" for value in row) + "\n"
        for row in triangle(matrix, kind)
    )