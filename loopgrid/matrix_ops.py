"""Basic matrix operations: display, random filling, arithmetic, transpose,
products, row and column sums, and the idempotence check."""

import random
from collections.abc import Sequence

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), (widths.pop() if widths else 0)


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Each item followed by a tab, each row followed by a newline."""
    return "".join(
        "".join(f"{value}\t" for value in row) + "\n" for row in matrix
    )


def random_matrix(
    rows: int, cols: int, bound: int, rng: random.Random | None = None
) -> Matrix:
    """A ``rows`` by ``cols`` matrix of random integers from 0 up to ``bound - 1``."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    if bound < 1:
        raise ValueError("bound must be at least 1")
    rng = rng if rng is not None else random.Random()
    return [[rng.randrange(bound) for _ in range(cols)] for _ in range(rows)]


def _same_shape(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> None:
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same dimensions")


def add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Item-by-item sum of two matrices of equal size."""
    _same_shape(a, b)
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def subtract(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Item-by-item difference ``a - b`` of two matrices of equal size."""
    _same_shape(a, b)
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Rows become columns and columns become rows."""
    _, cols = _shape(matrix)
    return [[row[j] for row in matrix] for j in range(cols)]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Matrix product of an r x c and a c x q matrix."""
    rows, inner = _shape(a)
    b_rows, _ = _shape(b)
    if inner != b_rows:
        raise ValueError(
            "no multiplication: columns of the first matrix must equal "
            "rows of the second"
        )
    columns = transpose(b)
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def row_sums(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Sum of each row."""
    _shape(matrix)
    return [sum(row) for row in matrix]


def column_sums(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Sum of each column."""
    return [sum(column) for column in transpose(matrix)]


def is_idempotent(matrix: Sequence[Sequence[int]]) -> bool:
    """True if the square matrix multiplied by itself gives itself back."""
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("idempotence is defined for square matrices only")
    return multiply(matrix, matrix) == [list(row) for row in matrix]