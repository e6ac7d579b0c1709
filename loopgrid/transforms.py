"""Flip, rotate and fold a matrix."""

from collections.abc import Sequence

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), (widths.pop() if widths else 0)


def _square(matrix: Sequence[Sequence[int]]) -> int:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("this fold is defined for square matrices only")
    return rows


def flip_horizontal(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Mirror left to right: the first column becomes the last."""
    _shape(matrix)
    return [list(reversed(row)) for row in matrix]


def flip_vertical(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Mirror top to bottom: the first row becomes the last."""
    _shape(matrix)
    return [list(row) for row in reversed(matrix)]


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Turn the matrix a quarter turn clockwise."""
    _shape(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def rotate_anticlockwise(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Turn the matrix a quarter turn anticlockwise."""
    _shape(matrix)
    return [list(column) for column in reversed(list(zip(*matrix)))]


def fold_right(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Fold the lower-left triangle onto the upper-right one across the principal diagonal.

    The diagonal is kept, each upper cell gains its mirror from below, and the
    lower cells are cleared to zero.
    """
    size = _square(matrix)
    return [
        [
            matrix[i][j] if i == j
            else matrix[i][j] + matrix[j][i] if i < j
            else 0
            for j in range(size)
        ]
        for i in range(size)
    ]


def fold_left(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Fold the lower-right triangle onto the upper-left one across the secondary diagonal.

    The secondary diagonal is kept, each cell above it gains its mirror from
    below, and the cells below it are cleared to zero.
    """
    size = _square(matrix)
    last = size - 1
    return [
        [
            matrix[i][j] if i + j == last
            else matrix[i][j] + matrix[last - j][last - i] if i + j < size
            else 0
            for j in range(size)
        ]
        for i in range(size)
    ]


def fold_vertical(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Fold the right half of each row onto the left half.

    An odd middle column is kept as it is; the cells right of the fold are zero.
    """
    _, cols = _shape(matrix)
    half = cols // 2
    result = []
    for row in matrix:
        folded = [0] * cols
        for j in range(half):
            folded[j] = row[j] + row[cols - j - 1]
        if cols % 2:
            folded[half] = row[half]
        result.append(folded)
    return result


def fold_horizontal(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Fold the bottom half of the rows onto the top half.

    An odd middle row is kept as it is; the rows below the fold are zero.
    """
    rows, cols = _shape(matrix)
    half = rows // 2
    result = [[0] * cols for _ in range(rows)]
    for i in range(half):
        result[i] = [x + y for x, y in zip(matrix[i], matrix[rows - i - 1])]
    if rows % 2:
        result[half] = list(matrix[half])
    return result