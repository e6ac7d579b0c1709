"""Walk a matrix along its anti-diagonals or in spiral order."""

from collections.abc import Sequence


def zigzag_diagonals(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Anti-diagonals of a square matrix, each read from bottom-left to top-right."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("zig-zag diagonals need a square matrix")
    upper = [[matrix[i - j][j] for j in range(i + 1)] for i in range(size)]
    lower = [
        [matrix[size - 1 - k][size - i + k] for k in range(i)]
        for i in range(size - 1, 0, -1)
    ]
    return upper + lower


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Items of a rectangular matrix read clockwise from the top-left, spiralling inward."""
    if len({len(row) for row in matrix}) > 1:
        raise ValueError("spiral order needs a rectangular matrix")
    if not matrix:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    order: list[int] = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][j] for j in range(left, right + 1))
        top += 1
        order.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][j] for j in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return order