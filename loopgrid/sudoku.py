"""Check a completed 9x9 sudoku grid."""

from collections.abc import Iterable, Sequence

SIZE = 9
BOX = 3


def has_duplicate(values: Iterable[int]) -> bool:
    """True if any value occurs more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def _check_shape(grid: Sequence[Sequence[int]]) -> None:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError(f"a sudoku grid must be {SIZE}x{SIZE}")


def rows_valid(grid: Sequence[Sequence[int]]) -> bool:
    """True if no row holds a repeated value."""
    _check_shape(grid)
    return not any(has_duplicate(row) for row in grid)


def columns_valid(grid: Sequence[Sequence[int]]) -> bool:
    """True if no column holds a repeated value."""
    _check_shape(grid)
    return not any(has_duplicate(column) for column in zip(*grid))


def boxes_valid(grid: Sequence[Sequence[int]]) -> bool:
    """True if no 3x3 box holds a repeated value."""
    _check_shape(grid)
    for top in range(0, SIZE, BOX):
        for left in range(0, SIZE, BOX):
            box = (
                grid[r][c]
                for r in range(top, top + BOX)
                for c in range(left, left + BOX)
            )
            if has_duplicate(box):
                return False
    return True


def is_valid_solution(grid: Sequence[Sequence[int]]) -> bool:
    """True if the grid holds digits 1-9 with no repeats in any row, column or box."""
    _check_shape(grid)
    if any(not 1 <= value <= SIZE for row in grid for value in row):
        return False
    return rows_valid(grid) and columns_valid(grid) and boxes_valid(grid)