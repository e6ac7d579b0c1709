"""Place mines on a board and fill the empty cells with neighbour counts."""

import random
from collections.abc import Sequence

from loopgrid.matrix_ops import format_matrix

MINE = -1
Board = list[list[int]]


def place_mines(
    rows: int, cols: int, count: int | None = None, rng: random.Random | None = None
) -> Board:
    """A board with ``count`` mines (-1) at random cells, zero elsewhere.

    Without ``count``, a quarter of the cells hold mines.
    """
    if rows < 0 or cols < 0:
        raise ValueError("board dimensions must not be negative")
    cells = rows * cols
    if count is None:
        count = cells // 4
    if not 0 <= count <= cells:
        raise ValueError(f"cannot place {count} mines on {cells} cells")
    rng = rng if rng is not None else random.Random()
    board = [[0] * cols for _ in range(rows)]
    for cell in rng.sample(range(cells), count):
        row, col = divmod(cell, cols)
        board[row][col] = MINE
    return board


def add_hints(board: Sequence[Sequence[int]]) -> Board:
    """A copy of the board with each zero cell replaced by its count of adjacent mines."""
    rows = len(board)
    result = [list(row) for row in board]
    for i, row in enumerate(board):
        for j, value in enumerate(row):
            if value != 0:
                continue
            result[i][j] = sum(
                1
                for di in (-1, 0, 1)
                for dj in (-1, 0, 1)
                if (di or dj)
                and 0 <= i + di < rows
                and 0 <= j + dj < len(board[i + di])
                and board[i + di][j + dj] == MINE
            )
    return result


def format_board(board: Sequence[Sequence[int]]) -> str:
    """The board as tab-separated rows."""
    return format_matrix(board)