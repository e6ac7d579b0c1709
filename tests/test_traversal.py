import pytest

from loopgrid.traversal import spiral_order, zigzag_diagonals

SOURCE_MATRIX = [
    [1, 2, 3, 4, 5],
    [6, 7, 8, 9, 10],
    [11, 12, 13, 14, 15],
    [16, 17, 18, 19, 20],
    [21, 22, 23, 24, 25],
]


def _grid(rows, cols):
    return [[r * cols + c for c in range(cols)] for r in range(rows)]


def test_zigzag_source_matrix():
    assert zigzag_diagonals(SOURCE_MATRIX) == [
        [1], [6, 2], [11, 7, 3], [16, 12, 8, 4], [21, 17, 13, 9, 5],
        [22, 18, 14, 10], [23, 19, 15], [24, 20], [25],
    ]


@pytest.mark.parametrize("size", [1, 2, 4, 7])
def test_zigzag_invariants(size):
    matrix = _grid(size, size)
    diagonals = zigzag_diagonals(matrix)
    assert len(diagonals) == 2 * size - 1
    flat = sorted(v for d in diagonals for v in d)
    assert flat == sorted(v for row in matrix for v in row)
    for index, diagonal in enumerate(diagonals):
        positions = [divmod(v, size) for v in diagonal]
        assert all(r + c == index for r, c in positions)
        assert [r for r, _ in positions] == sorted((r for r, _ in positions), reverse=True)


def test_zigzag_empty():
    assert zigzag_diagonals([]) == []


def test_zigzag_rejects_non_square():
    with pytest.raises(ValueError):
        zigzag_diagonals(_grid(2, 3))


def test_spiral_source_matrix():
    assert spiral_order(SOURCE_MATRIX) == [
        1, 2, 3, 4, 5, 10, 15, 20, 25, 24, 23, 22, 21,
        16, 11, 6, 7, 8, 9, 14, 19, 18, 17, 12, 13,
    ]


@pytest.mark.parametrize("rows,cols", [(1, 1), (3, 4), (4, 3), (5, 5), (2, 6)])
def test_spiral_is_permutation(rows, cols):
    matrix = _grid(rows, cols)
    order = spiral_order(matrix)
    assert sorted(order) == sorted(v for row in matrix for v in row)
    assert order[:cols] == matrix[0]


def test_spiral_single_row_and_column():
    assert spiral_order([[4, 5, 6]]) == [4, 5, 6]
    assert spiral_order([[4], [5], [6]]) == [4, 5, 6]


def test_spiral_empty():
    assert spiral_order([]) == []


def test_spiral_rejects_ragged():
    with pytest.raises(ValueError):
        spiral_order([[1, 2], [3]])