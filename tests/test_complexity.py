import pytest

from loopgrid.complexity import (
    comparison_cost,
    doubling_count,
    halving_count,
    nested_count,
    numbered_grid,
    power_tower_count,
    sequential_count,
    squaring_count,
    triangular_count,
    upper_triangular_count,
)


@pytest.mark.parametrize("m,n", [(0, 0), (3, 7), (100, 25)])
def test_sequential_count_adds(m, n):
    assert sequential_count(m, n) == m + n


@pytest.mark.parametrize("m,n", [(0, 5), (3, 7), (40, 25)])
def test_nested_count_multiplies(m, n):
    assert nested_count(m, n) == m * n


def test_doubling_and_halving_are_logarithmic():
    for n in range(1, 2000):
        assert doubling_count(n) == n.bit_length()
        assert halving_count(n) == doubling_count(n)
    assert doubling_count(0) == 0


@pytest.mark.parametrize("k", range(0, 6))
def test_squaring_count_at_exact_powers(k):
    assert squaring_count(2 ** (2**k)) == k + 1


def test_squaring_count_below_two():
    assert squaring_count(1) == 0


def test_power_tower_count():
    assert power_tower_count(1024) == 4
    assert power_tower_count(16) == power_tower_count(1024)
    assert power_tower_count(65536) == power_tower_count(1024) + 1
    assert power_tower_count(0) == 0


@pytest.mark.parametrize("n", [0, 1, 10, 57])
def test_triangular_counts(n):
    assert triangular_count(n) == n * (n + 1) // 2
    assert upper_triangular_count(n) == triangular_count(n)


def test_comparison_cost_source_figures():
    first = comparison_cost(10, 10000)
    assert first.comparisons == 100010
    assert first.body == 10 * 10000
    second = comparison_cost(10000, 10)
    assert second.comparisons == 110000
    assert second.body == first.body


def test_numbered_grid_shape_and_values():
    grid = numbered_grid(3, 4)
    assert len(grid) == 3
    assert all(len(row) == 4 for row in grid)
    assert [x for row in grid for x in row] == list(range(1, 13))