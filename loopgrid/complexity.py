"""Loops that count how often their bodies run, illustrating time complexity."""

import itertools
from typing import NamedTuple


class Cost(NamedTuple):
    """Counts from a pair of nested loops."""

    comparisons: int
    body: int


def sequential_count(m: int, n: int) -> int:
    """Run one loop of ``m`` steps then one of ``n`` steps: O(m + n)."""
    counter = sum(1 for _ in range(m))
    counter += sum(1 for _ in range(n))
    return counter


def nested_count(m: int, n: int) -> int:
    """Run an ``n``-step loop inside an ``m``-step loop: O(mn)."""
    return sum(1 for _ in range(m) for _ in range(n))


def doubling_count(n: int) -> int:
    """Count steps of ``i = 1; i <= n; i *= 2``: O(log n)."""
    counter = 0
    i = 1
    while i <= n:
        counter += 1
        i *= 2
    return counter


def halving_count(n: int) -> int:
    """Count steps of ``i = n; i >= 1; i //= 2``: O(log n)."""
    counter = 0
    i = n
    while i >= 1:
        counter += 1
        i //= 2
    return counter


def squaring_count(n: int) -> int:
    """Count steps of ``i = 2; i <= n; i *= i``: O(log log n)."""
    counter = 0
    i = 2
    while i <= n:
        counter += 1
        i *= i
    return counter


def power_tower_count(n: int) -> int:
    """Count steps of ``i = 1; i <= n; i = 2 ** i``."""
    if n.bit_length() > 65536:
        raise ValueError("n is too large to step past")
    counter = 0
    i = 1
    while i <= n:
        counter += 1
        i = 1 << i
    return counter


def triangular_count(n: int) -> int:
    """Inner loop runs ``i + 1`` times for each outer ``i`` below ``n``."""
    return sum(1 for i in range(n) for _ in range(i + 1))


def upper_triangular_count(n: int) -> int:
    """Inner loop runs from ``i`` to ``n`` for each outer ``i`` below ``n``."""
    return sum(1 for i in range(n) for _ in range(i, n))


def comparison_cost(m: int, n: int) -> Cost:
    """Count loop-control steps (m*n + m) and body runs (m*n) of nested loops."""
    comparisons = body = 0
    for _ in range(m):
        for _ in range(n):
            body += 1
            comparisons += 1
        comparisons += 1
    return Cost(comparisons, body)


def numbered_grid(m: int, n: int) -> list[list[int]]:
    """An ``m`` by ``n`` grid numbered 1, 2, ... in row-major order."""
    counter = itertools.count(1)
    return [[next(counter) for _ in range(n)] for _ in range(m)]