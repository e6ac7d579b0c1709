"""Scramble a matrix with two XOR keys and a transpose, and undo it."""

from collections.abc import Sequence

from loopgrid.matrix_ops import transpose

Matrix = list[list[int]]


def xor_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Item-by-item exclusive or of two matrices of equal size."""
    if len(a) != len(b) or any(len(row_a) != len(row_b) for row_a, row_b in zip(a, b)):
        raise ValueError("matrices must have the same dimensions")
    return [[x ^ y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def encrypt(
    matrix: Sequence[Sequence[int]],
    key1: Sequence[Sequence[int]],
    key2: Sequence[Sequence[int]],
) -> Matrix:
    """XOR with ``key1``, transpose, then XOR with ``key2``."""
    return xor_matrices(transpose(xor_matrices(matrix, key1)), key2)


def decrypt(
    cipher: Sequence[Sequence[int]],
    key1: Sequence[Sequence[int]],
    key2: Sequence[Sequence[int]],
) -> Matrix:
    """Undo :func:`encrypt`: XOR with ``key2``, transpose, then XOR with ``key1``."""
    return xor_matrices(transpose(xor_matrices(cipher, key2)), key1)