import pytest

from loopgrid.cipher import decrypt, encrypt, xor_matrices
from loopgrid.matrix_ops import transpose

PLAIN = [[4, 7, 5, 1], [8, 4, 2, 3], [4, 1, 2, 5], [1, 2, 3, 4]]
MASK_ONE = [[8, 8, 2, 2], [1, 7, 6, 5], [9, 4, 1, 3], [4, 1, 3, 2]]
MASK_TWO = [[2, 7, 2, 3], [1, 9, 4, 3], [5, 3, 2, 8], [6, 0, 1, 3]]
ZEROS = [[0] * 4 for _ in range(4)]


def test_round_trip_of_source_example():
    scrambled = encrypt(PLAIN, MASK_ONE, MASK_TWO)
    assert decrypt(scrambled, MASK_ONE, MASK_TWO) == PLAIN


def test_encryption_changes_the_matrix():
    assert encrypt(PLAIN, MASK_ONE, MASK_TWO) != PLAIN


def test_zero_keys_only_transpose():
    assert encrypt(PLAIN, ZEROS, ZEROS) == transpose(PLAIN)


def test_inputs_are_not_mutated():
    original = [row[:] for row in PLAIN]
    encrypt(PLAIN, MASK_ONE, MASK_TWO)
    assert PLAIN == original


def test_xor_small_example():
    assert xor_matrices([[1, 2]], [[3, 2]]) == [[2, 0]]


def test_xor_is_self_inverse():
    assert xor_matrices(xor_matrices(PLAIN, MASK_ONE), MASK_ONE) == PLAIN


def test_xor_shape_mismatch_raises():
    with pytest.raises(ValueError):
        xor_matrices([[1, 2]], [[1, 2, 3]])


def test_wrong_key_does_not_decrypt():
    scrambled = encrypt(PLAIN, MASK_ONE, MASK_TWO)
    assert decrypt(scrambled, MASK_TWO, MASK_ONE) != PLAIN


def test_non_square_round_trip():
    plain = [[1, 2, 3], [4, 5, 6]]
    first = [[7, 0, 1], [2, 9, 3]]
    second = [[5, 1], [0, 6], [8, 2]]
    assert decrypt(encrypt(plain, first, second), first, second) == plain


def test_mismatched_key_raises():
    with pytest.raises(ValueError):
        encrypt(PLAIN, [[1, 2], [3, 4]], MASK_TWO)