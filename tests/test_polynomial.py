import pytest

from contestlib.polynomial import (
    MOD,
    inverse,
    matrix_mul,
    multiply,
    multiply_all,
    ntt,
    power,
)


def test_power_zero_exponent():
    assert power(0, 0, MOD) == 1
    assert power(12345, 0, MOD) == 1


def test_power_of_multiple_of_mod():
    assert power(MOD * 3, 5, MOD) == 0


@pytest.mark.parametrize("x,n", [(3, 10), (2, MOD + 5), (123456, 789)])
def test_power_matches_builtin(x, n):
    assert power(x, n, MOD) == pow(x, n, MOD)


def test_power_uses_ntt_prime():
    assert power(3, 998244352, 998244353) == 1


@pytest.mark.parametrize("n", [1, 2, 7, 1024, MOD - 1])
def test_inverse(n):
    assert n * inverse(n, MOD) % MOD == 1


def test_inverse_of_zero_rejected():
    with pytest.raises(ValueError):
        inverse(MOD, MOD)


@pytest.mark.parametrize("values", [[5], [1, 2], [3, 1, 4, 1, 5, 9, 2, 6], list(range(16))])
def test_ntt_round_trip(values):
    assert ntt(ntt(values), invert=True) == [v % MOD for v in values]


def test_ntt_rejects_bad_length():
    with pytest.raises(ValueError):
        ntt([1, 2, 3])


def test_multiply_length_and_commutativity():
    a = [3, 0, 7, 1]
    b = [2, 5, 11]
    ab = multiply(a, b)
    assert len(ab) == len(a) + len(b) - 1
    assert ab == multiply(b, a)


def test_multiply_by_one_and_by_x():
    a = [4, 8, 15, 16, 23, 42]
    assert multiply(a, [1]) == a
    assert multiply(a, [0, 1]) == [0] + a


def test_multiply_by_constant():
    a = [1, 2, 3, MOD - 1]
    c = 7
    assert multiply(a, [c]) == [v * c % MOD for v in a]


def test_multiply_associative():
    a, b, c = [1, 2], [3, 4, 5], [6, 7, 8, 9]
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


def test_multiply_empty_rejected():
    with pytest.raises(ValueError):
        multiply([], [1])


def test_multiply_all_matches_pairwise():
    polys = [[1, 1], [2, 3], [5, 0, 1], [7]]
    expected = multiply(multiply(multiply(polys[0], polys[1]), polys[2]), polys[3])
    assert multiply_all(polys) == expected


def test_multiply_all_single_and_empty():
    assert multiply_all([[9, 8, 7]]) == [9, 8, 7]
    with pytest.raises(ValueError):
        multiply_all([])


def test_matrix_identity():
    m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    ident = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_mul(m, ident) == m
    assert matrix_mul(ident, m) == m


def test_matrix_associative_and_reduced():
    mod = 1000
    a = [[123, 456], [789, 12]]
    b = [[345, 678], [901, 234]]
    c = [[567, 890], [111, 222]]
    left = matrix_mul(matrix_mul(a, b, mod), c, mod)
    right = matrix_mul(a, matrix_mul(b, c, mod), mod)
    assert left == right
    assert all(0 <= v < mod for row in left for v in row)


def test_matrix_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_mul([[1, 2]], [[1, 2]])