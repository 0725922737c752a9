"""Polynomial multiplication by number-theoretic transform, and matrix products."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 998244353
G = 3
MATRIX_MOD = 10**9 + 7


def power(x: int, n: int, mod: int = MOD) -> int:
    """Return ``x ** n`` modulo the prime ``mod``, reducing the exponent by Fermat."""
    if n == 0:
        return 1
    if x % mod == 0:
        return 0
    return pow(x, n % (mod - 1), mod)


def inverse(n: int, mod: int = MOD) -> int:
    """Return the inverse of ``n`` modulo the prime ``mod``."""
    if n % mod == 0:
        raise ValueError(f"{n} has no inverse modulo {mod}")
    return pow(n, -1, mod)


def ntt(values: Sequence[int], invert: bool = False) -> list[int]:
    """Return the transform of ``values``, whose length must be a power of two."""
    a = [v % MOD for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")

    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            a[i], a[j] = a[j], a[i]

    half = 1
    while half < n:
        step = half << 1
        exponent = (MOD - 1) // step
        if invert:
            exponent = (MOD - 1) - exponent
        wn = power(G, exponent, MOD)
        for start in range(0, n, step):
            w = 1
            for k in range(start, start + half):
                x = a[k]
                y = w * a[k + half] % MOD
                a[k] = (x + y) % MOD
                a[k + half] = (x - y) % MOD
                w = w * wn % MOD
        half = step

    if invert:
        r = inverse(n, MOD)
        a = [v * r % MOD for v in a]
    return a


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the coefficients of the product of two polynomials modulo ``MOD``."""
    if not a or not b:
        raise ValueError("polynomials must have at least one coefficient")
    total = len(a) + len(b) - 1
    size = 1
    while size < total:
        size <<= 1
    fa = ntt(list(a) + [0] * (size - len(a)))
    fb = ntt(list(b) + [0] * (size - len(b)))
    product = [x * y % MOD for x, y in zip(fa, fb)]
    return ntt(product, invert=True)[:total]


def multiply_all(polys: Sequence[Sequence[int]]) -> list[int]:
    """Return the product of all polynomials, combined pairwise by halves."""
    polys = list(polys)
    if not polys:
        raise ValueError("at least one polynomial is required")

    def product(lo: int, hi: int) -> list[int]:
        if lo == hi:
            return list(polys[lo])
        mid = (lo + hi) // 2
        return multiply(product(lo, mid), product(mid + 1, hi))

    return product(0, len(polys) - 1)


def matrix_mul(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = MATRIX_MOD
) -> list[list[int]]:
    """Return the product of two matrices with every entry reduced modulo ``mod``."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("column count of a must equal row count of b")
    if b and any(len(row) != len(b[0]) for row in b):
        raise ValueError("b must be rectangular")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % mod for col in columns] for row in a]