"""Modular arithmetic helpers: exponentiation, inverses and binomials."""

from __future__ import annotations

MOD = 10**9 + 7

BIG_PRIMES: tuple[int, ...] = (
    1000500773, 1000500799, 1000500811, 1000500859, 1000500889,
    1000500923, 1000500929, 1000500931, 1000500959, 1000500967,
    1000501003, 1000501013, 1000501043, 1000501063, 1000501067,
    1000501091, 1000501111, 1000501123, 1000501129, 1000501157,
    1000501163, 1000501217, 1000501237, 1000501241, 1000501279,
    1000501309, 1000501331, 1000501351, 1000501379, 1000501433,
    1000501441, 1000501451, 1000501507, 1000501529, 1000501531,
    1000501543, 1000501559, 1000501577, 1000501591, 1000501603,
    1000501631, 1000501651, 1000501669, 1000501673, 1000501699,
    1000501703, 1000501709, 1000501751, 1000501759, 1000501783,
)


def binpow(a: int, b: int, mod: int = MOD) -> int:
    """Return ``a ** b`` modulo ``mod``; any base to the power zero is 1."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if b == 0:
        return 1
    return pow(a, b, mod)


def mod_inverse(a: int, mod: int = MOD) -> int:
    """Return the multiplicative inverse of ``a`` modulo ``mod``."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    if mod == 1:
        return 0
    try:
        return pow(a, -1, mod)
    except ValueError:
        raise ValueError(f"{a} has no inverse modulo {mod}") from None


def add(a: int, b: int, mod: int = MOD) -> int:
    """Return ``(a + b) mod mod`` in the range ``[0, mod)``."""
    return (a + b) % mod


def sub(a: int, b: int, mod: int = MOD) -> int:
    """Return ``(a - b) mod mod`` in the range ``[0, mod)``."""
    return (a - b) % mod


def mul(a: int, b: int, mod: int = MOD) -> int:
    """Return ``(a * b) mod mod`` in the range ``[0, mod)``."""
    return (a % mod) * (b % mod) % mod


def div(a: int, b: int, mod: int = MOD) -> int:
    """Return ``a`` times the modular inverse of ``b``."""
    return (a % mod) * mod_inverse(b % mod, mod) % mod


class Factorials:
    """Precomputed factorials modulo a prime, for binomial coefficients."""

    def __init__(self, limit: int = 200000, mod: int = MOD) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.mod = mod
        table = [1] * (limit + 1)
        for i in range(1, limit + 1):
            table[i] = table[i - 1] * i % mod
        self._fact = table

    def ncr(self, n: int, r: int) -> int:
        """Return C(n, r) modulo the prime; 0 when ``r > n``."""
        if r > n:
            return 0
        if r < 0:
            raise ValueError("r must be non-negative")
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the precomputed limit {self.limit}")
        denom = self._fact[n - r] * self._fact[r] % self.mod
        return self._fact[n] * mod_inverse(denom, self.mod) % self.mod