"""Prime sieves and factorisation by smallest prime factor."""

from __future__ import annotations

import math
from collections.abc import Mapping, MutableMapping


def prime_sieve(n: int) -> list[bool]:
    """Entry ``i`` tells whether ``i`` is prime, for ``0..n``."""
    is_prime = [i >= 2 for i in range(n + 1)]
    for i in range(2, math.isqrt(n) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return is_prime


def min_prime_factor_sieve(n: int) -> list[int]:
    """Smallest prime factor of every ``i`` in ``0..n``; 0 and 1 map to themselves."""
    spf = list(range(n + 1))
    for i in range(2, math.isqrt(n) + 1):
        if spf[i] == i:
            for j in range(i * i, n + 1, i):
                if spf[j] == j:
                    spf[j] = i
    return spf


class Factorizer:
    """Factorises integers up to ``limit`` with a smallest-prime-factor table."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self._spf = min_prime_factor_sieve(limit)

    def factorize(self, x: int) -> dict[int, int]:
        """Return ``{prime: exponent}`` for ``x``, primes ascending."""
        if x > self.limit:
            raise ValueError(f"{x} exceeds the sieve limit {self.limit}")
        factors: dict[int, int] = {}
        while x > 1:
            p = self._spf[x]
            while x % p == 0:
                x //= p
                factors[p] = factors.get(p, 0) + 1
        return factors

    def add_factors(self, factors: MutableMapping[int, int], x: int) -> None:
        """Multiply the number described by ``factors`` by ``x``, in place."""
        for p, e in self.factorize(x).items():
            factors[p] = factors.get(p, 0) + e

    def divides(self, factors: Mapping[int, int], x: int) -> bool:
        """Tell whether ``x`` divides the number described by ``factors``."""
        if x <= 0:
            raise ValueError("x must be positive")
        for p, count in factors.items():
            while count and x % p == 0:
                count -= 1
                x //= p
        return x == 1


def divisor_count(factors: Mapping[int, int]) -> int:
    """Number of divisors of the number described by ``factors``."""
    return math.prod(e + 1 for e in factors.values())