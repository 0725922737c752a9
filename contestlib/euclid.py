"""Extended Euclidean algorithm and linear Diophantine equations."""

from __future__ import annotations


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero, and the matching remainder."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a * x + b * y == g``."""
    if b == 0:
        return a, 1, 0
    q, r = _trunc_divmod(a, b)
    g, x1, y1 = extended_gcd(b, r)
    return g, y1, x1 - y1 * q


def find_any_solution(a: int, b: int, c: int) -> tuple[int, int, int] | None:
    """Solve ``a * x + b * y == c``; return ``(x, y, g)`` or None if unsolvable."""
    if a == 0 and b == 0:
        raise ValueError("a and b cannot both be zero")
    g, x0, y0 = extended_gcd(abs(a), abs(b))
    if c % g:
        return None
    k = c // g
    x0 *= k
    y0 *= k
    if a < 0:
        x0 = -x0
    if b < 0:
        y0 = -y0
    return x0, y0, g