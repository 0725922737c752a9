"""Sparse table for constant-time range minimum queries."""

from __future__ import annotations

from collections.abc import Iterable


def msb(n: int) -> int:
    """Index of the highest set bit of a positive ``n``."""
    if n <= 0:
        raise ValueError("n must be positive")
    return n.bit_length() - 1


class SparseTable:
    """Range minimum over a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        row = list(values)
        self.n = len(row)
        self._table = [row]
        step = 1
        while 2 * step <= self.n:
            row = [min(row[i], row[i + step]) for i in range(len(row) - step)]
            self._table.append(row)
            step *= 2

    def query(self, l: int, r: int) -> int:
        """Minimum of positions ``l..r`` (0-based, inclusive)."""
        if not 0 <= l <= r < self.n:
            raise IndexError(f"range {l}..{r} invalid for length {self.n}")
        j = msb(r - l + 1)
        row = self._table[j]
        return min(row[l], row[r - (1 << j) + 1])