"""Fenwick (binary indexed) trees in one and two dimensions."""

from __future__ import annotations


class FenwickTree:
    """Point updates and prefix sums over positions ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._tree = [0] * (n + 1)

    def update(self, idx: int, val: int) -> None:
        """Add ``val`` at position ``idx``."""
        if not 1 <= idx <= self.n:
            raise IndexError(f"index {idx} outside 1..{self.n}")
        while idx <= self.n:
            self._tree[idx] += val
            idx += idx & -idx

    def prefix_sum(self, idx: int) -> int:
        """Sum of positions ``1..idx``; 0 when ``idx`` is below 1."""
        total = 0
        while idx > 0:
            total += self._tree[idx]
            idx -= idx & -idx
        return total


class FenwickTree2D:
    """Point updates and rectangle sums over the grid ``1..n`` by ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._tree = [[0] * (n + 1) for _ in range(n + 1)]

    def update(self, x: int, y: int, val: int) -> None:
        """Add ``val`` at the point ``(x, y)``."""
        if not (1 <= x <= self.n and 1 <= y <= self.n):
            raise IndexError(f"point ({x}, {y}) outside the {self.n}x{self.n} grid")
        while x <= self.n:
            row, j = self._tree[x], y
            while j <= self.n:
                row[j] += val
                j += j & -j
            x += x & -x

    def prefix_sum(self, x: int, y: int) -> int:
        """Sum over the rectangle ``(1, 1)..(x, y)``."""
        if x <= 0 or y <= 0:
            return 0
        total = 0
        while x > 0:
            row, j = self._tree[x], y
            while j > 0:
                total += row[j]
                j -= j & -j
            x -= x & -x
        return total

    def range_sum(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum over the rectangle ``(x1, y1)..(x2, y2)``."""
        return (
            self.prefix_sum(x2, y2)
            + self.prefix_sum(x1 - 1, y1 - 1)
            - self.prefix_sum(x2, y1 - 1)
            - self.prefix_sum(x1 - 1, y2)
        )