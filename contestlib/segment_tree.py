"""Segment trees with lazy range assignment."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any


class _AssignTree:
    """Lazy range-assignment tree; subclasses say how node summaries combine."""

    _empty: Any = 0

    def __init__(self, values: Iterable[int]) -> None:
        vals = list(values)
        if not vals:
            raise ValueError("at least one value is required")
        self.n = len(vals)
        self._node: list[Any] = [self._empty] * (4 * self.n)
        self._lazy: list[int | None] = [None] * (4 * self.n)
        self._build(0, 0, self.n - 1, vals)

    def _leaf(self, value: int) -> Any:
        return value

    def _merge(self, left: Any, right: Any) -> Any:
        raise NotImplementedError

    def _fill(self, value: int, count: int) -> Any:
        raise NotImplementedError

    def _build(self, k: int, i: int, j: int, vals: list[int]) -> None:
        if i == j:
            self._node[k] = self._leaf(vals[i])
            return
        mid = (i + j) >> 1
        self._build(2 * k + 1, i, mid, vals)
        self._build(2 * k + 2, mid + 1, j, vals)
        self._node[k] = self._merge(self._node[2 * k + 1], self._node[2 * k + 2])

    def _apply(self, k: int, i: int, j: int, value: int) -> None:
        self._node[k] = self._fill(value, j - i + 1)
        self._lazy[k] = value

    def _push(self, k: int, i: int, j: int) -> None:
        value = self._lazy[k]
        if value is None or i == j:
            return
        mid = (i + j) >> 1
        self._apply(2 * k + 1, i, mid, value)
        self._apply(2 * k + 2, mid + 1, j, value)
        self._lazy[k] = None

    def _assign(self, l: int, r: int, value: int) -> None:
        def go(k: int, i: int, j: int) -> None:
            if l > j or r < i:
                return
            if l <= i and j <= r:
                self._apply(k, i, j, value)
                return
            self._push(k, i, j)
            mid = (i + j) >> 1
            go(2 * k + 1, i, mid)
            go(2 * k + 2, mid + 1, j)
            self._node[k] = self._merge(self._node[2 * k + 1], self._node[2 * k + 2])

        go(0, 0, self.n - 1)

    def _query(self, l: int, r: int) -> Any:
        def go(k: int, i: int, j: int) -> Any:
            if l > j or r < i:
                return self._empty
            if l <= i and j <= r:
                return self._node[k]
            self._push(k, i, j)
            mid = (i + j) >> 1
            return self._merge(go(2 * k + 1, i, mid), go(2 * k + 2, mid + 1, j))

        return go(0, 0, self.n - 1)


class XorSegmentTree(_AssignTree):
    """Range XOR, point reads, range assignment and first-at-least search."""

    _empty = (0, -math.inf)

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values)

    def _leaf(self, value: int) -> tuple[int, float]:
        return value, value

    def _merge(self, left: tuple, right: tuple) -> tuple:
        return left[0] ^ right[0], max(left[1], right[1])

    def _fill(self, value: int, count: int) -> tuple:
        return (value if count % 2 else 0), value

    def range_xor(self, l: int, r: int) -> int:
        """XOR of positions ``l..r`` (0-based, inclusive)."""
        return self._query(l, r)[0]

    def point_get(self, index: int) -> int:
        """Value at ``index``."""
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} outside 0..{self.n - 1}")
        return self._query(index, index)[0]

    def range_assign(self, l: int, r: int, value: int) -> None:
        """Set every position in ``l..r`` to ``value``."""
        self._assign(l, r, value)

    def find_first(self, value: int) -> int | None:
        """First index holding at least ``value``, or None."""
        if self._node[0][1] < value:
            return None
        k, i, j = 0, 0, self.n - 1
        while i != j:
            self._push(k, i, j)
            mid = (i + j) >> 1
            if self._node[2 * k + 1][1] >= value:
                k, j = 2 * k + 1, mid
            else:
                k, i = 2 * k + 2, mid + 1
        return i


class SumSegmentTree(_AssignTree):
    """Range sums with lazy range assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values)

    def _merge(self, left: int, right: int) -> int:
        return left + right

    def _fill(self, value: int, count: int) -> int:
        return value * count

    def update(self, l: int, r: int, value: int) -> None:
        """Set every position in ``l..r`` (0-based, inclusive) to ``value``."""
        self._assign(l, r, value)

    def sum(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``; 0 when ``l > r``."""
        return 0 if l > r else self._query(l, r)