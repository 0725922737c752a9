"""Disjoint-set union with union by rank and path compression."""

from __future__ import annotations

import math


class DisjointSet:
    """Disjoint sets over the elements ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        if not 1 <= a <= self.n:
            raise IndexError(f"element {a} outside 1..{self.n}")
        parent = self._parent
        root = a
        while parent[root] != root:
            root = parent[root]
        while parent[a] != root:
            parent[a], a = root, parent[a]
        return root

    def _link(self, a: int, b: int) -> tuple[int, int] | None:
        """Join the sets of ``a`` and ``b``; return ``(kept, absorbed)`` roots."""
        pa, pb = self.find(a), self.find(b)
        if pa == pb:
            return None
        if self._rank[pa] < self._rank[pb]:
            pa, pb = pb, pa
        elif self._rank[pa] == self._rank[pb]:
            self._rank[pa] += 1
        self._parent[pb] = pa
        return pa, pb

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if already joined."""
        return self._link(a, b) is not None


class WeightedDisjointSet(DisjointSet):
    """Disjoint sets tracking the smallest and largest edge weight per component."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._min = [math.inf] * (n + 1)
        self._max = [-math.inf] * (n + 1)

    def find(self, a: int) -> int:
        """Return the representative of the component holding ``a``."""
        return super().find(a)

    def union(self, a: int, b: int, weight: int) -> bool:
        """Join ``a`` and ``b`` by an edge of ``weight``; False if already joined."""
        linked = self._link(a, b)
        kept, absorbed = linked if linked else (self.find(a), self.find(a))
        self._min[kept] = min(weight, self._min[kept], self._min[absorbed])
        self._max[kept] = max(weight, self._max[kept], self._max[absorbed])
        return linked is not None

    def min_plus_max(self, a: int) -> int:
        """Sum of the smallest and largest edge weight in ``a``'s component."""
        root = self.find(a)
        if self._min[root] == math.inf:
            raise ValueError(f"the component of {a} has no edges")
        return self._min[root] + self._max[root]