"""All-pairs shortest paths and lowest common ancestors by binary lifting."""

from __future__ import annotations

import math
from collections.abc import Sequence


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances; ``math.inf`` marks a missing edge."""
    d = [list(row) for row in dist]
    n = len(d)
    if any(len(row) != n for row in d):
        raise ValueError("distance matrix must be square")
    for k in range(n):
        through = d[k]
        for row in d:
            to_k = row[k]
            if to_k < math.inf:
                row[:] = [min(cur, to_k + via) for cur, via in zip(row, through)]
    return d


class BinaryLifting:
    """Ancestor and lowest-common-ancestor queries on a rooted tree."""

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        self.n = len(adj)
        if not 0 <= root < self.n:
            raise IndexError(f"root {root} outside 0..{self.n - 1}")
        self._log = max(1, self.n.bit_length())
        self._tin = [0] * self.n
        self._tout = [0] * self.n
        self._up = [[root] * (self._log + 1) for _ in range(self.n)]
        timer = 0

        def enter(v: int, parent: int) -> None:
            nonlocal timer
            timer += 1
            self._tin[v] = timer
            up = self._up[v]
            up[0] = parent
            for i in range(1, self._log + 1):
                up[i] = self._up[up[i - 1]][i - 1]

        enter(root, root)
        stack = [(root, root, iter(adj[root]))]
        while stack:
            v, parent, children = stack[-1]
            for u in children:
                if u == parent:
                    continue
                if self._tin[u]:
                    raise ValueError("the graph contains a cycle")
                enter(u, v)
                stack.append((u, v, iter(adj[u])))
                break
            else:
                stack.pop()
                timer += 1
                self._tout[v] = timer
        if not all(self._tin):
            raise ValueError("the tree must be connected")

    def is_ancestor(self, u: int, v: int) -> bool:
        """Tell whether ``u`` is an ancestor of ``v`` (a node is its own ancestor)."""
        for node in (u, v):
            if not 0 <= node < self.n:
                raise IndexError(f"node {node} outside 0..{self.n - 1}")
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for i in range(self._log, -1, -1):
            if not self.is_ancestor(self._up[u][i], v):
                u = self._up[u][i]
        return self._up[u][0]