"""Tries over bits of integers and over characters of words."""

from __future__ import annotations

from dataclasses import dataclass, field


class BinaryTrie:
    """Stores non-negative 31-bit integers and finds the largest XOR with a key."""

    BITS = 31

    def __init__(self) -> None:
        self._root: list = [None, None]

    def _check(self, value: int) -> None:
        if not 0 <= value < (1 << self.BITS):
            raise ValueError(f"{value} is not a non-negative {self.BITS}-bit integer")

    def insert(self, value: int) -> None:
        """Add ``value`` to the trie."""
        self._check(value)
        node = self._root
        for i in reversed(range(self.BITS)):
            bit = (value >> i) & 1
            if node[bit] is None:
                node[bit] = [None, None]
            node = node[bit]

    def max_xor(self, key: int) -> int:
        """Return the largest ``key ^ v`` over the stored values ``v``."""
        self._check(key)
        if self._root[0] is None and self._root[1] is None:
            raise ValueError("the trie is empty")
        node = self._root
        best = 0
        for i in reversed(range(self.BITS)):
            bit = (key >> i) & 1
            if node[1 - bit] is not None:
                node = node[1 - bit]
                best |= 1 << i
            else:
                node = node[bit]
        return best


@dataclass
class TrieNode:
    """A node of a character trie; ``count`` is the number of words passing through."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    is_word: bool = False
    count: int = 0


class CharTrie:
    """Word set with prefix counting."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word``; every node along its path counts it once more."""
        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, TrieNode())
            node.count += 1
        node.is_word = True

    def search(self, key: str) -> bool:
        """Tell whether ``key`` was inserted as a whole word."""
        node = self.find(key)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> int:
        """Return how many inserted words start with a non-empty ``prefix``."""
        node = self.find(prefix)
        return 0 if node is None else node.count

    def prefix_count_sum(self, key: str) -> int:
        """Return the sum of ``starts_with`` over every non-empty prefix of ``key``."""
        node = self.root
        total = 0
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                break
            total += node.count
        return total

    def find(self, key: str) -> TrieNode | None:
        """Return the node reached by ``key``, or None if no word has that prefix."""
        node: TrieNode | None = self.root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node