"""Polynomial double hashing of a text and its substrings."""

from __future__ import annotations

from contestlib.modular import mod_inverse

BASE = 29
MOD1 = 10**9 + 7
MOD2 = 10**9 + 9
MODS = (MOD1, MOD2)


def _code(ch: str) -> int:
    return ord(ch) - ord("a")


class DoubleHash:
    """Hashes under two moduli; letter ``a`` has value 0, powers grow left to right."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._powers: list[list[int]] = []
        self._prefix: list[list[int]] = []
        for mod in MODS:
            powers = [1]
            prefix = [0]
            for ch in text:
                prefix.append((prefix[-1] + _code(ch) * powers[-1]) % mod)
                powers.append(powers[-1] * BASE % mod)
            self._powers.append(powers)
            self._prefix.append(prefix)

    def __len__(self) -> int:
        return len(self.text)

    def hash_of(self, pattern: str) -> tuple[int, int]:
        """Return the hash pair of an arbitrary string."""
        result = []
        for mod in MODS:
            h, p = 0, 1
            for ch in pattern:
                h = (h + _code(ch) * p) % mod
                p = p * BASE % mod
            result.append(h)
        return result[0], result[1]

    def substring_hash(self, l: int, r: int) -> tuple[int, int]:
        """Return the hash pair of ``text[l - 1:r]`` (1-based, inclusive)."""
        if not 1 <= l <= r <= len(self.text):
            raise IndexError(f"range {l}..{r} invalid for length {len(self.text)}")
        result = []
        for mod, powers, prefix in zip(MODS, self._powers, self._prefix):
            diff = (prefix[r] - prefix[l - 1]) % mod
            result.append(diff * mod_inverse(powers[l - 1], mod) % mod)
        return result[0], result[1]