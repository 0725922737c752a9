"""Pattern counting by prefix function and by a prefix-function automaton."""

from __future__ import annotations

from string import ascii_lowercase

ALPHABET = ascii_lowercase


def prefix_function(s: str) -> list[int]:
    """Return ``pi`` where ``pi[i]`` is the longest proper border of ``s[:i + 1]``."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def kmp_count(text: str, pattern: str) -> int:
    """Return the number of (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    m = len(pattern)
    count = j = 0
    for ch in text:
        while j > 0 and ch != pattern[j]:
            j = pi[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == m:
            count += 1
            j = pi[j - 1]
    return count


def compute_automaton(pattern: str) -> list[list[int]]:
    """Return the transition table over lowercase letters for ``pattern + '#'``.

    Row ``i`` column ``c`` is the matched length after reading letter ``c``
    in state ``i``.
    """
    s = pattern + "#"
    pi = prefix_function(s)
    aut: list[list[int]] = []
    for i, ch in enumerate(s):
        if i == 0:
            row = [int(c == ch) for c in ALPHABET]
        else:
            fallback = aut[pi[i - 1]]
            row = [i + 1 if c == ch else fallback[k] for k, c in enumerate(ALPHABET)]
        aut.append(row)
    return aut


def automaton_count(text: str, pattern: str) -> int:
    """Count occurrences of ``pattern`` in a lowercase ``text`` using the automaton."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    aut = compute_automaton(pattern)
    m = len(pattern)
    count = state = 0
    for ch in text:
        index = ord(ch) - ord("a")
        if not 0 <= index < len(ALPHABET):
            raise ValueError(f"text character {ch!r} is not a lowercase letter")
        state = aut[state][index]
        if state == m:
            count += 1
    return count