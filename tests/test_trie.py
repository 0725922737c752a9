import random

import pytest

from contestlib.trie import BinaryTrie, CharTrie

VALUES = [3, 10, 5, 25, 2, 8]
WORDS = ["apple", "app", "apply", "banana", "band", "bandana"]


@pytest.fixture
def binary_trie():
    trie = BinaryTrie()
    for v in VALUES:
        trie.insert(v)
    return trie


@pytest.fixture
def char_trie():
    trie = CharTrie()
    for w in WORDS:
        trie.insert(w)
    return trie


def test_max_xor_pinned(binary_trie):
    assert binary_trie.max_xor(5) == 28


def test_max_xor_is_attained_and_maximal():
    rng = random.Random(7)
    values = [rng.randrange(1 << 31) for _ in range(50)]
    trie = BinaryTrie()
    for v in values:
        trie.insert(v)
    for _ in range(50):
        key = rng.randrange(1 << 31)
        best = trie.max_xor(key)
        assert any(key ^ v == best for v in values)
        assert all(key ^ v <= best for v in values)


def test_max_xor_single_value():
    trie = BinaryTrie()
    trie.insert(12345)
    assert trie.max_xor(12345) == 0


def test_max_xor_empty_raises():
    with pytest.raises(ValueError):
        BinaryTrie().max_xor(1)


def test_binary_trie_range_checked():
    trie = BinaryTrie()
    with pytest.raises(ValueError):
        trie.insert(-1)
    with pytest.raises(ValueError):
        trie.insert(1 << 31)


def test_search(char_trie):
    for w in WORDS:
        assert char_trie.search(w)
    assert not char_trie.search("ap")
    assert not char_trie.search("apples")
    assert not char_trie.search("cherry")


def test_starts_with_counts_words(char_trie):
    for prefix in ["a", "app", "appl", "ban", "band", "bandan", "x", "applesauce"]:
        expected = sum(w.startswith(prefix) for w in WORDS)
        assert char_trie.starts_with(prefix) == expected


def test_starts_with_empty_prefix(char_trie):
    assert char_trie.starts_with("") == 0


def test_duplicate_words_counted(char_trie):
    char_trie.insert("app")
    assert char_trie.search("app")
    assert char_trie.starts_with("app") == sum(w.startswith("app") for w in WORDS) + 1


def test_prefix_count_sum_matches_starts_with(char_trie):
    for key in ["apply", "bandanas", "bx", "zzz", "b"]:
        expected = sum(char_trie.starts_with(key[:i]) for i in range(1, len(key) + 1))
        assert char_trie.prefix_count_sum(key) == expected


def test_find(char_trie):
    node = char_trie.find("band")
    assert node is not None and node.is_word
    assert node.count == sum(w.startswith("band") for w in WORDS)
    assert char_trie.find("bandx") is None
    assert char_trie.find("") is char_trie.root