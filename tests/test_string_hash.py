import pytest

from contestlib.string_hash import MOD1, MOD2, DoubleHash

TEXT = "abracadabra"


@pytest.fixture
def hasher():
    return DoubleHash(TEXT)


def test_single_letters_pinned(hasher):
    assert hasher.hash_of("") == (0, 0)
    assert hasher.hash_of("b") == (1, 1)


def test_whole_text_matches_hash_of(hasher):
    assert hasher.substring_hash(1, len(TEXT)) == hasher.hash_of(TEXT)


def test_every_substring_matches_hash_of(hasher):
    n = len(TEXT)
    for l in range(1, n + 1):
        for r in range(l, n + 1):
            assert hasher.substring_hash(l, r) == hasher.hash_of(TEXT[l - 1 : r])


def test_equal_substrings_equal_hashes(hasher):
    assert hasher.substring_hash(1, 4) == hasher.substring_hash(8, 11)


def test_different_substrings_differ(hasher):
    assert hasher.substring_hash(1, 3) != hasher.substring_hash(2, 4)
    assert hasher.hash_of("cab") != hasher.hash_of("bac")


def test_hash_values_in_range(hasher):
    n = len(TEXT)
    for l in range(1, n + 1):
        h1, h2 = hasher.substring_hash(l, n)
        assert 0 <= h1 < MOD1
        assert 0 <= h2 < MOD2


def test_pattern_longer_than_text(hasher):
    longer = TEXT * 3
    assert DoubleHash(longer).substring_hash(1, len(longer)) == hasher.hash_of(longer)


def test_invalid_ranges(hasher):
    with pytest.raises(IndexError):
        hasher.substring_hash(0, 3)
    with pytest.raises(IndexError):
        hasher.substring_hash(4, 3)
    with pytest.raises(IndexError):
        hasher.substring_hash(1, len(TEXT) + 1)


def test_length(hasher):
    assert len(hasher) == len(TEXT)