import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.lcs import SumHashedString, longest_common_substring

small_text = st.text(alphabet="abc", max_size=12)


def _brute_lcs(a, b):
    best = 0
    for i in range(len(a)):
        for j in range(i + 1, len(a) + 1):
            if a[i:j] in b:
                best = max(best, j - i)
    return best


def test_equal_substrings_hash_equal():
    hs = SumHashedString("abcababcab")
    assert hs.get_hash(0, 4) == hs.get_hash(5, 9)


def test_hash_is_position_independent():
    assert SumHashedString("xyab").get_hash(2, 3) == SumHashedString("ab").full_hash()


def test_full_hash_is_whole_range():
    hs = SumHashedString("hello")
    assert hs.full_hash() == hs.get_hash(0, 4)


def test_distinct_substrings_hash_differently():
    words = ["a", "b", "ab", "ba", "aa", "abc", "acb", "cab"]
    hashes = {SumHashedString(w).full_hash() for w in words}
    assert len(hashes) == len(words)


@given(small_text, small_text)
def test_hash_equality_matches_text_equality(a, b):
    if a and b:
        same = SumHashedString(a).full_hash() == SumHashedString(b).full_hash()
        assert same == (a == b)
    else:
        assert longest_common_substring(a, b) == 0


def test_invalid_range_raises():
    hs = SumHashedString("abc")
    with pytest.raises(IndexError):
        hs.get_hash(1, 3)
    with pytest.raises(IndexError):
        hs.get_hash(2, 1)


def test_empty_full_hash_raises():
    with pytest.raises(IndexError):
        SumHashedString("").full_hash()


def test_length_of_hashed_string():
    assert len(SumHashedString("abcd")) == 4


def test_no_common_characters():
    assert longest_common_substring("abc", "xyz") == 0


def test_empty_input():
    assert longest_common_substring("", "abc") == 0


@given(st.text(alphabet="abcd", max_size=20))
def test_string_with_itself(s):
    assert longest_common_substring(s, s) == len(s)


@given(small_text, small_text)
def test_matches_brute_force(a, b):
    assert longest_common_substring(a, b) == _brute_lcs(a, b)


@given(small_text, small_text)
def test_symmetric(a, b):
    assert longest_common_substring(a, b) == longest_common_substring(b, a)


@given(small_text, small_text, small_text)
def test_shared_infix_is_lower_bound(prefix, common, suffix):
    assert longest_common_substring(prefix + common, common + suffix) >= len(common)