import pytest
from hypothesis import given, strategies as st

from algokit.zfunc import z_function, z_match

small_text = st.text(alphabet="ab", max_size=12)


def _occurrences(pattern, text):
    return [i for i in range(len(text)) if text.startswith(pattern, i)]


def test_match_worked_example():
    assert z_match("aba", "abcababa") == [3, 5]


def test_z_of_repeated_letter():
    assert z_function("aaaaa") == [0, 4, 3, 2, 1]


def test_match_separator_character_is_ordinary():
    assert z_match("$", "a$b$") == [1, 3]


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        z_match("", "abc")


def test_empty_input():
    assert z_function("") == []


@given(small_text)
def test_z_values_are_maximal_prefixes(s):
    z = z_function(s)
    assert len(z) == len(s)
    for i in range(1, len(s)):
        k = z[i]
        assert s[:k] == s[i : i + k]
        assert i + k == len(s) or s[k] != s[i + k]


@given(st.text(alphabet="ab", min_size=1, max_size=4), small_text)
def test_match_agrees_with_startswith(pattern, text):
    assert z_match(pattern, text) == _occurrences(pattern, text)


@given(st.lists(st.integers(0, 2), max_size=10))
def test_works_on_lists(items):
    z = z_function(items)
    for i in range(1, len(items)):
        assert items[: z[i]] == items[i : i + z[i]]