import pytest
from hypothesis import given, strategies as st

from algokit.trie import SearchResult, Trie

words_strategy = st.lists(st.text(alphabet="abc", min_size=1, max_size=5), max_size=15)


@pytest.fixture
def trie():
    t = Trie()
    for word in ["apple", "app", "bat"]:
        t.insert(word)
    return t


def test_search_full_word(trie):
    assert trie.search("app") == SearchResult(len("app"), True)


def test_search_prefix_only(trie):
    assert trie.search("ap") == SearchResult(len("ap"), False)


def test_search_missing(trie):
    assert trie.search("cat") is None
    assert trie.search("apples") is None


def test_search_empty_key(trie):
    assert trie.search("") == SearchResult(0, False)


def test_prefix_count(trie):
    assert trie.prefix_count("app") == 2
    assert trie.prefix_count("b") == 1
    assert trie.prefix_count("z") == 0
    assert trie.prefix_count("") == 3


def test_rejects_other_characters(trie):
    with pytest.raises(ValueError):
        trie.insert("Hello")
    with pytest.raises(ValueError):
        trie.search("a1")


@given(words_strategy, st.text(alphabet="abc", max_size=4))
def test_prefix_count_matches_word_list(words, prefix):
    t = Trie()
    for w in words:
        t.insert(w)
    assert t.prefix_count(prefix) == sum(w.startswith(prefix) for w in words)


@given(words_strategy, st.text(alphabet="abc", min_size=1, max_size=5))
def test_search_agrees_with_word_list(words, key):
    t = Trie()
    for w in words:
        t.insert(w)
    result = t.search(key)
    if any(w.startswith(key) for w in words):
        assert result == SearchResult(len(key), key in words)
    else:
        assert result is None