"""A prefix tree over lower-case Latin words."""

from dataclasses import dataclass, field
from string import ascii_lowercase
from typing import Optional

__all__ = ["Trie", "SearchResult"]

_ALPHABET = frozenset(ascii_lowercase)


@dataclass
class _Node:
    children: dict = field(default_factory=dict)
    prefix_count: int = 0
    is_word: bool = False


@dataclass(frozen=True)
class SearchResult:
    """Outcome of following a key down the trie."""

    depth: int
    is_word: bool


def _check(key: str) -> None:
    if not set(key) <= _ALPHABET:
        raise ValueError(f"only letters a-z are allowed: {key!r}")


class Trie:
    """Prefix tree that counts how many inserted words pass each node."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add word; inserting it again counts it again."""
        _check(word)
        node = self._root
        node.prefix_count += 1
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.prefix_count += 1
        node.is_word = True

    def search(self, key: str) -> Optional[SearchResult]:
        """Follow key; return None if its path is absent.

        The depth reached equals len(key); is_word tells whether a
        non-empty key was inserted as a whole word.
        """
        _check(key)
        node = self._root
        is_word = False
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
            is_word = node.is_word
        return SearchResult(len(key), is_word)

    def prefix_count(self, prefix: str) -> int:
        """Return how many inserted words start with prefix."""
        _check(prefix)
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return 0
        return node.prefix_count