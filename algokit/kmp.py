"""Prefix-function (Knuth-Morris-Pratt) string algorithms."""

from collections.abc import Sequence

__all__ = [
    "prefix_function",
    "kmp_match",
    "prefix_occurrence_counts",
    "count_unique_substrings",
    "period",
]

# Never equal to any element of a pattern or text.
_SEPARATOR = object()


def prefix_function(s: Sequence) -> list[int]:
    """Return pi, where pi[i] is the longest proper border of s[:i + 1]."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def _joined(pattern: Sequence, text: Sequence) -> list:
    return [*pattern, _SEPARATOR, *text]


def kmp_match(pattern: Sequence, text: Sequence) -> list[int]:
    """Return the start indices of every occurrence of pattern in text."""
    n = len(pattern)
    if n == 0:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(_joined(pattern, text))
    return [i - 2 * n for i, border in enumerate(pi) if border == n]


def prefix_occurrence_counts(pattern: Sequence, text: Sequence) -> list[int]:
    """Count, for each k, how often pattern[:k] occurs in text.

    Entry 0 counts every position of the separated text, that is
    len(text) + 1.
    """
    joined = _joined(pattern, text)
    pi = prefix_function(joined)
    limit = len(pattern) + 1
    counts = [1 if node >= limit else 0 for node in range(len(joined) + 1)]
    # The parent of node j in the prefix tree is pi[j - 1] < j.
    for node in range(len(joined), 0, -1):
        counts[pi[node - 1]] += counts[node]
    return counts[:limit]


def count_unique_substrings(s: Sequence) -> int:
    """Return the number of distinct non-empty substrings of s."""
    total = 0
    for end in range(1, len(s) + 1):
        pi = prefix_function(s[:end][::-1])
        total += end - max(pi)
    return total


def period(s: Sequence) -> Sequence:
    """Return the shortest block that repeated whole times gives s."""
    if not s:
        raise ValueError("period of an empty sequence is undefined")
    n = len(s)
    k = n - prefix_function(s)[-1]
    return s[:k] if n % k == 0 else s