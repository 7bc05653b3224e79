"""Manacher's algorithm for palindromic radii."""

from collections.abc import Sequence
from itertools import chain

__all__ = ["manacher_odd", "manacher", "longest_palindrome"]

_LEFT = object()
_RIGHT = object()
_GAP = object()


def manacher_odd(s: Sequence) -> list[int]:
    """Return, for each centre i, the largest k with s[i-k:i+k+1] a palindrome."""
    n = len(s)
    t = [_LEFT, *s, _RIGHT]
    p = [0] * (n + 2)
    left = right = 1
    for i in range(1, n + 1):
        k = max(0, min(right - i, p[left + right - i]))
        while t[i - k] == t[i + k]:
            k += 1
        if i + k > right:
            left, right = i - k, i + k
        p[i] = k - 1
    return p[1 : n + 1]


def manacher(s: Sequence) -> list[int]:
    """Return palindrome lengths for all 2*len(s)+1 centres.

    Odd positions are centres on characters, even positions are gaps
    between them; each value is the length of the longest palindrome
    of s around that centre.
    """
    gapped = [_GAP, *chain.from_iterable((c, _GAP) for c in s)]
    return manacher_odd(gapped)


def longest_palindrome(s: Sequence) -> Sequence:
    """Return the leftmost longest palindromic substring of s."""
    if not s:
        return s[:0]
    start, length = 0, 1
    for i, radius in enumerate(manacher(s)):
        if radius > length:
            length = radius
            start = i // 2 - radius // 2
    return s[start : start + length]