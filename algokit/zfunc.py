"""Z-function and pattern matching built on it."""

from collections.abc import Sequence

__all__ = ["z_function", "z_match"]

_SEPARATOR = object()


def z_function(s: Sequence) -> list[int]:
    """Return z, where z[i] is the longest common prefix of s and s[i:].

    z[0] is 0 by convention.
    """
    n = len(s)
    z = [0] * n
    x = y = 0
    for i in range(1, n):
        k = max(0, min(z[i - x], y - i + 1))
        while i + k < n and s[k] == s[i + k]:
            x, y = i, i + k
            k += 1
        z[i] = k
    return z


def z_match(pattern: Sequence, text: Sequence) -> list[int]:
    """Return the start indices of every occurrence of pattern in text."""
    n = len(pattern)
    if n == 0:
        raise ValueError("pattern must not be empty")
    z = z_function([*pattern, _SEPARATOR, *text])
    return [i - (n + 1) for i, length in enumerate(z) if i > n and length == n]