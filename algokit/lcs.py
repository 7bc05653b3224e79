"""Longest common substring by double polynomial hashing and binary search."""

from itertools import accumulate

__all__ = ["SumHashedString", "longest_common_substring"]

_P1, _MOD1 = 137, 127657753
_P2, _MOD2 = 277, 987654319


def _powers(base: int, mod: int, count: int) -> list[int]:
    return list(accumulate(range(count - 1), lambda acc, _: acc * base % mod, initial=1))


class SumHashedString:
    """A string with prefix sums of c[k] * p**k under two moduli."""

    def __init__(self, text: str) -> None:
        self.text = text
        n = len(text)
        codes = [ord(c) for c in text]
        pow1 = _powers(_P1, _MOD1, n)
        pow2 = _powers(_P2, _MOD2, n)
        self._inv1 = _powers(pow(_P1, -1, _MOD1), _MOD1, n)
        self._inv2 = _powers(pow(_P2, -1, _MOD2), _MOD2, n)
        self._pref1 = list(
            accumulate(
                (c * p % _MOD1 for c, p in zip(codes, pow1)),
                lambda a, b: (a + b) % _MOD1,
                initial=0,
            )
        )
        self._pref2 = list(
            accumulate(
                (c * p % _MOD2 for c, p in zip(codes, pow2)),
                lambda a, b: (a + b) % _MOD2,
                initial=0,
            )
        )

    def __len__(self) -> int:
        return len(self.text)

    def get_hash(self, i: int, j: int) -> int:
        """Return the hash of text[i..j], both ends inclusive."""
        if not 0 <= i <= j < len(self.text):
            raise IndexError(f"invalid range [{i}, {j}] for length {len(self.text)}")
        h1 = (self._pref1[j + 1] - self._pref1[i]) % _MOD1 * self._inv1[i] % _MOD1
        h2 = (self._pref2[j + 1] - self._pref2[i]) % _MOD2 * self._inv2[i] % _MOD2
        return h1 * _MOD2 + h2

    def full_hash(self) -> int:
        """Return the hash of the whole text."""
        return self.get_hash(0, len(self.text) - 1)


def _shares_length(length: int, first: SumHashedString, second: SumHashedString) -> bool:
    seen = {first.get_hash(i, i + length - 1) for i in range(len(first) - length + 1)}
    return any(
        second.get_hash(i, i + length - 1) in seen
        for i in range(len(second) - length + 1)
    )


def longest_common_substring(first: str, second: str) -> int:
    """Return the length of the longest substring common to both strings."""
    a, b = SumHashedString(first), SumHashedString(second)
    lo, hi, best = 1, min(len(a), len(b)), 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if _shares_length(mid, a, b):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best