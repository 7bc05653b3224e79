"""Double polynomial hashing and the string algorithms built on it.

Positions passed to HashedString and lcp are 1-based and both ends are
inclusive. A range with left == right + 1 is empty and hashes to (0, 0).
"""

from itertools import accumulate

__all__ = [
    "BASE",
    "MOD",
    "HashedString",
    "poly_hash",
    "lcp",
    "z_by_hashing",
    "prefix_by_hashing",
    "even_palindrome_radius",
    "odd_palindrome_radius",
    "longest_palindrome_by_hashing",
]

BASE = (211, 277)
MOD = (127657753, 987654319)

Hash = tuple[int, int]


def _power(k: int) -> Hash:
    if k < 0:
        raise ValueError("exponent must be non-negative")
    return pow(BASE[0], k, MOD[0]), pow(BASE[1], k, MOD[1])


def _step(current: Hash, code: int) -> Hash:
    return (
        (current[0] * BASE[0] + code) % MOD[0],
        (current[1] * BASE[1] + code) % MOD[1],
    )


def _prefix_hashes(codes) -> list[Hash]:
    return list(accumulate(codes, _step, initial=(0, 0)))


def poly_hash(s: str) -> Hash:
    """Return the double polynomial hash of the whole string."""
    return _prefix_hashes(ord(c) for c in s)[-1]


class HashedString:
    """A string with forward and reverse prefix hashes for O(1) range hashes."""

    def __init__(self, text: str) -> None:
        self.text = text
        n = len(text)
        self._forward = _prefix_hashes(ord(c) for c in text)
        self._reverse = _prefix_hashes(ord(c) for c in reversed(text))
        self._powers = list(
            accumulate(
                range(n),
                lambda acc, _: (acc[0] * BASE[0] % MOD[0], acc[1] * BASE[1] % MOD[1]),
                initial=(1, 1),
            )
        )

    def __len__(self) -> int:
        return len(self.text)

    def _check(self, left: int, right: int) -> None:
        if left < 1 or right > len(self.text) or left > right + 1:
            raise IndexError(
                f"invalid range [{left}, {right}] for length {len(self.text)}"
            )

    def _range(self, table: list[Hash], left: int, right: int) -> Hash:
        high, low = table[right], table[left - 1]
        weight = self._powers[right - left + 1]
        return (
            (high[0] - low[0] * weight[0]) % MOD[0],
            (high[1] - low[1] * weight[1]) % MOD[1],
        )

    def get_hash(self, left: int, right: int) -> Hash:
        """Return the hash of text[left..right] (1-based, inclusive)."""
        self._check(left, right)
        return self._range(self._forward, left, right)

    def get_rev_hash(self, left: int, right: int) -> Hash:
        """Return the hash of text[left..right] read backwards."""
        self._check(left, right)
        n = len(self.text)
        return self._range(self._reverse, n - right + 1, n - left + 1)

    def append(self, current: Hash, char: str) -> Hash:
        """Return the hash of a string extended by char on the right."""
        return _step(current, ord(char))

    def prepend(self, current: Hash, char: str, k: int) -> Hash:
        """Return the hash after putting char before a string of length k."""
        weight, code = _power(k), ord(char)
        return (
            (weight[0] * code + current[0]) % MOD[0],
            (weight[1] * code + current[1]) % MOD[1],
        )

    def replace(self, current: Hash, i: int, old: str, new: str) -> Hash:
        """Return the hash after swapping old for new at weight BASE**i.

        i counts positions from the right end, starting at 0.
        """
        weight, delta = _power(i), ord(new) - ord(old)
        return (
            (current[0] + weight[0] * delta) % MOD[0],
            (current[1] + weight[1] * delta) % MOD[1],
        )

    def concat(self, left_hash: Hash, right_hash: Hash, k: int) -> Hash:
        """Return the hash of two strings joined; k is the right one's length."""
        weight = _power(k)
        return (
            (left_hash[0] * weight[0] + right_hash[0]) % MOD[0],
            (left_hash[1] * weight[1] + right_hash[1]) % MOD[1],
        )

    def is_palindrome(self, left: int, right: int) -> bool:
        """Tell whether text[left..right] is a palindrome; False out of range."""
        if left < 1 or right > len(self.text):
            return False
        return self.get_hash(left, right) == self.get_rev_hash(left, right)


def lcp(hs: HashedString, l1: int, r1: int, l2: int, r2: int) -> int:
    """Return the longest common prefix length of two ranges of hs."""
    lo, hi, best = 1, min(r1 - l1 + 1, r2 - l2 + 1), 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if hs.get_hash(l1, l1 + mid - 1) == hs.get_hash(l2, l2 + mid - 1):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def z_by_hashing(s: str) -> list[int]:
    """Return z, where z[i] is the longest common prefix of s and s[i:].

    Unlike the linear Z-function, z[0] here is len(s).
    """
    hs = HashedString(s)
    n = len(s)
    return [lcp(hs, 1, n, i, n) for i in range(1, n + 1)]


def prefix_by_hashing(s: str) -> list[int]:
    """Return the prefix function of s, derived from hashed prefix matches."""
    hs = HashedString(s)
    n = len(s)
    p = [0] * (n + 1)
    for i in range(2, n + 1):
        length = lcp(hs, 1, n, i, n)
        if length:
            end = i + length - 1
            p[end] = max(p[end], length)
    prev = p[n] if n else 0
    for i in range(n - 1, 0, -1):
        if prev:
            prev -= 1
            p[i] = max(p[i], prev)
        prev = max(p[i], prev)
    return p[1:]


def even_palindrome_radius(center: int, hs: HashedString) -> int:
    """Return the largest k with text[center-k..center+k-1] a palindrome."""
    lo, hi, best = 0, len(hs), 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if hs.is_palindrome(center - mid, center + mid - 1):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def odd_palindrome_radius(center: int, hs: HashedString) -> int:
    """Return the largest k with text[center-k+1..center+k-1] a palindrome."""
    lo, hi, best = 1, len(hs), 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if hs.is_palindrome(center - mid + 1, center + mid - 1):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def longest_palindrome_by_hashing(s: str) -> str:
    """Return a longest palindromic substring of s, preferring the rightmost."""
    hs = HashedString(s)
    n = len(s)
    center, length = 1, 0
    for i in range(2, n + 1):
        radius = even_palindrome_radius(i, hs)
        if radius >= length:
            center, length = i, radius
    odd_center, odd_length = 1, 1
    for i in range(2, n + 1):
        radius = odd_palindrome_radius(i, hs)
        if radius >= odd_length:
            odd_center, odd_length = i, radius
    if 2 * length >= 2 * (odd_length - 1) + 1:
        return s[center - length - 1 : center + length - 1]
    return s[odd_center - odd_length : odd_center + odd_length - 1]