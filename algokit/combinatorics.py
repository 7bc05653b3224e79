"""Binomial counting modulo a prime using precomputed factorials."""

from itertools import accumulate

from algokit.sequences import MOD

__all__ = ["DEFAULT_LIMIT", "FactorialTable"]

DEFAULT_LIMIT = 200_001


class FactorialTable:
    """Factorials and inverse factorials 0..limit modulo a prime."""

    def __init__(self, limit: int = DEFAULT_LIMIT, mod: int = MOD) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if limit >= mod:
            raise ValueError("limit must be smaller than the prime modulus")
        self.mod = mod
        self._fact = list(
            accumulate(range(1, limit + 1), lambda acc, i: acc * i % mod, initial=1)
        )
        inverse = [1] * (limit + 1)
        inverse[limit] = pow(self._fact[limit], mod - 2, mod)
        for i in range(limit, 0, -1):
            inverse[i - 1] = inverse[i] * i % mod
        self._inverse = inverse

    @property
    def limit(self) -> int:
        """Largest n whose factorial is held."""
        return len(self._fact) - 1

    def ncr(self, n: int, r: int) -> int:
        """Return n choose r modulo the prime; 0 when r is outside 0..n."""
        if n < 0 or r < 0 or r > n:
            return 0
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the table limit {self.limit}")
        return self._fact[n] * self._inverse[r] * self._inverse[n - r] % self.mod

    def catalan(self, n: int) -> int:
        """Return the n-th Catalan number modulo the prime."""
        if n < 0:
            raise ValueError("n must be non-negative")
        return (self.ncr(2 * n, n) - self.ncr(2 * n, n - 1)) % self.mod

    def count_solutions(self, n: int, r: int, a: int) -> int:
        """Count solutions of x1 + ... + xr = n with every xi >= a."""
        if r < 1:
            raise ValueError("r must be at least 1")
        free = n - r * a
        if free < 0:
            return 0
        return self.ncr(free + r - 1, r - 1)

    def count_bounded_solutions(self, n: int, r: int, a: int, b: int) -> int:
        """Count solutions of x1 + ... + xr = n with a <= xi <= b.

        Solutions with some variable above b are removed by
        inclusion-exclusion.
        """
        if r < 1:
            raise ValueError("r must be at least 1")
        free = n - r * a
        if b < a or free < 0:
            return 0
        width = b - a + 1
        total = self.ncr(free + r - 1, r - 1)
        for i in range(1, min(r, free // width) + 1):
            term = self.ncr(r, i) * self.ncr(free - i * width + r - 1, r - 1)
            total += -term if i % 2 else term
        return total % self.mod