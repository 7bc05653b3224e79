"""Counting integers coprime to n by inclusion-exclusion."""

import math
from itertools import combinations

__all__ = ["prime_factorize", "count_coprime_up_to"]


def prime_factorize(n: int) -> list[tuple[int, int]]:
    """Return the (prime, exponent) pairs of n in increasing order."""
    factors = []
    d = 2
    while d * d <= n:
        count = 0
        while n % d == 0:
            n //= d
            count += 1
        if count:
            factors.append((d, count))
        d += 1
    if n > 1:
        factors.append((n, 1))
    return factors


def count_coprime_up_to(n: int, r: int) -> int:
    """Return how many of 1..r are coprime to n."""
    if r <= 0:
        return 0
    primes = [p for p, _ in prime_factorize(n)]
    divisible = 0
    for size in range(1, len(primes) + 1):
        sign = 1 if size % 2 else -1
        for chosen in combinations(primes, size):
            divisible += sign * (r // math.prod(chosen))
    return max(0, r - divisible)