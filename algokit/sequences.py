"""Tabulated combinatorial sequences: Catalan, derangements, binomials."""

from itertools import pairwise

__all__ = [
    "MOD",
    "catalan_numbers",
    "derangements",
    "derangement_table",
    "binomial",
    "pascal_triangle",
]

MOD = 1_000_000_007


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")


def catalan_numbers(n: int, mod: int = MOD) -> list[int]:
    """Return the Catalan numbers C(0)..C(n) modulo mod."""
    _check_size(n)
    values = [1, 1][: n + 1]
    for i in range(2, n + 1):
        values.append(sum(a * b for a, b in zip(values, reversed(values))) % mod)
    return values


def derangements(n: int, mod: int = MOD) -> int:
    """Return the number of derangements of n items modulo mod."""
    _check_size(n)
    count = 1
    for i in range(1, n + 1):
        count = (count * i + (-1 if i % 2 else 1)) % mod
    return count


def derangement_table(n: int, mod: int = MOD) -> list[int]:
    """Return derangement counts D(0)..D(n) modulo mod."""
    _check_size(n)
    table = [1, 0, 1][: n + 1]
    for i in range(3, n + 1):
        table.append((i - 1) * (table[-2] + table[-1]) % mod)
    return table


def binomial(n: int, r: int) -> int:
    """Return n choose r exactly, by the multiplicative formula."""
    result = 1
    for i in range(1, r + 1):
        result = result * (n - i + 1) // i
    return result


def pascal_triangle(n: int, mod: int = MOD) -> list[list[int]]:
    """Return rows 0..n of Pascal's triangle modulo mod."""
    _check_size(n)
    rows = [[1]]
    for _ in range(n):
        rows.append([1, *((a + b) % mod for a, b in pairwise(rows[-1])), 1])
    return rows