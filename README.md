# algokit

A small library of classic string algorithms and combinatorics helpers.
Everything is plain Python with no third-party dependencies.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## String searching

```python
from algokit.kmp import prefix_function, kmp_match, period
from algokit.zfunc import z_function, z_match

prefix_function("aabaaab")        # [0, 1, 0, 1, 2, 2, 3]
kmp_match("aba", "abcababa")      # [3, 5]
z_match("aba", "abcababa")        # [3, 5]
period("aabaabaab")               # "aab"
```

The functions in `algokit.kmp`, `algokit.zfunc` and `algokit.manacher` accept
any sequence, not only strings. `kmp_match` and `z_match` raise `ValueError`
for an empty pattern, and `period` raises `ValueError` for an empty sequence.
`z_function` sets `z[0]` to 0.

`prefix_occurrence_counts(pattern, text)` returns a list whose entry `k` is the
number of times `pattern[:k]` occurs in `text` (entry 0 is `len(text) + 1`).
`count_unique_substrings(s)` counts the distinct non-empty substrings of `s`.

## Palindromes

```python
from algokit.manacher import manacher, longest_palindrome
from algokit.hashing import longest_palindrome_by_hashing

longest_palindrome("babba")               # "abba"
longest_palindrome_by_hashing("babba")    # "abba"
```

`manacher_odd(s)` gives, for every centre, the radius of the longest odd
palindrome there; `manacher(s)` gives palindrome lengths for all
`2 * len(s) + 1` centres, characters at odd positions and gaps at even ones.
`longest_palindrome` returns the leftmost longest palindrome;
`longest_palindrome_by_hashing` prefers the rightmost.

## Tries

```python
from algokit.trie import Trie

trie = Trie()
trie.insert("apple")
trie.insert("app")
trie.search("app")        # SearchResult(depth=3, is_word=True)
trie.search("b")          # None
trie.prefix_count("ap")   # 2
```

Only the letters `a` to `z` are accepted; anything else raises `ValueError`.
Inserting a word twice counts it twice in `prefix_count`.

## Polynomial hashing

`algokit.hashing.HashedString` holds forward and reversed prefix double hashes
of a string, giving constant-time substring hashes with 1-based, inclusive
bounds (`get_hash`, `get_rev_hash`, `is_palindrome`), plus helpers to derive
hashes after `append`, `prepend`, `replace` and `concat`. `poly_hash(s)` hashes
a whole string. Built on it are `lcp`, `z_by_hashing` (where `z[0]` is
`len(s)`), `prefix_by_hashing`, and the palindrome radius searches
`even_palindrome_radius` and `odd_palindrome_radius`.

```python
from algokit.hashing import HashedString, lcp, z_by_hashing

hs = HashedString("abcababcab")
lcp(hs, 1, 10, 6, 10)      # 5
z_by_hashing("aaa")        # [3, 2, 1]
```

`algokit.lcs.longest_common_substring(first, second)` returns the length of
the longest common substring of two strings, by binary search over hashed
windows held in `SumHashedString`.

## Combinatorics

```python
from algokit.combinatorics import FactorialTable
from algokit.sequences import binomial, catalan_numbers, derangements

table = FactorialTable()
table.ncr(4, 2)                              # 6
table.catalan(5)                             # 42
table.count_solutions(5, 3, 1)               # 6
table.count_bounded_solutions(4, 4, 0, 2)    # 19

binomial(4, 2)                               # 6
derangements(4)                              # 9
catalan_numbers(5)                           # [1, 1, 2, 5, 14, 42]
```

`FactorialTable(limit, mod)` precomputes factorials up to `limit` (default
200 001) modulo a prime (default 10^9 + 7); `ncr` raises `ValueError` when `n`
is beyond the table. `count_solutions(n, r, a)` counts solutions of
`x1 + ... + xr = n` with every `xi >= a`, and `count_bounded_solutions` adds an
upper bound `b` using inclusion and exclusion.

`algokit.sequences` also provides `derangement_table(n)` and
`pascal_triangle(n)`, both reduced modulo `MOD` unless another modulus is
given.

`algokit.totient.count_coprime_up_to(n, r)` counts the integers in `1..r`
that are coprime to `n`, by inclusion and exclusion over the prime factors
returned by `prime_factorize(n)`.

## What this package does not do

algokit is a library only: it installs no command-line program and reads no
input of its own. Call its functions from your own code.