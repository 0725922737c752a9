# contestlib

A small library of algorithms and data structures that come up again and
again in competitive programming. It is plain Python and needs nothing
outside the standard library.

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## What is included

| Module | Contents |
| --- | --- |
| `contestlib.modular` | `binpow`, `mod_inverse`, `add`, `sub`, `mul`, `div`, `Factorials` (binomials modulo a prime), constants `MOD` and `BIG_PRIMES` |
| `contestlib.euclid` | `extended_gcd`, `find_any_solution` for `a*x + b*y == c` |
| `contestlib.sieve` | `prime_sieve`, `min_prime_factor_sieve`, `Factorizer`, `divisor_count` |
| `contestlib.polynomial` | `power`, `inverse`, `ntt`, `multiply`, `multiply_all` (NTT modulo 998244353), `matrix_mul` |
| `contestlib.fenwick` | `FenwickTree`, `FenwickTree2D` (1-based positions) |
| `contestlib.dsu` | `DisjointSet`, `WeightedDisjointSet` (elements `1..n`, union by rank, path compression) |
| `contestlib.segment_tree` | `XorSegmentTree`, `SumSegmentTree`, both with lazy range assignment (0-based, inclusive ranges) |
| `contestlib.sparse_table` | `msb`, `SparseTable` for range-minimum queries |
| `contestlib.graph` | `floyd_warshall`, `BinaryLifting` for ancestor and LCA queries |
| `contestlib.trie` | `BinaryTrie` for maximum XOR over 31-bit integers, `CharTrie` with prefix counts |
| `contestlib.string_match` | `prefix_function`, `kmp_count`, `compute_automaton`, `automaton_count` |
| `contestlib.string_hash` | `DoubleHash`, polynomial hashing under two moduli |

Notes on behaviour:

- `Factorials(limit, mod).ncr(n, r)` returns 0 when `r > n` and raises
  `ValueError` when `n` exceeds `limit`.
- `find_any_solution` returns `(x, y, g)`, or `None` when there is no
  solution.
- `Factorizer.factorize(x)` returns a `{prime: exponent}` dict;
  `add_factors` updates such a dict in place and `divides` tells whether
  `x` divides the number it describes.
- `FenwickTree.update` and `FenwickTree2D.update` raise `IndexError` for
  positions outside the tree.
- `WeightedDisjointSet.union(a, b, weight)` records the smallest and
  largest edge weight of each component; `min_plus_max(a)` raises
  `ValueError` for a component with no edges.
- `XorSegmentTree.find_first(value)` returns the first index holding at
  least `value`, or `None`.
- `floyd_warshall` takes a square matrix with `math.inf` for missing edges
  and returns a new matrix.
- `BinaryLifting(adj, root=0)` takes a 0-based adjacency list of a tree and
  raises `ValueError` if it has a cycle or is not connected.
- `automaton_count` accepts only lowercase letters in the text;
  `kmp_count` works with any characters.
- `DoubleHash.substring_hash(l, r)` uses 1-based, inclusive positions.

## Examples

Modular arithmetic and binomial coefficients:

```python
from contestlib.modular import binpow, Factorials

MOD = 10**9 + 7
binpow(2, 10, MOD)            # 1024
table = Factorials(1000, MOD)
table.ncr(10, 3)              # 120
```

Polynomial multiplication:

```python
from contestlib.polynomial import multiply

multiply([1, 1], [1, 1])      # [1, 2, 1]
```

Prefix sums with a Fenwick tree:

```python
from contestlib.fenwick import FenwickTree

tree = FenwickTree(10)
tree.update(3, 5)
tree.update(7, 2)
tree.prefix_sum(5)            # 5
tree.prefix_sum(10)           # 7
```

Counting pattern occurrences:

```python
from contestlib.string_match import kmp_count

kmp_count("aaaa", "aa")       # 3
```

Disjoint sets:

```python
from contestlib.dsu import DisjointSet

sets = DisjointSet(5)
sets.union(1, 2)              # True
sets.find(1) == sets.find(2)  # True
```

## What it does not do

This is a library only. It has no command-line program and no template for
reading contest input or writing answers; you import the modules into your
own solution code.

## Running the tests

```
pytest
```