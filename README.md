# cpkit

A collection of algorithms and data structures for competitive programming,
written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `cpkit.numtheory` | `ipow` (modulo 1000000007), `ipow_mod`, `randint`, `ext_gcd`, `mod_inverse`, `Congruence`, `crt_merge`, `crt`, `solve_linear_congruence` |
| `cpkit.modint` | `ModInt` modular integers, `power`, `Combinatorics` (factorials, inverse factorials, inverses, binomials modulo a prime, and exact binomials saturated at a cap) |
| `cpkit.primes` | Miller–Rabin `is_prime`, `pollard_rho`, `factorize`, `linear_sieve` (primes and Euler's totient), `YarinSieve`, `SquareFreeCounter`, `TotientSummer` |
| `cpkit.convolution` | `fft`, `conv` (floating point), `ntt`, `conv_ntt` (modulo 998244353), `conv_mod` (any modulus) |
| `cpkit.linalg` | `fast_det`, `gaussian_elimination`, `solve_linear_system` over `ModularField`, `RealField` or `ExactField`; results as `EliminationResult` and `LinearSolution` |
| `cpkit.recurrence` | `berlekamp_massey`, `kitamasa` |
| `cpkit.dp` | `Line`, `LineContainer` (convex hull trick, max or min), `divide_and_conquer_layers` |
| `cpkit.linkcut` | `LinkCutTree` for dynamic forests: `link`, `cut`, `connected` |
| `cpkit.fenwick` | `FenwickTree`, offline `FenwickTree2D` |
| `cpkit.lazy_segtree` | `LazySegmentTree` with affine range updates and range sums modulo 998244353 |
| `cpkit.persistent_segtree` | `PersistentSegmentTree` for k-th smallest and count-at-most queries on array ranges |
| `cpkit.strings` | `get_fail`, `kmp`, `SuffixArray`, `CountingSuffixArray` |
| `cpkit.matching` | `BipartiteMatching` with `min_vertex_cover` and `max_independent_set` |
| `cpkit.centroid` | `centroid_decomposition` |
| `cpkit.euler` | `DirectedEulerTrail`, `UndirectedEulerTrail` |
| `cpkit.hld` | `HeavyLightDecomposition` over a positional structure you supply |
| `cpkit.lca` | `LCA` with O(1) queries and weighted distances |
| `cpkit.scc` | `SCC` (Tarjan) and its condensation graph via `build_condensation` |
| `cpkit.twosat` | `two_sat` |

## Examples

```python
from cpkit.numtheory import Congruence, crt
from cpkit.convolution import conv_ntt
from cpkit.strings import kmp
from cpkit.twosat import two_sat

crt([Congruence(2, 3), Congruence(3, 5)])   # Congruence(residue=8, modulus=15)
conv_ntt([1, 2], [3, 4])                     # [3, 10, 8]
kmp("abababa", "aba")                        # [0, 2, 4]
two_sat(2, [(1, 2), (-1, 2)])                # a list of two bools; x_2 is True
two_sat(1, [(1, 1), (-1, -1)])               # None: unsatisfiable
```

```python
from cpkit.lazy_segtree import LazySegmentTree

seg = LazySegmentTree(5, [1, 2, 3, 4, 5])
seg.update(2, 4, 2, 1)      # a[i] <- 2*a[i] + 1 on positions 2..4
seg.query(1, 5)             # 27
```

Functions that report "no solution" (`crt`, `crt_merge`,
`solve_linear_congruence`, `solve_linear_system`, `two_sat`) return `None`;
invalid arguments raise `ValueError` or `IndexError`.

Indices follow the conventions documented on each class: most tree and
graph structures are 1-based, while the string and convolution helpers
work on ordinary 0-based sequences.

## What it does not do

cpkit is a library only: it has no command-line program and reads no input
on its own. `HeavyLightDecomposition` does not include a segment tree; pass
any object with `update(l, r, val)` and `query(l, r)`. `randint` and
`pollard_rho` use an unseeded random generator, so their results are not
reproducible between runs.