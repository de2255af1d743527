"""Segment tree with lazy affine range updates and range sums modulo a prime."""

from __future__ import annotations

MOD = 998_244_353


class LazySegmentTree:
    """1-based array supporting a[i] <- mul*a[i] + add on ranges and range sums."""

    def __init__(self, n: int, values=None):
        if n < 1:
            raise ValueError("size must be at least 1")
        self.n = n
        size = 4 * n + 1
        self._tree = [0] * size
        self._mul = [1] * size
        self._add = [0] * size
        if values is not None:
            values = [v % MOD for v in values]
            if len(values) < n:
                raise ValueError("need at least n values")
            self._build(1, 1, n, values)

    def _build(self, node: int, s: int, e: int, values: list[int]) -> None:
        if s == e:
            self._tree[node] = values[s - 1]
            return
        m = (s + e) // 2
        self._build(2 * node, s, m, values)
        self._build(2 * node + 1, m + 1, e, values)
        self._tree[node] = (self._tree[2 * node] + self._tree[2 * node + 1]) % MOD

    def _propagate(self, node: int, s: int, e: int) -> None:
        mul = self._mul[node]
        add = self._add[node]
        if mul == 1 and add == 0:
            return
        self._tree[node] = (self._tree[node] * mul + add * (e - s + 1)) % MOD
        if s != e:
            for child in (2 * node, 2 * node + 1):
                self._mul[child] = self._mul[child] * mul % MOD
                self._add[child] = (add + self._add[child] * mul) % MOD
        self._mul[node] = 1
        self._add[node] = 0

    def _update(self, node, s, e, qs, qe, mul, add) -> None:
        self._propagate(node, s, e)
        if e < qs or qe < s:
            return
        if qs <= s and e <= qe:
            self._mul[node] = self._mul[node] * mul % MOD
            self._add[node] = (self._add[node] * mul + add) % MOD
            self._propagate(node, s, e)
            return
        m = (s + e) // 2
        self._update(2 * node, s, m, qs, qe, mul, add)
        self._update(2 * node + 1, m + 1, e, qs, qe, mul, add)
        self._tree[node] = (self._tree[2 * node] + self._tree[2 * node + 1]) % MOD

    def _query(self, node, s, e, qs, qe) -> int:
        self._propagate(node, s, e)
        if e < qs or qe < s:
            return 0
        if qs <= s and e <= qe:
            return self._tree[node]
        m = (s + e) // 2
        return (
            self._query(2 * node, s, m, qs, qe)
            + self._query(2 * node + 1, m + 1, e, qs, qe)
        ) % MOD

    def update(self, s: int, e: int, mul: int, add: int) -> None:
        """Set a[i] <- mul*a[i] + add for s <= i <= e (1-based)."""
        self._update(1, 1, self.n, s, e, mul % MOD, add % MOD)

    def query(self, s: int, e: int) -> int:
        """Return the sum of a[s..e] (1-based, inclusive) modulo 998244353."""
        return self._query(1, 1, self.n, s, e)