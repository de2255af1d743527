"""Persistent segment tree over values for order statistics on array ranges."""

from __future__ import annotations


class _Node:
    __slots__ = ("val", "left", "right")

    def __init__(self, val: int, left: _Node | None, right: _Node | None):
        self.val = val
        self.left = left
        self.right = right


class PersistentSegmentTree:
    """An append-only array A[1..N] of values in [0, m-1].

    Supports the k-th smallest value and the count of values <= k on A[L..R].
    """

    def __init__(self, m: int = 524288):
        if m < 1:
            raise ValueError("value range must be at least 1")
        self.m = m
        empty = _Node(0, None, None)
        empty.left = empty
        empty.right = empty
        self._roots = [empty]

    def __len__(self) -> int:
        return len(self._roots) - 1

    def _insert(self, prev: _Node, s: int, e: int, idx: int) -> _Node:
        if s == e:
            return _Node(prev.val + 1, None, None)
        mid = (s + e) // 2
        if idx <= mid:
            left = self._insert(prev.left, s, mid, idx)
            right = prev.right
        else:
            left = prev.left
            right = self._insert(prev.right, mid + 1, e, idx)
        return _Node(left.val + right.val, left, right)

    def append(self, x: int) -> None:
        """Append x as the next element A[N+1]."""
        if not 0 <= x < self.m:
            raise ValueError(f"value {x} outside [0, {self.m - 1}]")
        self._roots.append(self._insert(self._roots[-1], 0, self.m - 1, x))

    def _check_range(self, l: int, r: int) -> None:
        if not 1 <= l <= r <= len(self):
            raise IndexError(f"range [{l}, {r}] invalid for {len(self)} elements")

    def kth(self, l: int, r: int, k: int) -> int:
        """Return the k-th smallest (1-based) value of A[l..r]."""
        self._check_range(l, r)
        if not 1 <= k <= r - l + 1:
            raise ValueError(f"k={k} outside [1, {r - l + 1}]")
        i, j = self._roots[l - 1], self._roots[r]
        s, e = 0, self.m - 1
        while s != e:
            mid = (s + e) // 2
            left = j.left.val - i.left.val
            if left >= k:
                i, j, e = i.left, j.left, mid
            else:
                k -= left
                i, j, s = i.right, j.right, mid + 1
        return s

    def _count(self, i: _Node, j: _Node, s: int, e: int, k: int) -> int:
        if s > k:
            return 0
        if e <= k:
            return j.val - i.val
        mid = (s + e) // 2
        return self._count(i.left, j.left, s, mid, k) + self._count(
            i.right, j.right, mid + 1, e, k
        )

    def count(self, l: int, r: int, k: int) -> int:
        """Return how many values of A[l..r] are <= k."""
        self._check_range(l, r)
        return self._count(self._roots[l - 1], self._roots[r], 0, self.m - 1, k)