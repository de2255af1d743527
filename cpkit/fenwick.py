"""Fenwick trees: one-dimensional and offline two-dimensional."""

from __future__ import annotations

from bisect import bisect_left


class FenwickTree:
    """Point updates and prefix sums over positions 0..n-1."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("size must be non-negative")
        self._s = [0] * n

    def __len__(self) -> int:
        return len(self._s)

    def update(self, pos: int, dif) -> None:
        """Add dif to a[pos]."""
        if pos < 0:
            raise IndexError("position must be non-negative")
        s = self._s
        n = len(s)
        while pos < n:
            s[pos] += dif
            pos |= pos + 1

    def query(self, pos: int):
        """Return the sum of a[0:pos]."""
        if not 0 <= pos <= len(self._s):
            raise IndexError(f"position {pos} out of range")
        res = 0
        s = self._s
        while pos > 0:
            res += s[pos - 1]
            pos &= pos - 1
        return res

    def lower_bound(self, total) -> int:
        """Smallest pos with sum(a[0..pos]) >= total.

        Returns -1 if total <= 0 and n if no prefix reaches total.  Assumes
        all values are non-negative.
        """
        if total <= 0:
            return -1
        s = self._s
        n = len(s)
        pos = 0
        pw = 1 << n.bit_length()
        while pw:
            if pos + pw <= n and s[pos + pw - 1] < total:
                pos += pw
                total -= s[pos - 1]
            pw >>= 1
        return pos


class FenwickTree2D:
    """Sums over a[i][j] for i < x, j < y with points registered in advance.

    Call fake_update for every point that will be updated, then init.
    """

    def __init__(self, limx: int):
        if limx < 0:
            raise ValueError("size must be non-negative")
        self._ys: list[list[int]] = [[] for _ in range(limx)]
        self._ft: list[FenwickTree] | None = None

    def fake_update(self, x: int, y) -> None:
        """Register that point (x, y) will be updated."""
        if x < 0:
            raise IndexError("x must be non-negative")
        ys = self._ys
        while x < len(ys):
            ys[x].append(y)
            x |= x + 1

    def init(self) -> None:
        """Freeze the registered points and build the inner trees."""
        for column in self._ys:
            column.sort()
        self._ft = [FenwickTree(len(column)) for column in self._ys]

    def _trees(self) -> list[FenwickTree]:
        if self._ft is None:
            raise RuntimeError("init() must be called first")
        return self._ft

    def update(self, x: int, y, dif) -> None:
        """Add dif to a[x][y]."""
        ft = self._trees()
        if x < 0:
            raise IndexError("x must be non-negative")
        ys = self._ys
        while x < len(ys):
            ft[x].update(bisect_left(ys[x], y), dif)
            x |= x + 1

    def query(self, x: int, y):
        """Return the sum of a[i][j] over i < x and j < y."""
        ft = self._trees()
        if not 0 <= x <= len(self._ys):
            raise IndexError(f"x {x} out of range")
        total = 0
        while x:
            total += ft[x - 1].query(bisect_left(self._ys[x - 1], y))
            x &= x - 1
        return total