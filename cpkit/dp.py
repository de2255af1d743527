"""Dynamic-programming helpers: a line container and layered D&C optimisation."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass


@dataclass
class Line:
    """The line k*x + m; p is the last x at which it is optimal in its hull."""

    k: float
    m: float
    p: float = 0

    def __call__(self, x):
        return self.k * x + self.m


def _div(a, b):
    if isinstance(a, int) and isinstance(b, int):
        return a // b
    return a / b


class LineContainer:
    """Holds lines and answers max (or min) of their values at a point."""

    def __init__(self, maximize: bool = True):
        self.maximize = maximize
        self._hull: list[Line] = []

    def __len__(self) -> int:
        return len(self._hull)

    def _slope_key(self, line: Line):
        return line.k if self.maximize else -line.k

    def _update(self, xi: int, yi: int) -> bool:
        hull = self._hull
        x = hull[xi]
        if yi == len(hull):
            x.p = math.inf
            return False
        y = hull[yi]
        if x.k == y.k:
            better = x.m > y.m if self.maximize else x.m < y.m
            x.p = math.inf if better else -math.inf
        else:
            x.p = _div(y.m - x.m, x.k - y.k)
        return x.p >= y.p

    def add(self, k, m) -> None:
        """Insert the line k*x + m."""
        hull = self._hull
        y = bisect_right(hull, k if self.maximize else -k, key=self._slope_key)
        hull.insert(y, Line(k, m, 0))
        z = y + 1
        while self._update(y, z):
            del hull[z]
        x = y
        if x > 0:
            x -= 1
            if self._update(x, y):
                del hull[y]
                self._update(x, y)
        while x > 0:
            y = x
            x -= 1
            if hull[x].p < hull[y].p:
                break
            del hull[y]
            self._update(x, y)

    def query(self, x) -> Line:
        """Return the line that is optimal at x."""
        if not self._hull:
            raise ValueError("the container holds no lines")
        idx = bisect_left(self._hull, x, key=lambda line: line.p)
        return self._hull[idx]


def divide_and_conquer_layers(n: int, cost) -> list:
    """Best totals for splitting positions 0..n into 1..n consecutive parts.

    Entry i-1 of the result is max over 0 = k_0 < k_1 < ... < k_i = n of the
    sum of cost(k_{t-1}, k_t), or None when no such split exists.  The cost
    must make the optimal split point monotone.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    pre: list = [None] * (n + 1)
    pre[0] = 0
    results = []

    for _ in range(n):
        cur: list = [None] * (n + 1)

        def solve(lo: int, hi: int, optl: int, optr: int) -> None:
            if lo > hi:
                return
            mid = (lo + hi) // 2
            best = None
            opt = 0
            for i in range(optl, min(mid - 1, optr) + 1):
                if pre[i] is None:
                    continue
                value = pre[i] + cost(i, mid)
                if best is None or best < value:
                    best = value
                    opt = i
            cur[mid] = best
            solve(lo, mid - 1, optl, opt)
            solve(mid + 1, hi, opt, optr)

        solve(1, n, 0, n)
        cur[0] = None
        results.append(cur[n])
        pre = cur
    return results