"""Lowest common ancestor by Euler tour and sparse table: O(1) per query."""

from __future__ import annotations


class LCA:
    """Weighted tree over vertices 1..n with LCA and distance queries."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        self.depth = [0] * (n + 1)
        self._first: list[int] = []
        self._by_time: list[int] = []
        self._table: list[list[int]] | None = None

    def _check(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, a: int, b: int, w=1) -> None:
        """Insert the undirected edge {a, b} with weight w."""
        self._check(a)
        self._check(b)
        self._adj[a].append((b, w))
        self._adj[b].append((a, w))

    def build(self, root: int) -> None:
        """Preprocess the tree rooted at root."""
        self._check(root)
        n = self.n
        adj = self._adj
        depth = [0] * (n + 1)
        in_time = [0] * (n + 1)
        by_time = [0] * (n + 2)
        first = [-1] * (n + 1)
        timer = 1
        in_time[root] = 1
        by_time[1] = root
        first[root] = 0
        tour = [1]
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            v, p, it = stack[-1]
            for w, c in it:
                if w == p:
                    continue
                depth[w] = depth[v] + c
                timer += 1
                in_time[w] = timer
                by_time[timer] = w
                first[w] = len(tour)
                tour.append(timer)
                stack.append((w, v, iter(adj[w])))
                break
            else:
                stack.pop()
                if stack:
                    tour.append(in_time[stack[-1][0]])

        table = [tour]
        j = 1
        while (1 << j) <= len(tour):
            prev = table[-1]
            half = 1 << (j - 1)
            table.append(
                [min(prev[k], prev[k + half]) for k in range(len(tour) - (1 << j) + 1)]
            )
            j += 1
        self.depth = depth
        self._first = first
        self._by_time = by_time
        self._table = table

    def lca(self, a: int, b: int) -> int:
        """Return the lowest common ancestor of a and b."""
        if self._table is None:
            raise RuntimeError("build() must be called first")
        self._check(a)
        self._check(b)
        lo, hi = self._first[a], self._first[b]
        if lo < 0 or hi < 0:
            raise ValueError("vertex is not in the tree of the root")
        if lo > hi:
            lo, hi = hi, lo
        pw = (hi - lo + 1).bit_length() - 1
        row = self._table[pw]
        return self._by_time[min(row[lo], row[hi - (1 << pw) + 1])]

    def dist(self, a: int, b: int):
        """Return the weighted distance between a and b."""
        return self.depth[a] + self.depth[b] - 2 * self.depth[self.lca(a, b)]