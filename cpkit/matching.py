"""Maximum bipartite matching, minimum vertex cover and maximum independent set."""

from __future__ import annotations


class BipartiteMatching:
    """Bipartite graph with groups A = 1..n and B = 1..m (1-based vertices).

    ``match_a[x]`` is the B vertex matched to A vertex x (0 if none) and
    ``match_b[y]`` the A vertex matched to B vertex y.  Vertex sets are
    returned as ``(vertex, side)`` pairs with side 0 for A and 1 for B.
    """

    def __init__(self, n: int, m: int):
        if n < 0 or m < 0:
            raise ValueError("group sizes must be non-negative")
        self.n = n
        self.m = m
        self.max_match = 0
        self.match_a = [0] * (n + 1)
        self.match_b = [0] * (m + 1)
        self._adj_a: list[list[int]] = [[] for _ in range(n + 1)]
        self._adj_b: list[list[int]] = [[] for _ in range(m + 1)]
        self._visited = [0] * (max(n, m) + 1)
        self._pass = 0

    def add_edge(self, a: int, b: int) -> None:
        """Connect A vertex a with B vertex b."""
        if not 1 <= a <= self.n:
            raise IndexError(f"A vertex {a} out of range")
        if not 1 <= b <= self.m:
            raise IndexError(f"B vertex {b} out of range")
        self._adj_a[a].append(b)
        self._adj_b[b].append(a)

    def _sides(self, side: int):
        if side == 0:
            return self._adj_a, self.match_a, self.match_b
        if side == 1:
            return self._adj_b, self.match_b, self.match_a
        raise ValueError("side must be 0 (group A) or 1 (group B)")

    def _augment(self, x: int, side: int) -> bool:
        adj, mine, other = self._sides(side)
        visited, stamp = self._visited, self._pass
        for y in adj[x]:
            if visited[y] != stamp and other[y] <= 0:
                visited[y] = stamp
                mine[x] = y
                other[y] = x
                return True
        for y in adj[x]:
            if visited[y] != stamp:
                visited[y] = stamp
                if self._augment(other[y], side):
                    mine[x] = y
                    other[y] = x
                    return True
        return False

    def find_match(self, x: int, side: int) -> bool:
        """Try to match an unmatched vertex x of the given side, keeping the rest.

        Returns whether the matching grew.
        """
        _, mine, _ = self._sides(side)
        if mine[x] > 0:
            return False
        self._pass += 1
        if self._augment(x, side):
            self.max_match += 1
            return True
        return False

    def gen_max_match(self) -> int:
        """Compute a maximum matching from scratch and return its size."""
        self._pass = 0
        self._visited = [0] * (max(self.n, self.m) + 1)
        self.max_match = 0
        self.match_a = [0] * (self.n + 1)
        self.match_b = [0] * (self.m + 1)
        for i in range(1, self.n + 1):
            self._pass += 1
            if self._augment(i, 0):
                self.max_match += 1
        return self.max_match

    def min_vertex_cover(self) -> list[tuple[int, int]]:
        """Return a minimum vertex cover (König's construction)."""
        if self._pass == 0:
            self.gen_max_match()
        seen_a = [False] * (self.n + 1)
        seen_b = [False] * (self.m + 1)
        stack = [(i, 0) for i in range(1, self.n + 1) if self.match_a[i] <= 0]
        while stack:
            x, team = stack.pop()
            seen = seen_b if team else seen_a
            if seen[x]:
                continue
            seen[x] = True
            if team == 0:
                stack.extend((y, 1) for y in self._adj_a[x] if self.match_a[x] != y)
            else:
                stack.extend((a, 0) for a in self._adj_b[x] if self.match_b[x] == a)
        cover = [(i, 0) for i in range(1, self.n + 1) if not seen_a[i]]
        cover += [(i, 1) for i in range(1, self.m + 1) if seen_b[i]]
        return cover

    def max_independent_set(self) -> list[tuple[int, int]]:
        """Return a maximum independent set: the complement of the cover."""
        cover = set(self.min_vertex_cover())
        result = [(i, 0) for i in range(1, self.n + 1) if (i, 0) not in cover]
        result += [(i, 1) for i in range(1, self.m + 1) if (i, 1) not in cover]
        return result