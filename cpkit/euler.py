"""Eulerian trails in directed and undirected graphs (Hierholzer)."""

from __future__ import annotations

from collections import defaultdict


def _check_edges(n: int, edges) -> list[tuple[int, int]]:
    edges = [(u, v) for u, v in edges]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) out of range for {n} vertices")
    return edges


class DirectedEulerTrail:
    """Eulerian trail of a directed multigraph on vertices 0..n-1.

    After ``generate`` (run by the constructor), ``exists`` tells whether a
    trail using every edge exists; ``vertex_order`` lists its vertices and
    ``edge_order`` the indices of its edges in ``edges``.
    """

    def __init__(self, n: int, edges):
        self.n = n
        self.edges = _check_edges(n, edges)
        self.exists = False
        self.vertex_order: list[int] = []
        self.edge_order: list[int] = []
        self.generate()

    def _walk(self, adj, indeg, outdeg) -> list[int]:
        start = next((i for i in range(self.n) if indeg[i] < outdeg[i]), None)
        if start is None:
            start = next((i for i in range(self.n) if outdeg[i]), None)
        if start is None:
            return []
        path = []
        stack = [start]
        while stack:
            v = stack[-1]
            if adj[v]:
                stack.append(adj[v].pop())
            else:
                path.append(stack.pop())
        return path

    def generate(self) -> bool:
        """Compute the trail; return whether it exists."""
        self.exists = False
        self.vertex_order = []
        self.edge_order = []
        if not self.edges:
            self.exists = True
            self.vertex_order = [0]
            return True
        adj: list[list[int]] = [[] for _ in range(self.n)]
        indeg = [0] * self.n
        outdeg = [0] * self.n
        for u, v in self.edges:
            adj[u].append(v)
            outdeg[u] += 1
            indeg[v] += 1
        route = self._walk(adj, indeg, outdeg)
        if len(route) != len(self.edges) + 1:
            return False
        route.reverse()
        labels: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
        for i, e in enumerate(self.edges):
            labels[e].append(i)
        order = []
        for a, b in zip(route, route[1:]):
            bucket = labels[(a, b)]
            if not bucket:
                return False
            order.append(bucket.pop())
        self.exists = True
        self.vertex_order = route
        self.edge_order = order
        return True


class UndirectedEulerTrail:
    """Eulerian trail of an undirected multigraph on vertices 0..n-1.

    Attributes as for DirectedEulerTrail.
    """

    def __init__(self, n: int, edges):
        self.n = n
        self.edges = _check_edges(n, edges)
        self.exists = False
        self.vertex_order: list[int] = []
        self.edge_order: list[int] = []
        self.generate()

    def _walk(self, adj, degree) -> list[int]:
        start = next((i for i in range(self.n) if degree[i] % 2), None)
        if start is None:
            start = next((i for i in range(self.n) if degree[i]), None)
        if start is None:
            return []
        used = [False] * len(self.edges)
        path = []
        stack = [start]
        while stack:
            v = stack[-1]
            nbrs = adj[v]
            while nbrs and used[nbrs[-1][1]]:
                nbrs.pop()
            if nbrs:
                x, i = nbrs.pop()
                used[i] = True
                stack.append(x)
            else:
                path.append(stack.pop())
        return path

    def generate(self) -> bool:
        """Compute the trail; return whether it exists."""
        self.exists = False
        self.vertex_order = []
        self.edge_order = []
        if not self.edges:
            self.exists = True
            self.vertex_order = [0]
            return True
        adj: list[list[tuple[int, int]]] = [[] for _ in range(self.n)]
        degree = [0] * self.n
        for i, (u, v) in enumerate(self.edges):
            adj[u].append((v, i))
            adj[v].append((u, i))
            degree[u] += 1
            degree[v] += 1
        route = self._walk(adj, degree)
        if len(route) != len(self.edges) + 1:
            return False
        route.reverse()
        labels: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
        for i, (u, v) in enumerate(self.edges):
            labels[(min(u, v), max(u, v))].append(i)
        order = []
        for a, b in zip(route, route[1:]):
            bucket = labels[(min(a, b), max(a, b))]
            if not bucket:
                return False
            order.append(bucket.pop())
        self.exists = True
        self.vertex_order = route
        self.edge_order = order
        return True