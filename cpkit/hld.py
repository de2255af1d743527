"""Heavy-light decomposition for path and subtree queries on a tree."""

from __future__ import annotations


class HeavyLightDecomposition:
    """Maps tree paths and subtrees to ranges of a positional structure.

    ``adj`` is an undirected adjacency list over vertices 1..n.  ``seg`` must
    offer ``update(l, r, val)`` and ``query(l, r)`` over inclusive 1-based
    positions 1..n; query results are added together, so the operation
    must be commutative.
    """

    def __init__(self, n: int, adj, seg, root: int = 1):
        if not 1 <= root <= n:
            raise IndexError(f"root {root} out of range")
        if len(adj) < n + 1:
            raise ValueError("adjacency list must cover vertices 1..n")
        self.n = n
        self.seg = seg
        self.root = root
        children: list[list[int]] = [[] for _ in range(n + 1)]
        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        seen = [False] * (n + 1)
        seen[root] = True
        order = [root]
        stack = [root]
        while stack:
            v = stack.pop()
            for w in adj[v]:
                if not seen[w]:
                    seen[w] = True
                    children[v].append(w)
                    parent[w] = v
                    depth[w] = depth[v] + 1
                    stack.append(w)
                    order.append(w)

        size = [0] * (n + 1)
        for v in reversed(order):
            size[v] = 1 + sum(size[c] for c in children[v])
        for v in order:
            ch = children[v]
            for k, c in enumerate(ch):
                if size[c] > size[ch[0]]:
                    ch[0], ch[k] = c, ch[0]

        in_time = [0] * (n + 1)
        top = [0] * (n + 1)
        top[root] = root
        timer = 0
        stack = [root]
        while stack:
            v = stack.pop()
            timer += 1
            in_time[v] = timer
            ch = children[v]
            for c in reversed(ch):
                top[c] = top[v] if c == ch[0] else c
                stack.append(c)

        self.children = children
        self.parent = parent
        self.depth = depth
        self.size = size
        self.top = top
        self.in_time = in_time
        self.out_time = [in_time[v] + size[v] - 1 for v in range(n + 1)]

    def _path_ranges(self, a: int, b: int):
        top, depth, pos = self.top, self.depth, self.in_time
        while top[a] != top[b]:
            if depth[top[a]] < depth[top[b]]:
                a, b = b, a
            st = top[a]
            yield pos[st], pos[a]
            a = self.parent[st]
        if depth[a] > depth[b]:
            a, b = b, a
        yield pos[a], pos[b]

    def update_path(self, a: int, b: int, val) -> None:
        """Apply val to every vertex on the path between a and b."""
        for lo, hi in self._path_ranges(a, b):
            self.seg.update(lo, hi, val)

    def update_subtree(self, a: int, val) -> None:
        """Apply val to every vertex in the subtree of a."""
        self.seg.update(self.in_time[a], self.out_time[a], val)

    def query_path(self, a: int, b: int):
        """Combine the values on the path between a and b."""
        total = 0
        for lo, hi in self._path_ranges(a, b):
            total += self.seg.query(lo, hi)
        return total

    def query_subtree(self, a: int):
        """Combine the values in the subtree of a."""
        return self.seg.query(self.in_time[a], self.out_time[a])