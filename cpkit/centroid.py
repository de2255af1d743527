"""Centroid decomposition of a tree."""

from __future__ import annotations


def centroid_decomposition(adj, root: int = 0) -> list[int | None]:
    """Return the parent of every vertex in the centroid tree.

    ``adj`` is the adjacency list of a tree over vertices 0..len(adj)-1.  The
    first centroid, and any vertex not reachable from root, gets None.
    """
    n = len(adj)
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")
    parent: list[int | None] = [None] * n
    used = [False] * n
    size = [0] * n
    pending: list[tuple[int, int | None]] = [(root, None)]
    while pending:
        start, above = pending.pop()
        order: list[tuple[int, int]] = []
        seen = {start}
        stack = [(start, -1)]
        while stack:
            v, p = stack.pop()
            order.append((v, p))
            size[v] = 1
            for w in adj[v]:
                if not used[w] and w != p:
                    if w in seen:
                        raise ValueError("the graph is not a tree")
                    seen.add(w)
                    stack.append((w, v))
        for v, p in reversed(order):
            if p != -1:
                size[p] += size[v]

        total = size[start]
        cur, prev = start, -1
        while True:
            for w in adj[cur]:
                if not used[w] and w != prev and size[w] > total // 2:
                    prev, cur = cur, w
                    break
            else:
                break

        parent[cur] = above
        used[cur] = True
        pending.extend((w, cur) for w in adj[cur] if not used[w])
    return parent