import random
from collections import deque

import pytest

from cpkit.lca import LCA


def _tree(n, seed):
    rng = random.Random(seed)
    return [(rng.randint(1, v - 1), v, rng.randint(1, 10)) for v in range(2, n + 1)]


def _naive(n, edges, root):
    adj = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        adj[a].append((b, w))
        adj[b].append((a, w))
    par = {root: 0}
    level = {root: 0}
    weight = {root: 0}
    queue = deque([root])
    while queue:
        v = queue.popleft()
        for w, c in adj[v]:
            if w not in par:
                par[w] = v
                level[w] = level[v] + 1
                weight[w] = weight[v] + c
                queue.append(w)

    def lca(a, b):
        while level[a] > level[b]:
            a = par[a]
        while level[b] > level[a]:
            b = par[b]
        while a != b:
            a, b = par[a], par[b]
        return a

    return lca, weight


def _build(n, edges, root):
    tree = LCA(n)
    for a, b, w in edges:
        tree.add_edge(a, b, w)
    tree.build(root)
    return tree


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("root", [1, 7])
def test_matches_naive(seed, root):
    n = 20
    edges = _tree(n, seed)
    tree = _build(n, edges, root)
    lca, weight = _naive(n, edges, root)
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            c = lca(a, b)
            assert tree.lca(a, b) == c
            assert tree.dist(a, b) == weight[a] + weight[b] - 2 * weight[c]


def test_root_is_ancestor_of_all():
    edges = _tree(15, 42)
    tree = _build(15, edges, 4)
    assert all(tree.lca(4, v) == 4 for v in range(1, 16))
    assert all(tree.dist(v, v) == 0 for v in range(1, 16))


def test_default_weight_counts_edges():
    tree = LCA(4)
    tree.add_edge(1, 2)
    tree.add_edge(2, 3)
    tree.add_edge(2, 4)
    tree.build(1)
    assert tree.dist(3, 4) == 2
    assert tree.lca(3, 4) == 2


def test_query_before_build():
    tree = LCA(2)
    tree.add_edge(1, 2)
    with pytest.raises(RuntimeError):
        tree.lca(1, 2)


def test_unreachable_vertex():
    tree = LCA(3)
    tree.add_edge(1, 2)
    tree.build(1)
    with pytest.raises(ValueError):
        tree.lca(1, 3)


def test_edge_out_of_range():
    with pytest.raises(IndexError):
        LCA(2).add_edge(1, 3)