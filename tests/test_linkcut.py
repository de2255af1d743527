import random
from collections import deque

import pytest

from cpkit.linkcut import LinkCutTree


def _naive_connected(n, edges, u, v):
    adj = {i: [] for i in range(n)}
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    seen = {u}
    queue = deque([u])
    while queue:
        x = queue.popleft()
        for y in adj[x]:
            if y not in seen:
                seen.add(y)
                queue.append(y)
    return v in seen


def test_isolated_vertices_are_not_connected():
    lct = LinkCutTree(4)
    assert lct.connected(0, 0)
    assert not lct.connected(0, 1)
    assert len(lct) == 4


def test_chain_link_and_cut():
    lct = LinkCutTree(5)
    for i in range(4):
        lct.link(i, i + 1)
    assert lct.connected(0, 4)
    lct.cut(2, 3)
    assert lct.connected(0, 2)
    assert lct.connected(3, 4)
    assert not lct.connected(0, 4)
    lct.link(4, 0)
    assert lct.connected(2, 3)


def test_link_of_connected_vertices_raises():
    lct = LinkCutTree(3)
    lct.link(0, 1)
    lct.link(1, 2)
    with pytest.raises(ValueError):
        lct.link(0, 2)
    with pytest.raises(ValueError):
        lct.link(1, 1)


def test_cut_of_missing_edge_raises():
    lct = LinkCutTree(3)
    lct.link(0, 1)
    lct.link(1, 2)
    with pytest.raises(ValueError):
        lct.cut(0, 2)
    assert lct.connected(0, 2)


def test_out_of_range_vertex():
    lct = LinkCutTree(2)
    with pytest.raises(IndexError):
        lct.connected(0, 2)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_operations_match_naive_forest(seed):
    rng = random.Random(seed)
    n = 12
    lct = LinkCutTree(n)
    edges = set()
    for _ in range(300):
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v and not _naive_connected(n, edges, u, v):
            lct.link(u, v)
            edges.add((u, v))
        elif edges:
            a, b = rng.choice(sorted(edges))
            edges.discard((a, b))
            if rng.random() < 0.5:
                lct.cut(a, b)
            else:
                lct.cut(b, a)
        for _ in range(3):
            x, y = rng.randrange(n), rng.randrange(n)
            assert lct.connected(x, y) == _naive_connected(n, edges, x, y)