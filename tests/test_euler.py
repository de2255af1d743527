import random

import pytest

from cpkit.euler import DirectedEulerTrail, UndirectedEulerTrail


def _random_walk(n, length, seed):
    rng = random.Random(seed)
    walk = [rng.randrange(n)]
    for _ in range(length):
        walk.append(rng.randrange(n))
    edges = list(zip(walk, walk[1:]))
    rng.shuffle(edges)
    return walk, edges


def _check_directed(trail):
    assert trail.exists
    assert sorted(trail.edge_order) == list(range(len(trail.edges)))
    assert len(trail.vertex_order) == len(trail.edges) + 1
    for k, e in enumerate(trail.edge_order):
        assert trail.edges[e] == (trail.vertex_order[k], trail.vertex_order[k + 1])


def _check_undirected(trail):
    assert trail.exists
    assert sorted(trail.edge_order) == list(range(len(trail.edges)))
    assert len(trail.vertex_order) == len(trail.edges) + 1
    for k, e in enumerate(trail.edge_order):
        step = sorted((trail.vertex_order[k], trail.vertex_order[k + 1]))
        assert sorted(trail.edges[e]) == step


@pytest.mark.parametrize("seed", range(15))
def test_directed_random_walk(seed):
    walk, edges = _random_walk(6, 20, seed)
    trail = DirectedEulerTrail(6, edges)
    _check_directed(trail)
    if walk[0] != walk[-1]:
        assert trail.vertex_order[0] == walk[0]
        assert trail.vertex_order[-1] == walk[-1]


@pytest.mark.parametrize("seed", range(15))
def test_undirected_random_walk(seed):
    walk, edges = _random_walk(6, 20, seed)
    trail = UndirectedEulerTrail(6, edges)
    _check_undirected(trail)
    if walk[0] != walk[-1]:
        assert trail.vertex_order[0] == min(walk[0], walk[-1])
        assert {trail.vertex_order[0], trail.vertex_order[-1]} == {walk[0], walk[-1]}


def test_directed_multi_edges():
    trail = DirectedEulerTrail(2, [(0, 1), (0, 1), (1, 0)])
    _check_directed(trail)


def test_directed_no_trail():
    trail = DirectedEulerTrail(3, [(0, 1), (0, 2)])
    assert not trail.exists
    assert trail.vertex_order == []
    assert trail.edge_order == []


def test_directed_disconnected():
    trail = DirectedEulerTrail(4, [(0, 1), (1, 0), (2, 3), (3, 2)])
    assert not trail.exists


def test_undirected_four_odd_vertices():
    trail = UndirectedEulerTrail(4, [(0, 1), (0, 2), (0, 3)])
    assert not trail.exists
    assert trail.edge_order == []


def test_empty_graph():
    assert DirectedEulerTrail(3, []).vertex_order == [0]
    assert UndirectedEulerTrail(3, []).exists


def test_generate_is_repeatable():
    _, edges = _random_walk(5, 12, 99)
    trail = UndirectedEulerTrail(5, edges)
    first = (list(trail.vertex_order), list(trail.edge_order))
    assert trail.generate()
    assert (trail.vertex_order, trail.edge_order) == first


def test_edge_out_of_range():
    with pytest.raises(IndexError):
        DirectedEulerTrail(2, [(0, 2)])