import random

import pytest

from cpkit.fenwick import FenwickTree, FenwickTree2D


def test_prefix_sums_match_list():
    rng = random.Random(7)
    n = 37
    values = [0] * n
    ft = FenwickTree(n)
    for _ in range(200):
        pos = rng.randrange(n)
        dif = rng.randint(-50, 50)
        ft.update(pos, dif)
        values[pos] += dif
        q = rng.randint(0, n)
        assert ft.query(q) == sum(values[:q])


def test_query_empty_prefix_is_zero():
    ft = FenwickTree(5)
    ft.update(0, 9)
    assert ft.query(0) == 0
    assert ft.query(1) == 9


def test_lower_bound_non_positive_total():
    ft = FenwickTree(4)
    ft.update(1, 3)
    assert ft.lower_bound(0) == -1
    assert ft.lower_bound(-5) == -1


def test_lower_bound_unreachable_returns_size():
    ft = FenwickTree(6)
    for i in range(6):
        ft.update(i, 1)
    assert ft.lower_bound(100) == len(ft)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_lower_bound_matches_linear_scan(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 40)
    values = [rng.randint(0, 5) for _ in range(n)]
    ft = FenwickTree(n)
    for i, v in enumerate(values):
        ft.update(i, v)
    for total in range(1, sum(values) + 3):
        expected = next(
            (i for i in range(n) if sum(values[: i + 1]) >= total), n
        )
        assert ft.lower_bound(total) == expected


def test_negative_position_raises():
    ft = FenwickTree(3)
    with pytest.raises(IndexError):
        ft.update(-1, 1)
    with pytest.raises(IndexError):
        ft.query(4)


def test_2d_matches_brute_force():
    rng = random.Random(11)
    limx = 8
    points = [(rng.randrange(limx), rng.randrange(10)) for _ in range(25)]
    ft = FenwickTree2D(limx)
    for x, y in points:
        ft.fake_update(x, y)
    ft.init()
    weights = {}
    for _ in range(60):
        x, y = rng.choice(points)
        dif = rng.randint(-9, 9)
        ft.update(x, y, dif)
        weights[(x, y)] = weights.get((x, y), 0) + dif
    for qx in range(limx + 1):
        for qy in range(12):
            expected = sum(w for (px, py), w in weights.items() if px < qx and py < qy)
            assert ft.query(qx, qy) == expected


def test_2d_requires_init():
    ft = FenwickTree2D(4)
    ft.fake_update(1, 2)
    with pytest.raises(RuntimeError):
        ft.update(1, 2, 5)
    with pytest.raises(RuntimeError):
        ft.query(2, 3)