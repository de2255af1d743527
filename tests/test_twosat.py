import itertools
import random

import pytest

from cpkit.twosat import two_sat


def _value(lit, assignment):
    v = assignment[abs(lit) - 1]
    return v if lit > 0 else not v


def _satisfies(clauses, assignment):
    return all(_value(a, assignment) or _value(b, assignment) for a, b in clauses)


def _brute(n, clauses):
    return any(
        _satisfies(clauses, bits)
        for bits in itertools.product([False, True], repeat=n)
    )


def _random_clauses(n, seed):
    rng = random.Random(seed)

    def lit():
        return rng.randint(1, n) * rng.choice((1, -1))

    return [(lit(), lit()) for _ in range(rng.randint(1, 3 * n))]


@pytest.mark.parametrize("seed", range(40))
def test_matches_brute_force(seed):
    n = 4
    clauses = _random_clauses(n, seed)
    result = two_sat(n, clauses)
    assert (result is not None) == _brute(n, clauses)
    if result is not None:
        assert len(result) == n
        assert _satisfies(clauses, result)


def test_contradiction():
    assert two_sat(1, [(1, 1), (-1, -1)]) is None


def test_forced_true():
    assert two_sat(1, [(1, 1)]) == [True]


def test_implication_chain():
    clauses = [(1, 1), (-1, 2), (-2, 3)]
    result = two_sat(3, clauses)
    assert result == [True, True, True]


def test_invalid_literals():
    with pytest.raises(ValueError):
        two_sat(2, [(0, 1)])
    with pytest.raises(ValueError):
        two_sat(2, [(1, 3)])