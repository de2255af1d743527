import math

import pytest

from cpkit.primes import (
    SquareFreeCounter,
    TotientSummer,
    YarinSieve,
    factorize,
    is_prime,
    linear_sieve,
    pollard_rho,
)


def _trial_prime(n):
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def _is_square_free(n):
    return all(n % (d * d) for d in range(2, math.isqrt(n) + 1))


def test_is_prime_small_range():
    for n in range(0, 2000):
        assert is_prime(n) == _trial_prime(n)


def test_is_prime_large_known():
    assert is_prime(1_000_000_007)
    assert is_prime(998244353)
    assert not is_prime(1_000_000_007 * 998244353)


def test_is_prime_carmichael():
    for n in (561, 1105, 1729, 2465, 2821):
        assert is_prime(n) == _trial_prime(n)


def test_pollard_rho_divisor():
    for n in (91, 221, 1_000_000_007 * 998244353, 3 * 3 * 3 * 7):
        d = pollard_rho(n)
        assert n % d == 0
        assert is_prime(d)


def test_pollard_rho_too_small():
    with pytest.raises(ValueError):
        pollard_rho(2)


def test_factorize_known():
    n = 1_000_000_007 * 998244353
    assert factorize(n) == [998244353, 1_000_000_007]


def test_factorize_one():
    assert factorize(1) == []


@pytest.mark.parametrize("n", [2, 360, 9973, 2**20, 600851475143, 123456789012])
def test_factorize_invariants(n):
    fs = factorize(n)
    assert math.prod(fs) == n
    assert fs == sorted(fs)
    assert all(is_prime(f) for f in fs)


def test_factorize_non_positive():
    with pytest.raises(ValueError):
        factorize(0)


def test_linear_sieve_primes():
    primes, _ = linear_sieve(30)
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_linear_sieve_primes_match_trial():
    primes, _ = linear_sieve(1000)
    assert primes == [n for n in range(1001) if _trial_prime(n)]


def test_linear_sieve_phi_gauss_identity():
    _, phi = linear_sieve(500)
    for n in range(1, 501):
        assert sum(phi[d] for d in range(1, n + 1) if n % d == 0) == n


def test_linear_sieve_phi_matches_gcd_count():
    _, phi = linear_sieve(100)
    for n in range(1, 101):
        assert phi[n] == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_yarin_matches_is_prime():
    sieve = YarinSieve(5000)
    for n in range(5001):
        assert sieve.is_prime(n) == is_prime(n)


def test_yarin_out_of_range():
    sieve = YarinSieve(100)
    with pytest.raises(ValueError):
        sieve.is_prime(101)
    with pytest.raises(ValueError):
        sieve.is_prime(-1)


def test_square_free_hundred():
    assert SquareFreeCounter(1000).count(100) == 61


def test_square_free_matches_brute_force():
    counter = SquareFreeCounter(5)
    running = 0
    for x in range(1, 3000):
        running += _is_square_free(x)
        if x % 97 == 0:
            assert counter.count(x) == running


def test_square_free_limit_independent():
    small, large = SquareFreeCounter(10), SquareFreeCounter(5000)
    for x in (10**5, 777777, 10**6):
        assert small.count(x) == large.count(x)


def test_square_free_zero():
    assert SquareFreeCounter(10).count(0) == 0


def test_totient_sum_ten():
    assert TotientSummer(100).sum(10) == 32


def test_totient_sum_matches_sieve():
    _, phi = linear_sieve(5000)
    summer = TotientSummer(20)
    for x in (21, 100, 1234, 5000):
        assert summer.sum(x) == sum(phi[1 : x + 1]) % summer.mod


def test_totient_sum_limit_independent():
    small, large = TotientSummer(50, 998244353), TotientSummer(20000, 998244353)
    for x in (10**5, 314159):
        assert small.sum(x) == large.sum(x)


def test_totient_summer_even_modulus():
    with pytest.raises(ValueError):
        TotientSummer(10, 4)