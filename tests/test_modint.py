import math

import pytest

from cpkit.modint import MOD, Combinatorics, ModInt, power


def test_normalises_negative():
    assert ModInt(-1, 7).value == 7 - 1


def test_arithmetic_matches_integers():
    a, b = ModInt(123456789), ModInt(987654321)
    assert (a + b).value == (123456789 + 987654321) % MOD
    assert (a - b).value == (123456789 - 987654321) % MOD
    assert (a * b).value == 123456789 * 987654321 % MOD


def test_int_operands():
    a = ModInt(5, 11)
    assert a + 7 == ModInt(12, 11)
    assert 3 - a == ModInt(-2, 11)
    assert 2 * a == ModInt(10, 11)


def test_division_round_trip():
    a, b = ModInt(42), ModInt(99991)
    assert (a / b) * b == a


def test_inverse():
    for x in range(1, 13):
        assert ModInt(x, 13) * ModInt(x, 13).inv() == 1


def test_inverse_of_zero():
    with pytest.raises(ZeroDivisionError):
        ModInt(0, 13).inv()


def test_mixed_moduli():
    with pytest.raises(ValueError):
        ModInt(1, 7) + ModInt(1, 11)


def test_pow_fermat():
    assert ModInt(2).pow(MOD - 1) == 1
    assert ModInt(3) ** 10 == pow(3, 10, MOD)


def test_negation():
    a = ModInt(4, 9)
    assert a + (-a) == 0


def test_power_on_ints():
    assert power(3, 5) == 3**5
    assert power(7, 0) == 1


def test_power_negative():
    with pytest.raises(ValueError):
        power(2, -3)


def test_int_and_str():
    a = ModInt(17, 5)
    assert int(a) == a.value
    assert str(a) == str(a.value)


def test_binom_matches_math_comb():
    c = Combinatorics()
    for m in range(30):
        for k in range(m + 1):
            assert c.binom(m, k) == math.comb(m, k) % MOD


def test_binom_out_of_range():
    c = Combinatorics()
    assert c.binom(5, 6) == 0
    assert c.binom(5, -1) == 0
    assert c.binom(-1, 0) == 0


def test_row_sum_is_power_of_two():
    c = Combinatorics()
    n = 200
    assert sum(c.binom(n, k) for k in range(n + 1)) % MOD == pow(2, n, MOD)


def test_factorial_and_inverse_tables():
    c = Combinatorics()
    for m in range(1, 60):
        assert c.fac(m) * c.invfac(m) % MOD == 1
        assert c.inv(m) * m % MOD == 1
        assert c.fac(m) == math.factorial(m) % MOD


def test_negative_argument():
    with pytest.raises(ValueError):
        Combinatorics().fac(-1)


def test_small_prime_binom():
    c = Combinatorics(13)
    for m in range(13):
        for k in range(m + 1):
            assert c.binom(m, k) == math.comb(m, k) % 13


def test_binom_saturated_exact():
    c = Combinatorics()
    for m in range(40):
        for k in range(m + 1):
            assert c.binom_saturated(m, k) == math.comb(m, k)


def test_binom_saturated_caps():
    c = Combinatorics()
    assert c.binom_saturated(100, 50) == (1 << 63) - 1
    small = Combinatorics(cap=10)
    assert small.binom_saturated(5, 2) == 10
    assert small.binom_saturated(6, 3) == 10
    assert small.binom_saturated(4, 2) == math.comb(4, 2)
    assert small.binom_saturated(3, 4) == 0