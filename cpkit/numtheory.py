"""Modular exponentiation, extended Euclid, modular inverses and the CRT."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

MOD = 1_000_000_007
INF = 1_000_000_000_000_000_000

_rng = random.Random()


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def ipow(a: int, b: int) -> int:
    """Return a**b modulo MOD."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    return pow(a % MOD, b, MOD)


def ipow_mod(a: int, b: int, m: int) -> int:
    """Return a**b modulo m."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if m <= 0:
        raise ValueError("modulus must be positive")
    return pow(a % m, b, m)


def randint(low: int, high: int) -> int:
    """Return a uniformly random integer in [low, high]."""
    if low > high:
        raise ValueError("low must not exceed high")
    return _rng.randint(low, high)


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g, where |g| == gcd(a, b)."""
    if b == 0:
        return a, 1, 0
    g, x, y = ext_gcd(b, _tmod(a, b))
    return g, y, x - _tdiv(a, b) * y


def mod_inverse(a: int, m: int) -> int:
    """Return x with a*x ≡ 1 (mod m); raise ValueError if none exists."""
    g, x, _ = ext_gcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return _tmod(_tmod(x, m) + m, m)


@dataclass(frozen=True)
class Congruence:
    """The congruence x ≡ residue (mod modulus)."""

    residue: int
    modulus: int


def crt_merge(c1: Congruence, c2: Congruence) -> Congruence | None:
    """Combine two congruences into one, or return None if they conflict."""
    g, x, _ = ext_gcd(c1.modulus, c2.modulus)
    diff = c2.residue - c1.residue
    if _tmod(diff, g) != 0:
        return None
    ga = _tdiv(diff, g)
    yt = _tdiv(c2.modulus, g)
    x = _tmod(_tmod(x * ga, yt) + yt, yt)
    return Congruence(c1.modulus * x + c1.residue, c1.modulus * yt)


def crt(congruences) -> Congruence | None:
    """Combine every congruence; return None when the system has no solution."""
    ans: Congruence | None = Congruence(0, 1)
    for cg in congruences:
        ans = crt_merge(ans, cg)
        if ans is None:
            return None
    return ans


def solve_linear_congruence(a: int, b: int, c: int) -> Congruence | None:
    """Solve a*x ≡ b (mod c); return None when there is no solution."""
    g = math.gcd(a, c)
    if _tmod(b, g) != 0:
        return None
    a, b, c = _tdiv(a, g), _tdiv(b, g), _tdiv(c, g)
    sol = _tmod(mod_inverse(a, c) * b, c)
    return Congruence(sol, c)