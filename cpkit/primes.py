"""Primality, factorisation and sieves for multiplicative functions."""

from __future__ import annotations

import math
import random

MOD = 1_000_000_007

_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_rng = random.Random()


def _miller_rabin_attempt(n: int, a: int) -> bool:
    if n % a == 0:
        return False
    s, d = 0, n - 1
    while d % 2 == 0:
        d //= 2
        s += 1
    p = pow(a, d, n)
    if p == 1 or p == n - 1:
        return True
    for _ in range(s - 1):
        p = p * p % n
        if p == n - 1:
            return True
    return False


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for all 64-bit integers."""
    if n == 1:
        return False
    for base in _BASES:
        if n == base:
            return True
        if n < base:
            return False
        if n > 40 and not _miller_rabin_attempt(n, base):
            return False
    return n > 40


def pollard_rho(n: int) -> int:
    """Return a prime divisor of n (n >= 3), found with Pollard's rho."""
    if n < 3:
        raise ValueError("n must be at least 3")
    while True:
        x = _rng.randrange(2, n)
        y = x
        c = _rng.randrange(1, n)
        while True:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            g = math.gcd(x - y, n)
            if g != 1:
                break
        if is_prime(g):
            return g
        n = g


def factorize(n: int) -> list[int]:
    """Return the prime factors of n in ascending order, with multiplicity."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2
    while n != 1 and not is_prime(n):
        d = pollard_rho(n)
        while n % d == 0:
            factors.append(d)
            n //= d
    if n != 1:
        factors.append(n)
    factors.sort()
    return factors


def linear_sieve(limit: int) -> tuple[list[int], list[int]]:
    """Return (primes up to limit, Euler's totient phi[0..limit])."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    composite = bytearray(limit + 1)
    phi = [0] * (limit + 1)
    if limit >= 1:
        phi[1] = 1
    primes: list[int] = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
            phi[i] = i - 1
        for p in primes:
            ip = i * p
            if ip > limit:
                break
            composite[ip] = 1
            if i % p == 0:
                phi[ip] = phi[i] * p
                break
            phi[ip] = phi[i] * phi[p]
    return primes, phi


def _mertens_prefix(limit: int) -> list[int]:
    """Prefix sums of the Möbius function over [0, limit]."""
    composite = bytearray(limit + 1)
    mu = [0] * (limit + 1)
    if limit >= 1:
        mu[1] = 1
    primes: list[int] = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
            mu[i] = -1
        for p in primes:
            ip = i * p
            if ip > limit:
                break
            composite[ip] = 1
            if i % p == 0:
                break
            mu[ip] = -mu[i]
    for i in range(1, limit + 1):
        mu[i] += mu[i - 1]
    return mu


class YarinSieve:
    """Odd-only sieve of Eratosthenes answering primality up to limit."""

    def __init__(self, limit: int):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        half = limit // 2 + 1
        bits = bytearray(b"\x01") * half
        bits[0] = 0
        i = 1
        while (2 * i + 1) ** 2 <= limit:
            if bits[i]:
                step = 2 * i + 1
                start = step * step // 2
                bits[start::step] = bytes(len(range(start, half, step)))
            i += 1
        self._bits = bits

    def is_prime(self, n: int) -> bool:
        if not 0 <= n <= self.limit:
            raise ValueError(f"{n} is outside the sieved range")
        if n % 2:
            return bool(self._bits[n >> 1])
        return n == 2


class SquareFreeCounter:
    """Counts square-free integers in [1, x] using Möbius prefix sums."""

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        self._mertens = _mertens_prefix(limit)
        self._cache: dict[int, int] = {}

    def _mertens_at(self, x: int) -> int:
        if x <= self.limit:
            return self._mertens[x]
        cached = self._cache.get(x)
        if cached is not None:
            return cached
        ans = 1
        i = 2
        while i <= x:
            q = x // i
            j = x // q
            ans -= self._mertens_at(q) * (j - i + 1)
            i = j + 1
        self._cache[x] = ans
        return ans

    def count(self, x: int) -> int:
        """Return the number of square-free integers in [1, x]."""
        xsq = math.isqrt(x)
        t = min(self.limit, xsq)
        mertens = self._mertens
        ret = sum((x // (i * i)) * (mertens[i] - mertens[i - 1]) for i in range(1, t + 1))
        i = t + 1
        while i <= xsq:
            q = x // (i * i)
            j = math.isqrt(x // q)
            ret += q * (self._mertens_at(j) - self._mertens_at(i - 1))
            i = j + 1
        return ret


class TotientSummer:
    """Sums Euler's totient over [1, x] modulo mod with a Dirichlet sieve."""

    def __init__(self, limit: int, mod: int = MOD):
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        self.mod = mod
        self._inv2 = pow(2, -1, mod)
        _, phi = linear_sieve(limit)
        prefix = [0] * (limit + 1)
        acc = 0
        for i in range(1, limit + 1):
            acc = (acc + phi[i]) % mod
            prefix[i] = acc
        self._prefix = prefix
        self._cache: dict[int, int] = {}

    def sum(self, x: int) -> int:
        """Return (phi(1) + ... + phi(x)) modulo mod."""
        if x <= self.limit:
            return self._prefix[max(x, 0)]
        cached = self._cache.get(x)
        if cached is not None:
            return cached
        mod = self.mod
        ans = x % mod * ((x + 1) % mod) % mod * self._inv2 % mod
        i = 2
        while i <= x:
            q = x // i
            j = x // q
            ans = (ans + self.sum(q) * (j - i + 1) % mod * (mod - 1)) % mod
            i = j + 1
        self._cache[x] = ans
        return ans