"""Polynomial multiplication with the FFT and the number-theoretic transform."""

from __future__ import annotations

import math
from functools import lru_cache

NTT_MOD = (119 << 23) + 1  # 998244353
NTT_ROOT = 62
_NTT_MAX_LOG = 23


def _check_power_of_two(n: int) -> None:
    if n == 0 or n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")


@lru_cache(maxsize=None)
def _bit_reversal(n: int) -> tuple[int, ...]:
    log = n.bit_length() - 1
    rev = [0] * n
    for i in range(n):
        rev[i] = (rev[i // 2] | (i & 1) << log) // 2
    return tuple(rev)


@lru_cache(maxsize=None)
def _fft_roots(n: int) -> tuple[complex, ...]:
    """rt[k + j] = exp(i*pi*j/k) for every power of two k below n."""
    rt = [1 + 0j] * max(n, 2)
    k = 2
    while k < n:
        for j in range(k):
            rt[k + j] = complex(math.cos(math.pi * j / k), math.sin(math.pi * j / k))
        k *= 2
    return tuple(rt)


@lru_cache(maxsize=None)
def _ntt_roots(n: int) -> tuple[int, ...]:
    rt = [1] * max(n, 2)
    k, s = 2, 2
    while k < n:
        z = pow(NTT_ROOT, NTT_MOD >> s, NTT_MOD)
        for i in range(k, 2 * k):
            rt[i] = rt[i // 2] * (z if i & 1 else 1) % NTT_MOD
        k *= 2
        s += 1
    return tuple(rt)


def fft(a) -> list[complex]:
    """Evaluate the polynomial with coefficients a at the powers of exp(2*pi*i/n)."""
    out = [complex(v) for v in a]
    n = len(out)
    _check_power_of_two(n)
    rt = _fft_roots(n)
    for i, r in enumerate(_bit_reversal(n)):
        if i < r:
            out[i], out[r] = out[r], out[i]
    k = 1
    while k < n:
        for i in range(0, n, 2 * k):
            for j in range(k):
                z = rt[j + k] * out[i + j + k]
                out[i + j + k] = out[i + j] - z
                out[i + j] += z
        k *= 2
    return out


def conv(a, b) -> list[float]:
    """Return the coefficients of the product of two real polynomials."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = 1 << size.bit_length()
    packed = [0j] * n
    for i, v in enumerate(a):
        packed[i] = complex(v, 0.0)
    for i, v in enumerate(b):
        packed[i] = complex(packed[i].real, v)
    packed = [x * x for x in fft(packed)]
    mixed = [packed[-i & (n - 1)] - packed[i].conjugate() for i in range(n)]
    mixed = fft(mixed)
    return [mixed[i].imag / (4 * n) for i in range(size)]


def ntt(a) -> list[int]:
    """Evaluate a modulo 998244353 at the powers of an n-th root of unity."""
    out = [v % NTT_MOD for v in a]
    n = len(out)
    _check_power_of_two(n)
    if n > 1 << _NTT_MAX_LOG:
        raise ValueError(f"length must not exceed 2**{_NTT_MAX_LOG}")
    rt = _ntt_roots(n)
    for i, r in enumerate(_bit_reversal(n)):
        if i < r:
            out[i], out[r] = out[r], out[i]
    k = 1
    while k < n:
        for i in range(0, n, 2 * k):
            for j in range(k):
                z = rt[j + k] * out[i + j + k] % NTT_MOD
                ai = out[i + j]
                out[i + j + k] = (ai - z) % NTT_MOD
                out[i + j] = (ai + z) % NTT_MOD
        k *= 2
    return out


def conv_ntt(a, b) -> list[int]:
    """Return the product of two polynomials modulo 998244353."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = 1 << size.bit_length()
    inv = pow(n, NTT_MOD - 2, NTT_MOD)
    left = ntt(list(a) + [0] * (n - len(a)))
    right = ntt(list(b) + [0] * (n - len(b)))
    out = [0] * n
    for i, (x, y) in enumerate(zip(left, right)):
        out[-i & (n - 1)] = x * y % NTT_MOD * inv % NTT_MOD
    return ntt(out)[:size]


def conv_mod(a, b, m: int) -> list[int]:
    """Return the product of two polynomials modulo an arbitrary m, precisely."""
    if m < 1:
        raise ValueError("modulus must be positive")
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = 1 << size.bit_length()
    cut = max(math.isqrt(m), 1)
    left = [0j] * n
    right = [0j] * n
    for i, v in enumerate(a):
        v %= m
        left[i] = complex(v // cut, v % cut)
    for i, v in enumerate(b):
        v %= m
        right[i] = complex(v // cut, v % cut)
    left, right = fft(left), fft(right)

    outl = [0j] * n
    outs = [0j] * n
    for i in range(n):
        j = -i & (n - 1)
        outl[j] = (left[i] + left[j].conjugate()) * right[i] / (2.0 * n)
        outs[j] = (left[i] - left[j].conjugate()) * right[i] / (2.0 * n) / 1j
    outl, outs = fft(outl), fft(outs)

    res = []
    for i in range(size):
        av = int(outl[i].real + 0.5)
        cv = int(outs[i].imag + 0.5)
        bv = int(outl[i].imag + 0.5) + int(outs[i].real + 0.5)
        res.append(((av % m * cut + bv) % m * cut + cv) % m)
    return res