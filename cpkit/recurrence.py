"""Linear recurrences: Berlekamp-Massey and Kitamasa's method."""

from __future__ import annotations

from .numtheory import MOD


def berlekamp_massey(x, mod: int = MOD) -> list[int]:
    """Return the shortest recurrence c with x[n] = sum(c[j] * x[n-j-1]) mod mod."""
    x = [v % mod for v in x]
    cur: list[int] = []
    ls: list[int] = []
    lf = 0
    ld = 0
    for i, xi in enumerate(x):
        t = sum(x[i - j - 1] * c for j, c in enumerate(cur)) % mod
        delta = (t - xi) % mod
        if delta == 0:
            continue
        if not cur:
            cur = [0] * (i + 1)
            lf = i
            ld = delta
            continue
        k = delta * pow(ld, mod - 2, mod) % mod
        c = [0] * (i - lf - 1) + [k] + [-v * k % mod for v in ls]
        if len(c) < len(cur):
            c.extend([0] * (len(cur) - len(c)))
        for j, v in enumerate(cur):
            c[j] = (c[j] + v) % mod
        if i - lf + len(ls) >= len(cur):
            ls, lf, ld = cur, i, delta
        cur = c
    return [v % mod for v in cur]


def kitamasa(rec, dp, n: int, mod: int = MOD) -> int:
    """Return dp[n] mod mod where dp[i] = sum(rec[j] * dp[i-j-1]).

    dp holds the first len(rec) terms.
    """
    m = len(rec)
    if m == 0:
        raise ValueError("recurrence must have at least one coefficient")
    if len(dp) < m:
        raise ValueError("need as many initial terms as coefficients")
    if n < 0:
        raise ValueError("index must be non-negative")
    if n <= m - 1:
        return dp[n] % mod
    rec = [v % mod for v in rec]

    def mul(v, w):
        t = [0] * (2 * m)
        for j, vj in enumerate(v):
            if vj:
                for k, wk in enumerate(w):
                    t[j + k] = (t[j + k] + vj * wk) % mod
        for j in range(2 * m - 1, m - 1, -1):
            tj = t[j]
            if tj:
                for k in range(1, m + 1):
                    t[j - k] = (t[j - k] + tj * rec[k - 1]) % mod
        return t[:m]

    s = [0] * m
    s[0] = 1
    t = [0] * m
    if m == 1:
        t[0] = rec[0]
    else:
        t[1] = 1
    while n:
        if n & 1:
            s = mul(s, t)
        t = mul(t, t)
        n >>= 1
    return sum(si * di for si, di in zip(s, dp)) % mod