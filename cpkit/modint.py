"""Integers modulo a prime and factorial-based combinatorics."""

from __future__ import annotations

MOD = 1_000_000_007
_SATURATION = (1 << 63) - 1


def power(a, b: int):
    """Return a**b by repeated squaring for any type supporting * and +int."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    res = a * 0 + 1
    while b:
        if b % 2:
            res = res * a
        a = a * a
        b //= 2
    return res


class ModInt:
    """An immutable residue modulo a prime p."""

    __slots__ = ("_value", "_modulus")

    def __init__(self, x: int = 0, p: int = MOD):
        if p <= 0:
            raise ValueError("modulus must be positive")
        self._value = x % p
        self._modulus = p

    @property
    def value(self) -> int:
        return self._value

    @property
    def modulus(self) -> int:
        return self._modulus

    def _coerce(self, other) -> ModInt:
        if isinstance(other, ModInt):
            if other._modulus != self._modulus:
                raise ValueError("operands have different moduli")
            return other
        if isinstance(other, int):
            return ModInt(other, self._modulus)
        return NotImplemented

    def pow(self, b: int) -> ModInt:
        return power(self, b)

    def inv(self) -> ModInt:
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return power(self, self._modulus - 2)

    def __int__(self) -> int:
        return self._value

    def __neg__(self) -> ModInt:
        return ModInt(-self._value, self._modulus)

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self._value + other._value, self._modulus)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self._value - other._value, self._modulus)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self._value * other._value, self._modulus)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self * other.inv()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other / self

    def __pow__(self, b: int) -> ModInt:
        return power(self, b)

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"ModInt({self._value}, {self._modulus})"


class Combinatorics:
    """Factorials, inverse factorials and binomials modulo a prime p."""

    def __init__(self, p: int = MOD, cap: int = _SATURATION):
        self.p = p
        self.cap = cap
        self._n = 0
        self._fac = [1]
        self._invfac = [1]
        self._inv = [0]
        self._pascal: list[list[int]] = [[1]]

    def init(self, m: int) -> None:
        """Precompute tables up to m (capped at p - 1 for small p)."""
        p = self.p
        if p < 100_000_000 and m >= p:
            m = p - 1
        if m <= self._n:
            return
        n = self._n
        extra = m - n
        self._fac.extend([0] * extra)
        self._invfac.extend([0] * extra)
        self._inv.extend([0] * extra)
        for i in range(n + 1, m + 1):
            self._fac[i] = self._fac[i - 1] * i % p
        self._invfac[m] = ModInt(self._fac[m], p).inv().value
        for i in range(m, n, -1):
            self._invfac[i - 1] = self._invfac[i] * i % p
            self._inv[i] = self._invfac[i] * self._fac[i - 1] % p
        self._n = m

    def _ensure(self, m: int) -> None:
        if m < 0:
            raise ValueError("argument must be non-negative")
        if m > self._n:
            self.init(2 * m)

    def fac(self, m: int) -> int:
        self._ensure(m)
        return self._fac[m]

    def invfac(self, m: int) -> int:
        self._ensure(m)
        return self._invfac[m]

    def inv(self, m: int) -> int:
        self._ensure(m)
        return self._inv[m]

    def binom(self, m: int, k: int) -> int:
        """Return C(m, k) modulo p, or 0 outside 0 <= k <= m."""
        if m < 0 or m < k or k < 0:
            return 0
        return self.fac(m) * self.invfac(k) % self.p * self.invfac(m - k) % self.p

    def binom_saturated(self, m: int, k: int) -> int:
        """Return C(m, k) exactly, saturated at cap."""
        if m < 0 or m < k or k < 0:
            return 0
        rows = self._pascal
        cap = self.cap
        for i in range(len(rows), m + 1):
            prev = rows[i - 1]
            row = [1] * (i + 1)
            for j in range(1, i):
                row[j] = min(prev[j] + prev[j - 1], cap)
            rows.append(row)
        return rows[m][k]