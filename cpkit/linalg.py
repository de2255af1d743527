"""Determinants, Gaussian elimination and linear systems over several fields."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .numtheory import MOD


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def fast_det(a, mod: int | None = MOD) -> int:
    """Return the determinant of a square integer matrix, modulo mod if given.

    The input is left untouched.  With mod=None the exact determinant is
    returned.
    """
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    if mod is not None:
        rows = [[v % mod for v in row] for row in a]
    else:
        rows = [list(row) for row in a]
    ans = 1
    for i in range(n):
        for j in range(i + 1, n):
            while rows[j][i] != 0:
                if mod is not None:
                    t = rows[i][i] // rows[j][i]
                else:
                    t = _trunc_div(rows[i][i], rows[j][i])
                if t:
                    for k in range(i, n):
                        value = rows[i][k] - rows[j][k] * t
                        rows[i][k] = value % mod if mod is not None else value
                rows[i], rows[j] = rows[j], rows[i]
                ans = -ans
        ans *= rows[i][i]
        if mod is not None:
            ans %= mod
        if not ans:
            return 0
    return ans % mod if mod is not None else ans


class ModularField:
    """Integers modulo a prime."""

    largest_pivot = False

    def __init__(self, mod: int = MOD):
        if mod < 2:
            raise ValueError("modulus must be at least 2")
        self.mod = mod
        self.zero = 0
        self.one = 1

    def coerce(self, x) -> int:
        return x % self.mod

    def is_zero(self, x) -> bool:
        return x % self.mod == 0

    def add(self, a, b) -> int:
        return (a + b) % self.mod

    def sub(self, a, b) -> int:
        return (a - b) % self.mod

    def mul(self, a, b) -> int:
        return a * b % self.mod

    def div(self, a, b) -> int:
        return a * pow(b, self.mod - 2, self.mod) % self.mod


class RealField:
    """Floating-point numbers; zero means below eps in magnitude."""

    largest_pivot = True

    def __init__(self, eps: float = 1e-9):
        self.eps = eps
        self.zero = 0.0
        self.one = 1.0

    def coerce(self, x) -> float:
        return float(x)

    def is_zero(self, x) -> bool:
        return abs(x) < self.eps

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        return a / b


class ExactField:
    """Rational numbers, computed exactly with fractions."""

    largest_pivot = False

    def __init__(self):
        self.zero = Fraction(0)
        self.one = Fraction(1)

    def coerce(self, x) -> Fraction:
        return Fraction(x)

    def is_zero(self, x) -> bool:
        return x == 0

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        return a / b


@dataclass
class EliminationResult:
    """Reduced row echelon form, rank, determinant and optional inverse."""

    rref: list
    rank: int
    det: object
    inverse: list | None = None


@dataclass
class LinearSolution:
    """Solutions x = particular + sum(k_i * basis[i])."""

    particular: list
    basis: list

    @property
    def dimension(self) -> int:
        return len(self.basis)


def gaussian_elimination(a, field=None, with_inverse: bool = False) -> EliminationResult:
    """Reduce matrix a to reduced row echelon form over field."""
    field = field if field is not None else ModularField()
    if not a or not a[0]:
        raise ValueError("matrix must not be empty")
    n, m = len(a), len(a[0])
    if any(len(row) != m for row in a):
        raise ValueError("rows must have equal length")
    if with_inverse and n != m:
        raise ValueError("the inverse needs a square matrix")
    rows = [[field.coerce(v) for v in row] for row in a]
    out = None
    if with_inverse:
        out = [[field.one if i == j else field.zero for j in range(m)] for i in range(n)]

    rank = 0
    det = field.one
    for i in range(m):
        if rank == n:
            break
        if field.is_zero(rows[rank][i]):
            idx = -1
            if field.largest_pivot:
                best = field.zero
                for j in range(rank + 1, n):
                    if abs(rows[j][i]) > best:
                        best = abs(rows[j][i])
                        idx = j
            else:
                idx = next(
                    (j for j in range(rank + 1, n) if not field.is_zero(rows[j][i])), -1
                )
            if idx == -1 or field.is_zero(rows[idx][i]):
                det = field.zero
                continue
            rows[rank], rows[idx] = rows[idx], rows[rank]
            if out is not None:
                out[rank], out[idx] = out[idx], out[rank]
            det = field.sub(field.zero, det)
        det = field.mul(det, rows[rank][i])
        coeff = field.div(field.one, rows[rank][i])
        rows[rank] = [field.mul(v, coeff) for v in rows[rank]]
        if out is not None:
            out[rank] = [field.mul(v, coeff) for v in out[rank]]
        pivot_row = rows[rank]
        for j in range(n):
            if j == rank:
                continue
            t = rows[j][i]
            rows[j] = [field.sub(v, field.mul(p, t)) for v, p in zip(rows[j], pivot_row)]
            if out is not None:
                out[j] = [field.sub(v, field.mul(p, t)) for v, p in zip(out[j], out[rank])]
        rank += 1
    return EliminationResult(rows, rank, det, out)


def solve_linear_system(a, b, field=None) -> LinearSolution | None:
    """Solve a x = b; return None when there is no solution."""
    field = field if field is not None else ModularField()
    if not a or not a[0]:
        raise ValueError("matrix must not be empty")
    n, m = len(a), len(a[0])
    if len(b) != n:
        raise ValueError("right-hand side length must match the row count")
    augmented = [list(row) + [rhs] for row, rhs in zip(a, b)]
    rref = gaussian_elimination(augmented, field).rref

    for row in rref:
        if not field.is_zero(row[m]) and all(field.is_zero(v) for v in row[:m]):
            return None

    cols = []
    piv_col = 0
    for row in rref:
        while piv_col < m and field.is_zero(row[piv_col]):
            piv_col += 1
        if piv_col == m:
            break
        cols.append(piv_col)

    particular = [field.zero] * m
    for row, col in zip(rref, cols):
        particular[col] = row[m]

    pivots = set(cols)
    basis = []
    for i in range(m):
        if i in pivots:
            continue
        vec = [field.zero] * m
        vec[i] = field.one
        for row, col in zip(rref, cols):
            vec[col] = field.sub(field.zero, row[i])
        basis.append(vec)
    return LinearSolution(particular, basis)