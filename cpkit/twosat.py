"""2-satisfiability through strongly connected components."""

from __future__ import annotations

from .scc import SCC


def two_sat(n: int, clauses) -> list[bool] | None:
    """Satisfy the AND of (a OR b) over clauses (a, b).

    Literal i stands for x_i and -i for NOT x_i, with 1 <= |i| <= n.  Return
    the values of x_1..x_n, or None when the formula is unsatisfiable.
    """
    if n < 0:
        raise ValueError("variable count must be non-negative")

    def node(lit: int) -> int:
        if lit == 0 or abs(lit) > n:
            raise ValueError(f"literal {lit} outside 1..{n}")
        return 2 * lit if lit > 0 else -2 * lit - 1

    def negate(p: int) -> int:
        return ((p - 1) ^ 1) + 1

    graph: list[list[int]] = [[] for _ in range(2 * n + 2)]
    for a, b in clauses:
        p, q = node(a), node(b)
        graph[negate(p)].append(q)
        graph[negate(q)].append(p)

    sid = SCC(2 * n, graph).scc_id
    result = []
    for i in range(1, n + 1):
        neg, pos = sid[2 * i - 1], sid[2 * i]
        if neg == pos:
            return None
        result.append(neg > pos)
    return result