"""Strongly connected components with Tarjan's algorithm."""

from __future__ import annotations


class SCC:
    """Strongly connected components of a directed graph on vertices 1..n.

    ``graph[v]`` lists the successors of v (index 0 is ignored).  Components
    are numbered 1..scc_count in reverse topological order: component 1 has
    no outgoing edges.  ``scc_id[v]`` is the component of v and
    ``components[c]`` its vertices; index 0 of both is unused.
    """

    def __init__(self, n: int, graph):
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        if len(graph) < n + 1:
            raise ValueError("graph must cover vertices 1..n")
        self.n = n
        self.graph = [list(graph[v]) for v in range(n + 1)]
        self.scc_id = [0] * (n + 1)
        self.components: list[list[int]] = [[]]
        self.condensation: list[list[int]] | None = None
        self._tarjan()

    @property
    def scc_count(self) -> int:
        return len(self.components) - 1

    def _tarjan(self) -> None:
        n, graph, sid = self.n, self.graph, self.scc_id
        order = [0] * (n + 1)
        low = [0] * (n + 1)
        stack: list[int] = []
        timer = 0
        for s in range(1, n + 1):
            if order[s]:
                continue
            timer += 1
            order[s] = low[s] = timer
            stack.append(s)
            work = [(s, iter(graph[s]))]
            while work:
                v, it = work[-1]
                for w in it:
                    if not order[w]:
                        timer += 1
                        order[w] = low[w] = timer
                        stack.append(w)
                        work.append((w, iter(graph[w])))
                        break
                    if not sid[w]:
                        low[v] = min(low[v], order[w])
                else:
                    work.pop()
                    if low[v] == order[v]:
                        cid = len(self.components)
                        comp = []
                        while True:
                            t = stack.pop()
                            sid[t] = cid
                            comp.append(t)
                            if t == v:
                                break
                        self.components.append(comp)
                    if work:
                        u = work[-1][0]
                        low[u] = min(low[u], low[v])

    def build_condensation(self) -> list[list[int]]:
        """Build the graph between components: sorted, without duplicates."""
        sid = self.scc_id
        out: list[set[int]] = [set() for _ in range(self.scc_count + 1)]
        for v in range(1, self.n + 1):
            for w in self.graph[v]:
                if sid[v] != sid[w]:
                    out[sid[v]].add(sid[w])
        self.condensation = [sorted(targets) for targets in out]
        return self.condensation