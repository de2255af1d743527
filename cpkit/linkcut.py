"""A link-cut tree over a forest of unrooted trees."""

from __future__ import annotations


class _Node:
    """A splay-tree node; the root's ``pp`` points to the path parent."""

    __slots__ = ("p", "pp", "c", "flip")

    def __init__(self) -> None:
        self.p: _Node | None = None
        self.pp: _Node | None = None
        self.c: list[_Node | None] = [None, None]
        self.flip = False

    def fix(self) -> None:
        for child in self.c:
            if child is not None:
                child.p = self

    def push_flip(self) -> None:
        if not self.flip:
            return
        self.flip = False
        c = self.c
        c[0], c[1] = c[1], c[0]
        for child in c:
            if child is not None:
                child.flip = not child.flip

    def up(self) -> int:
        if self.p is None:
            return -1
        return int(self.p.c[1] is self)

    def rot(self, i: int, b: int) -> None:
        h = i ^ b
        x = self.c[i]
        y = x if b == 2 else x.c[h]
        z = y if b else x
        y.p = self.p
        if y.p is not None:
            self.p.c[self.up()] = y
        self.c[i] = z.c[i ^ 1]
        if b < 2:
            x.c[h] = y.c[h ^ 1]
            y.c[h ^ 1] = x
        z.c[i ^ 1] = self
        self.fix()
        x.fix()
        y.fix()
        if self.p is not None:
            self.p.fix()
        self.pp, y.pp = y.pp, self.pp

    def splay(self) -> None:
        """Splay this node to the root of its tree, leaving no flip pending."""
        self.push_flip()
        while self.p is not None:
            parent = self.p
            if parent.p is not None:
                parent.p.push_flip()
            parent.push_flip()
            self.push_flip()
            c1 = self.up()
            c2 = parent.up()
            if c2 == -1:
                parent.rot(c1, 2)
            else:
                parent.p.rot(c2, int(c1 != c2))

    def first(self) -> _Node:
        """Return the leftmost node of this subtree, splayed to the top."""
        node = self
        node.push_flip()
        while node.c[0] is not None:
            node = node.c[0]
            node.push_flip()
        node.splay()
        return node


class LinkCutTree:
    """A forest on vertices 0..n-1 supporting link, cut and connectivity."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self._nodes = [_Node() for _ in range(n)]

    def __len__(self) -> int:
        return len(self._nodes)

    def _node(self, i: int) -> _Node:
        if not 0 <= i < len(self._nodes):
            raise IndexError(f"vertex {i} out of range")
        return self._nodes[i]

    def link(self, u: int, v: int) -> None:
        """Add the edge (u, v); the vertices must be in different trees."""
        if self.connected(u, v):
            raise ValueError(f"vertices {u} and {v} are already connected")
        nu = self._node(u)
        self._make_root(nu)
        nu.pp = self._node(v)

    def cut(self, u: int, v: int) -> None:
        """Remove the edge (u, v), which must exist."""
        x = self._node(u)
        top = self._node(v)
        self._make_root(top)
        x.splay()
        expected = x.pp if x.pp is not None else x.c[0]
        if expected is not top:
            raise ValueError(f"there is no edge between {u} and {v}")
        if x.pp is not None:
            x.pp = None
        else:
            x.c[0] = None
            top.p = None
            x.fix()

    def connected(self, u: int, v: int) -> bool:
        """Return whether u and v lie in the same tree."""
        nu = self._access(self._node(u)).first()
        return nu is self._access(self._node(v)).first()

    def _make_root(self, u: _Node) -> None:
        self._access(u)
        u.splay()
        left = u.c[0]
        if left is not None:
            left.p = None
            left.flip = not left.flip
            left.pp = u
            u.c[0] = None
            u.fix()

    @staticmethod
    def _access(u: _Node) -> _Node:
        u.splay()
        while u.pp is not None:
            pp = u.pp
            pp.splay()
            u.pp = None
            right = pp.c[1]
            if right is not None:
                right.p = None
                right.pp = pp
            pp.c[1] = u
            pp.fix()
            u = pp
        return u