"""String matching with KMP and two suffix-array constructions."""

from __future__ import annotations


def get_fail(s) -> list[int]:
    """Failure function: fail[i] is the longest proper border of s[:i+1]."""
    fail = [0] * len(s)
    j = 0
    for i in range(1, len(s)):
        while j > 0 and s[i] != s[j]:
            j = fail[j - 1]
        if s[i] == s[j]:
            j += 1
            fail[i] = j
    return fail


def kmp(text, pattern) -> list[int]:
    """Return every i with text[i:i+len(pattern)] == pattern."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    fail = get_fail(pattern)
    last = len(pattern) - 1
    found = []
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = fail[j - 1]
        if ch == pattern[j]:
            if j == last:
                found.append(i - j)
                j = fail[j]
            else:
                j += 1
    return found


class SuffixArray:
    """Suffix array by prefix doubling, with Kasai's LCP.

    sa has len(s)+1 entries and starts with len(s); isa is its inverse;
    lcp[i] is the longest common prefix of suffixes sa[i] and sa[i+1].
    """

    def __init__(self, s):
        self.s = s
        self._build_sa()
        self._build_lcp()

    def _build_sa(self) -> None:
        s = self.s
        n = len(s) + 1
        sa = [n - 1] + sorted(range(n - 1), key=lambda i: s[i])
        isa = [0] * n
        for i in range(1, n):
            a, b = sa[i - 1], sa[i]
            isa[b] = isa[a] if i > 1 and s[a] == s[b] else i
        length = 1
        while length < n:
            old_sa = list(sa)
            old_isa = list(isa)
            pos = list(range(n))
            for t in old_sa:
                start = t - length
                if start >= 0:
                    rank = isa[start]
                    sa[pos[rank]] = start
                    pos[rank] += 1
            tied = False
            for i in range(1, n):
                a, b = sa[i - 1], sa[i]
                if old_isa[a] == old_isa[b] and old_isa[a + length] == old_isa[b + length]:
                    isa[b] = isa[a]
                else:
                    isa[b] = i
                if isa[b] != i:
                    tied = True
            if not tied:
                break
            length *= 2
        self.sa = sa
        self.isa = isa

    def _build_lcp(self) -> None:
        s = self.s
        size = len(s)
        sa, isa = self.sa, self.isa
        lcp = [0] * size
        h = 0
        for b in range(size):
            a = sa[isa[b] - 1]
            while a + h < size and b + h < size and s[a + h] == s[b + h]:
                h += 1
            lcp[isa[b] - 1] = h
            if h:
                h -= 1
        self.lcp = lcp


class CountingSuffixArray:
    """Suffix array by radix-sorted doubling.

    sa[0] == len(s); lcp[i] is the LCP of suffixes sa[i] and sa[i-1], with
    lcp[0] == 0; rank is the inverse of sa.  Symbols must lie in [1, lim).
    """

    def __init__(self, s, lim: int = 256):
        codes = [ord(c) for c in s] if isinstance(s, str) else list(s)
        for c in codes:
            if not 1 <= c < lim:
                raise ValueError(f"symbol {c} outside [1, {lim})")
        n = len(codes) + 1
        x = codes + [0]
        sa = list(range(n))
        ws_size = max(n, lim)
        j = 0
        p = 0
        while p < n:
            y = list(range(n - j, n)) + [v - j for v in sa if v >= j]
            ws = [0] * ws_size
            for v in x:
                ws[v] += 1
            for i in range(1, lim):
                ws[i] += ws[i - 1]
            for i in range(n - 1, -1, -1):
                c = x[y[i]]
                ws[c] -= 1
                sa[ws[c]] = y[i]
            x, y = y, x
            p = 1
            x[sa[0]] = 0
            for i in range(1, n):
                a, b = sa[i - 1], sa[i]
                if y[a] == y[b] and y[a + j] == y[b + j]:
                    x[b] = p - 1
                else:
                    x[b] = p
                    p += 1
            j = max(1, j * 2)
            lim = p

        rank = [0] * n
        for i in range(1, n):
            rank[sa[i]] = i
        text = codes + [0]
        lcp = [0] * n
        k = 0
        for i in range(n - 1):
            if k:
                k -= 1
            other = sa[rank[i] - 1]
            while text[i + k] == text[other + k]:
                k += 1
            lcp[rank[i]] = k
        self.sa = sa
        self.lcp = lcp
        self.rank = rank