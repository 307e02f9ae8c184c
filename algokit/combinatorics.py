"""Counting helpers: gcd pair counts, binomials, bounded sums and floor sums."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

MOD = 1_000_000_007


def _positive_values(values: Iterable[int]) -> list[int]:
    items = list(values)
    if any(v < 1 for v in items):
        raise ValueError("all values must be positive integers")
    return items


def count_pairs_with_free_gcd(values: Iterable[int]) -> int:
    """Count pairs whose gcd is not a multiple of any value in the collection."""
    items = _positive_values(values)
    limit = max(items, default=0)
    counts = Counter(items)

    pairs = [0] * (limit + 1)
    for g in range(1, limit + 1):
        multiples = sum(counts[j] for j in range(g, limit + 1, g))
        pairs[g] = multiples * (multiples - 1) // 2
    # Remove pairs whose gcd is a proper multiple of g.
    for g in range(limit, 0, -1):
        pairs[g] -= sum(pairs[j] for j in range(2 * g, limit + 1, g))

    blocked = [False] * (limit + 1)
    for v in counts:
        for j in range(v, limit + 1, v):
            blocked[j] = True
    return sum(pairs[g] for g in range(1, limit + 1) if not blocked[g])


def max_pair_gcd(values: Iterable[int]) -> int:
    """Largest gcd of any two entries; 1 when no larger gcd occurs."""
    items = _positive_values(values)
    if not items:
        raise ValueError("at least one value is required")
    limit = max(items)
    counts = Counter(items)
    for d in range(limit, 1, -1):
        if sum(counts[m] for m in range(d, limit + 1, d)) > 1:
            return d
    return 1


class Binomial:
    """Binomial coefficients modulo a prime from precomputed factorials."""

    def __init__(self, limit: int = 200005, mod: int = MOD) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if mod <= limit:
            raise ValueError("mod must be a prime larger than limit")
        self.limit = limit
        self.mod = mod
        fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fact[i] = fact[i - 1] * i % mod
        inv_fact = [1] * (limit + 1)
        inv_fact[limit] = pow(fact[limit], -1, mod)
        for i in range(limit, 0, -1):
            inv_fact[i - 1] = inv_fact[i] * i % mod
        self._fact = fact
        self._inv_fact = inv_fact

    def ncr(self, n: int, r: int) -> int:
        """``C(n, r)`` modulo ``mod``; zero when ``r`` is outside ``[0, n]``."""
        if n < 0 or r < 0 or r > n:
            return 0
        if n > self.limit:
            raise ValueError(f"{n} exceeds the precomputed limit {self.limit}")
        return self._fact[n] * self._inv_fact[r] % self.mod * self._inv_fact[n - r] % self.mod


def count_bounded_solutions(n: int, s: int, low: int, high: int) -> int:
    """Number of n-tuples with ``low <= x_i <= high`` and ``x_1 + ... + x_n <= s``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if low > high:
        raise ValueError("low must not exceed high")
    if s < low * n:
        return 0
    s -= low * n
    width = high - low
    total = 0
    for k in range(n + 1):
        top = s - k * (width + 1) + n
        if top < n:
            break
        term = math.comb(n, k) * math.comb(top, n)
        total += -term if k & 1 else term
    return total


def floor_sum(n: int) -> int:
    """Sum of ``n // k`` for ``k`` from 1 to ``n``, in O(sqrt n) blocks."""
    total = 0
    i = 1
    while i <= n:
        quotient = n // i
        last = n // quotient
        total += quotient * (last - i + 1)
        i = last + 1
    return total


def ncr_approx(n: int, r: int) -> int:
    """``C(n, r)`` through a sum of logarithms, rounded to the nearest integer."""
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")
    if r > n:
        return 0
    if r == 0 or r == n:
        return 1
    log_sum = sum(math.log(n - i) - math.log(i + 1) for i in range(r))
    return round(math.exp(log_sum))


def knight_placements(n: int) -> int:
    """Ways to place two knights on an ``n`` by ``n`` board so they do not attack."""
    if n < 1:
        raise ValueError("board size must be positive")
    return (n - 1) * (n + 4) * (n * n - 3 * n + 4) // 2