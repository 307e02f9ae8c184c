"""Primality, sieves, Euler's totient and divisors."""

from __future__ import annotations

import math


def phi(n: int) -> int:
    """Euler's totient of ``n`` by trial division."""
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def phi_table(n: int) -> list[int]:
    """Totients of every integer from 0 to ``n``."""
    table = list(range(n + 1))
    for i in range(2, n + 1):
        if table[i] == i:
            for j in range(i, n + 1, i):
                table[j] -= table[j] // i
    return table


class Sieve:
    """Primality and smallest-prime-factor tables for ``0..n``."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("sieve limit must be at least 1")
        self.limit = n
        self._smallest = [0] * (n + 1)
        for i in range(2, n + 1):
            if self._smallest[i] == 0:
                for j in range(i, n + 1, i):
                    if self._smallest[j] == 0:
                        self._smallest[j] = i
        self.primes = [i for i, p in enumerate(self._smallest) if p == i]

    def is_prime(self, k: int) -> bool:
        return k >= 2 and self._smallest[k] == k

    def __getitem__(self, k: int) -> bool:
        return self.is_prime(k)

    def __contains__(self, k: object) -> bool:
        return isinstance(k, int) and 0 <= k <= self.limit and self.is_prime(k)

    def prime_factorization(self, k: int) -> list[tuple[int, int]]:
        """Prime factors of ``k`` with multiplicities, in increasing order."""
        if k < 1:
            raise ValueError("only positive integers can be factorized")
        if k > self.limit:
            raise IndexError(f"{k} exceeds the sieve limit {self.limit}")
        factors: list[tuple[int, int]] = []
        while k != 1:
            p = self._smallest[k]
            count = 0
            while k % p == 0:
                k //= p
                count += 1
            factors.append((p, count))
        return factors

    def phi(self, n: int) -> int:
        """Euler's totient of ``n`` from its factorization."""
        for p, _ in self.prime_factorization(n):
            n = n // p * (p - 1)
        return n


def is_prime(n: int) -> bool:
    """Primality by trial division."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def primes_up_to(n: int) -> list[int]:
    """All primes not greater than ``n``."""
    if n < 2:
        return []
    flags = [True] * (n + 1)
    flags[0] = flags[1] = False
    for i in range(2, math.isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return [i for i, prime in enumerate(flags) if prime]


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n`` in increasing order."""
    if n < 1:
        raise ValueError("n must be positive")
    small = [i for i in range(1, math.isqrt(n) + 1) if n % i == 0]
    large = [n // i for i in reversed(small) if i * i != n]
    return small + large


def prime_factors(n: int) -> list[int]:
    """Distinct prime factors of ``n`` in increasing order."""
    factors = []
    p = 2
    while p * p <= n:
        if n % p == 0:
            factors.append(p)
            while n % p == 0:
                n //= p
        p += 1
    if n > 1:
        factors.append(n)
    return factors