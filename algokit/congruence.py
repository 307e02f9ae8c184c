"""Chinese remaindering, linear congruences and linear Diophantine equations."""

from __future__ import annotations

import math
from collections.abc import Iterable

from algokit.modular import extended_euclid


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounded toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def crt(a1: int, m1: int, a2: int, m2: int) -> tuple[int, int] | None:
    """Solve ``x = a1 (mod m1)``, ``x = a2 (mod m2)``.

    Returns ``(x, lcm(m1, m2))`` or None when the system has no solution.
    The moduli need not be coprime.
    """
    g, p, q = extended_euclid(m1, m2)
    if a1 % g != a2 % g:
        return None
    m = m1 // g * m2
    p %= m
    q %= m
    x = (p * a2 % m * (m1 // g) % m + q * a1 % m * (m2 // g) % m) % m
    return x, m


def crt_system(residues: Iterable[int], moduli: Iterable[int]) -> tuple[int, int] | None:
    """Solve a whole system of congruences; None if it is inconsistent."""
    pairs = list(zip(residues, moduli, strict=True))
    if not pairs:
        raise ValueError("at least one congruence is required")
    (x, m), *rest = pairs
    for a, n in rest:
        solved = crt(x, m, a, n)
        if solved is None:
            return None
        x, m = solved
    return x, m


def intersect_progressions(a1: int, d1: int, a2: int, d2: int) -> tuple[int, int] | None:
    """Intersection of progressions ``a1 + d1*k`` and ``a2 + d2*k``.

    Returns ``(first, step)`` or None when they share no term.
    """
    solved = crt(a1 % d1, d1, a2 % d2, d2)
    if solved is None:
        return None
    a, d = solved
    start = max(a1, a2)
    a = start if start % d == a else start - start % d + a
    return a, d


def inverse(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m``; raises ValueError if they are not coprime."""
    g, x, _ = extended_euclid(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def congruence_solutions(a: int, b: int, m: int) -> list[int]:
    """All ``x`` in ``[0, m)`` with ``a*x = b (mod m)``; exactly gcd(a, m) of them, or none."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    g = math.gcd(a, m)
    if b % g:
        return []
    a //= g
    b //= g
    step = m // g
    x = inverse(a, step) * b
    return [(x + step * k) % m for k in range(g)]


def find_any_solution(a: int, b: int, c: int) -> tuple[int, int, int] | None:
    """One solution ``(x, y, g)`` of ``a*x + b*y = c``, or None if there is none."""
    if a == 0 and b == 0:
        return None if c else (0, 0, 0)
    g, x, y = extended_euclid(abs(a), abs(b))
    if c % g:
        return None
    x *= c // g
    y *= c // g
    if a < 0:
        x = -x
    if b < 0:
        y = -y
    return x, y, g


def count_solutions(a: int, b: int, c: int, minx: int, maxx: int, miny: int, maxy: int) -> int:
    """Number of integer solutions of ``a*x + b*y = c`` inside the given box."""
    found = find_any_solution(a, b, c)
    if found is None:
        return 0
    x, y, g = found
    if a == 0 and b == 0:
        return (maxx - minx + 1) * (maxy - miny + 1)
    if a == 0:
        return (maxx - minx + 1) * int(miny <= c // b <= maxy)
    if b == 0:
        return (maxy - miny + 1) * int(minx <= c // a <= maxx)

    a //= g
    b //= g
    sign_a = 1 if a > 0 else -1
    sign_b = 1 if b > 0 else -1

    def shifted(cnt: int) -> tuple[int, int]:
        return x + cnt * b, y - cnt * a

    x, y = shifted(_trunc_div(minx - x, b))
    if x < minx:
        x, y = shifted(sign_b)
    if x > maxx:
        return 0
    lx1 = x
    x, y = shifted(_trunc_div(maxx - x, b))
    if x > maxx:
        x, y = shifted(-sign_b)
    rx1 = x

    x, y = shifted(-_trunc_div(miny - y, a))
    if y < miny:
        x, y = shifted(-sign_a)
    if y > maxy:
        return 0
    lx2 = x
    x, y = shifted(-_trunc_div(maxy - y, a))
    if y > maxy:
        x, y = shifted(sign_a)
    rx2 = x

    if lx2 > rx2:
        lx2, rx2 = rx2, lx2
    lx = max(lx1, lx2)
    rx = min(rx1, rx2)
    if lx > rx:
        return 0
    return (rx - lx) // abs(b) + 1