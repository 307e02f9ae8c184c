"""Modular arithmetic helpers: addition, multiplication, powers and inverses."""

from __future__ import annotations

import math

MOD = 1_000_000_007


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def add(a: int, b: int, m: int = MOD) -> int:
    """Sum of two residues in ``[0, m)``, reduced by a single subtraction."""
    res = a + b
    return res - m if res >= m else res


def sub(a: int, b: int, m: int = MOD) -> int:
    """Difference ``a - b`` reduced into ``[0, m)``."""
    return (a - b) % m


def mul(a: int, b: int, m: int = MOD) -> int:
    """Product ``a * b``, reduced modulo ``m`` when it reaches ``m``."""
    res = a * b
    return res % m if res >= m else res


def mulmod(a: int, b: int, m: int = MOD) -> int:
    """Product of ``a`` and ``b`` modulo ``m`` in ``[0, m)``."""
    return (a * b) % m


def binpow(base: int, exponent: int, m: int = MOD) -> int:
    """``base ** exponent`` modulo ``m`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    square = base % m
    while exponent:
        if exponent & 1:
            result = mul(result, square, m)
        square = mul(square, square, m)
        exponent >>= 1
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor; ``gcd(a, 0)`` is ``a`` itself."""
    return math.gcd(a, b) if b else a


def lcm(a: int, b: int) -> int:
    """Least common multiple of ``a`` and ``b``."""
    return a * (b // gcd(a, b))


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g``, ``g`` the gcd of ``a`` and ``b``."""
    x, y, xx, yy = 1, 0, 0, 1
    while b:
        q, r = _trunc_divmod(a, b)
        a, b = b, r
        x, xx = xx, x - q * xx
        y, yy = yy, y - q * yy
    return a, x, y


def mod_inverse(a: int, m: int = MOD) -> int:
    """Inverse of ``a`` modulo ``m``; raises ValueError if none exists."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    if m == 1:
        return 0
    g, x, _ = extended_euclid(a % m, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def inverse_prime(a: int, m: int) -> int:
    """Inverse of ``a`` modulo a prime ``m`` through Fermat's little theorem."""
    if m < 2:
        raise ValueError("modulus must be at least 2")
    if math.gcd(a, m) != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return binpow(a % m, m - 2, m)


def power(n: int, r: int, m: int = MOD) -> int:
    """``n ** r`` modulo ``m``; a zero base always gives zero."""
    if r < 0:
        raise ValueError("exponent must be non-negative")
    if n == 0:
        return 0
    if r == 0:
        return 1
    return pow(n, r, m)