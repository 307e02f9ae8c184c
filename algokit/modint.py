"""Integers modulo a fixed modulus with arithmetic operators."""

from __future__ import annotations

from dataclasses import dataclass

MOD = 998244353


@dataclass(frozen=True, eq=False)
class ModInt:
    """An integer reduced modulo ``mod``; division assumes ``mod`` is prime."""

    value: int
    mod: int = MOD

    def __post_init__(self) -> None:
        if self.mod <= 0:
            raise ValueError("modulus must be positive")
        object.__setattr__(self, "value", self.value % self.mod)

    def _coerce(self, other: object) -> ModInt | None:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other
        if isinstance(other, int):
            return ModInt(other, self.mod)
        return None

    def __add__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self.value + o.value, self.mod)

    __radd__ = __add__

    def __sub__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self.value - o.value, self.mod)

    def __rsub__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self.value * o.value, self.mod)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __rtruediv__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self.inverse()

    def __pow__(self, exponent: int) -> ModInt:
        if exponent < 0:
            return self.inverse() ** -exponent
        result = 1
        base = self.value
        while exponent:
            if exponent & 1:
                result = result * base % self.mod
            base = base * base % self.mod
            exponent >>= 1
        return ModInt(result, self.mod)

    def inverse(self) -> ModInt:
        """Multiplicative inverse, computed as ``self ** (mod - 2)``."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self ** (self.mod - 2)

    def __invert__(self) -> ModInt:
        return self.inverse()

    def __neg__(self) -> ModInt:
        return ModInt(-self.value, self.mod)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.mod
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.mod))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)