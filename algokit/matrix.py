"""Dense integer matrices with arithmetic modulo a fixed modulus."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 998244353


class Matrix:
    """Matrix of integers whose arithmetic results are reduced modulo ``mod``."""

    def __init__(self, entries: Iterable[Iterable[int]], mod: int = MOD) -> None:
        self.entries = [list(row) for row in entries]
        self.mod = mod
        if len({len(row) for row in self.entries}) > 1:
            raise ValueError("all rows must have the same length")

    @classmethod
    def zeros(cls, rows: int, cols: int, mod: int = MOD) -> Matrix:
        """All-zero matrix of the given shape."""
        return cls([[0] * cols for _ in range(rows)], mod)

    @classmethod
    def identity(cls, n: int, mod: int = MOD) -> Matrix:
        """The ``n`` by ``n`` unit matrix."""
        return cls([[int(i == j) for j in range(n)] for i in range(n)], mod)

    @property
    def shape(self) -> tuple[int, int]:
        rows = len(self.entries)
        return rows, len(self.entries[0]) if rows else 0

    def __getitem__(self, index: tuple[int, int]) -> int:
        i, j = index
        return self.entries[i][j]

    def __setitem__(self, index: tuple[int, int], value: int) -> None:
        i, j = index
        self.entries[i][j] = value

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [[(x + y) % self.mod for x, y in zip(r, s)] for r, s in zip(self.entries, other.entries)],
            self.mod,
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [[(x - y) % self.mod for x, y in zip(r, s)] for r, s in zip(self.entries, other.entries)],
            self.mod,
        )

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        rows, inner = self.shape
        other_rows, cols = other.shape
        if inner != other_rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        columns = list(zip(*other.entries))
        if not columns:
            return Matrix.zeros(rows, cols, self.mod)
        return Matrix(
            [[sum(x * y for x, y in zip(row, col)) % self.mod for col in columns] for row in self.entries],
            self.mod,
        )

    def pow(self, k: int) -> Matrix:
        """The matrix raised to the non-negative power ``k``."""
        rows, cols = self.shape
        if rows != cols:
            raise ValueError("only square matrices can be raised to a power")
        if k < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(rows, self.mod)
        base = self
        while k:
            if k & 1:
                result = result @ base
            base = base @ base
            k >>= 1
        return result

    def __pow__(self, k: int) -> Matrix:
        return self.pow(k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.entries == other.entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.entries!r}, mod={self.mod})"