"""Points in the plane with tolerance-aware comparisons and basic vector maths."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import cmp_to_key

EPS = 1e-9
PI = math.pi


def sign(x: float) -> int:
    """-1, 0 or 1 depending on ``x`` compared with zero within ``EPS``."""
    return (x > EPS) - (x < -EPS)


@dataclass(frozen=True, eq=False)
class Point:
    """A point or vector with float coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point:
        if isinstance(k, Point):
            return NotImplemented
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Point:
        return Point(self.x / k, self.y / k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return sign(other.x - self.x) == 0 and sign(other.y - self.y) == 0

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Point) -> bool:
        return self.y < other.y if sign(other.x - self.x) == 0 else self.x < other.x

    def __gt__(self, other: Point) -> bool:
        return self.y > other.y if sign(other.x - self.x) == 0 else self.x > other.x

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g})"

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y

    def perp(self) -> Point:
        """The vector rotated a quarter turn counter-clockwise."""
        return Point(-self.y, self.x)

    def arg(self) -> float:
        return math.atan2(self.y, self.x)

    def truncate(self, r: float) -> Point:
        """Vector of length ``r`` in the same direction; a zero vector stays as is."""
        k = self.norm()
        if not sign(k):
            return self
        r /= k
        return Point(self.x * r, self.y * r)


def dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def cross(a: Point, b: Point) -> float:
    return a.x * b.y - a.y * b.x


def cross2(a: Point, b: Point, c: Point) -> float:
    """Cross product of ``b - a`` and ``c - a``."""
    return cross(b - a, c - a)


def dist2(a: Point, b: Point) -> float:
    return dot(a - b, a - b)


def dist(a: Point, b: Point) -> float:
    return math.sqrt(dist2(a, b))


def orientation(a: Point, b: Point, c: Point) -> int:
    """1 for a counter-clockwise turn a-b-c, -1 for clockwise, 0 if collinear."""
    return sign(cross(b - a, c - a))


def rotate_ccw90(a: Point) -> Point:
    return Point(-a.y, a.x)


def rotate_cw90(a: Point) -> Point:
    return Point(a.y, -a.x)


def rotate_ccw(a: Point, t: float) -> Point:
    c, s = math.cos(t), math.sin(t)
    return Point(a.x * c - a.y * s, a.x * s + a.y * c)


def rotate_cw(a: Point, t: float) -> Point:
    c, s = math.cos(t), math.sin(t)
    return Point(a.x * c + a.y * s, -a.x * s + a.y * c)


def rad_to_deg(r: float) -> float:
    return r * 180.0 / PI


def deg_to_rad(d: float) -> float:
    return d * PI / 180.0


def get_angle(a: Point, b: Point) -> float:
    """Unsigned angle between two vectors, in radians."""
    cos_theta = dot(a, b) / a.norm() / b.norm()
    return math.acos(max(-1.0, min(1.0, cos_theta)))


def is_point_in_angle(b: Point, a: Point, c: Point, p: Point) -> bool:
    """Whether ``p`` lies inside the angle ``bac``."""
    if orientation(a, b, c) == 0:
        raise ValueError("the angle's arms must not be collinear")
    if orientation(a, c, b) < 0:
        b, c = c, b
    return orientation(a, c, p) >= 0 and orientation(a, b, p) <= 0


def _half(p: Point) -> bool:
    return p.y > 0.0 or (p.y == 0.0 and p.x < 0.0)


def polar_sort(points: Iterable[Point], origin: Point | None = None) -> list[Point]:
    """Points sorted counter-clockwise around ``origin`` (the zero point by default)."""
    o = Point() if origin is None else origin

    def less(a: Point, b: Point) -> bool:
        a, b = a - o, b - o
        return (_half(a), 0.0, a.norm2()) < (_half(b), cross(a, b), b.norm2())

    def compare(a: Point, b: Point) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(points, key=cmp_to_key(compare))