"""Circles in the plane: relations, intersections, tangents and special circles."""

from __future__ import annotations

import math
from dataclasses import dataclass

from algokit.geometry.lines import (
    Line,
    dist_point_to_line,
    dist_point_to_segment,
    line_line_intersection,
)
from algokit.geometry.point import (
    EPS,
    PI,
    Point,
    dist,
    dist2,
    dot,
    rotate_ccw90,
    rotate_cw90,
    sign,
)


@dataclass(frozen=True, eq=False)
class Circle:
    """A circle given by its centre and radius."""

    center: Point
    radius: float

    @classmethod
    def circumscribed(cls, a: Point, b: Point, c: Point) -> Circle:
        """The circle through three distinct, non-collinear points."""
        mid_ab = (a + b) * 0.5
        mid_ac = (a + c) * 0.5
        center = line_line_intersection(
            mid_ab, mid_ab + rotate_cw90(a - mid_ab), mid_ac, mid_ac + rotate_cw90(a - mid_ac)
        )
        if center is None:
            raise ValueError("the points are collinear")
        return cls(center, dist(a, center))

    @classmethod
    def inscribed(cls, a: Point, b: Point, c: Point) -> Circle:
        """The circle inscribed in the triangle ``abc``."""
        m = math.atan2(b.y - a.y, b.x - a.x)
        n = math.atan2(c.y - a.y, c.x - a.x)
        ua = a
        ub = a + Point(math.cos((n + m) / 2.0), math.sin((n + m) / 2.0))
        m = math.atan2(a.y - b.y, a.x - b.x)
        n = math.atan2(c.y - b.y, c.x - b.x)
        va = b
        vb = b + Point(math.cos((n + m) / 2.0), math.sin((n + m) / 2.0))
        center = line_line_intersection(ua, ub, va, vb)
        if center is None:
            raise ValueError("the triangle is degenerate")
        return cls(center, dist_point_to_segment(a, b, center))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.center == other.center and sign(self.radius - other.radius) == 0

    __hash__ = None  # type: ignore[assignment]

    def area(self) -> float:
        return PI * self.radius * self.radius

    def circumference(self) -> float:
        return 2.0 * PI * self.radius


def circle_point_relation(p: Point, r: float, b: Point) -> int:
    """0 if ``b`` is outside the circle, 1 if on its circumference, 2 if inside."""
    d = dist(p, b)
    if sign(d - r) < 0:
        return 2
    if sign(d - r) == 0:
        return 1
    return 0


def circle_line_relation(p: Point, r: float, a: Point, b: Point) -> int:
    """0 if line ab misses the circle, 1 if it touches it, 2 if it cuts it."""
    d = dist_point_to_line(a, b, p)
    if sign(d - r) < 0:
        return 2
    if sign(d - r) == 0:
        return 1
    return 0


def circle_line_intersection(c: Point, r: float, a: Point, b: Point) -> list[Point]:
    """Points where the line through ``a`` and ``b`` meets the circle."""
    b = b - a
    a = a - c
    big_a = dot(b, b)
    big_b = dot(a, b)
    big_c = dot(a, a) - r * r
    disc = big_b * big_b - big_a * big_c
    if disc < -EPS:
        return []
    points = [c + a + b * (-big_b + math.sqrt(disc + EPS)) / big_a]
    if disc > EPS:
        points.append(c + a + b * (-big_b - math.sqrt(disc)) / big_a)
    return points


def circle_circle_relation(a: Point, r: float, b: Point, big_r: float) -> int:
    """Relative position of two circles.

    5: apart, 4: touching from outside, 3: crossing in two points,
    2: touching from inside, 1: one inside the other.
    """
    d = dist(a, b)
    if sign(d - r - big_r) > 0:
        return 5
    if sign(d - r - big_r) == 0:
        return 4
    gap = abs(r - big_r)
    if sign(d - gap) > 0:
        return 3
    if sign(d - gap) == 0:
        return 2
    return 1


def circle_circle_intersection(a: Point, r: float, b: Point, big_r: float) -> list[Point]:
    """Common points of two circles; raises ValueError if the circles coincide."""
    if a == b and sign(r - big_r) == 0:
        raise ValueError("the circles coincide")
    d = math.sqrt(dist2(a, b))
    if d > r + big_r or d + min(r, big_r) < max(r, big_r):
        return []
    x = (d * d - big_r * big_r + r * r) / (2 * d)
    y = math.sqrt(max(0.0, r * r - x * x))
    v = (b - a) / d
    points = [a + v * x + rotate_ccw90(v) * y]
    if y > 0:
        points.append(a + v * x - rotate_ccw90(v) * y)
    return points


def circles_through_points(a: Point, b: Point, r: float) -> list[Circle]:
    """Circles of radius ``r`` passing through both ``a`` and ``b``."""
    return [Circle(p, r) for p in circle_circle_intersection(a, r, b, r)]


def circles_tangent_to_line(u: Line, q: Point, r: float) -> list[Circle]:
    """Circles of radius ``r`` tangent to line ``u`` and passing through ``q``."""
    d = dist_point_to_line(u.a, u.b, q)
    if sign(d - r * 2.0) > 0:
        return []
    if sign(d) == 0:
        return [
            Circle(q + rotate_ccw90(u.v).truncate(r), r),
            Circle(q + rotate_cw90(u.v).truncate(r), r),
        ]
    left = rotate_ccw90(u.v).truncate(r)
    right = rotate_cw90(u.v).truncate(r)
    u1 = Line.through(u.a + left, u.b + left)
    u2 = Line.through(u.a + right, u.b + right)
    centers = circle_line_intersection(q, r, u1.a, u1.b)
    if not centers:
        centers = circle_line_intersection(q, r, u2.a, u2.b)
    if not centers:
        return []
    first = centers[0]
    second = centers[1] if len(centers) > 1 else first
    if first == second:
        return [Circle(first, r)]
    return [Circle(first, r), Circle(second, r)]


def apollonius_circle(p: Point, q: Point, rp: float, rq: float) -> Circle:
    """Circle of points ``w`` with ``dist(w, p) : dist(w, q) == rp : rq``."""
    rq *= rq
    rp *= rp
    a = rq - rp
    if not sign(a):
        raise ValueError("the two ratios must differ")
    g = (rq * p.x - rp * q.x) / a
    h = (rq * p.y - rp * q.y) / a
    c = (rq * p.x * p.x - rp * q.x * q.x + rq * p.y * p.y - rp * q.y * q.y) / a
    return Circle(Point(g, h), math.sqrt(g * g + h * h - c))


def circle_circle_area(a: Point, r1: float, b: Point, r2: float) -> float:
    """Area of the intersection of two discs."""
    d = (a - b).norm()
    if r1 + r2 < d + EPS:
        return 0.0
    if r1 + d < r2 + EPS:
        return PI * r1 * r1
    if r2 + d < r1 + EPS:
        return PI * r2 * r2
    theta_1 = math.acos((r1 * r1 + d * d - r2 * r2) / (2 * r1 * d))
    theta_2 = math.acos((r2 * r2 + d * d - r1 * r1) / (2 * r2 * d))
    return r1 * r1 * (theta_1 - math.sin(2 * theta_1) / 2.0) + r2 * r2 * (
        theta_2 - math.sin(2 * theta_2) / 2.0
    )


def tangent_lines_from_point(p: Point, r: float, q: Point) -> list[Line]:
    """Tangent lines from ``q`` to the circle; none if ``q`` lies inside it."""
    x = sign(dist2(p, q) - r * r)
    if x < 0:
        return []
    if x == 0:
        return [Line.through(q, q + rotate_ccw90(q - p))]
    d = dist(p, q)
    along = r * r / d
    h = math.sqrt(r * r - along * along)
    base = (q - p).truncate(along)
    return [
        Line.through(q, p + (base + rotate_ccw90(q - p).truncate(h))),
        Line.through(q, p + (base + rotate_cw90(q - p).truncate(h))),
    ]


def tangent_lines_between_circles(
    c1: Point, r1: float, c2: Point, r2: float, inner: bool = False
) -> list[Line]:
    """Common outer tangents of two circles, or inner ones when ``inner`` is set."""
    if inner:
        r2 = -r2
    d = c2 - c1
    dr = r1 - r2
    d2 = d.norm2()
    h2 = d2 - dr * dr
    if d2 == 0 or h2 < 0:
        if h2 == 0:
            raise ValueError("the circles coincide")
        return []
    lines = []
    for direction in (-1, 1):
        v = (d * dr + rotate_ccw90(d) * math.sqrt(h2) * direction) / d2
        lines.append(Line.through(c1 + v * r1, c2 + v * r2))
    return lines if h2 > 0 else lines[:1]