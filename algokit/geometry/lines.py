"""Lines, segments and rays in the plane: projections, distances and intersections."""

from __future__ import annotations

import math
from dataclasses import dataclass

from algokit.geometry.point import (
    EPS,
    Point,
    cross,
    cross2,
    dist,
    dist2,
    dot,
    orientation,
    sign,
)


def _points_on(v: Point, c: float) -> tuple[Point, Point]:
    """Two distinct points on the line ``cross(v, (x, y)) == c``."""
    a, b = -v.y, v.x
    if sign(a) == 0:
        return Point(0.0, c / b), Point(1.0, c / b)
    if sign(b) == 0:
        return Point(c / a, 0.0), Point(c / a, 1.0)
    return Point(0.0, c / b), Point(1.0, (c - a) / b)


@dataclass(frozen=True)
class Line:
    """A line through ``a`` and ``b``, also held as ``cross(v, (x, y)) == c``."""

    a: Point
    b: Point
    v: Point
    c: float

    @classmethod
    def through(cls, p: Point, q: Point) -> Line:
        """The line through two points."""
        v = q - p
        return cls(p, q, v, cross(v, p))

    @classmethod
    def from_direction(cls, v: Point, c: float) -> Line:
        """The line with direction ``v`` and offset ``c``."""
        p, q = _points_on(v, c)
        return cls(p, q, v, c)

    @classmethod
    def from_equation(cls, a: float, b: float, c: float) -> Line:
        """The line ``a*x + b*y + c == 0``."""
        return cls.from_direction(Point(b, -a), -c)

    def abc(self) -> tuple[float, float, float]:
        """Coefficients ``(a, b, c)`` of ``a*x + b*y + c == 0``."""
        return -self.v.y, self.v.x, -self.c

    def side(self, p: Point) -> int:
        """1 if ``p`` is on the left, -1 if on the right, 0 if on the line."""
        return sign(cross(self.v, p) - self.c)

    def perpendicular_through(self, p: Point) -> Line:
        """The line through ``p`` perpendicular to this one."""
        return Line.through(p, p + self.v.perp())

    def translate(self, t: Point) -> Line:
        """This line shifted by the vector ``t``."""
        return Line.from_direction(self.v, self.c + cross(self.v, t))

    def cmp_by_projection(self, p: Point, q: Point) -> bool:
        """Whether the projection of ``p`` comes before that of ``q`` along ``v``."""
        return dot(self.v, p) < dot(self.v, q)

    def shift_left(self, d: float) -> Line:
        """This line moved a distance ``d`` to its left."""
        z = self.v.perp().truncate(d)
        return Line.through(self.a + z, self.b + z)


def point_along_line(a: Point, b: Point, d: float) -> Point:
    """The point at distance ``d`` from ``a`` in the direction of ``b``."""
    if a == b:
        raise ValueError("the two points must be distinct")
    return a + ((b - a) / (b - a).norm()) * d


def project_point_to_line(a: Point, b: Point, c: Point) -> Point:
    """Orthogonal projection of ``c`` onto the line through ``a`` and ``b``."""
    return a + (b - a) * dot(c - a, b - a) / (b - a).norm2()


def reflect_point_over_line(a: Point, b: Point, c: Point) -> Point:
    """Mirror image of ``c`` in the line through ``a`` and ``b``."""
    p = project_point_to_line(a, b, c)
    return p + p - c


def dist_point_to_line(a: Point, b: Point, c: Point) -> float:
    """Distance from ``c`` to the line through ``a`` and ``b``."""
    return abs(cross(b - a, c - a) / (b - a).norm())


def is_point_on_segment(a: Point, b: Point, p: Point) -> bool:
    """Whether ``p`` lies on the segment ``ab``."""
    if abs(cross(p - b, a - b)) >= EPS:
        return False
    if p.x < min(a.x, b.x) - EPS or p.x > max(a.x, b.x) + EPS:
        return False
    if p.y < min(a.y, b.y) - EPS or p.y > max(a.y, b.y) + EPS:
        return False
    return True


def project_point_to_segment(a: Point, b: Point, c: Point) -> Point:
    """The point of segment ``ab`` closest to ``c``."""
    r = dist2(a, b)
    if sign(r) == 0:
        return a
    r = dot(c - a, b - a) / r
    if r < 0:
        return a
    if r > 1:
        return b
    return a + (b - a) * r


def dist_point_to_segment(a: Point, b: Point, c: Point) -> float:
    """Distance from ``c`` to the segment ``ab``."""
    return dist(c, project_point_to_segment(a, b, c))


def is_parallel(a: Point, b: Point, c: Point, d: Point) -> int:
    """0 if lines ab and cd are not parallel, 1 if parallel, 2 if collinear."""
    if abs(cross(b - a, d - c)) >= EPS:
        return 0
    if abs(cross(a - b, a - c)) < EPS and abs(cross(c - d, c - a)) < EPS:
        return 2
    return 1


def are_lines_same(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Whether lines ab and cd coincide."""
    return abs(cross(a - c, c - d)) < EPS and abs(cross(b - c, c - d)) < EPS


def angle_bisector(a: Point, b: Point, c: Point) -> Point:
    """Direction vector bisecting the angle ``abc``."""
    p, q = a - b, c - b
    return p + q * math.sqrt(dot(p, p) / dot(q, q))


def point_line_relation(a: Point, b: Point, p: Point) -> int:
    """1 if ``p`` is counter-clockwise of line ab, 2 if clockwise, 3 if on it."""
    c = sign(cross(p - a, b - a))
    if c < 0:
        return 1
    if c > 0:
        return 2
    return 3


def line_line_intersection(a: Point, b: Point, c: Point, d: Point) -> Point | None:
    """Intersection of lines ab and cd, or None if they are parallel."""
    a1, b1, c1 = a.y - b.y, b.x - a.x, cross(a, b)
    a2, b2, c2 = c.y - d.y, d.x - c.x, cross(c, d)
    det = a1 * b2 - a2 * b1
    if det == 0:
        return None
    return Point((b1 * c2 - b2 * c1) / det, (c1 * a2 - a1 * c2) / det)


def seg_seg_intersection(a: Point, b: Point, c: Point, d: Point) -> Point | None:
    """Point where segments ab and cd properly cross, or None."""
    oa, ob = cross2(c, d, a), cross2(c, d, b)
    oc, od = cross2(a, b, c), cross2(a, b, d)
    if oa * ob < 0 and oc * od < 0:
        return (a * ob - b * oa) / (ob - oa)
    return None


def seg_seg_intersection_inside(a: Point, b: Point, c: Point, d: Point) -> list[Point]:
    """Common points of segments ab and cd.

    An empty list means no intersection, one point a single crossing and two
    points the ends of an overlapping stretch.
    """
    crossing = seg_seg_intersection(a, b, c, d)
    if crossing is not None:
        return [crossing]
    candidates = [
        p
        for p, on in (
            (a, is_point_on_segment(c, d, a)),
            (b, is_point_on_segment(c, d, b)),
            (c, is_point_on_segment(a, b, c)),
            (d, is_point_on_segment(a, b, d)),
        )
        if on
    ]
    result: list[Point] = []
    for p in sorted(candidates, key=lambda q: (q.x, q.y)):
        if not result or result[-1] != p:
            result.append(p)
    return result


def seg_line_relation(a: Point, b: Point, c: Point, d: Point) -> int:
    """0 if segment ab misses line cd, 1 if it crosses it, 2 if it lies on it."""
    p = cross2(c, d, a)
    q = cross2(c, d, b)
    if sign(p) == 0 and sign(q) == 0:
        return 2
    if p * q < 0:
        return 1
    return 0


def seg_line_intersection(a: Point, b: Point, c: Point, d: Point) -> Point | None:
    """Point where segment ab crosses line cd, or None if it does not."""
    relation = seg_line_relation(a, b, c, d)
    if relation == 2:
        raise ValueError("the segment lies on the line")
    if relation == 1:
        return line_line_intersection(a, b, c, d)
    return None


def dist_segment_to_segment(a: Point, b: Point, c: Point, d: Point) -> float:
    """Shortest distance between segments ab and cd."""
    if seg_seg_intersection(a, b, c, d) is not None:
        return 0.0
    return min(
        dist_point_to_segment(a, b, c),
        dist_point_to_segment(a, b, d),
        dist_point_to_segment(c, d, a),
        dist_point_to_segment(c, d, b),
    )


def dist_point_to_ray(a: Point, b: Point, c: Point) -> float:
    """Distance from ``c`` to the ray starting at ``a`` with direction ``b``."""
    b = a + b
    if dot(c - a, b - a) < 0.0:
        return dist(c, a)
    return dist_point_to_line(a, b, c)


def ray_ray_intersect(a_start: Point, a_dir: Point, b_start: Point, b_dir: Point) -> bool:
    """Whether two rays, each given by start point and direction, meet."""
    dx = b_start.x - a_start.x
    dy = b_start.y - a_start.y
    det = b_dir.x * a_dir.y - b_dir.y * a_dir.x
    if abs(det) < EPS:
        return False
    u = (dy * b_dir.x - dx * b_dir.y) / det
    v = (dy * a_dir.x - dx * a_dir.y) / det
    return sign(u) >= 0 and sign(v) >= 0


def ray_ray_distance(a_start: Point, a_dir: Point, b_start: Point, b_dir: Point) -> float:
    """Shortest distance between two rays."""
    if ray_ray_intersect(a_start, a_dir, b_start, b_dir):
        return 0.0
    return min(
        dist_point_to_ray(a_start, a_dir, b_start),
        dist_point_to_ray(b_start, b_dir, a_start),
    )