"""Polygons in the plane: areas, hulls, containment, calipers and distances."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence

from algokit.geometry.circles import Circle
from algokit.geometry.lines import (
    Line,
    dist_point_to_line,
    dist_point_to_segment,
    is_parallel,
    is_point_on_segment,
    line_line_intersection,
)
from algokit.geometry.point import (
    EPS,
    Point,
    cross,
    dist,
    dist2,
    dot,
    orientation,
    sign,
)

_INF = 1e100


def _edges(p: Sequence[Point]) -> list[tuple[Point, Point]]:
    """Consecutive vertex pairs, closing the polygon."""
    pts = list(p)
    return list(zip(pts, pts[1:] + pts[:1]))


def _signed_double_area(p: Sequence[Point]) -> float:
    return sum(cross(a, b) for a, b in _edges(p))


def area_of_triangle(a: Point, b: Point, c: Point) -> float:
    """Area of the triangle ``abc``."""
    return abs(cross(b - a, c - a) * 0.5)


def is_point_in_triangle(a: Point, b: Point, c: Point, p: Point) -> int:
    """-1 if ``p`` is strictly inside the triangle, 0 if on its border, 1 if outside."""
    if sign(cross(b - a, c - a)) < 0:
        b, c = c, b
    c1 = sign(cross(b - a, p - a))
    c2 = sign(cross(c - b, p - b))
    c3 = sign(cross(a - c, p - c))
    if c1 < 0 or c2 < 0 or c3 < 0:
        return 1
    if c1 + c2 + c3 != 3:
        return 0
    return -1


def perimeter(p: Sequence[Point]) -> float:
    """Length of the closed boundary through the vertices."""
    return sum(dist(a, b) for a, b in _edges(p))


def area(p: Sequence[Point]) -> float:
    """Area of a simple polygon given in either orientation."""
    return abs(_signed_double_area(p)) * 0.5


def centroid(p: Sequence[Point]) -> Point:
    """Centre of mass of a simple polygon with vertices in order."""
    scale = 3.0 * _signed_double_area(p)
    if scale == 0:
        raise ValueError("the polygon has zero area")
    total = Point()
    for a, b in _edges(p):
        total = total + (a + b) * cross(a, b)
    return total / scale


def is_ccw(p: Sequence[Point]) -> bool:
    """Whether the vertices run counter-clockwise."""
    return sign(_signed_double_area(p)) > 0


def geometric_median(points: Iterable[Point]) -> Point:
    """Point minimising the sum of distances to all points, by nested ternary search."""
    pts = list(points)
    if not pts:
        raise ValueError("at least one point is required")

    def total_distance(z: Point) -> float:
        return sum(dist(q, z) for q in pts)

    def best_y(x: float) -> tuple[float, float]:
        lo, hi = -1e5, 1e5
        for _ in range(60):
            m1 = lo + (hi - lo) / 3
            m2 = hi - (hi - lo) / 3
            if total_distance(Point(x, m1)) < total_distance(Point(x, m2)):
                hi = m2
            else:
                lo = m1
        return lo, total_distance(Point(x, lo))

    lo, hi = -1e5, 1e5
    for _ in range(60):
        m1 = lo + (hi - lo) / 3
        m2 = hi - (hi - lo) / 3
        if best_y(m1)[1] < best_y(m2)[1]:
            hi = m2
        else:
            lo = m1
    return Point(lo, best_y(lo)[0])


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Strict convex hull, counter-clockwise from the lowest-leftmost point."""
    pts = list(points)
    if len(pts) <= 1:
        return pts
    ordered = sorted(pts)
    up: list[Point] = []
    dn: list[Point] = []
    for q in ordered:
        while len(up) > 1 and orientation(up[-2], up[-1], q) >= 0:
            up.pop()
        while len(dn) > 1 and orientation(dn[-2], dn[-1], q) <= 0:
            dn.pop()
        up.append(q)
        dn.append(q)
    hull = dn
    if len(hull) > 1:
        hull.pop()
    up.reverse()
    up.pop()
    hull.extend(up)
    if len(hull) == 2 and hull[0] == hull[1]:
        hull.pop()
    return hull


def is_convex(p: Sequence[Point]) -> bool:
    """Whether the polygon never turns both left and right."""
    pts = list(p)
    n = len(pts)
    seen = [False, False, False]
    for i in range(n):
        a, b, c = pts[i], pts[(i + 1) % n], pts[(i + 2) % n]
        seen[sign(cross(b - a, c - a)) + 1] = True
        if seen[0] and seen[2]:
            return False
    return True


def is_point_in_convex(p: Sequence[Point], x: Point) -> int:
    """-1 strictly inside, 0 on the border, 1 outside a strictly convex CCW polygon."""
    n = len(p)
    if n < 3:
        raise ValueError("the polygon needs at least three vertices")
    a = orientation(p[0], p[1], x)
    b = orientation(p[0], p[n - 1], x)
    if a < 0 or b > 0:
        return 1
    lo, hi = 1, n - 1
    while lo + 1 < hi:
        mid = (lo + hi) >> 1
        if orientation(p[0], p[mid], x) >= 0:
            lo = mid
        else:
            hi = mid
    k = orientation(p[lo], p[hi], x)
    if k <= 0:
        return -k
    if lo == 1 and a == 0:
        return 0
    if hi == n - 1 and b == 0:
        return 0
    return -1


def is_point_on_polygon(p: Sequence[Point], z: Point) -> bool:
    """Whether ``z`` lies on some edge of the polygon."""
    return any(is_point_on_segment(a, b, z) for a, b in _edges(p))


def winding_number(p: Sequence[Point], z: Point) -> int | None:
    """Winding number of the polygon around ``z``; None if ``z`` is on the boundary."""
    if is_point_on_polygon(p, z):
        return None
    total = 0
    for a, b in _edges(p):
        below = a.y < z.y
        if below != (b.y < z.y):
            orient = orientation(z, b, a)
            if orient == 0:
                return 0
            if below == (orient > 0):
                total += 1 if below else -1
    return total


def is_point_in_polygon(p: Sequence[Point], z: Point) -> int:
    """-1 strictly inside, 0 on the boundary, 1 strictly outside."""
    k = winding_number(p, z)
    if k is None:
        return 0
    return 1 if k == 0 else -1


def extreme_vertex(p: Sequence[Point], z: Point, top: int) -> int:
    """Index of the vertex of a convex polygon with the largest dot product with ``z``.

    ``top`` is the index of the upper-right vertex.
    """
    n = len(p)
    if n == 1:
        return 0
    best = dot(p[0], z)
    best_id = 0
    if dot(p[top], z) > best:
        best, best_id = dot(p[top], z), top
    lo, hi = 1, top - 1
    while lo < hi:
        mid = (lo + hi) >> 1
        if dot(p[mid + 1], z) >= dot(p[mid], z):
            lo = mid + 1
        else:
            hi = mid
    if dot(p[lo], z) > best:
        best, best_id = dot(p[lo], z), lo
    lo, hi = top + 1, n - 1
    while lo < hi:
        mid = (lo + hi) >> 1
        if dot(p[(mid + 1) % n], z) >= dot(p[mid], z):
            lo = mid + 1
        else:
            hi = mid
    lo %= n
    if dot(p[lo], z) > best:
        best_id = lo
    return best_id


def diameter(p: Sequence[Point]) -> float:
    """Largest distance between two points of a convex polygon."""
    n = len(p)
    if n == 1:
        return 0.0
    if n == 2:
        return dist(p[0], p[1])
    best = 0.0
    j = 1
    for i in range(n):
        while cross(p[(i + 1) % n] - p[i], p[(j + 1) % n] - p[j]) >= 0:
            best = max(best, dist2(p[i], p[j]))
            j = (j + 1) % n
        best = max(best, dist2(p[i], p[j]))
    return math.sqrt(best)


def width(p: Sequence[Point]) -> float:
    """Smallest distance between two parallel lines enclosing a convex polygon."""
    n = len(p)
    if n <= 2:
        return 0.0
    best = _INF
    j = 1
    for i in range(n):
        while cross(p[(i + 1) % n] - p[i], p[(j + 1) % n] - p[j]) >= 0:
            j = (j + 1) % n
        best = min(best, dist_point_to_line(p[i], p[(i + 1) % n], p[j]))
    return best


def minimum_enclosing_rectangle(p: Sequence[Point]) -> float:
    """Smallest perimeter of a rectangle enclosing a convex polygon."""
    n = len(p)
    if n <= 2:
        return perimeter(p)
    first = p[1] - p[0]
    mndot = 0
    lowest = dot(first, p[0])
    for i in range(1, n):
        if dot(first, p[i]) <= lowest:
            lowest = dot(first, p[i])
            mndot = i
    best = _INF
    j = 1
    mxdot = 1
    for i in range(n):
        cur = p[(i + 1) % n] - p[i]
        while cross(cur, p[(j + 1) % n] - p[j]) >= 0:
            j = (j + 1) % n
        while dot(p[(mxdot + 1) % n], cur) >= dot(p[mxdot], cur):
            mxdot = (mxdot + 1) % n
        while dot(p[(mndot + 1) % n], cur) <= dot(p[mndot], cur):
            mndot = (mndot + 1) % n
        span = dot(p[mxdot], cur) / cur.norm() - dot(p[mndot], cur) / cur.norm()
        best = min(best, 2.0 * (span + dist_point_to_line(p[i], p[(i + 1) % n], p[j])))
    return best


def minimum_enclosing_circle(points: Iterable[Point]) -> Circle:
    """Smallest circle containing every point, in expected linear time."""
    pts = list(points)
    if not pts:
        raise ValueError("at least one point is required")
    random.shuffle(pts)
    c = Circle(pts[0], 0.0)
    for i in range(1, len(pts)):
        if sign(dist(c.center, pts[i]) - c.radius) <= 0:
            continue
        c = Circle(pts[i], 0.0)
        for j in range(i):
            if sign(dist(c.center, pts[j]) - c.radius) <= 0:
                continue
            c = Circle((pts[i] + pts[j]) / 2, dist(pts[i], pts[j]) / 2)
            for k in range(j):
                if sign(dist(c.center, pts[k]) - c.radius) > 0:
                    c = Circle.circumscribed(pts[i], pts[j], pts[k])
    return c


def cut(p: Sequence[Point], a: Point, b: Point) -> list[Point]:
    """Part of the polygon on the left of the directed line from ``a`` to ``b``."""
    result: list[Point] = []
    for s, t in _edges(p):
        c1 = cross(b - a, s - a)
        c2 = cross(b - a, t - a)
        if sign(c1) >= 0:
            result.append(s)
        if sign(c1 * c2) < 0 and not is_parallel(s, t, a, b):
            crossing = line_line_intersection(s, t, a, b)
            if crossing is not None:
                result.append(crossing)
    return result


def polygon_line_intersection(p: Sequence[Point], a: Point, b: Point) -> float:
    """Total length of the parts of line ab inside a simple polygon, boundary included."""
    if not p:
        return 0.0
    line = Line.through(a, b)
    events: list[tuple[float, int]] = []
    for s, t in _edges(p):
        s1 = orientation(a, b, s)
        s2 = orientation(a, b, t)
        if s1 == s2:
            continue
        edge = Line.through(s, t)
        inter = (edge.v * line.c - line.v * edge.c) / cross(line.v, edge.v)
        along = dot(inter, line.v)
        if s1 > s2:
            f = 2 if s1 and s2 else 1
        else:
            f = -2 if s1 and s2 else -1
        events.append((along - EPS if f > 0 else along + EPS, f))
    events.sort()
    total = 0.0
    depth = 0
    for (here, f), (there, _) in zip(events, events[1:]):
        depth += f
        if depth:
            total += there - here
    return total / math.sqrt(dot(line.v, line.v))


def convex_line_intersection(
    p: Sequence[Point], a: Point, b: Point, top: int
) -> tuple[int, int | None] | None:
    """Edges of a convex polygon met by line ab.

    None means no intersection; ``(i, None)`` a touch at vertex ``i``;
    ``(i, i)`` the line running along edge ``i``; otherwise the two crossed
    edges, edge ``i`` joining ``p[i]`` and ``p[(i + 1) % n]``.
    """
    n = len(p)
    end_a = extreme_vertex(p, (a - b).perp(), top)
    end_b = extreme_vertex(p, (b - a).perp(), top)

    def side(i: int) -> int:
        return orientation(a, p[i], b)

    if side(end_a) < 0 or side(end_b) > 0:
        return None
    res: list[int] = []
    for _ in range(2):
        lo, hi = end_b, end_a
        while (lo + 1) % n != hi:
            m = ((lo + hi + (0 if lo < hi else n)) // 2) % n
            if side(m) == side(end_b):
                lo = m
            else:
                hi = m
        res.append((lo + int(side(hi) == 0)) % n)
        end_a, end_b = end_b, end_a
    first, second = res
    if first == second:
        return first, None
    if not side(first) and not side(second):
        k = (first - second + n + 1) % n
        if k == 0:
            return first, first
        if k == 2:
            return second, second
    return first, second


def _point_poly_tangent(p: Sequence[Point], q: Point, direction: int, lo: int, hi: int) -> int:
    while hi - lo > 1:
        mid = (lo + hi) >> 1
        pvs = orientation(q, p[mid], p[mid - 1]) != -direction
        nxt = orientation(q, p[mid], p[mid + 1]) != -direction
        if pvs and nxt:
            return mid
        if not (pvs or nxt):
            i1 = _point_poly_tangent(p, q, direction, mid + 1, hi)
            i2 = _point_poly_tangent(p, q, direction, lo, mid - 1)
            return i1 if orientation(q, p[i1], p[i2]) == direction else i2
        if orientation(q, p[mid], p[lo]) == direction:
            if pvs:
                lo = mid + 1
            else:
                hi = mid - 1
        elif orientation(q, p[lo], p[hi]) == direction:
            hi = mid - 1
        else:
            lo = mid + 1
    best = lo
    for i in range(lo + 1, hi + 1):
        if orientation(q, p[best], p[i]) != direction:
            best = i
    return best


def tangents_from_point_to_polygon(p: Sequence[Point], q: Point) -> tuple[int, int]:
    """Indices of the (ccw, cw) tangent vertices of a convex polygon seen from ``q``."""
    last = len(p) - 1
    return _point_poly_tangent(p, q, 1, 0, last), _point_poly_tangent(p, q, -1, 0, last)


def dist_point_to_polygon(p: Sequence[Point], z: Point) -> float:
    """Distance from a point strictly outside a convex polygon to the polygon."""
    n = len(p)
    if n == 0:
        raise ValueError("the polygon has no vertices")
    if n <= 3:
        return min(dist_point_to_segment(s, t, z) for s, t in _edges(p))
    lo, hi = tangents_from_point_to_polygon(p, z)
    if lo > hi:
        hi += n
    best = _INF
    while lo < hi:
        mid = (lo + hi) >> 1
        left = dist2(p[mid % n], z)
        right = dist2(p[(mid + 1) % n], z)
        best = min(best, left, right)
        if left < right:
            hi = mid
        else:
            lo = mid + 1
    best = math.sqrt(best)
    best = min(best, dist_point_to_segment(p[lo % n], p[(lo + 1) % n], z))
    best = min(best, dist_point_to_segment(p[lo % n], p[(lo - 1 + n) % n], z))
    return best


def dist_polygon_to_line(p: Sequence[Point], a: Point, b: Point, top: int) -> float:
    """Distance from a convex polygon to line ab; zero if they meet."""
    orth = (b - a).perp()
    if orientation(a, b, p[0]) > 0:
        orth = (a - b).perp()
    idx = extreme_vertex(p, orth, top)
    if dot(p[idx] - a, orth) > 0:
        return 0.0
    return dist_point_to_line(a, b, p[idx])


def dist_polygon_to_polygon(p1: Sequence[Point], p2: Sequence[Point]) -> float:
    """Distance between two disjoint convex polygons."""
    return min(
        min((dist_point_to_polygon(p2, q) for q in p1), default=_INF),
        min((dist_point_to_polygon(p1, q) for q in p2), default=_INF),
    )


def max_dist_polygon_to_polygon(u: Sequence[Point], v: Sequence[Point]) -> float:
    """Largest distance between a point of one convex polygon and one of another."""
    u, v = list(u), list(v)
    n, m = len(u), len(v)
    if n < 3 or m < 3:
        best = max((dist2(s, t) for s in u for t in v), default=0.0)
        return math.sqrt(best)
    if u[0].x > v[0].x:
        u, v = v, u
        n, m = m, n
    i = j = 0
    while j + 1 < m and v[j].x < v[j + 1].x:
        j += 1
    best = 0.0
    for _ in range(n + m + 10):
        if cross(u[(i + 1) % n] - u[i], v[(j + 1) % m] - v[j]) >= 0:
            j = (j + 1) % m
        else:
            i = (i + 1) % n
        best = max(best, dist2(u[i], v[j]))
    return math.sqrt(best)