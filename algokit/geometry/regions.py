"""Regions in the plane: unions, half-plane intersections, Minkowski sums and more."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from algokit.geometry.circles import Circle
from algokit.geometry.point import (
    EPS,
    PI,
    Point,
    cross,
    dist,
    dist2,
    dot,
    orientation,
    sign,
)
from algokit.geometry.polygon import is_point_in_triangle


def _edges(p: Sequence[Point]) -> list[tuple[Point, Point]]:
    """Consecutive vertex pairs, closing the polygon."""
    pts = list(p)
    return list(zip(pts, pts[1:] + pts[:1]))


def _acos(v: float) -> float:
    return math.acos(max(-1.0, min(1.0, v)))


def _sqrt(v: float) -> float:
    return math.sqrt(max(0.0, v))


class CircleUnion:
    """Area of the union of a collection of discs."""

    def __init__(self, circles: Iterable[tuple[float, float, float]] = ()) -> None:
        self._circles: list[tuple[float, float, float]] = []
        for x, y, r in circles:
            self.add(x, y, r)

    def __len__(self) -> int:
        return len(self._circles)

    def add(self, x: float, y: float, r: float) -> None:
        """Add the disc with centre ``(x, y)`` and radius ``r``."""
        if r < 0:
            raise ValueError("radius must be non-negative")
        self._circles.append((float(x), float(y), float(r)))

    def area(self) -> float:
        """Total area covered by the discs."""
        xs = [c[0] for c in self._circles]
        ys = [c[1] for c in self._circles]
        rs = [c[2] for c in self._circles]
        n = len(rs)

        for i in range(n):
            for j in range(i):
                if not sign(xs[i] - xs[j]) and not sign(ys[i] - ys[j]) and not sign(rs[i] - rs[j]):
                    rs[i] = 0.0
                    break

        covered = [
            any(
                i != j
                and sign(rs[j] - rs[i]) >= 0
                and sign(math.hypot(xs[i] - xs[j], ys[i] - ys[j]) - (rs[j] - rs[i])) <= 0
                for j in range(n)
            )
            for i in range(n)
        ]

        arc = 0.0
        pol = 0.0

        def piece(i: int, lef: float, rig: float) -> None:
            nonlocal arc, pol
            r = rs[i]
            arc += 0.5 * r * r * (rig - lef - math.sin(rig - lef))
            x1, y1 = xs[i] + r * math.cos(lef), ys[i] + r * math.sin(lef)
            x2, y2 = xs[i] + r * math.cos(rig), ys[i] + r * math.sin(rig)
            pol += x1 * y2 - x2 * y1

        for i in range(n):
            if not sign(rs[i]) or covered[i]:
                continue
            segs: list[tuple[float, float]] = []
            for j in range(n):
                if i == j:
                    continue
                d = math.hypot(xs[i] - xs[j], ys[i] - ys[j])
                if sign(d - (rs[j] + rs[i])) >= 0 or sign(d - abs(rs[j] - rs[i])) <= 0:
                    continue
                alpha = math.atan2(ys[j] - ys[i], xs[j] - xs[i])
                cos_beta = (rs[i] ** 2 + d * d - rs[j] ** 2) / (2 * rs[i] * d)
                beta = _acos(cos_beta)
                lo, hi = alpha - beta, alpha + beta
                if sign(lo) <= 0 and sign(hi) <= 0:
                    segs.append((2 * PI + lo, 2 * PI + hi))
                elif sign(lo) < 0:
                    segs.append((2 * PI + lo, 2 * PI))
                    segs.append((0.0, hi))
                else:
                    segs.append((lo, hi))
            segs.sort()
            rig = 0.0
            for lo, hi in segs:
                if sign(rig - lo) >= 0:
                    rig = max(rig, hi)
                else:
                    piece(i, rig, lo)
                    rig = hi
            if not sign(rig):
                arc += rs[i] * rs[i] * PI
            else:
                piece(i, rig, 2 * PI)
        return pol / 2.0 + arc


@dataclass(frozen=True)
class HalfPlane:
    """The points ``p`` with ``cross(b - a, p - a) >= 0``: left of the line from a to b."""

    a: Point
    b: Point

    def __lt__(self, other: HalfPlane) -> bool:
        p = self.b - self.a
        q = other.b - other.a
        fp = p.y < 0 or (p.y == 0 and p.x < 0)
        fq = q.y < 0 or (q.y == 0 and q.x < 0)
        if fp != fq:
            return not fp
        c = cross(p, q)
        if c:
            return c > 0
        return cross(p, other.b - self.a) < 0

    def intersection(self, other: HalfPlane) -> Point:
        """Point where the two boundary lines meet; ValueError if they are parallel."""
        b = self.b - self.a
        d = other.a - other.b
        c = other.a - self.a
        den = cross(b, d)
        if den == 0:
            raise ValueError("the boundary lines are parallel")
        return self.a + b * cross(c, d) / den


def _check(a: HalfPlane, b: HalfPlane, c: HalfPlane) -> bool:
    try:
        meet = b.intersection(c)
    except ValueError:
        return False
    # The tolerance keeps zero-area results such as segments and points.
    return cross(a.b - a.a, meet - a.a) > -EPS


def half_plane_intersection(planes: Iterable[HalfPlane]) -> list[Point]:
    """Vertices of the convex region common to all half-planes; empty if none.

    Unbounded inputs need a bounding box added. A vertex may repeat.
    """
    ordered = sorted(planes)
    unique: list[HalfPlane] = []
    for h in ordered:
        if not unique or cross(h.b - h.a, unique[-1].b - unique[-1].a):
            unique.append(h)

    dq: deque[HalfPlane] = deque()
    for h in unique:
        while len(dq) > 1 and not _check(h, dq[-2], dq[-1]):
            dq.pop()
        while len(dq) > 1 and not _check(h, dq[0], dq[1]):
            dq.popleft()
        dq.append(h)
    while len(dq) > 2 and not _check(dq[0], dq[-2], dq[-1]):
        dq.pop()
    while len(dq) > 2 and not _check(dq[-1], dq[0], dq[1]):
        dq.popleft()

    res = list(dq)
    if len(res) <= 2:
        return []
    try:
        return [h.intersection(g) for h, g in zip(res, res[1:] + res[:1])]
    except ValueError:
        return []


def _rat(a: Point, b: Point, p: Point) -> float:
    if not sign(a.x - b.x):
        return (p.y - a.y) / (b.y - a.y)
    return (p.x - a.x) / (b.x - a.x)


def polygon_union(polygons: Iterable[Sequence[Point]]) -> float:
    """Area of the union of simple polygons, each given counter-clockwise."""
    polys = [list(p) for p in polygons]
    total = 0.0
    for i, poly in enumerate(polys):
        for a, b in _edges(poly):
            segs: list[tuple[float, int]] = [(0.0, 0), (1.0, 0)]
            for j, other in enumerate(polys):
                if i == j:
                    continue
                for c, d in _edges(other):
                    sc = sign(cross(b - a, c - a))
                    sd = sign(cross(b - a, d - a))
                    if not sc and not sd:
                        if sign(dot(b - a, d - c)) > 0 and i > j:
                            segs.append((_rat(a, b, c), 1))
                            segs.append((_rat(a, b, d), -1))
                    else:
                        sa = cross(d - c, a - c)
                        sb = cross(d - c, b - c)
                        if sc >= 0 and sd < 0:
                            segs.append((sa / (sa - sb), 1))
                        elif sc < 0 and sd >= 0:
                            segs.append((sa / (sa - sb), -1))
            segs.sort()
            pre = min(max(segs[0][0], 0.0), 1.0)
            count = segs[0][1]
            free = 0.0
            for pos, delta in segs[1:]:
                now = min(max(pos, 0.0), 1.0)
                if not count:
                    free += now - pre
                count += delta
                pre = now
            total += cross(a, b) * free
    return total * 0.5


def reorder_polygon(p: Sequence[Point]) -> list[Point]:
    """The polygon rotated so that its bottom-most, then left-most vertex comes first."""
    pts = list(p)
    if not pts:
        return []
    pos = 0
    for i, q in enumerate(pts):
        best = pts[pos]
        if q.y < best.y or (sign(q.y - best.y) == 0 and q.x < best.x):
            pos = i
    return pts[pos:] + pts[:pos]


def minkowski_sum(a: Sequence[Point], b: Sequence[Point]) -> list[Point]:
    """Minkowski sum of two convex counter-clockwise polygons of two or more vertices."""
    pa = reorder_polygon(a)
    pb = reorder_polygon(b)
    n, m = len(pa), len(pb)
    if n < 2 or m < 2:
        raise ValueError("both polygons need at least two vertices")
    pa += pa[:2]
    pb += pb[:2]
    result: list[Point] = []
    i = j = 0
    while i < n or j < m:
        result.append(pa[i] + pb[j])
        turn = sign(cross(pa[i + 1] - pa[i], pb[j + 1] - pb[j]))
        if turn >= 0:
            i += 1
        if turn <= 0:
            j += 1
    return result


def _triangle_circle_area(c: Point, r: float, a: Point, b: Point) -> float:
    """Area shared by the disc of radius ``r`` at ``c`` and the triangle ``c, a, b``."""
    sd1, sd2 = dist2(c, a), dist2(c, b)
    if sd1 > sd2:
        a, b = b, a
        sd1, sd2 = sd2, sd1
    sd = dist2(a, b)
    d1, d2, d = math.sqrt(sd1), math.sqrt(sd2), math.sqrt(sd)
    x = abs(sd2 - sd - sd1) / (2 * d)
    h = _sqrt(sd1 - x * x)
    if r >= d2:
        return h * d / 2
    if sd + sd1 < sd2:
        if r < d1:
            return r * r * (_acos(h / d2) - _acos(h / d1)) / 2
        y = _sqrt(r * r - h * h)
        return r * r * (_acos(h / d2) - _acos(h / r)) / 2 + h * (y - x) / 2
    if r < h:
        return r * r * (_acos(h / d2) + _acos(h / d1)) / 2
    result = r * r * (_acos(h / d2) - _acos(h / r)) / 2
    y = _sqrt(r * r - h * h)
    result += h * y / 2
    if r < d1:
        result += r * r * (_acos(h / d1) - _acos(h / r)) / 2
        result += h * y / 2
    else:
        result += h * x / 2
    return result


def polygon_circle_intersection(p: Sequence[Point], center: Point, r: float) -> float:
    """Area shared by a simple polygon and the disc of radius ``r`` at ``center``."""
    origin = Point()
    total = 0.0
    for s, t in _edges(p):
        turn = orientation(center, s, t)
        if turn == 0:
            continue
        piece = _triangle_circle_area(origin, r, s - center, t - center)
        total += piece if turn > 0 else -piece
    return abs(total)


def maximum_circle_cover(points: Iterable[Point], r: float) -> tuple[int, Circle]:
    """Largest number of points a circle of radius ``r`` can hold, and such a circle."""
    pts = list(points)
    if not pts:
        raise ValueError("at least one point is required")
    if r <= 0:
        raise ValueError("radius must be positive")
    best = 0
    best_id = 0
    best_theta = 0.0
    for i, p in enumerate(pts):
        events: list[tuple[float, int]] = [(-PI, 1), (PI, -1)]
        for j, q in enumerate(pts):
            if j == i:
                continue
            d = dist(p, q)
            if d > r * 2:
                continue
            direction = (q - p).arg()
            spread = _acos(d / 2 / r)
            st, ed = direction - spread, direction + spread
            if st > PI:
                st -= PI * 2
            if st <= -PI:
                st += PI * 2
            if ed > PI:
                ed -= PI * 2
            if ed <= -PI:
                ed += PI * 2
            events.append((st - EPS, 1))
            events.append((ed, -1))
            if st > ed:
                events.append((-PI, 1))
                events.append((PI, -1))
        events.sort()
        count = 0
        for theta, delta in events:
            count += delta
            if count > best:
                best, best_id, best_theta = count, i, theta
    anchor = pts[best_id]
    center = Point(anchor.x + r * math.cos(best_theta), anchor.y + r * math.sin(best_theta))
    return best, Circle(center, r)


def maximum_inscribed_circle(p: Sequence[Point]) -> float:
    """Radius of the largest circle inside a convex counter-clockwise polygon."""
    pts = list(p)
    n = len(pts)
    if n <= 2:
        return 0.0
    big = 1e9
    box = [
        HalfPlane(Point(-big, -big), Point(big, -big)),
        HalfPlane(Point(big, -big), Point(big, big)),
        HalfPlane(Point(big, big), Point(-big, big)),
        HalfPlane(Point(-big, big), Point(-big, -big)),
    ]
    lo, hi = 0.0, 20000.0
    while hi - lo > EPS:
        mid = (lo + hi) * 0.5
        planes = list(box)
        for s, t in _edges(pts):
            z = (t - s).perp().truncate(mid)
            planes.append(HalfPlane(s + z, t + z))
        if half_plane_intersection(planes):
            lo = mid
        else:
            hi = mid
    return lo


def triangulate(p: Sequence[Point]) -> list[list[Point]]:
    """Split a simple counter-clockwise polygon into triangles by ear clipping."""
    pts = list(p)
    triangles: list[list[Point]] = []
    while len(pts) >= 3:
        n = len(pts)
        for i in range(n):
            pre = n - 1 if i == 0 else i - 1
            nxt = 0 if i == n - 1 else i + 1
            if orientation(pts[i], pts[pre], pts[nxt]) >= 0:
                continue
            is_ear = all(
                is_point_in_triangle(pts[i], pts[pre], pts[nxt], pts[j]) >= 1
                for j in range(n)
                if j not in (i, pre, nxt)
            )
            if is_ear:
                triangles.append([pts[pre], pts[i], pts[nxt]])
                del pts[i]
                break
        else:
            raise ValueError("the polygon has no ear; it must be simple and counter-clockwise")
    return triangles


@dataclass(frozen=True)
class Star:
    """A regular star polygon with ``n`` points and circumradius ``r``."""

    n: int
    r: float

    def area(self) -> float:
        theta = PI / self.n
        s = 2 * self.r * math.sin(theta)
        inner = 0.5 * s / math.tan(theta)
        polygon_area = 0.5 * self.n * s * inner
        notch = 0.25 * s * s / math.tan(1.5 * theta)
        return polygon_area - self.n * notch


def max_polygon_area(lengths: Iterable[float]) -> float:
    """Largest area of a non-degenerate polygon with these side lengths; 0 if none exists."""
    v = list(lengths)
    if len(v) < 3:
        return 0.0
    m = max(range(len(v)), key=lambda i: (v[i], -i))
    total = sum(v)
    if sign(v[m] - (total - v[m])) >= 0:
        return 0.0

    def ang(x: float, r: float) -> float:
        return 2 * math.asin(min(1.0, (x / 2) / r))

    def calc(r: float) -> float:
        return sum(ang(x, r) for x in v)

    lo, hi = v[m] / 2, 1e6
    for _ in range(60):
        mid = (lo + hi) / 2
        if calc(mid) <= 2 * PI:
            hi = mid
        else:
            lo = mid
    r = hi

    if calc(r) > 2 * PI - EPS:
        return sum(r * r * math.sin(ang(x, r)) / 2 for x in v)

    # The circle's centre lies outside the polygon.
    def calc2(r: float) -> float:
        return sum(2 * PI - ang(x, r) if i == m else ang(x, r) for i, x in enumerate(v))

    lo, hi = v[m] / 2, 1e6
    for _ in range(60):
        mid = (lo + hi) / 2
        if calc2(mid) > 2 * PI:
            hi = mid
        else:
            lo = mid
    r = hi
    result = 0.0
    for i, x in enumerate(v):
        piece = r * r * math.sin(ang(x, r)) / 2
        result += -piece if i == m else piece
    return result