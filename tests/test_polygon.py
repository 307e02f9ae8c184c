import math
import random

import pytest

from algokit.geometry.point import Point, dot, orientation
from algokit.geometry.polygon import (
    area,
    area_of_triangle,
    centroid,
    convex_hull,
    convex_line_intersection,
    cut,
    diameter,
    dist_point_to_polygon,
    dist_polygon_to_line,
    dist_polygon_to_polygon,
    extreme_vertex,
    geometric_median,
    is_ccw,
    is_convex,
    is_point_in_convex,
    is_point_in_polygon,
    is_point_in_triangle,
    is_point_on_polygon,
    max_dist_polygon_to_polygon,
    minimum_enclosing_circle,
    minimum_enclosing_rectangle,
    perimeter,
    polygon_line_intersection,
    tangents_from_point_to_polygon,
    width,
    winding_number,
)


def square(side=2.0, dx=0.0, dy=0.0):
    return [
        Point(dx, dy),
        Point(dx + side, dy),
        Point(dx + side, dy + side),
        Point(dx, dy + side),
    ]


def rectangle(w, h):
    return [Point(0, 0), Point(w, 0), Point(w, h), Point(0, h)]


CONCAVE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 1), Point(0, 4)]


def test_triangle_area_is_half_square():
    sq = square(3.0)
    assert area_of_triangle(sq[0], sq[1], sq[2]) * 2 == pytest.approx(area(sq))


@pytest.mark.parametrize(
    "p, expected",
    [(Point(0.5, 0.5), -1), (Point(1, 0), 0), (Point(3, 3), 1)],
)
def test_point_in_triangle_any_orientation(p, expected):
    a, b, c = Point(0, 0), Point(2, 0), Point(0, 2)
    assert is_point_in_triangle(a, b, c, p) == expected
    assert is_point_in_triangle(a, c, b, p) == expected


@pytest.mark.parametrize("side", [1.0, 2.5, 7.0])
def test_square_measures(side):
    sq = square(side)
    assert perimeter(sq) == pytest.approx(4 * side)
    assert area(sq) == pytest.approx(side * side)
    assert area(list(reversed(sq))) == pytest.approx(side * side)
    assert centroid(sq) == Point(side / 2, side / 2)


def test_area_independent_of_start_vertex():
    assert area(CONCAVE) == pytest.approx(area(CONCAVE[2:] + CONCAVE[:2]))


def test_centroid_of_degenerate_polygon_raises():
    with pytest.raises(ValueError):
        centroid([Point(0, 0), Point(1, 1), Point(2, 2)])


def test_direction():
    sq = square()
    assert is_ccw(sq) is True
    assert is_ccw(list(reversed(sq))) is False


def test_geometric_median_collinear():
    m = geometric_median([Point(0, 0), Point(1, 0), Point(10, 0)])
    assert m.x == pytest.approx(1.0, abs=1e-3)
    assert m.y == pytest.approx(0.0, abs=1e-3)


def test_geometric_median_square_is_centre():
    m = geometric_median(square(2.0))
    assert m.x == pytest.approx(1.0, abs=1e-3)
    assert m.y == pytest.approx(1.0, abs=1e-3)


def test_convex_hull_drops_inner_and_collinear_points():
    pts = square(2.0) + [Point(1, 1), Point(1, 0), Point(0.5, 1.5)]
    assert convex_hull(pts) == square(2.0)


def test_convex_hull_of_duplicates():
    assert convex_hull([Point(1, 1), Point(1, 1)]) == [Point(1, 1)]
    assert convex_hull([Point(3, 4)]) == [Point(3, 4)]


def test_random_hull_invariants():
    rng = random.Random(7)
    pts = [Point(rng.uniform(-50, 50), rng.uniform(-50, 50)) for _ in range(60)]
    hull = convex_hull(pts)
    assert is_convex(hull)
    assert is_ccw(hull)
    assert all(is_point_in_polygon(hull, q) <= 0 for q in pts)
    brute = max(math.dist(tuple(s), tuple(t)) for s in pts for t in pts)
    assert diameter(hull) == pytest.approx(brute)


def test_is_convex():
    assert is_convex(square()) is True
    assert is_convex(CONCAVE) is False


@pytest.mark.parametrize(
    "x, expected",
    [(Point(1, 1), -1), (Point(3, 1), 1), (Point(2, 1), 0), (Point(0, 0), 0)],
)
def test_point_in_convex(x, expected):
    assert is_point_in_convex(square(), x) == expected


def test_point_in_convex_needs_three_vertices():
    with pytest.raises(ValueError):
        is_point_in_convex([Point(0, 0), Point(1, 0)], Point(0, 0))


def test_point_in_concave_polygon():
    assert is_point_in_polygon(CONCAVE, Point(1, 0.5)) == -1
    assert is_point_in_polygon(CONCAVE, Point(2, 3)) == 1
    assert is_point_in_polygon(CONCAVE, Point(2, 0)) == 0
    assert is_point_on_polygon(CONCAVE, Point(4, 2)) is True


def test_winding_number():
    sq = square()
    inside = Point(1, 1)
    ccw = winding_number(sq, inside)
    cw = winding_number(list(reversed(sq)), inside)
    assert abs(ccw) == 1
    assert ccw == -cw
    assert winding_number(sq, Point(5, 5)) == 0
    assert winding_number(sq, Point(1, 0)) is None


@pytest.mark.parametrize("z", [Point(1, 1), Point(1, -1), Point(-1, 0), Point(0, 1)])
def test_extreme_vertex_maximises_dot(z):
    sq = square()
    idx = extreme_vertex(sq, z, 2)
    assert dot(sq[idx], z) == pytest.approx(max(dot(q, z) for q in sq))


@pytest.mark.parametrize("w, h", [(3.0, 1.0), (2.0, 5.0)])
def test_rectangle_calipers(w, h):
    rect = rectangle(w, h)
    assert diameter(rect) == pytest.approx(math.hypot(w, h))
    assert width(rect) == pytest.approx(min(w, h))
    assert minimum_enclosing_rectangle(rect) == pytest.approx(2 * (w + h))


def test_minimum_enclosing_circle():
    pts = square(2.0) + [Point(1, 1), Point(0.5, 1.5)]
    c = minimum_enclosing_circle(pts)
    assert c.radius == pytest.approx(math.hypot(1, 1))
    assert c.center == Point(1, 1)
    assert all(math.dist(tuple(c.center), tuple(q)) <= c.radius + 1e-9 for q in pts)


def test_minimum_enclosing_circle_empty():
    with pytest.raises(ValueError):
        minimum_enclosing_circle([])


def test_cut_splits_area():
    sq = square(2.0)
    a, b = Point(1, 0), Point(1, 2)
    left = cut(sq, a, b)
    right = cut(sq, b, a)
    assert area(left) + area(right) == pytest.approx(area(sq))
    assert area(left) == pytest.approx(area(sq) / 2)
    assert all(q.x <= 1 + 1e-9 for q in left)


def test_polygon_line_intersection_length():
    sq = square(2.0)
    assert polygon_line_intersection(sq, Point(0, 1), Point(1, 1)) == pytest.approx(2.0)
    assert polygon_line_intersection(sq, Point(0, 0), Point(1, 1)) == pytest.approx(
        2 * math.sqrt(2)
    )
    assert polygon_line_intersection(sq, Point(0, 5), Point(1, 5)) == pytest.approx(0.0)


def test_convex_line_intersection_crossing_edges():
    sq = square(2.0)
    a, b = Point(-1, 1), Point(3, 1)
    found = convex_line_intersection(sq, a, b, 2)
    assert found is not None
    n = len(sq)
    for i in found:
        s, t = sq[i], sq[(i + 1) % n]
        assert orientation(a, b, s) * orientation(a, b, t) <= 0
    assert found[0] != found[1]


def test_convex_line_intersection_misses():
    assert convex_line_intersection(square(2.0), Point(-1, 5), Point(3, 5), 2) is None


def test_tangents_leave_polygon_on_one_side():
    sq = square(2.0)
    q = Point(5, 1)
    for idx in tangents_from_point_to_polygon(sq, q):
        sides = {orientation(q, sq[idx], v) for v in sq}
        assert not ({1, -1} <= sides)


def test_dist_point_to_polygon():
    assert dist_point_to_polygon(square(2.0), Point(5, 1)) == pytest.approx(3.0)
    tri = [Point(0, 0), Point(2, 0), Point(0, 2)]
    assert dist_point_to_polygon(tri, Point(0, -4)) == pytest.approx(4.0)


def test_dist_polygon_to_line():
    sq = square(2.0)
    assert dist_polygon_to_line(sq, Point(5, 0), Point(5, 1), 2) == pytest.approx(3.0)
    assert dist_polygon_to_line(sq, Point(1, 0), Point(1, 1), 2) == 0.0


def test_dist_polygon_to_polygon_symmetric():
    p1 = square(2.0)
    p2 = square(2.0, 5.0, 5.0)
    d = dist_polygon_to_polygon(p1, p2)
    assert d == pytest.approx(math.hypot(3, 3))
    assert dist_polygon_to_polygon(p2, p1) == pytest.approx(d)


def test_max_dist_polygon_to_polygon():
    p1 = square(2.0)
    p2 = square(2.0, 5.0, 5.0)
    assert max_dist_polygon_to_polygon(p1, p2) == pytest.approx(math.hypot(7, 7))
    small = [Point(0, 0), Point(1, 0)]
    assert max_dist_polygon_to_polygon(small, p2) == pytest.approx(math.hypot(7, 7))