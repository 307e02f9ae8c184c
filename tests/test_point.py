import math
import random

import pytest

from algokit.geometry.point import (
    PI,
    Point,
    cross,
    cross2,
    deg_to_rad,
    dist,
    dist2,
    dot,
    get_angle,
    is_point_in_angle,
    orientation,
    polar_sort,
    rad_to_deg,
    rotate_ccw,
    rotate_ccw90,
    rotate_cw,
    rotate_cw90,
    sign,
)


def test_sign_uses_tolerance():
    assert sign(1e-10) == 0
    assert sign(1.0) == 1
    assert sign(-1.0) == -1


def test_arithmetic_round_trips():
    a, b = Point(1.5, -2.0), Point(3.0, 4.25)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert (a / 2) * 2 == a


def test_equality_is_tolerant():
    assert Point(1.0, 2.0) == Point(1.0 + 1e-12, 2.0 - 1e-12)
    assert not (Point(1.0, 2.0) == Point(1.0, 2.1))


def test_ordering():
    assert Point(1, 5) < Point(2, 0)
    assert Point(1, 0) < Point(1, 3)
    assert Point(2, 0) > Point(1, 9)
    assert sorted([Point(2, 1), Point(1, 4), Point(1, 2)]) == [Point(1, 2), Point(1, 4), Point(2, 1)]


def test_unpacking():
    x, y = Point(7.0, -3.0)
    assert (x, y) == (7.0, -3.0)


def test_norm():
    p = Point(3, 4)
    assert p.norm() == pytest.approx(5.0)
    assert p.norm2() == pytest.approx(p.norm() ** 2)
    assert dot(p, p) == pytest.approx(p.norm2())


def test_perp_is_orthogonal():
    p = Point(2.5, -1.0)
    assert dot(p, p.perp()) == pytest.approx(0.0)
    assert p.perp() == rotate_ccw90(p)


def test_truncate():
    p = Point(3, 4)
    t = p.truncate(10)
    assert t.norm() == pytest.approx(10)
    assert cross(p, t) == pytest.approx(0.0)
    assert dot(p, t) > 0
    assert Point(0, 0).truncate(5) == Point(0, 0)


def test_cross_and_dist():
    rng = random.Random(1)
    for _ in range(20):
        a = Point(rng.uniform(-10, 10), rng.uniform(-10, 10))
        b = Point(rng.uniform(-10, 10), rng.uniform(-10, 10))
        c = Point(rng.uniform(-10, 10), rng.uniform(-10, 10))
        assert cross(a, b) == pytest.approx(-cross(b, a))
        assert cross2(a, b, c) == pytest.approx(cross(b - a, c - a))
        assert dist(a, b) == pytest.approx(math.sqrt(dist2(a, b)))
        assert dist(a, b) == pytest.approx(dist(b, a))


def test_orientation():
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    assert orientation(a, b, c) == 1
    assert orientation(a, c, b) == -orientation(a, b, c)
    assert orientation(a, b, Point(5, 0)) == 0


def test_rotations():
    p = Point(2.0, 1.0)
    assert rotate_ccw(p, PI / 2) == rotate_ccw90(p)
    assert rotate_cw(p, PI / 2) == rotate_cw90(p)
    assert rotate_cw(rotate_ccw(p, 0.7), 0.7) == p
    assert rotate_ccw(p, 1.3).norm() == pytest.approx(p.norm())
    assert rotate_cw90(rotate_ccw90(p)) == p


def test_angle_conversion():
    assert rad_to_deg(PI) == pytest.approx(180.0)
    for d in (-90.0, 0.0, 33.3, 270.0):
        assert rad_to_deg(deg_to_rad(d)) == pytest.approx(d)


def test_get_angle():
    assert get_angle(Point(1, 0), Point(0, 2)) == pytest.approx(math.pi / 2)
    assert get_angle(Point(1, 1), Point(2, 2)) == pytest.approx(0.0, abs=1e-7)
    assert get_angle(Point(1, 0), Point(-3, 0)) == pytest.approx(math.pi)


def test_point_in_angle():
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    assert is_point_in_angle(b, a, c, Point(1, 1)) is True
    assert is_point_in_angle(b, a, c, Point(-1, -1)) is False
    assert is_point_in_angle(c, a, b, Point(1, 1)) is True


def test_point_in_angle_collinear_arms():
    with pytest.raises(ValueError):
        is_point_in_angle(Point(1, 0), Point(0, 0), Point(2, 0), Point(1, 1))


def test_polar_sort_orders_by_angle():
    rng = random.Random(4)
    points = [Point(rng.uniform(-5, 5), rng.uniform(-5, 5)) for _ in range(30)]
    result = polar_sort(points)
    assert len(result) == len(points)
    assert all(any(p is q for q in points) for p in result)
    args = [p.arg() for p in result]
    assert all(x <= y + 1e-12 for x, y in zip(args, args[1:]))


def test_polar_sort_around_origin():
    o = Point(10, -3)
    rng = random.Random(8)
    points = [o + Point(rng.uniform(-5, 5), rng.uniform(-5, 5)) for _ in range(25)]
    args = [(p - o).arg() for p in polar_sort(points, o)]
    assert all(x <= y + 1e-12 for x, y in zip(args, args[1:]))


def test_polar_sort_same_direction_by_distance():
    near, far = Point(1, 1), Point(3, 3)
    assert polar_sort([far, near]) == [near, far]