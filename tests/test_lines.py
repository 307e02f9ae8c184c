import pytest

from algokit.geometry.lines import (
    Line,
    angle_bisector,
    are_lines_same,
    dist_point_to_line,
    dist_point_to_ray,
    dist_point_to_segment,
    dist_segment_to_segment,
    is_parallel,
    is_point_on_segment,
    line_line_intersection,
    point_along_line,
    point_line_relation,
    project_point_to_line,
    project_point_to_segment,
    ray_ray_distance,
    ray_ray_intersect,
    reflect_point_over_line,
    seg_line_intersection,
    seg_line_relation,
    seg_seg_intersection,
    seg_seg_intersection_inside,
)
from algokit.geometry.point import Point, dist, dot, get_angle, orientation

P = Point


def test_through_contains_its_points():
    line = Line.through(P(1, 2), P(4, -3))
    assert line.side(P(1, 2)) == 0
    assert line.side(P(4, -3)) == 0


def test_side_left_and_right():
    line = Line.through(P(0, 0), P(1, 0))
    assert line.side(P(0, 1)) == 1
    assert line.side(P(0, -1)) == -1


def test_from_direction_points_lie_on_line():
    line = Line.from_direction(P(2, 3), 5)
    assert line.side(line.a) == 0
    assert line.side(line.b) == 0
    assert line.a != line.b


def test_from_equation_round_trip():
    line = Line.from_equation(2, -3, 7)
    assert line.abc() == pytest.approx((2, -3, 7))
    a, b, c = line.abc()
    for p in (line.a, line.b):
        assert a * p.x + b * p.y + c == pytest.approx(0)


def test_perpendicular_through():
    line = Line.through(P(0, 0), P(3, 1))
    perp = line.perpendicular_through(P(5, 5))
    assert dot(line.v, perp.v) == pytest.approx(0)
    assert perp.side(P(5, 5)) == 0


def test_translate():
    line = Line.through(P(0, 0), P(2, 1))
    t = P(1, 4)
    moved = line.translate(t)
    assert moved.side(line.a + t) == 0
    assert moved.side(line.b + t) == 0


def test_shift_left():
    line = Line.through(P(0, 0), P(3, 4))
    shifted = line.shift_left(2.5)
    assert dist_point_to_line(shifted.a, shifted.b, line.a) == pytest.approx(2.5)
    assert line.side(shifted.a) == 1


def test_cmp_by_projection():
    line = Line.through(P(0, 0), P(1, 0))
    assert line.cmp_by_projection(P(0, 5), P(2, -3))
    assert not line.cmp_by_projection(P(2, -3), P(0, 5))


def test_point_along_line():
    a, b = P(1, 1), P(4, 5)
    p = point_along_line(a, b, 2.0)
    assert dist(a, p) == pytest.approx(2.0)
    assert orientation(a, b, p) == 0


def test_point_along_line_same_points():
    with pytest.raises(ValueError):
        point_along_line(P(1, 1), P(1, 1), 3)


def test_projection_is_orthogonal():
    a, b, c = P(0, 0), P(4, 2), P(1, 5)
    p = project_point_to_line(a, b, c)
    assert orientation(a, b, p) == 0
    assert dot(c - p, b - a) == pytest.approx(0)
    assert dist_point_to_line(a, b, c) == pytest.approx(dist(c, p))


def test_reflection_twice_is_identity():
    a, b, c = P(-1, 2), P(3, 7), P(5, -2)
    r = reflect_point_over_line(a, b, c)
    assert reflect_point_over_line(a, b, r) == c
    assert orientation(a, b, (c + r) / 2) == 0
    assert dist_point_to_line(a, b, r) == pytest.approx(dist_point_to_line(a, b, c))


def test_is_point_on_segment():
    a, b = P(0, 0), P(4, 4)
    assert is_point_on_segment(a, b, P(2, 2))
    assert not is_point_on_segment(a, b, P(5, 5))
    assert not is_point_on_segment(a, b, P(2, 3))


def test_project_point_to_segment_clamps():
    a, b = P(0, 0), P(4, 0)
    assert project_point_to_segment(a, b, P(9, 3)) == b
    assert project_point_to_segment(a, b, P(-2, 3)) == a
    assert project_point_to_segment(a, b, P(1, 3)) == P(1, 0)
    assert project_point_to_segment(a, a, P(1, 3)) == a
    assert dist_point_to_segment(a, b, P(9, 3)) == pytest.approx(dist(b, P(9, 3)))


def test_is_parallel_cases():
    assert is_parallel(P(0, 0), P(1, 1), P(0, 1), P(1, 0)) == 0
    assert is_parallel(P(0, 0), P(1, 0), P(0, 1), P(1, 1)) == 1
    assert is_parallel(P(0, 0), P(1, 0), P(2, 0), P(3, 0)) == 2


def test_are_lines_same():
    assert are_lines_same(P(0, 0), P(1, 1), P(2, 2), P(5, 5))
    assert not are_lines_same(P(0, 0), P(1, 1), P(2, 3), P(5, 6))


def test_angle_bisector_splits_angle():
    a, b, c = P(5, 0), P(0, 0), P(0, 3)
    v = angle_bisector(a, b, c)
    assert get_angle(v, a - b) == pytest.approx(get_angle(v, c - b))


def test_point_line_relation():
    a, b = P(0, 0), P(1, 0)
    assert point_line_relation(a, b, P(0, 1)) == 1
    assert point_line_relation(a, b, P(0, -1)) == 2
    assert point_line_relation(a, b, P(7, 0)) == 3


def test_line_line_intersection():
    a, b, c, d = P(0, 0), P(2, 2), P(0, 2), P(2, 0)
    p = line_line_intersection(a, b, c, d)
    assert orientation(a, b, p) == 0
    assert orientation(c, d, p) == 0
    assert line_line_intersection(P(0, 0), P(1, 0), P(0, 1), P(1, 1)) is None


def test_seg_seg_intersection():
    a, b, c, d = P(0, 0), P(4, 4), P(0, 4), P(4, 0)
    p = seg_seg_intersection(a, b, c, d)
    assert is_point_on_segment(a, b, p)
    assert is_point_on_segment(c, d, p)
    assert seg_seg_intersection(P(0, 0), P(1, 1), P(3, 0), P(3, 5)) is None
    assert seg_seg_intersection(P(0, 0), P(2, 0), P(2, 0), P(2, 3)) is None


def test_seg_seg_intersection_inside():
    overlap = seg_seg_intersection_inside(P(0, 0), P(2, 0), P(1, 0), P(3, 0))
    assert overlap == [P(1, 0), P(2, 0)]
    touching = seg_seg_intersection_inside(P(0, 0), P(2, 0), P(2, 0), P(2, 3))
    assert touching == [P(2, 0)]
    assert seg_seg_intersection_inside(P(0, 0), P(1, 0), P(0, 2), P(1, 2)) == []
    crossing = seg_seg_intersection_inside(P(0, 0), P(4, 4), P(0, 4), P(4, 0))
    assert len(crossing) == 1
    assert is_point_on_segment(P(0, 0), P(4, 4), crossing[0])


def test_seg_line_relation():
    c, d = P(0, 0), P(1, 0)
    assert seg_line_relation(P(5, -1), P(5, 1), c, d) == 1
    assert seg_line_relation(P(5, 1), P(5, 2), c, d) == 0
    assert seg_line_relation(P(5, 0), P(9, 0), c, d) == 2


def test_seg_line_intersection():
    c, d = P(0, 0), P(1, 0)
    p = seg_line_intersection(P(5, -1), P(5, 3), c, d)
    assert orientation(c, d, p) == 0
    assert is_point_on_segment(P(5, -1), P(5, 3), p)
    assert seg_line_intersection(P(5, 1), P(5, 2), c, d) is None
    with pytest.raises(ValueError):
        seg_line_intersection(P(5, 0), P(9, 0), c, d)


def test_dist_segment_to_segment():
    assert dist_segment_to_segment(P(0, 0), P(4, 4), P(0, 4), P(4, 0)) == 0.0
    a, b, c, d = P(0, 0), P(1, 0), P(3, 1), P(3, 5)
    expected = min(
        dist_point_to_segment(a, b, c),
        dist_point_to_segment(a, b, d),
        dist_point_to_segment(c, d, a),
        dist_point_to_segment(c, d, b),
    )
    assert dist_segment_to_segment(a, b, c, d) == pytest.approx(expected)
    assert dist_segment_to_segment(a, b, c, d) == pytest.approx(dist(b, c))


def test_dist_point_to_ray():
    start, direction = P(0, 0), P(1, 0)
    behind = P(-3, 4)
    assert dist_point_to_ray(start, direction, behind) == pytest.approx(dist(start, behind))
    ahead = P(6, -2)
    assert dist_point_to_ray(start, direction, ahead) == pytest.approx(
        dist_point_to_line(start, start + direction, ahead)
    )


def test_ray_ray_intersect():
    assert ray_ray_intersect(P(0, 0), P(1, 1), P(2, 0), P(-1, 1))
    assert not ray_ray_intersect(P(0, 0), P(-1, -1), P(2, 0), P(1, -1))
    assert not ray_ray_intersect(P(0, 0), P(1, 0), P(0, 1), P(1, 0))


def test_ray_ray_distance():
    assert ray_ray_distance(P(0, 0), P(1, 1), P(2, 0), P(-1, 1)) == 0.0
    a_start, a_dir, b_start, b_dir = P(0, 0), P(1, 0), P(0, 3), P(1, 0)
    expected = min(
        dist_point_to_ray(a_start, a_dir, b_start),
        dist_point_to_ray(b_start, b_dir, a_start),
    )
    assert ray_ray_distance(a_start, a_dir, b_start, b_dir) == pytest.approx(expected)
    assert ray_ray_distance(a_start, a_dir, b_start, b_dir) == pytest.approx(dist(a_start, b_start))