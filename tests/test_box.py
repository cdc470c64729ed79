import pytest

from terrain_trees.box import Box
from terrain_trees.primitives import Point, Vertex


def unit_box() -> Box:
    return Box(Point(0, 0), Point(1, 1))


def test_default_box_is_degenerate_at_origin():
    box = Box()
    assert box.min_point == Point()
    assert box.max_point == Point()
    assert box.diagonal() == 0.0


def test_corners_are_copied():
    low, high = Point(0, 0), Point(2, 2)
    box = Box(low, high)
    low.x = -5
    assert box.min_point == Point(0, 0)
    copy = box.copy()
    copy.max_point.y = 9
    assert box.max_point == Point(2, 2)


def test_diagonal_of_three_four_box():
    assert Box(Point(0, 0), Point(3, 4)).diagonal() == pytest.approx(5.0)


def test_diagonal_is_translation_invariant():
    a = Box(Point(0, 0), Point(2, 7))
    b = Box(Point(10, -3), Point(12, 4))
    assert a.diagonal() == pytest.approx(b.diagonal())


@pytest.mark.parametrize(
    "other, expected",
    [
        (Box(Point(0.5, 0.5), Point(2, 2)), True),
        (Box(Point(1, 1), Point(2, 2)), True),
        (Box(Point(1.5, 0), Point(2, 1)), False),
        (Box(Point(0, -3), Point(1, -0.5)), False),
    ],
)
def test_intersects(other, expected):
    assert unit_box().intersects(other) is expected
    assert other.intersects(unit_box()) is expected


def test_completely_contains_is_strict():
    outer = Box(Point(0, 0), Point(10, 10))
    assert outer.completely_contains(Box(Point(1, 1), Point(9, 9)))
    assert not outer.completely_contains(Box(Point(0, 1), Point(9, 9)))
    assert not outer.completely_contains(outer)


@pytest.mark.parametrize(
    "point, expected",
    [(Point(0, 0), True), (Point(1, 1), True), (Point(0.5, 0.2), True), (Point(1.1, 0.5), False)],
)
def test_contains_closed(point, expected):
    assert unit_box().contains_closed(point) is expected


def test_contains_treats_inner_max_faces_as_open():
    box = unit_box()
    domain_max = Point(2, 2)
    assert box.contains(Point(0, 0), domain_max)
    assert box.contains(Point(0.5, 0.5), domain_max)
    assert not box.contains(Point(1, 0.5), domain_max)
    assert not box.contains(Point(0.5, 1), domain_max)
    assert not box.contains(Point(-0.1, 0.5), domain_max)


def test_contains_treats_domain_border_faces_as_closed():
    box = unit_box()
    domain_max = Point(1, 1)
    assert box.contains(Point(1, 0.5), domain_max)
    assert box.contains(Point(1, 1), domain_max)
    assert not box.contains(Point(1.01, 1), domain_max)


def test_contains_accepts_vertices():
    assert unit_box().contains(Vertex(0.5, 0.5, 100.0), Point(1, 1))


def test_resize_grows_to_include_point():
    box = unit_box()
    box.resize(Point(3, -2))
    assert box.min_point == Point(0, -2)
    assert box.max_point == Point(3, 1)
    assert box.contains_closed(Point(3, -2))


def test_resize_keeps_box_when_point_inside():
    box = unit_box()
    box.resize(Point(0.5, 0.5))
    assert box == unit_box()


def test_min_distance():
    box = Box(Point(0, 0), Point(3, 4))
    assert box.min_distance(Point(1, 1)) == 0.0
    assert box.min_distance(Point(6, 8)) == pytest.approx(5.0)
    assert box.min_distance(Point(-2, 2)) == pytest.approx(2.0)


def test_equality_hash_and_ordering():
    a = Box(Point(0, 0), Point(1, 1))
    b = Box(Point(0, 0), Point(1, 2))
    c = Box(Point(-1, 0), Point(5, 5))
    assert a == unit_box()
    assert hash(a) == hash(unit_box())
    assert a != b
    assert a < b
    assert c < a
    assert b > a
    assert sorted([b, a, c]) == [c, a, b]
    assert len({a, unit_box(), b}) == 2


def test_str_lists_both_corners():
    assert str(Box(Point(0, 1), Point(2, 3))) == "0 1 2 3"