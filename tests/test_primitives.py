import pytest

from terrain_trees.primitives import Point, Vertex


def test_default_point_is_origin():
    assert Point().coords == [0.0, 0.0]


def test_coordinates_come_from_constructor():
    p = Point(1.5, -2.0)
    assert p.coordinate(0) == 1.5
    assert p.coordinate(1) == -2.0
    assert (p.x, p.y) == (1.5, -2.0)


def test_set_coordinate_round_trip():
    p = Point()
    p.set_coordinate(0, 4.25)
    p.set_coordinate(1, -7.5)
    assert p == Point(4.25, -7.5)


def test_ordering_is_lexicographic():
    pts = [Point(2, 0), Point(1, 3), Point(1, 2)]
    assert sorted(pts) == [Point(1, 2), Point(1, 3), Point(2, 0)]
    assert Point(1, 5) < Point(2, 0)
    assert Point(2, 0) > Point(1, 5)


def test_equal_points_hash_alike():
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_add_and_sub_are_inverse():
    p, q = Point(3.5, -1.0), Point(0.25, 8.0)
    assert (p + q) - q == p


def test_scalar_multiplication_matches_addition():
    p = Point(3.5, -1.0)
    assert p * 2 == p + p


def test_distance_invariants():
    p, q = Point(1.0, 2.0), Point(-4.0, 7.5)
    assert p.distance(p) == 0.0
    assert p.distance(q) == pytest.approx(q.distance(p))
    r = Point(10.0, -3.0)
    assert p.distance(r) <= p.distance(q) + q.distance(r) + 1e-12


def test_distance_pinned_value():
    assert Point(0, 0).distance(Point(3, 4)) == pytest.approx(5.0)


def test_point_str():
    assert str(Point(1, 2)) == "1 2"


def test_vertex_default_elevation_is_zero():
    v = Vertex(1, 2)
    assert v.z == 0.0
    assert v.fields == [0.0]


def test_vertex_elevation_through_coordinate():
    v = Vertex(1, 2, 3)
    assert v.coordinate(v.dimension) == v.z == 3
    assert v.coordinate(0) == 1


def test_vertex_set_coordinate_elevation_and_plane():
    v = Vertex(1, 2, 3)
    v.set_coordinate(2, 7)
    v.set_coordinate(0, 9)
    assert v.z == 7
    assert v.x == 9


def test_vertex_multiple_fields():
    v = Vertex(1, 2, 3, 4)
    assert v.fields == [3, 4]
    v.add_field(5.5)
    assert v.fields[-1] == 5.5
    assert len(v.fields) == 3


def test_vertex_equality_ignores_fields():
    assert Vertex(1, 2, 3) == Vertex(1, 2, 9)
    assert Vertex(1, 2, 3) != Vertex(1, 3, 3)


def test_norm_invariants():
    a, b = Vertex(1, 2, 3), Vertex(-2, 0.5, 6)
    assert a.norm(a) == 0.0
    assert a.norm(b) == pytest.approx(b.norm(a))


def test_norm_equals_planar_distance_at_same_elevation():
    a, b = Vertex(1, 2, 5), Vertex(-2, 0.5, 5)
    assert a.norm(b) == pytest.approx(a.distance(b))


def test_scalar_product_of_vector_with_itself_is_squared_norm():
    origin, a = Vertex(1, 1, 1), Vertex(2.5, -3, 4)
    assert origin.scalar_product(a, a) == pytest.approx(origin.norm(a) ** 2)


def test_scalar_product_of_orthogonal_vectors_is_zero():
    origin = Vertex(0, 0, 0)
    assert origin.scalar_product(Vertex(1, 0, 0), Vertex(0, 1, 0)) == 0.0
    assert origin.scalar_product(Vertex(1, 0, 0), Vertex(0, 0, 1)) == 0.0