from terrain_trees.incidence import EdgeTriangleTuple, VertexTrianglePair


def test_vertex_triangle_pair_orders_by_vertex_only():
    assert VertexTrianglePair(1, 9) < VertexTrianglePair(2, 0)
    a, b = VertexTrianglePair(3, 1), VertexTrianglePair(3, 8)
    assert not a < b
    assert not b < a


def test_vertex_triangle_pairs_sort_by_vertex():
    pairs = [VertexTrianglePair(4, 1), VertexTrianglePair(2, 7), VertexTrianglePair(3, 5)]
    assert [p.v for p in sorted(pairs)] == [2, 3, 4]
    assert [p.t for p in sorted(pairs)] == [7, 5, 1]


def test_vertex_triangle_pair_default():
    p = VertexTrianglePair()
    assert (p.v, p.t) == (0, 0)


def test_create_sorts_vertices():
    f = EdgeTriangleTuple.create(7, 3, 4, 1)
    assert (f.v1, f.v2, f.t, f.f_pos) == (3, 7, 4, 1)


def test_create_default_position():
    f = EdgeTriangleTuple.create(2, 5, 6)
    assert f.f_pos == 0


def test_default_tuple():
    f = EdgeTriangleTuple()
    assert (f.v1, f.v2, f.t, f.f_pos) == (0, 0, 0, 0)


def test_equality_ignores_triangle_and_position():
    a = EdgeTriangleTuple.create(1, 2, 10, 0)
    b = EdgeTriangleTuple.create(2, 1, 20, 2)
    assert a == b
    assert hash(a) == hash(b)
    assert a != EdgeTriangleTuple.create(1, 3, 10, 0)


def test_ordering_breaks_ties_on_triangle():
    a = EdgeTriangleTuple.create(1, 2, 10)
    b = EdgeTriangleTuple.create(1, 2, 20)
    assert a < b
    assert b > a
    assert not b < a


def test_sorted_tuples_group_equal_edges():
    tuples = [
        EdgeTriangleTuple.create(2, 3, 5),
        EdgeTriangleTuple.create(1, 2, 9),
        EdgeTriangleTuple.create(3, 2, 1),
        EdgeTriangleTuple.create(2, 1, 4),
    ]
    ordered = sorted(tuples)
    assert [(f.v1, f.v2, f.t) for f in ordered] == [(1, 2, 4), (1, 2, 9), (2, 3, 1), (2, 3, 5)]
    assert ordered[0] == ordered[1]
    assert ordered[2] == ordered[3]


def test_set_deduplicates_edges():
    tuples = {
        EdgeTriangleTuple.create(1, 2, 1),
        EdgeTriangleTuple.create(2, 1, 2),
        EdgeTriangleTuple.create(2, 3, 1),
    }
    assert len(tuples) == 2


def test_has_not():
    f = EdgeTriangleTuple.create(4, 8, 1)
    assert f.has_not(5)
    assert not f.has_not(4)
    assert not f.has_not(8)


def test_str():
    assert str(EdgeTriangleTuple.create(7, 3, 4, 1)) == "3 7 4 1"