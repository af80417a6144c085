import pytest

from geoexact import Point, Segment, same_side, seg_contains, sgn, side


def seg(a, b):
    return Segment.of(a, b)


X_AXIS = seg((0, 0), (4, 0))
DIAGONAL = seg((0, 0), (4, 4))


@pytest.mark.parametrize("value, expected", [(-7, -1), (0, 0), (12, 1), (10**40, 1)])
def test_sgn(value, expected):
    assert sgn(value) == expected


@pytest.mark.parametrize(
    "point, expected",
    [((2, 3), 1), ((2, -3), -1), ((7, 0), 0), ((-1, 0), 0), ((0, 0), 0)],
)
def test_side_against_horizontal_segment(point, expected):
    assert side(X_AXIS, Point.of(point)) == expected


@pytest.mark.parametrize("point", [(1, 3), (-2, 5), (10, -1), (3, 2)])
def test_orientation_is_antisymmetric(point):
    for segment in (X_AXIS, DIAGONAL, seg((-3, 7), (5, -2))):
        p = Point.of(point)
        assert side(segment, p) == -side(segment.reversed(), p)
        assert side(segment, p) != 0


@pytest.mark.parametrize("segment", [X_AXIS, DIAGONAL, seg((-3, 7), (5, -2)), seg((1, 1), (1, 1))])
def test_segment_endpoints_are_collinear_with_it(segment):
    assert side(segment, segment.first) == 0
    assert side(segment, segment.second) == 0


@pytest.mark.parametrize(
    "p1, p2, expected",
    [
        ((1, 1), (5, 2), True),
        ((1, 1), (1, -1), False),
        ((1, 0), (9, 0), True),
        ((1, 0), (1, 1), False),
        ((-3, -1), (8, -20), True),
    ],
)
def test_same_side(p1, p2, expected):
    assert same_side(X_AXIS, Point.of(p1), Point.of(p2)) is expected


@pytest.mark.parametrize(
    "point, expected",
    [
        ((2, 2), True),
        ((0, 0), True),
        ((4, 4), True),
        ((5, 5), False),
        ((-1, -1), False),
        ((1, 3), False),
    ],
)
def test_diagonal_containment(point, expected):
    assert seg_contains(DIAGONAL, Point.of(point)) is expected


def test_containment_ignores_endpoint_order():
    assert seg_contains(DIAGONAL.reversed(), Point(1, 1))
    assert not seg_contains(DIAGONAL.reversed(), Point(6, 6))


@pytest.mark.parametrize(
    "segment, point, expected",
    [
        (seg((0, 2), (4, 2)), (5, 2), False),
        (seg((0, 2), (4, 2)), (-1, 2), False),
        (seg((0, 2), (4, 2)), (3, 2), True),
        (seg((1, 0), (1, 5)), (1, 5), True),
        (seg((1, 0), (1, 5)), (1, 6), False),
        (seg((1, 5), (1, 0)), (1, -1), False),
        (seg((-6, -3), (2, 1)), (-2, -1), True),
        (seg((-6, -3), (2, 1)), (4, 2), False),
    ],
)
def test_containment_checks_each_axis_range(segment, point, expected):
    assert seg_contains(segment, Point.of(point)) is expected


def test_degenerate_segment_contains_only_its_point():
    dot = seg((2, 3), (2, 3))

    assert seg_contains(dot, Point(2, 3))
    assert not seg_contains(dot, Point(2, 4))


def test_point_rendering():
    assert str(Point(3, -4)) == "(3;-4)"
    assert str(seg((0, 0), (1, 2))) == "(0;0)-(1;2)"


def test_point_of_rejects_non_pairs():
    with pytest.raises(ValueError):
        Point.of((1, 2, 3))


def test_points_unpack_and_compare_by_value():
    x, y = Point(5, 6)

    assert (x, y) == (5, 6)
    assert Point(5, 6) == Point.of([5, 6])
    assert len({Point(1, 2), Point(1, 2)}) == 1
