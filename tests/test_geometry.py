import math

import pytest

from geometry import (DegenerateInput, HullError, InsufficientPoints, Point,
                      distance_to_line, farthest_from, hull_edges, is_left_of,
                      is_strictly_convex, leftmost, locate_point, orientation,
                      rightmost, same_cycle, validate_points)

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4)]


def test_orientation_sign():
    assert orientation((0, 0), (1, 0), (0, 1)) > 0
    assert orientation((0, 0), (1, 0), (0, -1)) < 0
    assert orientation((0, 0), (1, 1), (3, 3)) == 0
    assert orientation((0, 0), (4, 0), (0, 4)) == 16


def test_is_left_of_is_strict_lexicographic():
    assert is_left_of((0, 5), (1, 0))
    assert is_left_of((1, 0), (1, 2))
    assert not is_left_of((1, 2), (1, 0))
    assert not is_left_of((1, 1), (1, 1))


def test_extremes_do_not_touch_input():
    pts = [(3, 1), (0, 2), (0, -1), (5, 0), (5, 3)]
    before = list(pts)
    assert leftmost(pts) == (0, -1)
    assert rightmost(pts) == (5, 3)
    assert pts == before


def test_distance_to_line():
    assert distance_to_line((0, 0), (4, 0), (2, 3)) == pytest.approx(3.0)
    assert distance_to_line((0, 0), (4, 0), (2, -3)) == pytest.approx(3.0)
    assert distance_to_line((0, 0), (1, 1), (0, 2)) == pytest.approx(math.sqrt(2))


def test_farthest_from_prefers_first_on_ties():
    pts = [(1, 1), (2, -3), (3, 3), (1, 3)]
    assert farthest_from((0, 0), (4, 0), pts) == 1


@pytest.mark.parametrize("points", [[], [(0, 0)], [(0, 0), (1, 1)]])
def test_validate_rejects_too_few_points(points):
    with pytest.raises(InsufficientPoints):
        validate_points(points)


def test_validate_rejects_duplicates():
    with pytest.raises(DegenerateInput, match="duplicate"):
        validate_points([(0, 0), (1, 0), (0, 1), (1.0, 0.0)])


def test_validate_rejects_collinear():
    with pytest.raises(DegenerateInput, match="collinear"):
        validate_points([(0, 0), (1, 1), (2, 2), (-3, -3)])


def test_errors_are_value_errors():
    assert issubclass(InsufficientPoints, HullError)
    assert issubclass(DegenerateInput, ValueError)


def test_validate_returns_new_list():
    pts = ((0, 0), (1, 0), (0, 1))
    out = validate_points(pts)
    assert out == list(pts)
    assert isinstance(out, list)


def test_point_is_a_tuple():
    p = Point(1.5, -2.0)
    assert p == (1.5, -2.0)
    assert (p.x, p.y) == (1.5, -2.0)


def test_hull_edges_close_the_polygon():
    edges = hull_edges(SQUARE)
    assert len(edges) == 4
    assert edges[-1] == ((0, 4), (0, 0))


def test_is_strictly_convex():
    assert is_strictly_convex(SQUARE)
    assert not is_strictly_convex(list(reversed(SQUARE)))
    assert not is_strictly_convex([(0, 0), (2, 0), (4, 0), (4, 4), (0, 4)])


@pytest.mark.parametrize(
    "p,expected",
    [
        ((2, 2), "inside"),
        ((4, 2), "on boundary"),
        ((0, 0), "on boundary"),
        ((5, 2), "outside"),
        ((-1, -1), "outside"),
    ]
)
def test_locate_point(p, expected):
    assert locate_point(SQUARE, p) == expected


def test_same_cycle():
    assert same_cycle(SQUARE, SQUARE[2:] + SQUARE[:2])
    assert not same_cycle(SQUARE, list(reversed(SQUARE)))
    assert not same_cycle(SQUARE, SQUARE[:3])
    assert not same_cycle(SQUARE, [(9, 9)] + SQUARE[1:])
