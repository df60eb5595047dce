import random

import pytest

from geometry import (DegenerateInput, InsufficientPoints, is_strictly_convex,
                      locate_point, same_cycle)
from hulls import (ALGORITHMS, UnknownAlgorithm, compute_hull, gift_wrapping,
                   graham_scan, monotone_chain, quick_hull)

HULLS = [gift_wrapping, graham_scan, monotone_chain, quick_hull]


def random_points(count, seed):
    rng = random.Random(seed)
    return [(rng.uniform(-100, 100), rng.uniform(-100, 100)) for _ in range(count)]


@pytest.mark.parametrize("hull", HULLS)
def test_triangle(hull):
    assert hull([(0, 0), (4, 0), (0, 4)]) == [(0, 0), (4, 0), (0, 4)]


@pytest.mark.parametrize("hull", HULLS)
def test_triangle_given_in_other_order(hull):
    assert hull([(0, 4), (0, 0), (4, 0)]) == [(0, 0), (4, 0), (0, 4)]


@pytest.mark.parametrize("hull", HULLS)
def test_square_skips_interior_point(hull):
    pts = [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]
    assert hull(pts) == [(0, 0), (4, 0), (4, 4), (0, 4)]


@pytest.mark.parametrize("hull", HULLS)
def test_far_outlier_is_on_hull(hull):
    pts = [(0, 0), (4, 0), (5, 2), (4, 4), (0, 4), (-1, 2), (2, 1), (2, 3), (40, 30)]
    result = hull(pts)
    assert (40, 30) in result
    assert (5, 2) not in result
    assert (4, 0) in result and (0, 4) in result


@pytest.mark.parametrize("hull", HULLS)
def test_minimum_input_is_its_own_hull(hull):
    pts = [(3.5, -1.0), (-2.0, 0.5), (1.0, 7.25)]
    result = hull(pts)
    assert sorted(result) == sorted(pts)
    assert is_strictly_convex(result)


@pytest.mark.parametrize("hull", HULLS)
@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_random_hull_contains_every_point(hull, seed):
    pts = random_points(200, seed)
    result = hull(pts)
    assert is_strictly_convex(result)
    assert min(result) == result[0]
    for p in pts:
        assert locate_point(result, p, eps=1e-7) != "outside"


@pytest.mark.parametrize("seed", [3, 11, 2024])
def test_algorithms_agree(seed):
    pts = random_points(300, seed)
    results = [hull(pts) for hull in HULLS]
    for other in results[1:]:
        assert same_cycle(results[0], other)


@pytest.mark.parametrize("hull", HULLS)
def test_hull_of_hull_is_the_same(hull):
    first = hull(random_points(150, 5))
    shuffled = list(first)
    random.Random(9).shuffle(shuffled)
    assert same_cycle(hull(shuffled), first)


@pytest.mark.parametrize("hull", HULLS)
def test_points_on_a_circle_are_all_kept(hull):
    pts = [(10 * c, 10 * s) for c, s in [(1, 0), (0.6, 0.8), (0, 1), (-0.6, 0.8),
                                         (-1, 0), (-0.6, -0.8), (0, -1), (0.6, -0.8)]]
    result = hull(pts)
    assert len(result) == len(pts)
    assert is_strictly_convex(result)


@pytest.mark.parametrize("hull", HULLS)
def test_input_is_not_modified(hull):
    pts = random_points(50, 13)
    before = list(pts)
    hull(pts)
    assert pts == before


@pytest.mark.parametrize("hull", HULLS)
def test_hull_vertices_come_from_input(hull):
    pts = random_points(80, 21)
    assert set(hull(pts)) <= set(pts)


@pytest.mark.parametrize("hull", HULLS)
def test_too_few_points(hull):
    with pytest.raises(InsufficientPoints):
        hull([(0, 0), (1, 1)])


@pytest.mark.parametrize("hull", HULLS)
def test_duplicates_rejected(hull):
    with pytest.raises(DegenerateInput):
        hull([(0, 0), (4, 0), (0, 4), (4, 0)])


@pytest.mark.parametrize("hull", HULLS)
def test_collinear_rejected(hull):
    with pytest.raises(DegenerateInput):
        hull([(0, 0), (1, 2), (2, 4), (3, 6)])


def test_registry_and_dispatch():
    assert set(ALGORITHMS) == {"gift_wrapping", "graham_scan", "monotone_chain", "quick_hull"}
    pts = [(0, 0), (4, 0), (4, 4), (0, 4), (1, 3)]
    assert compute_hull(pts, "quick_hull") == quick_hull(pts)
    assert compute_hull(pts) == monotone_chain(pts)


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithm):
        compute_hull([(0, 0), (1, 0), (0, 1)], "bogo_hull")
    with pytest.raises(KeyError):
        compute_hull([(0, 0), (1, 0), (0, 1)], "bogo_hull")
