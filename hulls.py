"""Planar convex hull algorithms.

Every function takes a sequence of points and returns a new list holding
the hull vertices in counter-clockwise order, starting at the
lexicographically smallest point. The caller's sequence is never modified.
"""
import logging
from functools import cmp_to_key
from typing import Callable, Dict, List, Sequence

from geometry import (
    DegenerateInput,
    HullError,
    Point,
    farthest_from,
    leftmost,
    lex_key,
    orientation,
    rightmost,
    validate_points,
)

logger = logging.getLogger(__name__)

HullFunction = Callable[[Sequence[Point]], List[Point]]


class UnknownAlgorithm(HullError, KeyError):
    pass


def gift_wrapping(points: Sequence[Point]) -> List[Point]:
    """Jarvis march, O(n*h)."""
    pts = validate_points(points)
    n = len(pts)
    start = pts.index(leftmost(pts))

    hull: List[Point] = []
    current = start
    while True:
        hull.append(pts[current])
        if len(hull) > n:
            raise DegenerateInput("gift wrapping did not close the hull")

        # Keep the most clockwise candidate; the current point is never a candidate.
        end = 0
        for i in range(1, n):
            if end == current or orientation(pts[current], pts[end], pts[i]) < 0:
                end = i

        current = end
        if current == start:
            break

    logger.debug("gift_wrapping: %d points -> %d hull vertices", n, len(hull))
    return hull


def _ccw_around(pivot: Point):
    def compare(a: Point, b: Point) -> int:
        turn = orientation(pivot, a, b)
        if turn > 0:
            return -1
        if turn < 0:
            return 1
        # same direction from the pivot: nearer first
        da = (a[0] - pivot[0]) ** 2 + (a[1] - pivot[1]) ** 2
        db = (b[0] - pivot[0]) ** 2 + (b[1] - pivot[1]) ** 2
        return (da > db) - (da < db)

    return cmp_to_key(compare)


def graham_scan(points: Sequence[Point]) -> List[Point]:
    """Graham scan, O(n log n)."""
    pts = validate_points(points)
    pivot = leftmost(pts)
    rest = sorted((p for p in pts if p is not pivot), key=_ccw_around(pivot))

    hull = [pivot, rest[0], rest[1]]
    for p in rest[2:]:
        while len(hull) >= 2 and orientation(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    logger.debug("graham_scan: %d points -> %d hull vertices", len(pts), len(hull))
    return hull


def _chain(ordered: Sequence[Point]) -> List[Point]:
    chain: List[Point] = []
    for p in ordered:
        while len(chain) >= 2 and orientation(chain[-2], chain[-1], p) <= 0:
            chain.pop()
        chain.append(p)
    return chain


def monotone_chain(points: Sequence[Point]) -> List[Point]:
    """Andrew's monotone chain, O(n log n)."""
    pts = sorted(validate_points(points), key=lex_key)
    lower = _chain(pts)
    upper = _chain(reversed(pts))

    # both chains contain both endpoints
    hull = lower + upper[1:-1]
    logger.debug("monotone_chain: %d points -> %d hull vertices", len(pts), len(hull))
    return hull


def _hull_side(points: List[Point], p: Point, q: Point) -> List[Point]:
    # points all lie strictly right of p->q; returns the chain strictly between p and q
    if not points:
        return []

    f = points[farthest_from(p, q, points)]
    outside_pf = [r for r in points if orientation(p, f, r) < 0]
    outside_fq = [r for r in points if orientation(f, q, r) < 0]

    return _hull_side(outside_pf, p, f) + [f] + _hull_side(outside_fq, f, q)


def quick_hull(points: Sequence[Point]) -> List[Point]:
    """QuickHull, expected O(n log n), O(n^2) worst case."""
    pts = validate_points(points)
    a = leftmost(pts)
    b = rightmost(pts)

    above: List[Point] = []
    below: List[Point] = []
    for p in pts:
        turn = orientation(a, b, p)
        if turn > 0:
            above.append(p)
        elif turn < 0:
            below.append(p)

    # below is walked a->b and above b->a, which keeps the whole hull ccw
    hull = [a] + _hull_side(below, a, b) + [b] + _hull_side(above, b, a)
    logger.debug("quick_hull: %d points -> %d hull vertices", len(pts), len(hull))
    return hull


ALGORITHMS: Dict[str, HullFunction] = {
    "quick_hull": quick_hull,
    "gift_wrapping": gift_wrapping,
    "monotone_chain": monotone_chain,
    "graham_scan": graham_scan,
}


def compute_hull(points: Sequence[Point], algorithm: str = "monotone_chain") -> List[Point]:
    try:
        func = ALGORITHMS[algorithm]
    except KeyError:
        raise UnknownAlgorithm(
            f"unknown algorithm {algorithm!r}, expected one of {', '.join(ALGORITHMS)}"
        ) from None
    return func(points)
