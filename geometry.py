import math
from typing import List, NamedTuple, Sequence, Tuple


class Point(NamedTuple):
    x: float
    y: float


Segment = Tuple[Point, Point]


class HullError(ValueError):
    """Input that none of the hull algorithms can handle."""


class InsufficientPoints(HullError):
    pass


class DegenerateInput(HullError):
    pass


def orientation(a: Point, b: Point, c: Point) -> float:
    """z of cross(b - a, c - a): > 0 when c is ccw of a->b, < 0 when cw, 0 when collinear."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def lex_key(p: Point) -> Tuple[float, float]:
    return (p[0], p[1])


def is_left_of(a: Point, b: Point) -> bool:
    return a[0] < b[0] or (a[0] == b[0] and a[1] < b[1])


def leftmost(points: Sequence[Point]) -> Point:
    best = points[0]
    for p in points[1:]:
        if is_left_of(p, best):
            best = p
    return best


def rightmost(points: Sequence[Point]) -> Point:
    best = points[0]
    for p in points[1:]:
        if is_left_of(best, p):
            best = p
    return best


def distance_to_line(a: Point, b: Point, p: Point) -> float:
    return abs(orientation(a, b, p)) / math.hypot(b[0] - a[0], b[1] - a[1])


def farthest_from(a: Point, b: Point, points: Sequence[Point]) -> int:
    idx_max = 0
    dist_max = distance_to_line(a, b, points[0])
    for i in range(1, len(points)):
        dist = distance_to_line(a, b, points[i])
        if dist > dist_max:
            idx_max = i
            dist_max = dist
    return idx_max


def validate_points(points: Sequence[Point]) -> List[Point]:
    """Check that ``points`` can be hulled and return them as a new list.

    Raises InsufficientPoints for fewer than three points and
    DegenerateInput for repeated points or a set lying on a single line.
    """
    pts = list(points)
    if len(pts) < 3:
        raise InsufficientPoints(f"need at least 3 points, got {len(pts)}")
    seen = set()
    for p in pts:
        key = lex_key(p)
        if key in seen:
            raise DegenerateInput(f"duplicate point ({p[0]}, {p[1]})")
        seen.add(key)
    a, b = pts[0], pts[1]
    if all(orientation(a, b, c) == 0 for c in pts[2:]):
        raise DegenerateInput("all points are collinear")
    return pts


# Hull inspection helpers

def hull_edges(hull: Sequence[Point]) -> List[Segment]:
    if len(hull) < 2:
        return []
    if len(hull) == 2:
        return [(hull[0], hull[1])]
    return [(hull[i], hull[(i + 1) % len(hull)]) for i in range(len(hull))]


def is_strictly_convex(hull: Sequence[Point]) -> bool:
    """True when the polygon turns strictly left at every vertex, read cyclically."""
    n = len(hull)
    if n < 3:
        return False
    return all(orientation(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) > 0 for i in range(n))


def point_on_segment(a: Point, b: Point, p: Point, eps: float = 1e-9) -> bool:
    (ax, ay), (bx, by), (px, py) = a, b, p
    abx, aby = (bx - ax), (by - ay)
    apx, apy = (px - ax), (py - ay)

    ab2 = abx * abx + aby * aby
    if ab2 == 0.0:
        return math.hypot(px - ax, py - ay) <= eps

    t = max(0.0, min(1.0, (apx * abx + apy * aby) / ab2))
    qx, qy = ax + t * abx, ay + t * aby

    return math.hypot(px - qx, py - qy) <= eps


def locate_point(hull: Sequence[Point], p: Point, eps: float = 1e-9) -> str:
    """Return "inside", "on boundary" or "outside" for ``p`` against a ccw hull."""
    if not hull:
        return "outside"
    if len(hull) == 1:
        return "on boundary" if math.hypot(p[0] - hull[0][0], p[1] - hull[0][1]) <= eps else "outside"
    if len(hull) == 2:
        return "on boundary" if point_on_segment(hull[0], hull[1], p, eps) else "outside"

    on_boundary = False
    for a, b in hull_edges(hull):
        if point_on_segment(a, b, p, eps):
            on_boundary = True
            continue
        # ccw hull: everything inside is left of every edge
        if orientation(a, b, p) < -eps:
            return "outside"
    return "on boundary" if on_boundary else "inside"


def same_cycle(first: Sequence[Point], second: Sequence[Point]) -> bool:
    """True when ``second`` is a rotation of ``first``."""
    if len(first) != len(second):
        return False
    if not first:
        return True
    keys = [lex_key(p) for p in second]
    try:
        start = keys.index(lex_key(first[0]))
    except ValueError:
        return False
    n = len(first)
    return all(lex_key(first[i]) == keys[(start + i) % n] for i in range(n))
