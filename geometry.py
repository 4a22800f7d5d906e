import math
from typing import List, NamedTuple, Optional, Sequence, Tuple


class Point(NamedTuple):
    x: int
    y: int


Segment = Tuple[Point, Point]


def cross(o: Point, a: Point, b: Point) -> int:
    """Twice the signed area of the triangle o, a, b."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def orientation(o: Point, a: Point, b: Point) -> int:
    """1 if o->a->b turns left (CCW), -1 if it turns right, 0 if collinear."""
    value = cross(o, a, b)
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def squared_distance(a: Point, b: Point) -> int:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dx * dx + dy * dy


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def signed_area(polygon: Sequence[Point]) -> float:
    """Shoelace area, positive for counter-clockwise vertex order."""
    n = len(polygon)
    if n < 3:
        return 0.0
    total = 0
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        total += x1 * y2 - x2 * y1
    return total / 2


def hull_edges(hull: Sequence[Point]) -> List[Segment]:
    if len(hull) < 2:
        return []
    if len(hull) == 2:
        return [(hull[0], hull[1])]
    return [(hull[i], hull[(i + 1) % len(hull)]) for i in range(len(hull))]


def perimeter(hull: Sequence[Point]) -> float:
    """Length of the closed boundary; a two-vertex hull counts its segment once."""
    return sum(distance(a, b) for a, b in hull_edges(hull))


def _on_segment(a: Point, b: Point, p: Point) -> bool:
    return (
        cross(a, b, p) == 0
        and min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def locate_point(hull: Sequence[Point], p: Point) -> Optional[str]:
    """Classify p against a counter-clockwise hull.

    Returns "inside", "on boundary" or "outside", or None for an empty hull.
    One and two vertex hulls are treated as a point and a segment.
    """
    if len(hull) == 0:
        return None
    if len(hull) == 1:
        return "on boundary" if tuple(hull[0]) == tuple(p) else "outside"
    if len(hull) == 2:
        return "on boundary" if _on_segment(hull[0], hull[1], p) else "outside"

    on_boundary = False
    for a, b in hull_edges(hull):
        turn = cross(a, b, p)
        if turn < 0:
            return "outside"
        if turn == 0 and _on_segment(a, b, p):
            on_boundary = True
    return "on boundary" if on_boundary else "inside"
