from enum import Enum
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from geometry import Point, cross, orientation, squared_distance

HullFunction = Callable[[Iterable[Point]], List[Point]]


def graham_scan(points: Iterable[Point]) -> List[Point]:
    """Convex hull by Graham Scan, counter-clockwise from the lowest point.

    Inputs with fewer than three points come back unchanged. Collinear
    boundary points are dropped, so an all-collinear input collapses to
    its two extreme points.
    """
    pts = list(points)
    if len(pts) < 3:
        return pts

    pivot = min(pts, key=lambda p: (p[1], p[0]))

    # Every point lies in the half-plane [0, pi) seen from the pivot, so
    # comparing by cross product orders them by polar angle exactly.
    def by_angle(a: Point, b: Point) -> int:
        turn = orientation(pivot, a, b)
        if turn:
            return -turn
        return squared_distance(pivot, a) - squared_distance(pivot, b)

    ordered = sorted(set(pts), key=cmp_to_key(by_angle))

    stack: List[Point] = []
    for p in ordered:
        while len(stack) >= 2 and orientation(stack[-2], stack[-1], p) <= 0:
            stack.pop()
        stack.append(p)
    return stack


def jarvis_march(points: Iterable[Point]) -> List[Point]:
    """Convex hull by gift wrapping in O(n*h), counter-clockwise from the leftmost point."""
    pts = list(points)
    if len(pts) < 3:
        return pts

    start = min(pts)
    hull: List[Point] = []
    current = start
    while True:
        hull.append(current)
        candidate = None
        for p in pts:
            if p == current:
                continue
            if candidate is None:
                candidate = p
                continue
            turn = orientation(current, candidate, p)
            if turn < 0 or (
                turn == 0 and squared_distance(current, p) > squared_distance(current, candidate)
            ):
                candidate = p
        if candidate is None or candidate == start:
            break
        current = candidate
    return hull


_WorkItem = Tuple[Point, Point, Optional[List[int]]]


def _outside(pts: Sequence[Point], indices: Iterable[int], a: Point, b: Point) -> List[int]:
    """Indices of the points strictly to the right of the directed edge a->b."""
    return [i for i in indices if cross(a, b, pts[i]) < 0]


def _projection(a: Point, b: Point, p: Point) -> int:
    """Dot product of a->b and a->p."""
    return (b[0] - a[0]) * (p[0] - a[0]) + (b[1] - a[1]) * (p[1] - a[1])


def quick_hull(points: Iterable[Point]) -> List[Point]:
    """Convex hull by QuickHull, counter-clockwise from the leftmost point.

    Edges are expanded from an explicit work stack instead of recursion.
    Candidates are carried as indices into the input, which keeps
    duplicate coordinates apart and avoids scanning the hull for
    membership. Points lying exactly on an edge line are discarded.
    """
    pts = list(points)
    if len(pts) < 3:
        return pts

    left = min(range(len(pts)), key=lambda i: pts[i])
    right = max(range(len(pts)), key=lambda i: pts[i])
    leftmost, rightmost = pts[left], pts[right]
    if leftmost == rightmost:
        return [leftmost]

    rest = [i for i in range(len(pts)) if i != left and i != right]
    below = _outside(pts, rest, leftmost, rightmost)
    above = _outside(pts, rest, rightmost, leftmost)

    hull: List[Point] = []
    # An item with no candidate list emits its first point as a vertex.
    # Popped in order: leftmost, the lower side, rightmost, the upper side.
    work: List[_WorkItem] = [
        (rightmost, leftmost, above),
        (rightmost, rightmost, None),
        (leftmost, rightmost, below),
        (leftmost, leftmost, None),
    ]
    while work:
        a, b, candidates = work.pop()
        if candidates is None:
            hull.append(a)
            continue
        if not candidates:
            continue
        # Ties for farthest lie on a line parallel to a->b; take the one
        # nearest a so the rest fall outside apex->b and resolve there.
        far = max(
            candidates,
            key=lambda i: (abs(cross(a, b, pts[i])), -_projection(a, b, pts[i])),
        )
        apex = pts[far]
        work.append((apex, b, _outside(pts, candidates, apex, b)))
        work.append((apex, apex, None))
        work.append((a, apex, _outside(pts, candidates, a, apex)))
    return hull


def monotone_chain(points: Iterable[Point]) -> List[Point]:
    """Andrew's monotone chain, counter-clockwise from the lowest (x, y) point."""
    pts = list(points)
    if len(pts) < 3:
        return pts

    ordered = sorted(set(pts))
    if len(ordered) == 1:
        return ordered

    lower: List[Point] = []
    for p in ordered:
        while len(lower) >= 2 and orientation(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper: List[Point] = []
    for p in reversed(ordered):
        while len(upper) >= 2 and orientation(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return lower[:-1] + upper[:-1]


class UnknownAlgorithmError(ValueError):
    """No hull strategy matches the requested name."""


class HullAlgorithm(Enum):
    GRAHAM_SCAN = "graham_scan"
    JARVIS_MARCH = "jarvis_march"
    QUICK_HULL = "quick_hull"
    MONOTONE_CHAIN = "monotone_chain"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def function(self) -> HullFunction:
        return _FUNCTIONS[self]

    @classmethod
    def parse(cls, name: Union[str, "HullAlgorithm"]) -> "HullAlgorithm":
        """Look up a strategy by wire name, member name or label, ignoring case."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
        for algorithm in cls:
            if key in (algorithm.value, algorithm.label.lower().replace(" ", "_")):
                return algorithm
        choices = ", ".join(a.value for a in cls)
        raise UnknownAlgorithmError(f"Unknown hull algorithm {name!r} (expected one of: {choices})")


_LABELS = {
    HullAlgorithm.GRAHAM_SCAN: "Graham Scan",
    HullAlgorithm.JARVIS_MARCH: "Jarvis March",
    HullAlgorithm.QUICK_HULL: "QuickHull",
    HullAlgorithm.MONOTONE_CHAIN: "Monotone Chain",
}

_FUNCTIONS = {
    HullAlgorithm.GRAHAM_SCAN: graham_scan,
    HullAlgorithm.JARVIS_MARCH: jarvis_march,
    HullAlgorithm.QUICK_HULL: quick_hull,
    HullAlgorithm.MONOTONE_CHAIN: monotone_chain,
}


def compute_hull(
    points: Iterable[Point],
    algorithm: Union[str, HullAlgorithm] = HullAlgorithm.GRAHAM_SCAN,
) -> List[Point]:
    return HullAlgorithm.parse(algorithm).function(points)
