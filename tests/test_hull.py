"""Tests for the four convex hull strategies in hull.py."""

import itertools
import random

import pytest

from geometry import Point, locate_point, orientation, signed_area
from hull import (
    HullAlgorithm,
    UnknownAlgorithmError,
    compute_hull,
    graham_scan,
    jarvis_march,
    monotone_chain,
    quick_hull,
)

ALGORITHMS = list(HullAlgorithm)

SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


def pts(*coords):
    return [Point(x, y) for x, y in coords]


def all_collinear(points):
    distinct = list(dict.fromkeys(points))
    if len(distinct) < 3:
        return True
    o, a = distinct[0], distinct[1]
    return all(orientation(o, a, p) == 0 for p in distinct[2:])


def random_points(rng, n, lo=-20, hi=20):
    return [Point(rng.randint(lo, hi), rng.randint(lo, hi)) for _ in range(n)]


def general_position_points(rng, n, lo=-50, hi=50):
    chosen = []
    while len(chosen) < n:
        p = Point(rng.randint(lo, hi), rng.randint(lo, hi))
        if p in chosen:
            continue
        if any(orientation(a, b, p) == 0 for a, b in itertools.combinations(chosen, 2)):
            continue
        chosen.append(p)
    return chosen


def assert_valid_hull(points, hull):
    assert set(hull) <= set(points)
    assert len(hull) == len(set(hull))
    if len(hull) >= 2:
        assert hull[-1] != hull[0]
    if all_collinear(points):
        assert len(hull) <= 2
        for p in points:
            assert locate_point(hull, p) == "on boundary"
        return
    n = len(hull)
    assert n >= 3
    assert signed_area(hull) > 0
    for i in range(n):
        assert orientation(hull[i - 1], hull[i], hull[(i + 1) % n]) == 1
    for p in points:
        assert locate_point(hull, p) != "outside"


@pytest.mark.parametrize("algorithm", ALGORITHMS, ids=lambda a: a.value)
class TestDegenerateInput:
    def test_empty_list(self, algorithm):
        assert algorithm.function([]) == []

    def test_single_point(self, algorithm):
        assert algorithm.function(pts((5, 5))) == pts((5, 5))

    def test_two_points_returned_as_is(self, algorithm):
        assert algorithm.function(pts((0, 0), (1, 1))) == pts((0, 0), (1, 1))

    def test_two_points_keep_their_order(self, algorithm):
        assert algorithm.function(pts((3, 1), (0, 0))) == pts((3, 1), (0, 0))

    def test_two_duplicates_returned_as_is(self, algorithm):
        assert algorithm.function(pts((2, 2), (2, 2))) == pts((2, 2), (2, 2))

    def test_accepts_any_iterable(self, algorithm):
        assert algorithm.function(iter(pts((1, 2)))) == pts((1, 2))

    def test_horizontal_collinear_collapses_to_extremes(self, algorithm):
        assert algorithm.function(pts((0, 0), (2, 0), (4, 0))) == pts((0, 0), (4, 0))

    def test_vertical_collinear_collapses_to_extremes(self, algorithm):
        assert algorithm.function(pts((1, 5), (1, 1), (1, 3))) == pts((1, 1), (1, 5))

    def test_diagonal_collinear_collapses_to_extremes(self, algorithm):
        hull = algorithm.function(pts((3, 3), (0, 0), (1, 1), (2, 2), (1, 1)))
        assert set(hull) == set(pts((0, 0), (3, 3)))
        assert len(hull) == 2

    def test_identical_points_collapse_to_one(self, algorithm):
        assert algorithm.function(pts((3, 3), (3, 3), (3, 3), (3, 3))) == pts((3, 3))


@pytest.mark.parametrize("algorithm", ALGORITHMS, ids=lambda a: a.value)
class TestKnownHulls:
    def test_square_with_interior_point(self, algorithm):
        hull = algorithm.function(pts((0, 0), (4, 0), (4, 4), (0, 4), (2, 2)))
        assert hull == SQUARE

    def test_exact_square(self, algorithm):
        hull = algorithm.function(list(reversed(SQUARE)))
        assert set(hull) == set(SQUARE)
        assert len(hull) == 4
        assert signed_area(hull) > 0

    def test_triangle(self, algorithm):
        hull = algorithm.function(pts((0, 0), (4, 0), (2, 3)))
        assert hull == pts((0, 0), (4, 0), (2, 3))

    def test_collinear_boundary_points_are_dropped(self, algorithm):
        points = pts((0, 0), (2, 0), (4, 0), (4, 2), (4, 4), (2, 4), (0, 4), (0, 2), (1, 3))
        assert algorithm.function(points) == SQUARE

    def test_duplicates_appear_once(self, algorithm):
        points = pts((0, 0), (4, 4), (0, 0), (4, 0), (4, 4), (0, 4), (2, 2), (0, 4), (4, 0))
        assert algorithm.function(points) == SQUARE

    def test_plain_tuples(self, algorithm):
        hull = algorithm.function([(0, 0), (4, 0), (0, 4), (1, 1)])
        assert hull == [(0, 0), (4, 0), (0, 4)]

    def test_negative_coordinates(self, algorithm):
        points = pts((-3, -3), (3, -3), (3, 3), (-3, 3), (0, 0), (-1, 2), (2, -2))
        hull = algorithm.function(points)
        assert set(hull) == set(pts((-3, -3), (3, -3), (3, 3), (-3, 3)))
        assert_valid_hull(points, hull)

    def test_large_coordinates(self, algorithm):
        big = 10 ** 15
        points = pts((-big, -big), (big, -big), (big, big), (-big, big), (0, 1), (big - 1, 0))
        hull = algorithm.function(points)
        assert set(hull) == set(pts((-big, -big), (big, -big), (big, big), (-big, big)))

    def test_output_is_its_own_hull(self, algorithm):
        points = pts((0, 0), (7, 1), (9, 6), (4, 9), (-2, 5), (3, 4), (5, 5))
        hull = algorithm.function(points)
        assert algorithm.function(hull) == hull


@pytest.mark.parametrize("algorithm", ALGORITHMS, ids=lambda a: a.value)
class TestRandomizedProperties:
    def test_containment_and_winding(self, algorithm):
        rng = random.Random(1234)
        for _ in range(1000):
            points = random_points(rng, rng.randint(3, 30))
            hull = algorithm.function(points)
            assert_valid_hull(points, hull)

    def test_idempotent(self, algorithm):
        rng = random.Random(99)
        for _ in range(300):
            hull = algorithm.function(random_points(rng, rng.randint(3, 30)))
            assert algorithm.function(hull) == hull

    def test_small_inputs_unchanged(self, algorithm):
        rng = random.Random(7)
        for _ in range(100):
            points = random_points(rng, rng.randint(0, 2))
            assert algorithm.function(points) == points


class TestCrossAlgorithmAgreement:
    def test_general_position_inputs_agree(self):
        rng = random.Random(2024)
        for _ in range(200):
            points = general_position_points(rng, rng.randint(3, 12))
            hulls = [set(algorithm.function(points)) for algorithm in ALGORITHMS]
            assert all(h == hulls[0] for h in hulls[1:])

    def test_start_vertex_per_algorithm(self):
        points = pts((5, 0), (9, 4), (4, 9), (0, 5), (4, 4))
        assert monotone_chain(points)[0] == Point(0, 5)
        assert jarvis_march(points)[0] == Point(0, 5)
        assert quick_hull(points)[0] == Point(0, 5)
        assert graham_scan(points)[0] == Point(5, 0)


class TestQuickHull:
    def test_many_hull_vertices_without_recursion(self):
        points = [Point(i, i * i) for i in range(3000)]
        random.Random(5).shuffle(points)
        hull = quick_hull(points)
        assert len(hull) == 3000
        assert hull == monotone_chain(points)

    def test_duplicate_of_farthest_point(self):
        points = pts((0, 0), (4, 0), (2, 5), (2, 5), (2, 1))
        assert quick_hull(points) == pts((0, 0), (4, 0), (2, 5))

    def test_tied_farthest_points_keep_only_the_ends(self):
        points = pts((0, 0), (10, 0), (5, 3), (2, 3), (8, 3))
        hull = quick_hull(points)
        assert hull == pts((0, 0), (10, 0), (8, 3), (2, 3))
        assert_valid_hull(points, hull)
        assert quick_hull(hull) == hull

    @pytest.mark.parametrize("order", [0, 1, 2, 3])
    def test_tied_farthest_independent_of_input_order(self, order):
        top = pts((1, 6), (3, 6), (5, 6), (7, 6), (9, 6))
        rotated = top[order:] + top[:order]
        points = pts((0, 0), (10, 0)) + rotated + pts((5, 2), (4, -4), (6, -4), (5, -4))
        hull = quick_hull(points)
        assert hull == pts((0, 0), (4, -4), (6, -4), (10, 0), (9, 6), (1, 6))
        assert_valid_hull(points, hull)
        assert quick_hull(hull) == hull


class TestJarvisMarch:
    def test_leftmost_ties_start_at_lowest(self):
        points = pts((0, 3), (0, 0), (0, 6), (5, 3))
        assert jarvis_march(points) == pts((0, 0), (5, 3), (0, 6))


class TestHullAlgorithm:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("graham_scan", HullAlgorithm.GRAHAM_SCAN),
            ("Jarvis March", HullAlgorithm.JARVIS_MARCH),
            ("quick-hull", HullAlgorithm.QUICK_HULL),
            ("QuickHull", HullAlgorithm.QUICK_HULL),
            ("MONOTONE_CHAIN", HullAlgorithm.MONOTONE_CHAIN),
            (HullAlgorithm.MONOTONE_CHAIN, HullAlgorithm.MONOTONE_CHAIN),
        ],
    )
    def test_parse(self, name, expected):
        assert HullAlgorithm.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(UnknownAlgorithmError, match="Unknown hull algorithm"):
            HullAlgorithm.parse("bubble_sort")

    def test_functions(self):
        assert HullAlgorithm.GRAHAM_SCAN.function is graham_scan
        assert HullAlgorithm.JARVIS_MARCH.function is jarvis_march
        assert HullAlgorithm.QUICK_HULL.function is quick_hull
        assert HullAlgorithm.MONOTONE_CHAIN.function is monotone_chain

    def test_labels_are_distinct(self):
        assert len({a.label for a in HullAlgorithm}) == 4

    def test_compute_hull_defaults_to_graham_scan(self):
        points = pts((5, 0), (9, 4), (4, 9), (0, 5), (4, 4))
        assert compute_hull(points) == graham_scan(points)

    @pytest.mark.parametrize("algorithm", ALGORITHMS, ids=lambda a: a.value)
    def test_compute_hull_dispatch_by_name(self, algorithm):
        points = pts((5, 0), (9, 4), (4, 9), (0, 5), (4, 4))
        assert compute_hull(points, algorithm.value) == algorithm.function(points)
