"""Unit tests for graham.py - stack scan and collinear reduction."""

import pytest

from conftest import pts
from hullscan.constants import DegeneracyMode
from hullscan.errors import InvalidInputError, TooFewPointsError
from hullscan.graham import build_hull, compute_graham_scan, reduce_degeneracies
from hullscan.sorting import sort_by_angle

pytestmark = pytest.mark.unit


class TestBuildHull:
    def test_interior_point_popped(self, square_with_center):
        hull = build_hull(sort_by_angle(square_with_center))
        assert hull == pts((0, 0), (1, 0), (1, 1), (0, 1))

    def test_keeps_collinear_in_none_mode(self, collinear_edge):
        hull = build_hull(sort_by_angle(collinear_edge), DegeneracyMode.NONE)
        assert hull == pts((0, 0), (2, 0), (4, 0), (4, 4), (0, 4))

    def test_pops_collinear_in_reduce_mode(self, collinear_edge):
        hull = build_hull(sort_by_angle(collinear_edge), DegeneracyMode.REDUCE)
        assert hull == pts((0, 0), (4, 0), (4, 4), (0, 4))

    def test_collinear_seed_converges(self):
        """The first three sorted points are collinear; later points fix up the stack."""
        ordered = pts((0, 0), (1, 0), (2, 0), (3, 0), (3, 3), (0, 3))
        assert build_hull(ordered, DegeneracyMode.REDUCE) == pts((0, 0), (3, 0), (3, 3), (0, 3))
        assert reduce_degeneracies(build_hull(ordered)) == pts((0, 0), (3, 0), (3, 3), (0, 3))

    def test_seed_third_point_checked(self):
        """The third sorted point is not a hull vertex and is popped by a later point."""
        ordered = sort_by_angle(pts((0, 0), (4, 0), (3, 1), (4, 4), (0, 4)))
        assert ordered[:3] == pts((0, 0), (4, 0), (3, 1))
        assert build_hull(ordered) == pts((0, 0), (4, 0), (4, 4), (0, 4))

    def test_nearer_point_on_last_ray_popped(self):
        ordered = sort_by_angle(pts((0, 0), (4, 0), (4, 4), (0, 2), (0, 4)))
        assert build_hull(ordered) == pts((0, 0), (4, 0), (4, 4), (0, 4))

    def test_pivot_first(self, circle_points):
        ordered = sort_by_angle(circle_points)
        assert build_hull(ordered)[0] == ordered[0]

    def test_input_not_modified(self, square_with_center):
        ordered = sort_by_angle(square_with_center)
        before = list(ordered)
        build_hull(ordered)
        assert ordered == before

    def test_too_few_points(self):
        with pytest.raises(TooFewPointsError):
            build_hull(pts((0, 0), (1, 0)))

    def test_none_raises_invalid_input(self):
        with pytest.raises(InvalidInputError) as exc_info:
            build_hull(None)
        assert type(exc_info.value) is InvalidInputError

    def test_unknown_mode(self, triangle):
        with pytest.raises(InvalidInputError):
            build_hull(triangle, "sometimes")


class TestReduceDegeneracies:
    def test_drops_midpoint_of_edge(self):
        hull = reduce_degeneracies(pts((0, 0), (2, 0), (4, 0), (4, 4), (0, 4)))
        assert hull == pts((0, 0), (4, 0), (4, 4), (0, 4))

    def test_drops_run_of_collinear_points(self):
        hull = reduce_degeneracies(pts((0, 0), (1, 0), (2, 0), (3, 0), (3, 3)))
        assert hull == pts((0, 0), (3, 0), (3, 3))

    def test_wrap_around_edge(self):
        """A redundant point on the edge back to the start is removed."""
        hull = reduce_degeneracies(pts((0, 0), (4, 0), (4, 4), (0, 4), (0, 2)))
        assert hull == pts((0, 0), (4, 0), (4, 4), (0, 4))

    def test_first_point_on_closing_edge(self):
        hull = reduce_degeneracies(pts((2, 0), (4, 0), (4, 4), (0, 4), (0, 0)))
        assert hull == pts((4, 0), (4, 4), (0, 4), (0, 0))

    def test_zero_length_edge(self):
        hull = reduce_degeneracies(pts((0, 0), (4, 0), (4, 0), (4, 4), (0, 4)))
        assert hull == pts((0, 0), (4, 0), (4, 4), (0, 4))

    def test_convex_boundary_unchanged(self, triangle):
        assert reduce_degeneracies(triangle) == triangle

    def test_idempotent(self, collinear_edge):
        once = reduce_degeneracies(collinear_edge + pts((0, 2)))
        assert reduce_degeneracies(once) == once

    def test_all_collinear_keeps_ends(self):
        assert reduce_degeneracies(pts((0, 0), (1, 0), (2, 0))) == pts((0, 0), (2, 0))

    def test_returns_new_list(self, triangle):
        assert reduce_degeneracies(triangle) is not triangle

    def test_too_few_points(self):
        with pytest.raises(TooFewPointsError):
            reduce_degeneracies(pts((0, 0), (1, 0)))

    def test_none_raises(self):
        with pytest.raises(InvalidInputError):
            reduce_degeneracies(None)


class TestComputeGrahamScan:
    def test_reduce_mode(self, collinear_edge):
        assert compute_graham_scan(collinear_edge) == pts((0, 0), (4, 0), (4, 4), (0, 4))

    def test_none_mode(self, collinear_edge):
        hull = compute_graham_scan(collinear_edge, DegeneracyMode.NONE)
        assert hull == pts((0, 0), (2, 0), (4, 0), (4, 4), (0, 4))

    def test_all_collinear_reduce(self):
        assert compute_graham_scan(pts((2, 0), (0, 0), (1, 0))) == pts((0, 0), (2, 0))

    def test_all_collinear_none(self):
        hull = compute_graham_scan(pts((2, 0), (0, 0), (1, 0)), DegeneracyMode.NONE)
        assert hull == pts((0, 0), (1, 0), (2, 0))

    def test_unknown_mode(self, triangle):
        with pytest.raises(InvalidInputError):
            compute_graham_scan(triangle, "sometimes")
