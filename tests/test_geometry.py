"""
Unit tests for the geometric primitives the hull is built on.
"""

import math

import pytest

from geometry import (
    EPSILON,
    NonFiniteCoordinateError,
    Point,
    Segment,
    boundary_length,
    convex_hull,
    hull_edges,
    polygon_area,
)


class TestPoint:

    def test_equality_is_exact(self):
        assert Point(1, 2) == Point(1.0, 2.0)
        assert Point(1, 2) != Point(1, 2 + 1e-12)

    def test_coordinates_are_floats(self):
        p = Point(3, 4)
        assert isinstance(p.x, float) and isinstance(p.y, float)

    @pytest.mark.parametrize("x, y", [
        (math.nan, 0.0),
        (0.0, math.inf),
        (-math.inf, 1.0),
    ])
    def test_non_finite_rejected(self, x, y):
        with pytest.raises(NonFiniteCoordinateError):
            Point(x, y)

    def test_non_finite_error_is_value_error(self):
        with pytest.raises(ValueError):
            Point(math.nan, math.nan)

    def test_of_accepts_pairs(self):
        assert Point.of((1, 2)) == Point(1, 2)
        assert Point.of([0.5, -0.5]) == Point(0.5, -0.5)

    def test_of_returns_points_unchanged(self):
        p = Point(1, 1)
        assert Point.of(p) is p

    @pytest.mark.parametrize("bad", [3, (1, 2, 3), None])
    def test_of_rejects_non_pairs(self, bad):
        with pytest.raises(TypeError):
            Point.of(bad)

    def test_hashable(self):
        assert len({Point(0, 0), Point(0.0, 0.0), Point(1, 0)}) == 2


class TestSegmentArithmetic:

    def test_dot_and_cross(self):
        a = Segment(Point(0, 0), Point(2, 0))
        b = Segment(Point(0, 0), Point(0, 3))
        assert a.dot(b) == 0.0
        assert a.cross(b) == 6.0
        assert b.cross(a) == -6.0

    def test_length(self):
        assert Segment(Point(0, 0), Point(3, 4)).length() == 5.0
        assert Segment(Point(1, 1), Point(1, 1)).length() == 0.0


class TestSegmentPredicates:

    def setup_method(self):
        self.edge = Segment(Point(0, 0), Point(2, 0))

    def test_collinear(self):
        assert self.edge.is_collinear_with(Point(5, 0))
        assert self.edge.is_collinear_with(Point(-3, 0))
        assert not self.edge.is_collinear_with(Point(1, 1e-3))

    def test_collinear_within_tolerance(self):
        # angle far below EPSILON
        assert self.edge.is_collinear_with(Point(1, 1e-12))
        assert not self.edge.is_collinear_with(Point(1, 1e-6))

    def test_collinear_custom_tolerance(self):
        assert self.edge.is_collinear_with(Point(1, 1e-6), eps=1e-3)

    def test_contains_bounded(self):
        assert self.edge.contains_bounded(Point(1, 0))
        assert self.edge.contains_bounded(Point(0, 0))
        assert self.edge.contains_bounded(Point(2, 0))
        assert not self.edge.contains_bounded(Point(3, 0))
        assert not self.edge.contains_bounded(Point(-1e-3, 0))
        assert not self.edge.contains_bounded(Point(1, 0.5))

    def test_contains_bounded_tolerates_rounding(self):
        a, b = Point(0.1, 0.2), Point(0.7, 1.4)
        mid = Point((a.x + b.x) / 2, (a.y + b.y) / 2)
        assert Segment(a, b).contains_bounded(mid)

    def test_illuminated_from_right(self):
        # counter-clockwise hull edges have the interior on their left
        assert self.edge.is_illuminated_by(Point(1, -1))
        assert not self.edge.is_illuminated_by(Point(1, 1))

    def test_collinear_observer_beyond_endpoint(self):
        assert self.edge.is_illuminated_by(Point(3, 0))
        assert self.edge.is_illuminated_by(Point(-1, 0))

    def test_observer_on_edge_sees_nothing(self):
        assert not self.edge.is_illuminated_by(Point(1, 0))
        assert not self.edge.is_illuminated_by(Point(0, 0))
        assert not self.edge.is_illuminated_by(Point(2, 0))


class TestPolygonMeasures:

    def test_square(self):
        square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        assert polygon_area(square) == 1.0
        assert boundary_length(square) == 4.0

    def test_orientation_does_not_matter(self):
        square = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]
        assert polygon_area(square) == pytest.approx(4.0)

    def test_degenerate(self):
        assert polygon_area([]) == 0.0
        assert polygon_area([Point(0, 0), Point(3, 4)]) == 0.0
        assert boundary_length([]) == 0.0
        assert boundary_length([Point(1, 1)]) == 0.0

    def test_segment_walked_there_and_back(self):
        assert boundary_length([Point(0, 0), Point(3, 4)]) == 10.0

    def test_hull_edges(self):
        tri = [Point(0, 0), Point(1, 0), Point(0, 1)]
        assert hull_edges(tri) == [(tri[0], tri[1]), (tri[1], tri[2]), (tri[2], tri[0])]
        assert hull_edges(tri[:2]) == [(tri[0], tri[1])]
        assert hull_edges(tri[:1]) == []


class TestBatchHull:

    def test_drops_interior_and_collinear_points(self):
        points = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 1), (1, 0), (0, 1), (2, 2)]
        assert convex_hull(points) == [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]

    def test_degenerate_inputs(self):
        assert convex_hull([]) == []
        assert convex_hull([(1, 1), (1, 1)]) == [Point(1, 1)]
        assert convex_hull([(0, 0), (1, 1), (2, 2)]) == [Point(0, 0), Point(2, 2)]


def test_epsilon_value():
    assert EPSILON == 1e-9
