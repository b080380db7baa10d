"""Unit tests for ear-clipping triangulation."""

import math

import pytest

from vecpath.core.geometry import cross, signed_area
from vecpath.core.triangulate import triangulate_polygon
from vecpath.domain import Point


def _total_area(triangles) -> float:
    return sum(t.area() for t in triangles)


class TestConvexPolygons:
    """Tests for convex input."""

    @pytest.mark.parametrize("n", [3, 4, 6, 12])
    def test_regular_polygon(self, n: int) -> None:
        """Test a convex n-gon gives n - 2 triangles covering its area."""
        points = [
            Point(50 + 40 * math.cos(2 * math.pi * i / n), 50 + 40 * math.sin(2 * math.pi * i / n))
            for i in range(n)
        ]
        triangles = triangulate_polygon(points)
        assert len(triangles) == n - 2
        assert _total_area(triangles) == pytest.approx(abs(signed_area(points)))

    def test_closed_triangle(self) -> None:
        """Test a closed triangle path (last point repeats first) gives one triangle."""
        points = [Point(0, 0), Point(50, 0), Point(0, 50), Point(0, 0)]
        triangles = triangulate_polygon(points)
        assert len(triangles) == 1
        assert triangles[0].area() == pytest.approx(1250.0)

    def test_either_winding_is_accepted(self) -> None:
        square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        assert len(triangulate_polygon(square)) == 2
        assert len(triangulate_polygon(list(reversed(square)))) == 2


class TestConcavePolygons:
    """Tests for concave input."""

    def test_l_shape(self) -> None:
        points = [
            Point(0, 0),
            Point(20, 0),
            Point(20, 10),
            Point(10, 10),
            Point(10, 20),
            Point(0, 20),
        ]
        triangles = triangulate_polygon(points)
        assert len(triangles) == 4
        assert _total_area(triangles) == pytest.approx(300.0)

    def test_arrow_shape(self) -> None:
        points = [Point(0, 0), Point(10, 5), Point(0, 10), Point(3, 5)]
        triangles = triangulate_polygon(points)
        assert len(triangles) == 2
        assert _total_area(triangles) == pytest.approx(abs(signed_area(points)))

    def test_triangles_have_non_negative_orientation(self) -> None:
        """Test emitted triangles share one winding whatever the input winding."""
        points = [Point(0, 0), Point(0, 20), Point(10, 20), Point(10, 10), Point(20, 10), Point(20, 0)]
        for t in triangulate_polygon(points):
            assert cross(t.a, t.b, t.c) >= 0


class TestDegenerateInput:
    """Tests for input that fills nothing."""

    def test_fewer_than_three_points(self) -> None:
        assert triangulate_polygon([]) == []
        assert triangulate_polygon([Point(0, 0), Point(1, 1)]) == []

    def test_duplicates_collapse(self) -> None:
        assert triangulate_polygon([Point(0, 0), Point(0, 0), Point(5, 5), Point(0, 0)]) == []

    def test_collinear_points(self) -> None:
        assert triangulate_polygon([Point(0, 0), Point(5, 0), Point(10, 0)]) == []

    def test_self_intersecting_bowtie(self) -> None:
        """Test a figure-eight yields nothing rather than garbage."""
        points = [Point(0, 0), Point(10, 10), Point(10, 0), Point(0, 10)]
        assert triangulate_polygon(points) == []
