"""Unit tests for thick-line quads."""

import pytest

from vecpath.core.geometry import signed_area
from vecpath.core.thick_line import (
    STRIP_ORDER,
    thick_line_command,
    thick_line_points,
    thick_line_strip,
    thick_polyline,
)
from vecpath.domain import DrawTriangleStrip, Point
from vecpath.exceptions import DegenerateGeometryError


class TestThickLinePoints:
    """Tests for the corner ring of one segment."""

    def test_horizontal_segment_ring(self) -> None:
        ring = thick_line_points(Point(0, 0), Point(10, 0), 4.0)
        assert ring == [Point(0, -2), Point(0, 2), Point(10, 2), Point(10, -2)]

    def test_ring_is_simple_rectangle(self) -> None:
        """Test the ring encloses exactly length x width."""
        ring = thick_line_points(Point(3, 4), Point(9, 12), 6.0)
        assert abs(signed_area(ring)) == pytest.approx(10.0 * 6.0)

    def test_zero_length_raises(self) -> None:
        with pytest.raises(DegenerateGeometryError):
            thick_line_points(Point(5, 5), Point(5, 5), 5.0)


class TestThickLineStrip:
    """Tests for strip ordering."""

    def test_strip_order(self) -> None:
        assert STRIP_ORDER == (0, 1, 3, 2)
        strip = thick_line_strip(Point(0, 0), Point(10, 0), 4.0)
        assert strip == (Point(0, -2), Point(0, 2), Point(10, -2), Point(10, 2))

    def test_strip_covers_rectangle_without_overlap(self) -> None:
        """Test the two strip triangles sum to length x width (no bowtie)."""
        command = thick_line_command(Point(0, 0), Point(10, 0), 4.0)
        assert command is not None
        triangles = command.triangles()
        assert len(triangles) == 2
        assert sum(t.area() for t in triangles) == pytest.approx(40.0)

    def test_zero_length_command_is_skipped(self) -> None:
        """Test zero-length segments produce no geometry and no NaN."""
        assert thick_line_command(Point(5, 5), Point(5, 5), 5.0) is None


class TestThickPolyline:
    """Tests for independent per-segment quads."""

    def test_one_quad_per_segment(self) -> None:
        points = [Point(0, 0), Point(10, 0), Point(10, 10)]
        commands = thick_polyline(points, 3.0)
        assert len(commands) == 2
        assert all(isinstance(c, DrawTriangleStrip) for c in commands)

    def test_duplicate_points_skipped(self) -> None:
        points = [Point(0, 0), Point(0, 0), Point(10, 0)]
        commands = thick_polyline(points, 3.0)
        assert len(commands) == 1
        assert all(p.is_finite() for p in commands[0].points)

    def test_single_point_draws_nothing(self) -> None:
        assert thick_polyline([Point(1, 1)], 3.0) == []
