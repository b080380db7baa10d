"""Unit tests for DrawingSurface."""

import math

import pytest

from vecpath.core import Subpath
from vecpath.domain import Point, Rect, RGBAColor
from vecpath.exceptions import FrameStateError
from vecpath.render import DrawingSurface, FrameState, RecordingRasterizer


@pytest.fixture
def rasterizer() -> RecordingRasterizer:
    return RecordingRasterizer()


@pytest.fixture
def surface(rasterizer: RecordingRasterizer) -> DrawingSurface:
    return DrawingSurface(rasterizer, 640, 480)


class TestFrameLifecycle:
    """Tests for begin/flush ordering."""

    def test_empty_frame(self, rasterizer: RecordingRasterizer, surface: DrawingSurface) -> None:
        with surface:
            assert surface.state is FrameState.ACTIVE

        assert surface.state is FrameState.FINISHED
        assert rasterizer.names() == ["begin", "viewport", "flush", "end", "present"]
        assert rasterizer.calls[0].args == (640, 480)
        assert rasterizer.calls[1].args == (0, 0, 640, 480)

    def test_flush_once_when_drawing_raises(
        self, rasterizer: RecordingRasterizer, surface: DrawingSurface
    ) -> None:
        """Test the frame is flushed exactly once and the error still propagates."""
        with pytest.raises(RuntimeError, match="boom"):
            with surface:
                surface.begin_path()
                raise RuntimeError("boom")

        counts = rasterizer.count_by_name()
        assert counts["flush"] == 1
        assert counts["end"] == 1
        assert counts["present"] == 1
        assert rasterizer.names()[-3:] == ["flush", "end", "present"]

    def test_finish_is_idempotent(self, rasterizer: RecordingRasterizer, surface: DrawingSurface) -> None:
        surface.begin()
        surface.finish()
        surface.finish()
        assert rasterizer.count_by_name()["flush"] == 1

    def test_begin_twice_raises(self, surface: DrawingSurface) -> None:
        surface.begin()
        with pytest.raises(FrameStateError):
            surface.begin()

    def test_finish_before_begin_raises(self, surface: DrawingSurface) -> None:
        with pytest.raises(FrameStateError, match="idle"):
            surface.finish()

    def test_drawing_outside_frame_raises(self, surface: DrawingSurface) -> None:
        with pytest.raises(FrameStateError) as exc_info:
            surface.line(Point(0, 0), Point(1, 1))
        assert exc_info.value.state == "idle"

        with surface:
            pass
        with pytest.raises(FrameStateError):
            surface.fill()


class TestPathConstruction:
    """Tests for shape and subpath commands."""

    def test_shapes_are_appended(self, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.line(Point(10, 10), Point(50, 50))
            surface.rectangle(Point(10, 10), Point(50, 50))
            surface.roundrect(Point(0, 0), Point(40, 40), 5.0, 5.0)
            surface.ellipse(Point(100, 100), Point(300, 300))
            assert len(surface.path) == 4

    def test_begin_path_discards_entries(self, surface: DrawingSurface) -> None:
        with surface:
            surface.rectangle(Point(10, 10), Point(50, 50))
            surface.begin_path()
            assert surface.path.is_empty()

    def test_line_to_without_move_to_anchors(self, surface: DrawingSurface) -> None:
        """Test a first line_to starts a subpath at its point."""
        with surface:
            surface.begin_path()
            surface.line_to(Point(5, 5))
            surface.line_to(Point(10, 5))
            subpath = surface.path.last_as_subpath()
            assert subpath is not None
            assert subpath.points == [Point(5, 5), Point(10, 5)]

    def test_move_to_starts_new_subpath(self, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.move_to(Point(0, 0))
            surface.line_to(Point(10, 0))
            surface.move_to(Point(20, 20))
            assert len(surface.path) == 2
            assert surface.path.last_as_subpath().points == [Point(20, 20)]

    def test_move_to_reuses_empty_subpath(self, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.path.append(Subpath())
            surface.move_to(Point(3, 3))
            assert len(surface.path) == 1

    def test_subpath_after_shape(self, surface: DrawingSurface) -> None:
        """Test subpath commands after another shape create a fresh subpath."""
        with surface:
            surface.begin_path()
            surface.rectangle(Point(0, 0), Point(10, 10))
            surface.line_to(Point(20, 20))
            assert len(surface.path) == 2
            assert isinstance(list(surface.path)[0], Rect)

    def test_arc_to_without_subpath_anchors_at_corner(self, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.arc_to(Point(10, 0), Point(10, 10), 5.0)
            assert surface.path.last_as_subpath().points == [Point(10, 0)]

    def test_close_path_without_subpath(self, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.close_path()
            assert surface.path.is_empty()


class TestPainting:
    """Tests for stroke, fill and clear."""

    def test_fill_closed_triangle(self, rasterizer: RecordingRasterizer, surface: DrawingSurface) -> None:
        """Test move/line/line/close then fill draws a single triangle."""
        with surface:
            surface.begin_path()
            surface.move_to(Point(0, 0))
            surface.line_to(Point(50, 0))
            surface.line_to(Point(0, 50))
            surface.close_path()
            surface.fill()

        calls = rasterizer.calls_named("draw_filled_triangles")
        assert len(calls) == 1
        (triangles,) = calls[0].args
        assert len(triangles) == 1
        assert triangles[0].area() == pytest.approx(1250.0)

    def test_fill_sets_color_first(self, rasterizer: RecordingRasterizer, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.rectangle(Point(10, 10), Point(50, 50))
            surface.fill_style.color = RGBAColor(1.0, 0.0, 0.0, 1.0)
            surface.fill()

        names = rasterizer.names()
        index = names.index("draw_filled_rect")
        assert names[index - 1] == "set_color"
        assert rasterizer.calls[index - 1].args == (1.0, 0.0, 0.0, 1.0)
        assert rasterizer.calls[index].args == (10, 10, 40, 40)

    def test_stroke_uses_current_width(self, rasterizer: RecordingRasterizer, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.line(Point(10, 10), Point(50, 50))
            surface.stroke()
            surface.stroke_style.width = 3.0
            surface.stroke()

        assert len(rasterizer.calls_named("draw_line")) == 1
        assert len(rasterizer.calls_named("draw_filled_triangle_strip")) == 1

    def test_clear(self, rasterizer: RecordingRasterizer, surface: DrawingSurface) -> None:
        with surface:
            surface.fill_style.color = RGBAColor.from_argb(0xFFFEFAE0)
            surface.clear()

        names = rasterizer.names()
        assert names[2:4] == ["set_color", "clear"]

    def test_stats(self, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.rectangle(Point(10, 10), Point(50, 50))
            surface.line(Point(0, 0), Point(5, 5))
            surface.fill()
            surface.stroke()
            surface.begin_path()
            surface.fill()

        stats = surface.stats
        assert stats.fill_passes == 2
        assert stats.stroke_passes == 1
        assert stats.empty_passes == 1
        assert stats.command_counts == {"DrawFilledRect": 1, "DrawLineStrip": 1, "DrawLine": 1}
        assert stats.triangles_emitted == 2
        assert stats.duration_seconds >= 0.0


class _FailingFlushRasterizer(RecordingRasterizer):
    def flush(self) -> None:
        super().flush()
        raise RuntimeError("flush failed")


class TestRobustness:
    """Tests for failing backends and unusable input."""

    def test_end_and_present_run_when_flush_raises(self) -> None:
        rasterizer = _FailingFlushRasterizer()
        surface = DrawingSurface(rasterizer, 100, 100)

        with pytest.raises(RuntimeError, match="flush failed"):
            with surface:
                pass

        assert rasterizer.names()[-3:] == ["flush", "end", "present"]
        assert surface.state is FrameState.FINISHED

    def test_infinite_ellipse_sweep_draws_nothing(
        self, rasterizer: RecordingRasterizer, surface: DrawingSurface
    ) -> None:
        with surface:
            surface.begin_path()
            surface.ellipse(Point(0, 0), Point(10, 10), 0.0, math.inf)
            surface.fill()
            surface.stroke()

        assert rasterizer.calls_named("draw_filled_triangles") == []
        assert rasterizer.calls_named("draw_line_strip") == []

    def test_non_finite_arc_radius_keeps_sharp_corner(self, surface: DrawingSurface) -> None:
        with surface:
            surface.begin_path()
            surface.move_to(Point(0, 0))
            surface.arc_to(Point(10, 0), Point(10, 10), math.nan)
            assert surface.path.last_as_subpath().points == [Point(0, 0), Point(10, 0)]
