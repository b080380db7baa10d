"""Unit tests for Path."""

from vecpath.core import Path, Subpath
from vecpath.domain import (
    DrawFilledRect,
    DrawLine,
    DrawLineStrip,
    FillStyle,
    Line,
    Point,
    Rect,
    StrokeStyle,
)


class TestPath:
    """Tests for Path entries and draw order."""

    def test_empty_path(self) -> None:
        path = Path()
        assert path.is_empty()
        assert len(path) == 0
        assert path.stroke_all(StrokeStyle()) == []
        assert path.fill_all(FillStyle()) == []

    def test_insertion_order_is_draw_order(self) -> None:
        path = Path()
        rect = Rect(Point(0, 0), Point(10, 10))
        line = Line(Point(0, 0), Point(10, 10))
        path.append(rect)
        path.append(line)

        assert list(path) == [rect, line]
        commands = path.stroke_all(StrokeStyle())
        assert isinstance(commands[0], DrawLineStrip)
        assert commands[1] == DrawLine(Point(0, 0), Point(10, 10))

    def test_fill_all_skips_shapes_without_interior(self) -> None:
        path = Path()
        path.append(Line(Point(0, 0), Point(10, 10)))
        path.append(Rect(Point(0, 0), Point(10, 10)))
        assert path.fill_all(FillStyle()) == [DrawFilledRect(0, 0, 10, 10)]

    def test_reset(self) -> None:
        path = Path()
        path.append(Rect(Point(0, 0), Point(10, 10)))
        path.reset()
        assert path.is_empty()


class TestLastAsSubpath:
    """Tests for subpath lookup."""

    def test_none_when_empty(self) -> None:
        assert Path().last_as_subpath() is None

    def test_none_when_last_is_other_shape(self) -> None:
        path = Path()
        path.append(Subpath())
        path.append(Rect(Point(0, 0), Point(10, 10)))
        assert path.last_as_subpath() is None

    def test_returns_last_subpath(self) -> None:
        path = Path()
        path.append(Rect(Point(0, 0), Point(10, 10)))
        subpath = Subpath()
        path.append(subpath)
        assert path.last_as_subpath() is subpath
