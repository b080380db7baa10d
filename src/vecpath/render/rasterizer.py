"""Rasterizer contract and a recording backend.

The rasterizer is the external collaborator that receives point and triangle
arrays and turns them into pixels. Any object with these methods can be
plugged into a drawing surface.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from vecpath.domain import Point, Segment, Triangle


class Rasterizer(Protocol):
    """Immediate-mode drawing backend.

    Colors are normalized floats in 0..1. Lifecycle: ``begin`` and
    ``viewport`` before any drawing, then ``flush``, ``end`` and ``present``
    once all drawing for the frame is done.
    """

    def begin(self, width: int, height: int) -> None:
        ...

    def viewport(self, x: int, y: int, width: int, height: int) -> None:
        ...

    def set_color(self, r: float, g: float, b: float, a: float) -> None:
        ...

    def clear(self) -> None:
        ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        ...

    def draw_line_strip(self, points: Sequence[Point]) -> None:
        ...

    def draw_lines(self, segments: Sequence[Segment]) -> None:
        ...

    def draw_filled_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def draw_filled_triangles(self, triangles: Sequence[Triangle]) -> None:
        ...

    def draw_filled_triangle_strip(self, points: Sequence[Point]) -> None:
        ...

    def flush(self) -> None:
        ...

    def end(self) -> None:
        ...

    def present(self) -> None:
        ...


@dataclass(frozen=True)
class RasterCall:
    """One recorded rasterizer call.

    Attributes:
        name: Method name (e.g. "draw_line")
        args: Positional arguments as received
    """

    name: str
    args: tuple[Any, ...]


class RecordingRasterizer:
    """Rasterizer that records every call instead of drawing.

    Useful as a test double and for gathering draw statistics.

    Example:
        rasterizer = RecordingRasterizer()
        with DrawingSurface(rasterizer, 100, 100) as surface:
            ...
        rasterizer.names()  # ["begin", "viewport", ..., "present"]
    """

    def __init__(self) -> None:
        self.calls: list[RasterCall] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append(RasterCall(name, args))

    def begin(self, width: int, height: int) -> None:
        self._record("begin", width, height)

    def viewport(self, x: int, y: int, width: int, height: int) -> None:
        self._record("viewport", x, y, width, height)

    def set_color(self, r: float, g: float, b: float, a: float) -> None:
        self._record("set_color", r, g, b, a)

    def clear(self) -> None:
        self._record("clear")

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record("draw_line", x1, y1, x2, y2)

    def draw_line_strip(self, points: Sequence[Point]) -> None:
        self._record("draw_line_strip", tuple(points))

    def draw_lines(self, segments: Sequence[Segment]) -> None:
        self._record("draw_lines", tuple(segments))

    def draw_filled_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("draw_filled_rect", x, y, width, height)

    def draw_filled_triangles(self, triangles: Sequence[Triangle]) -> None:
        self._record("draw_filled_triangles", tuple(triangles))

    def draw_filled_triangle_strip(self, points: Sequence[Point]) -> None:
        self._record("draw_filled_triangle_strip", tuple(points))

    def flush(self) -> None:
        self._record("flush")

    def end(self) -> None:
        self._record("end")

    def present(self) -> None:
        self._record("present")

    def names(self) -> list[str]:
        """Names of the recorded calls, in order."""
        return [call.name for call in self.calls]

    def calls_named(self, name: str) -> list[RasterCall]:
        """Recorded calls with the given method name."""
        return [call for call in self.calls if call.name == name]

    def count_by_name(self) -> dict[str, int]:
        """Number of recorded calls per method name."""
        counts: dict[str, int] = {}
        for call in self.calls:
            counts[call.name] = counts.get(call.name, 0) + 1
        return counts
