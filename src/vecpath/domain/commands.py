"""Draw commands emitted by the shape generators.

A draw command is the concrete geometry produced for one rasterizer
primitive. Commands are immutable and know how to issue themselves to any
object implementing the rasterizer protocol.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from vecpath.domain.primitives import Point, Segment, Triangle

if TYPE_CHECKING:
    from vecpath.render.rasterizer import Rasterizer


@dataclass(frozen=True, slots=True)
class DrawLine:
    """A single hairline segment."""

    start: Point
    end: Point

    def issue(self, rasterizer: "Rasterizer") -> None:
        rasterizer.draw_line(self.start.x, self.start.y, self.end.x, self.end.y)

    def point_count(self) -> int:
        return 2

    def triangle_count(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class DrawLineStrip:
    """A connected open polyline."""

    points: tuple[Point, ...]

    def issue(self, rasterizer: "Rasterizer") -> None:
        rasterizer.draw_line_strip(self.points)

    def point_count(self) -> int:
        return len(self.points)

    def triangle_count(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class DrawLines:
    """Independent, disjoint hairline segments."""

    segments: tuple[Segment, ...]

    def issue(self, rasterizer: "Rasterizer") -> None:
        rasterizer.draw_lines(self.segments)

    def point_count(self) -> int:
        return 2 * len(self.segments)

    def triangle_count(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class DrawFilledRect:
    """An axis-aligned filled rectangle with non-negative size."""

    x: float
    y: float
    width: float
    height: float

    def issue(self, rasterizer: "Rasterizer") -> None:
        rasterizer.draw_filled_rect(self.x, self.y, self.width, self.height)

    def point_count(self) -> int:
        return 4

    def triangle_count(self) -> int:
        return 2

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True, slots=True)
class DrawFilledTriangles:
    """A list of independent filled triangles."""

    triangles: tuple[Triangle, ...]

    def issue(self, rasterizer: "Rasterizer") -> None:
        rasterizer.draw_filled_triangles(self.triangles)

    def point_count(self) -> int:
        return 3 * len(self.triangles)

    def triangle_count(self) -> int:
        return len(self.triangles)


@dataclass(frozen=True, slots=True)
class DrawTriangleStrip:
    """Filled geometry drawn as a triangle strip."""

    points: tuple[Point, ...]

    def issue(self, rasterizer: "Rasterizer") -> None:
        rasterizer.draw_filled_triangle_strip(self.points)

    def point_count(self) -> int:
        return len(self.points)

    def triangle_count(self) -> int:
        return max(0, len(self.points) - 2)

    def triangles(self) -> list[Triangle]:
        """Expand the strip into its individual triangles."""
        return [
            Triangle(self.points[i], self.points[i + 1], self.points[i + 2])
            for i in range(len(self.points) - 2)
        ]


DrawCommand = (
    DrawLine | DrawLineStrip | DrawLines | DrawFilledRect | DrawFilledTriangles | DrawTriangleStrip
)
