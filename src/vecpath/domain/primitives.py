"""Core geometric value types.

This module defines the fundamental geometric types used throughout vecpath:
- Point: A 2D point in drawing-surface coordinates
- Segment: An independent line segment between two points
- Triangle: Three points forming a fill primitive
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D drawing-surface space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> "Point":
        return Point(self.x * s, self.y * s)

    def __rmul__(self, s: float) -> "Point":
        return self.__mul__(s)

    def length(self) -> float:
        """Length of the point taken as a vector from the origin."""
        return math.hypot(self.x, self.y)

    def is_finite(self) -> bool:
        """Check that neither coordinate is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Segment:
    """A line segment between two points."""

    start: Point
    end: Point

    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


@dataclass(frozen=True, slots=True)
class Triangle:
    """A triangle used as a fill primitive.

    Points are kept in emission order. Triangles produced by the fill
    generators always have non-negative orientation (see ``oriented``).

    Attributes:
        a: First vertex
        b: Second vertex
        c: Third vertex
    """

    a: Point
    b: Point
    c: Point

    def orientation(self) -> float:
        """Twice the signed area; positive when a->b->c turns positively."""
        return (self.b.x - self.a.x) * (self.c.y - self.a.y) - (self.b.y - self.a.y) * (
            self.c.x - self.a.x
        )

    def area(self) -> float:
        """Unsigned area of the triangle."""
        return abs(self.orientation()) / 2.0

    def oriented(self) -> "Triangle":
        """Return this triangle with non-negative orientation.

        Swaps ``b`` and ``c`` when the winding is negative, leaving ``a`` in
        place so fans keep their shared apex.
        """
        if self.orientation() < 0:
            return Triangle(self.a, self.c, self.b)
        return self

    def points(self) -> tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)
