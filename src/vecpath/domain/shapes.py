"""Shape entries held by a path.

Shapes form a closed tagged variant: every entry carries a ``kind`` tag from
``ShapeKind`` and the generators dispatch on that tag. The entries defined here
are immutable; the free-form subpath (the only mutable variant) lives in
``vecpath.core.subpath`` because it builds its points with the geometry kernel.
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from vecpath.domain.primitives import Point


class ShapeKind(Enum):
    """Tag identifying the variant of a shape entry."""

    LINE = auto()
    RECT = auto()
    ROUNDRECT = auto()
    ELLIPSE = auto()
    SUBPATH = auto()


@dataclass(frozen=True, slots=True)
class Line:
    """A straight line from ``start`` to ``end``."""

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    start: Point
    end: Point


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle spanned by two opposite corners.

    Corners are kept as given; the fill generator normalizes them.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.RECT

    corner1: Point
    corner2: Point

    def normalized(self) -> tuple[float, float, float, float]:
        """Return (x, y, width, height) with non-negative width and height."""
        x = min(self.corner1.x, self.corner2.x)
        y = min(self.corner1.y, self.corner2.y)
        return (x, y, abs(self.corner2.x - self.corner1.x), abs(self.corner2.y - self.corner1.y))


@dataclass(frozen=True, slots=True)
class RoundRect:
    """A rectangle with elliptical corners.

    Attributes:
        corner1: First bounding corner
        corner2: Opposite bounding corner
        rx: Horizontal corner radius
        ry: Vertical corner radius
    """

    kind: ClassVar[ShapeKind] = ShapeKind.ROUNDRECT

    corner1: Point
    corner2: Point
    rx: float
    ry: float


@dataclass(frozen=True, slots=True)
class EllipseSector:
    """An elliptical arc sector inside an axis-aligned bounding box.

    Attributes:
        corner1: First bounding corner
        corner2: Opposite bounding corner
        angle_start: Start angle in radians
        angle_end: End angle in radians
    """

    kind: ClassVar[ShapeKind] = ShapeKind.ELLIPSE

    corner1: Point
    corner2: Point
    angle_start: float = 0.0
    angle_end: float = 2.0 * math.pi
