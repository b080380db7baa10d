"""Free-form subpath built from move/line/arc/close commands.

A subpath is the only mutable shape entry. It moves through three states:

- EMPTY: no points yet; only ``move_to`` has an effect
- OPEN: anchored by ``move_to`` and growing
- CLOSED: the last point repeats the first

Commands that make no sense in the current state are silent no-ops.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from vecpath.config import GeometryConfig
from vecpath.core.geometry import tangent_arc
from vecpath.domain import Point, ShapeKind


class SubpathState(Enum):
    """Lifecycle state of a subpath."""

    EMPTY = auto()
    OPEN = auto()
    CLOSED = auto()


@dataclass
class Subpath:
    """A growable ordered point sequence.

    Attributes:
        points: Accumulated points, in drawing order
        config: Geometry settings used to sample tangent arcs
    """

    kind: ClassVar[ShapeKind] = ShapeKind.SUBPATH

    points: list[Point] = field(default_factory=list)
    config: GeometryConfig = field(default_factory=GeometryConfig, repr=False)

    @property
    def state(self) -> SubpathState:
        if not self.points:
            return SubpathState.EMPTY
        if self.is_closed():
            return SubpathState.CLOSED
        return SubpathState.OPEN

    def is_empty(self) -> bool:
        return not self.points

    def is_closed(self) -> bool:
        """Check whether the last point repeats the first."""
        return len(self.points) > 1 and self.points[-1] == self.points[0]

    def move_to(self, point: Point) -> None:
        """Anchor an empty subpath at ``point``; no-op otherwise."""
        if not self.points:
            self.points.append(point)

    def line_to(self, point: Point) -> None:
        """Append ``point``; no-op on an empty subpath."""
        if self.points:
            self.points.append(point)

    def arc_to(self, p1: Point, p2: Point, radius: float) -> None:
        """Round the corner at ``p1`` with a fillet heading toward ``p2``.

        Appends the sampled arc between the current last point, the corner
        ``p1`` and the next point ``p2``. When the corner is degenerate
        (collinear or zero-length segments, non-finite radius) the join stays
        sharp and only ``p1`` is appended. A non-finite ``p1`` is dropped.
        No-op on an empty subpath.
        """
        if not self.points:
            return

        cfg = self.config
        arc = tangent_arc(
            self.points[-1],
            p1,
            p2,
            radius,
            resolution=cfg.arc_resolution,
            min_segments=cfg.arc_min_segments,
            max_segments=cfg.arc_max_segments,
            epsilon=cfg.epsilon,
            collinear_tolerance=cfg.collinear_tolerance,
        )
        if not arc:
            if not p1.is_finite():
                return
            arc = [p1]

        for point in arc:
            if point != self.points[-1]:
                self.points.append(point)

    def close_path(self) -> None:
        """Append a copy of the first point unless already closed."""
        if self.points and not self.is_closed():
            self.points.append(self.points[0])
