"""Geometric operations for path generation.

This module provides the core mathematical utilities for:
- Distances, cross products and angles between segments
- Perpendicular offsets for thick strokes
- Ellipse sampling with size-adaptive angular steps
- Tangent-arc (fillet) solving at polyline corners
- Signed polygon area and point-in-triangle testing

All functions are pure and stateless.
"""

import logging
import math
from dataclasses import dataclass

from vecpath.domain import Point
from vecpath.exceptions import DegenerateGeometryError

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class EllipseData:
    """Center and signed radii of an ellipse derived from its bounding box."""

    cx: float
    cy: float
    rx: float
    ry: float

    @property
    def center(self) -> Point:
        return Point(self.cx, self.cy)

    def point_at(self, angle: float) -> Point:
        """Point on the ellipse boundary at the given angle (radians)."""
        return Point(self.cx + math.cos(angle) * self.rx, self.cy + math.sin(angle) * self.ry)

    def perimeter_estimate(self) -> float:
        """Approximate perimeter, 2*pi*sqrt((rx^2 + ry^2) / 2)."""
        return TWO_PI * math.sqrt((self.rx * self.rx + self.ry * self.ry) / 2.0)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def cross(a: Point, b: Point, c: Point) -> float:
    """Cross product of (b - a) and (c - a).

    Equals twice the signed area of triangle abc. Positive when a->b->c turns
    counter-clockwise in a y-up frame (clockwise on a y-down screen).

    Examples:
        >>> cross(Point(0, 0), Point(1, 0), Point(1, 1))
        1.0
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def angle_between(p1: Point, p2: Point, p3: Point) -> float:
    """Unsigned angle at ``p2`` between segments p2->p1 and p2->p3.

    Args:
        p1: End of the first segment
        p2: Shared vertex
        p3: End of the second segment

    Returns:
        Angle in radians in [0, pi], or NaN when either segment has zero
        length. Callers must guard against degenerate input.
    """
    v1x, v1y = p1.x - p2.x, p1.y - p2.y
    v2x, v2y = p3.x - p2.x, p3.y - p2.y

    magnitude = math.hypot(v1x, v1y) * math.hypot(v2x, v2y)
    if magnitude == 0.0:
        return math.nan

    cos_angle = (v1x * v2x + v1y * v2y) / magnitude
    # Rounding can push the cosine slightly outside acos' domain
    return math.acos(max(-1.0, min(1.0, cos_angle)))


def perpendicular_offset(start: Point, end: Point, half_width: float) -> Point:
    """Offset vector perpendicular to start->end with length ``half_width``.

    The direction vector is rotated 90 degrees counter-clockwise:
    (dx, dy) -> (-dy, dx).

    Raises:
        DegenerateGeometryError: If start and end coincide
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)

    if length < _EPSILON:
        raise DegenerateGeometryError("Cannot offset a zero-length segment")

    return Point(-dy / length * half_width, dx / length * half_width)


def ellipse_data(corner1: Point, corner2: Point) -> EllipseData:
    """Derive center and radii from an ellipse bounding box.

    Radii keep the sign of ``corner2 - corner1`` so that sampling always
    starts on the side of ``corner2`` for angle 0.
    """
    rx = (corner2.x - corner1.x) / 2.0
    ry = (corner2.y - corner1.y) / 2.0
    return EllipseData(cx=corner1.x + rx, cy=corner1.y + ry, rx=rx, ry=ry)


def ellipse_points(
    corner1: Point,
    corner2: Point,
    angle_start: float = 0.0,
    angle_end: float = TWO_PI,
) -> list[Point]:
    """Sample points along an elliptical arc.

    The angular step is chosen so that the chord between consecutive samples
    stays roughly constant whatever the ellipse size: step = 2*pi / perimeter.
    Larger ellipses therefore get more points.

    Samples are taken at ``angle_start + i * step`` while the angle does not
    exceed ``angle_end``; when the last sample falls short of ``angle_end`` an
    exact point at ``angle_end`` is appended so the arc has no gap.

    Args:
        corner1: Bounding box start corner
        corner2: Bounding box end corner
        angle_start: Starting angle in radians
        angle_end: Ending angle in radians

    Returns:
        At least one point for usable input. A zero-size box yields the center
        alone; an empty range (``angle_start > angle_end``) yields the point at
        ``angle_end``. A sweep longer than one turn is cut to one turn. A
        non-finite box or angle yields no points.
    """
    if not (
        corner1.is_finite()
        and corner2.is_finite()
        and math.isfinite(angle_start)
        and math.isfinite(angle_end)
    ):
        logger.debug("Ellipse rejected: non-finite box or angle range")
        return []

    if angle_end - angle_start > TWO_PI:
        angle_end = angle_start + TWO_PI

    data = ellipse_data(corner1, corner2)

    perimeter = data.perimeter_estimate()
    if perimeter < _EPSILON:
        return [data.center]

    step = TWO_PI / perimeter

    points: list[Point] = []
    last_angle: float | None = None
    i = 0
    alpha = angle_start
    while alpha <= angle_end:
        points.append(data.point_at(alpha))
        last_angle = alpha
        i += 1
        alpha = angle_start + i * step

    if last_angle is None or angle_end - last_angle > _EPSILON:
        points.append(data.point_at(angle_end))

    return points


def tangent_arc(
    p0: Point,
    p1: Point,
    p2: Point,
    radius: float,
    resolution: float = 2.0,
    min_segments: int = 4,
    max_segments: int = 1024,
    epsilon: float = _EPSILON,
    collinear_tolerance: float = 1e-6,
) -> list[Point]:
    """Sample the circular fillet of ``radius`` rounding the corner at ``p1``.

    The corner is approached from ``p0`` and left toward ``p2``. The arc is
    tangent to both segments; it starts on p1->p0 and ends on p1->p2, each
    ``radius / tan(theta / 2)`` away from the corner, where theta is the
    interior angle at ``p1``. Sweep direction follows the sign of the cross
    product of the incoming direction vectors (p1 - p0) and (p2 - p1).

    Args:
        p0: Point the corner is approached from
        p1: Corner point
        p2: Point the corner departs toward
        radius: Fillet radius
        resolution: Arc length covered by one segment
        min_segments: Lower bound on the segment count
        max_segments: Upper bound on the segment count
        epsilon: Segments shorter than this are zero-length
        collinear_tolerance: Minimum |sin| of the turn between the segments

    Returns:
        The sampled arc from the first tangent point to the second. Empty when
        an adjacent segment has zero length or the segments are collinear
        (straight-through or reversing), since the fillet is undefined there,
        and when a point or the radius is NaN or infinite. ``[p1]`` when
        ``radius`` is not positive.
    """
    if not (p0.is_finite() and p1.is_finite() and p2.is_finite() and math.isfinite(radius)):
        logger.debug("Tangent arc rejected: non-finite input at corner %s", p1)
        return []

    len1 = distance(p0, p1)
    len2 = distance(p1, p2)
    if len1 < epsilon or len2 < epsilon:
        logger.debug("Tangent arc rejected: zero-length segment at corner %s", p1)
        return []

    if radius <= 0.0:
        return [p1]

    in_x, in_y = (p1.x - p0.x) / len1, (p1.y - p0.y) / len1
    out_x, out_y = (p2.x - p1.x) / len2, (p2.y - p1.y) / len2
    turn = in_x * out_y - in_y * out_x
    if abs(turn) < collinear_tolerance:
        logger.debug("Tangent arc rejected: collinear segments at corner %s", p1)
        return []

    theta = angle_between(p0, p1, p2)
    half = theta / 2.0
    tangent_distance = radius / math.tan(half)
    center_distance = radius / math.sin(half)

    # Unit bisector of the two segment directions leaving the corner
    bis_x, bis_y = out_x - in_x, out_y - in_y
    bis_len = math.hypot(bis_x, bis_y)
    bis_x, bis_y = bis_x / bis_len, bis_y / bis_len

    start = Point(p1.x - in_x * tangent_distance, p1.y - in_y * tangent_distance)
    end = Point(p1.x + out_x * tangent_distance, p1.y + out_y * tangent_distance)
    cx = p1.x + bis_x * center_distance
    cy = p1.y + bis_y * center_distance

    sweep = math.pi - theta
    if turn < 0:
        sweep = -sweep
    angle0 = math.atan2(start.y - cy, start.x - cx)

    segments = math.ceil(radius * abs(sweep) / resolution)
    segments = max(min_segments, min(max_segments, segments))

    points = [start]
    for i in range(1, segments):
        angle = angle0 + sweep * i / segments
        points.append(Point(cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    points.append(end)

    return points


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Positive for counter-clockwise winding in a y-up frame, matching the sign
    convention of ``cross``.

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        >>> signed_area(square)
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def point_in_triangle(p: Point, a: Point, b: Point, c: Point) -> bool:
    """Test whether ``p`` lies inside triangle abc or on its boundary.

    Works for either winding of the triangle.
    """
    d1 = cross(a, b, p)
    d2 = cross(b, c, p)
    d3 = cross(c, a, p)

    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0

    return not (has_neg and has_pos)
