"""Thick-line quad construction.

A stroke wider than a hairline is drawn as one filled rectangle per segment,
rendered as a triangle strip. Segments are handled independently, so corners
between consecutive segments are not mitred.

::

    0  S   1
    +--+--+
    |    /|
    |   / |
    |  /  |
    | /   |
    |/    |
    +--+--+
    3  E   2

The ring 0-1-2-3 surrounds segment S->E. Drawing it as a strip in the order
0, 1, 3, 2 yields triangles 0-1-3 and 1-3-2; any other order produces a bowtie.
"""

import logging

from vecpath.core.geometry import perpendicular_offset
from vecpath.domain import DrawTriangleStrip, Point
from vecpath.exceptions import DegenerateGeometryError

logger = logging.getLogger(__name__)

STRIP_ORDER = (0, 1, 3, 2)


def thick_line_points(start: Point, end: Point, width: float) -> list[Point]:
    """Corner ring of the rectangle covering a segment of the given width.

    Args:
        start: Segment start point
        end: Segment end point
        width: Full stroke width

    Returns:
        Four points in ring order: start - o, start + o, end + o, end - o,
        where o is the perpendicular offset of half the width

    Raises:
        DegenerateGeometryError: If the segment has zero length
    """
    offset = perpendicular_offset(start, end, width / 2.0)
    return [start - offset, start + offset, end + offset, end - offset]


def thick_line_strip(start: Point, end: Point, width: float) -> tuple[Point, ...]:
    """Triangle-strip ordering of ``thick_line_points``.

    Raises:
        DegenerateGeometryError: If the segment has zero length
    """
    ring = thick_line_points(start, end, width)
    return tuple(ring[i] for i in STRIP_ORDER)


def thick_line_command(start: Point, end: Point, width: float) -> DrawTriangleStrip | None:
    """Build the strip command for one thick segment.

    Returns:
        The command, or None for a zero-length segment
    """
    try:
        return DrawTriangleStrip(thick_line_strip(start, end, width))
    except DegenerateGeometryError:
        logger.debug("Skipping zero-length thick segment at %s", start)
        return None


def thick_polyline(points: list[Point], width: float) -> list[DrawTriangleStrip]:
    """One independent quad per consecutive pair of points.

    Zero-length pairs are skipped. Fewer than two points yields nothing.
    """
    commands: list[DrawTriangleStrip] = []
    for i in range(1, len(points)):
        command = thick_line_command(points[i - 1], points[i], width)
        if command is not None:
            commands.append(command)
    return commands
