"""Stroke and fill geometry for each shape variant.

Each shape kind has a stroke generator and a fill generator; both return the
draw commands for the shape under the given style. Dispatch goes through
tables keyed by ``ShapeKind`` so the set of shapes stays closed: adding a
variant without generators fails loudly in ``stroke_geometry``/``fill_geometry``.

Stroke widths follow one rule for every shape: the hairline width draws
single-pixel lines, any other positive width draws independent quads per
segment (no mitred corners), and a width of zero or less draws nothing.
"""

import logging
import math
from collections.abc import Callable

from vecpath.config import GeometryConfig, TriangulationConfig
from vecpath.core.geometry import ellipse_data, ellipse_points
from vecpath.core.subpath import Subpath
from vecpath.core.thick_line import thick_line_command, thick_polyline
from vecpath.core.triangulate import triangulate_polygon
from vecpath.domain import (
    DrawCommand,
    DrawFilledRect,
    DrawFilledTriangles,
    DrawLine,
    DrawLines,
    DrawLineStrip,
    EllipseSector,
    FillStyle,
    Line,
    Point,
    Rect,
    RoundRect,
    Segment,
    ShapeKind,
    StrokeStyle,
    Triangle,
)

logger = logging.getLogger(__name__)

Shape = Line | Rect | RoundRect | EllipseSector | Subpath

HALF_PI = math.pi / 2.0


def _stroke_segments(
    segments: list[tuple[Point, Point]], width: float, config: GeometryConfig
) -> list[DrawCommand]:
    """Stroke independent segments as one hairline batch or as quads."""
    if config.is_hairline(width):
        return [DrawLines(tuple(Segment(a, b) for a, b in segments))]

    commands: list[DrawCommand] = []
    for a, b in segments:
        command = thick_line_command(a, b, width)
        if command is not None:
            commands.append(command)
    return commands


def _stroke_polyline(points: list[Point], width: float, config: GeometryConfig) -> list[DrawCommand]:
    """Stroke a connected polyline as a line strip or as a chain of quads."""
    if len(points) < 2:
        return []
    if config.is_hairline(width):
        return [DrawLineStrip(tuple(points))]
    return list(thick_polyline(points, width))


def _fan(center: Point, boundary: list[Point]) -> list[Triangle]:
    """Fan triangles from ``center`` through consecutive boundary points."""
    return [
        Triangle(center, boundary[i - 1], boundary[i]).oriented() for i in range(1, len(boundary))
    ]


# -- Line -------------------------------------------------------------------


def _stroke_line(shape: Line, style: StrokeStyle, config: GeometryConfig) -> list[DrawCommand]:
    if config.is_hairline(style.width):
        return [DrawLine(shape.start, shape.end)]

    command = thick_line_command(shape.start, shape.end, style.width)
    return [command] if command is not None else []


def _fill_line(shape: Line, style: FillStyle, config: GeometryConfig) -> list[DrawCommand]:
    # Lines have no interior
    return []


# -- Rectangle --------------------------------------------------------------


def _rect_corners(corner1: Point, corner2: Point) -> list[Point]:
    return [
        Point(corner1.x, corner1.y),
        Point(corner2.x, corner1.y),
        Point(corner2.x, corner2.y),
        Point(corner1.x, corner2.y),
    ]


def _stroke_rect(shape: Rect, style: StrokeStyle, config: GeometryConfig) -> list[DrawCommand]:
    corners = _rect_corners(shape.corner1, shape.corner2)

    if config.is_hairline(style.width):
        return [DrawLineStrip((*corners, corners[0]))]

    edges = [(corners[i], corners[(i + 1) % 4]) for i in range(4)]
    return _stroke_segments(edges, style.width, config)


def _fill_rect(shape: Rect, style: FillStyle, config: GeometryConfig) -> list[DrawCommand]:
    x, y, width, height = shape.normalized()
    return [DrawFilledRect(x, y, width, height)]


# -- Rounded rectangle ------------------------------------------------------


class _RoundRectLayout:
    """Normalized box, clamped radii and corner arcs of a rounded rectangle."""

    def __init__(self, shape: RoundRect) -> None:
        self.x1 = min(shape.corner1.x, shape.corner2.x)
        self.y1 = min(shape.corner1.y, shape.corner2.y)
        self.x2 = max(shape.corner1.x, shape.corner2.x)
        self.y2 = max(shape.corner1.y, shape.corner2.y)
        self.rx = min(abs(shape.rx), (self.x2 - self.x1) / 2.0)
        self.ry = min(abs(shape.ry), (self.y2 - self.y1) / 2.0)

    def is_square_cornered(self, epsilon: float) -> bool:
        return self.rx <= epsilon or self.ry <= epsilon

    def as_rect(self) -> Rect:
        return Rect(Point(self.x1, self.y1), Point(self.x2, self.y2))

    def corner_centers(self) -> list[Point]:
        """Centers of the top-left, top-right, bottom-right, bottom-left arcs."""
        return [
            Point(self.x1 + self.rx, self.y1 + self.ry),
            Point(self.x2 - self.rx, self.y1 + self.ry),
            Point(self.x2 - self.rx, self.y2 - self.ry),
            Point(self.x1 + self.rx, self.y2 - self.ry),
        ]

    def corner_arcs(self) -> list[list[Point]]:
        """Quarter-ellipse samples, one per corner, each sweeping 90 degrees."""
        x1, y1, x2, y2 = self.x1, self.y1, self.x2, self.y2
        dx, dy = self.rx * 2.0, self.ry * 2.0
        return [
            ellipse_points(Point(x1, y1), Point(x1 + dx, y1 + dy), math.pi, HALF_PI * 3.0),
            ellipse_points(Point(x2 - dx, y1), Point(x2, y1 + dy), HALF_PI * 3.0, math.pi * 2.0),
            ellipse_points(Point(x2 - dx, y2 - dy), Point(x2, y2), 0.0, HALF_PI),
            ellipse_points(Point(x1, y2 - dy), Point(x1 + dx, y2), HALF_PI, math.pi),
        ]

    def edges(self) -> list[tuple[Point, Point]]:
        """The four straight edges, inset by the corner radii."""
        x1, y1, x2, y2, rx, ry = self.x1, self.y1, self.x2, self.y2, self.rx, self.ry
        return [
            (Point(x1 + rx, y1), Point(x2 - rx, y1)),
            (Point(x2, y1 + ry), Point(x2, y2 - ry)),
            (Point(x2 - rx, y2), Point(x1 + rx, y2)),
            (Point(x1, y2 - ry), Point(x1, y1 + ry)),
        ]


def _stroke_roundrect(shape: RoundRect, style: StrokeStyle, config: GeometryConfig) -> list[DrawCommand]:
    layout = _RoundRectLayout(shape)
    if layout.is_square_cornered(config.epsilon):
        return _stroke_rect(layout.as_rect(), style, config)

    # Edges shrink to nothing when the radii span the whole side
    edges = [(a, b) for a, b in layout.edges() if a != b]
    commands = _stroke_segments(edges, style.width, config) if edges else []
    for arc in layout.corner_arcs():
        commands.extend(_stroke_polyline(arc, style.width, config))
    return commands


def _fill_roundrect(shape: RoundRect, style: FillStyle, config: GeometryConfig) -> list[DrawCommand]:
    layout = _RoundRectLayout(shape)
    if layout.is_square_cornered(config.epsilon):
        return _fill_rect(layout.as_rect(), style, config)

    x1, y1, x2, y2, rx, ry = layout.x1, layout.y1, layout.x2, layout.y2, layout.rx, layout.ry
    commands: list[DrawCommand] = []

    # Horizontal and vertical bands overlap in the middle; fill color is flat
    if y2 - y1 - 2.0 * ry > config.epsilon:
        commands.append(DrawFilledRect(x1, y1 + ry, x2 - x1, y2 - y1 - 2.0 * ry))
    if x2 - x1 - 2.0 * rx > config.epsilon:
        commands.append(DrawFilledRect(x1 + rx, y1, x2 - x1 - 2.0 * rx, y2 - y1))

    for center, arc in zip(layout.corner_centers(), layout.corner_arcs(), strict=True):
        triangles = _fan(center, arc)
        if triangles:
            commands.append(DrawFilledTriangles(tuple(triangles)))

    return commands


# -- Ellipse sector ---------------------------------------------------------


def _stroke_ellipse(shape: EllipseSector, style: StrokeStyle, config: GeometryConfig) -> list[DrawCommand]:
    points = ellipse_points(shape.corner1, shape.corner2, shape.angle_start, shape.angle_end)
    return _stroke_polyline(points, style.width, config)


def _fill_ellipse(shape: EllipseSector, style: FillStyle, config: GeometryConfig) -> list[DrawCommand]:
    data = ellipse_data(shape.corner1, shape.corner2)
    if abs(data.rx * data.ry) <= config.epsilon:
        logger.debug("Skipping fill of zero-area ellipse box at %s", data.center)
        return []

    points = ellipse_points(shape.corner1, shape.corner2, shape.angle_start, shape.angle_end)
    triangles = _fan(data.center, points)
    return [DrawFilledTriangles(tuple(triangles))] if triangles else []


# -- Free-form subpath ------------------------------------------------------


def _stroke_subpath(shape: Subpath, style: StrokeStyle, config: GeometryConfig) -> list[DrawCommand]:
    return _stroke_polyline(shape.points, style.width, config)


def _fill_subpath(
    shape: Subpath,
    style: FillStyle,
    config: GeometryConfig,
    triangulation: TriangulationConfig | None = None,
) -> list[DrawCommand]:
    tri_cfg = triangulation or TriangulationConfig()
    triangles = triangulate_polygon(
        shape.points,
        epsilon=tri_cfg.epsilon,
        large_polygon_threshold=tri_cfg.large_polygon_threshold,
    )
    return [DrawFilledTriangles(tuple(triangles))] if triangles else []


_STROKE_GENERATORS: dict[ShapeKind, Callable[..., list[DrawCommand]]] = {
    ShapeKind.LINE: _stroke_line,
    ShapeKind.RECT: _stroke_rect,
    ShapeKind.ROUNDRECT: _stroke_roundrect,
    ShapeKind.ELLIPSE: _stroke_ellipse,
    ShapeKind.SUBPATH: _stroke_subpath,
}

_FILL_GENERATORS: dict[ShapeKind, Callable[..., list[DrawCommand]]] = {
    ShapeKind.LINE: _fill_line,
    ShapeKind.RECT: _fill_rect,
    ShapeKind.ROUNDRECT: _fill_roundrect,
    ShapeKind.ELLIPSE: _fill_ellipse,
}


def stroke_geometry(
    shape: Shape,
    style: StrokeStyle,
    config: GeometryConfig | None = None,
) -> list[DrawCommand]:
    """Draw commands outlining ``shape`` with the given stroke style.

    Args:
        shape: Any shape entry
        style: Active stroke style
        config: Geometry settings (defaults if None)

    Returns:
        Commands in drawing order; empty for a non-positive width

    Raises:
        KeyError: If the shape kind has no stroke generator
    """
    cfg = config or GeometryConfig()
    if style.width <= 0:
        return []
    return _STROKE_GENERATORS[shape.kind](shape, style, cfg)


def fill_geometry(
    shape: Shape,
    style: FillStyle,
    config: GeometryConfig | None = None,
    triangulation: TriangulationConfig | None = None,
) -> list[DrawCommand]:
    """Draw commands filling the interior of ``shape``.

    Args:
        shape: Any shape entry
        style: Active fill style
        config: Geometry settings (defaults if None)
        triangulation: Ear-clipping settings for free-form subpaths

    Returns:
        Commands in drawing order; empty for shapes with no interior

    Raises:
        KeyError: If the shape kind has no fill generator
    """
    cfg = config or GeometryConfig()
    if shape.kind is ShapeKind.SUBPATH:
        return _fill_subpath(shape, style, cfg, triangulation)
    return _FILL_GENERATORS[shape.kind](shape, style, cfg)
