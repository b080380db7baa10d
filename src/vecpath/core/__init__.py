"""Core geometry algorithms for vecpath.

This module contains the core algorithms for:

- Geometry kernel (distances, angles, ellipse sampling, tangent arcs)
- Thick-line quad construction
- Polygon triangulation by ear clipping
- Per-shape stroke and fill generation
- Free-form subpaths and the path aggregate

Key functions:
- ellipse_points: Sample an elliptical arc with size-adaptive resolution
- tangent_arc: Sample the fillet rounding a polyline corner
- thick_line_points: Corner ring of a thick segment
- triangulate_polygon: Ear-clipping triangulation
- stroke_geometry / fill_geometry: Draw commands for one shape

Key classes:
- Subpath: Free-form move/line/arc/close builder
- Path: Ordered shape collection stroked or filled as one unit
"""

from vecpath.core.generators import Shape, fill_geometry, stroke_geometry
from vecpath.core.geometry import (
    EllipseData,
    angle_between,
    cross,
    distance,
    ellipse_data,
    ellipse_points,
    perpendicular_offset,
    point_in_triangle,
    signed_area,
    tangent_arc,
)
from vecpath.core.path import Path
from vecpath.core.subpath import Subpath, SubpathState
from vecpath.core.thick_line import (
    thick_line_command,
    thick_line_points,
    thick_line_strip,
    thick_polyline,
)
from vecpath.core.triangulate import triangulate_polygon

__all__ = [
    # Geometry kernel
    "EllipseData",
    "angle_between",
    "cross",
    "distance",
    "ellipse_data",
    "ellipse_points",
    "perpendicular_offset",
    "point_in_triangle",
    "signed_area",
    "tangent_arc",
    # Thick lines
    "thick_line_command",
    "thick_line_points",
    "thick_line_strip",
    "thick_polyline",
    # Triangulation
    "triangulate_polygon",
    # Generators
    "Shape",
    "fill_geometry",
    "stroke_geometry",
    # Paths
    "Path",
    "Subpath",
    "SubpathState",
]
