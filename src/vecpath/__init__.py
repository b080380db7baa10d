"""Vecpath - 2D vector-path geometry for immediate-mode rasterizers.

Vecpath turns declarative path commands (lines, rectangles, rounded rectangles,
ellipse sectors and free-form polylines with tangent-arc joins) into the
concrete geometry a rasterizer consumes: point sequences for stroked outlines
and triangle lists for filled regions.

Example:
    >>> from vecpath.render import DrawingSurface, RecordingRasterizer
    >>> from vecpath.domain import Point
    >>> with DrawingSurface(RecordingRasterizer(), 640, 480) as surface:
    ...     surface.begin_path()
    ...     surface.rectangle(Point(10, 10), Point(50, 50))
    ...     surface.stroke()
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
