"""Domain models for vecpath.

This module contains the value types flowing through the geometry engine.
All models are designed to be immutable where possible (frozen dataclasses),
except the styles, which are mutable surface state.

Key classes:
- Point, Segment, Triangle: geometric primitives
- RGBAColor, StrokeStyle, FillStyle: styles applied at stroke/fill time
- Line, Rect, RoundRect, EllipseSector: immutable shape entries
- DrawLine ... DrawTriangleStrip: emitted rasterizer commands
"""

from vecpath.domain.commands import (
    DrawCommand,
    DrawFilledRect,
    DrawFilledTriangles,
    DrawLine,
    DrawLines,
    DrawLineStrip,
    DrawTriangleStrip,
)
from vecpath.domain.primitives import Point, Segment, Triangle
from vecpath.domain.shapes import EllipseSector, Line, Rect, RoundRect, ShapeKind
from vecpath.domain.style import FillStyle, RGBAColor, StrokeStyle

__all__: list[str] = [
    # Enums
    "ShapeKind",
    # Primitives
    "Point",
    "Segment",
    "Triangle",
    # Styles
    "RGBAColor",
    "StrokeStyle",
    "FillStyle",
    # Shapes
    "Line",
    "Rect",
    "RoundRect",
    "EllipseSector",
    # Commands
    "DrawCommand",
    "DrawLine",
    "DrawLineStrip",
    "DrawLines",
    "DrawFilledRect",
    "DrawFilledTriangles",
    "DrawTriangleStrip",
]
