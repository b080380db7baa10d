"""Rendering layer for vecpath.

This module connects generated geometry to a rasterizer backend.

Key classes:
- Rasterizer: Protocol every backend implements
- RecordingRasterizer: Records calls (test double, statistics)
- SvgRasterizer: Writes the frame as an SVG document
- DrawingSurface: Owns path and styles for one frame and flushes it once
"""

from vecpath.render.rasterizer import RasterCall, Rasterizer, RecordingRasterizer
from vecpath.render.surface import DrawingSurface, FrameState
from vecpath.render.svg import SvgRasterizer

__all__ = [
    "DrawingSurface",
    "FrameState",
    "RasterCall",
    "Rasterizer",
    "RecordingRasterizer",
    "SvgRasterizer",
]
