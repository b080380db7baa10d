"""Demo scene drawn by the CLI.

Exercises every shape kind: hairline and thick strokes, rectangle, ellipse
and rounded-rectangle fills, an arc sector and a tangent-arc fillet with
markers on its control points.
"""

import math

from vecpath.domain import Point, RGBAColor
from vecpath.render import DrawingSurface

BACKGROUND = 0xFFFEFAE0
LIGHT_FILL = 0xFFE9EDC9
LIGHT_STROKE = 0xFFCCD5AE
WARM_FILL = 0xFFFAEDCD
WARM_STROKE = 0xFFD4A373
RED_MARKER = 0x80FF0000
BLUE_MARKER = 0x800000FF


def _marker(surface: DrawingSurface, center: Point, argb: int) -> None:
    surface.begin_path()
    surface.ellipse(Point(center.x - 5, center.y - 5), Point(center.x + 5, center.y + 5))
    surface.fill_style.color = RGBAColor.from_argb(argb)
    surface.fill()


def draw_arc_to_demo(surface: DrawingSurface) -> None:
    """A closed fillet through three control points, each marked by a dot."""
    p0 = Point(50, 120)
    p1 = Point(100, 120)
    p2 = Point(100, 170)

    surface.begin_path()
    surface.move_to(p0)
    surface.arc_to(p1, p2, 50.0)
    surface.close_path()

    surface.stroke_style.width = 3.0
    surface.stroke_style.color = RGBAColor.from_argb(WARM_STROKE)
    surface.stroke()

    _marker(surface, p0, RED_MARKER)
    _marker(surface, p1, BLUE_MARKER)
    _marker(surface, p2, RED_MARKER)


def draw_demo_frame(surface: DrawingSurface) -> None:
    """Draw the full demo scene on an active surface."""
    surface.fill_style.color = RGBAColor.from_argb(BACKGROUND)
    surface.clear()

    surface.begin_path()
    surface.line(Point(10, 10), Point(50, 50))
    surface.rectangle(Point(10, 10), Point(50, 50))
    surface.ellipse(Point(100, 100), Point(300, 300))

    surface.fill_style.color = RGBAColor.from_argb(LIGHT_FILL)
    surface.fill()

    surface.stroke_style.width = 3.0
    surface.stroke_style.color = RGBAColor.from_argb(LIGHT_STROKE)
    surface.stroke()

    surface.begin_path()
    surface.ellipse(Point(400, 400), Point(500, 500), math.pi, math.pi / 2.0 * 3.0)
    surface.roundrect(Point(100, 400), Point(400, 600), 20.0, 20.0)

    surface.fill_style.color = RGBAColor.from_argb(WARM_FILL)
    surface.fill()

    surface.stroke_style.width = 3.0
    surface.stroke_style.color = RGBAColor.from_argb(WARM_STROKE)
    surface.stroke()

    draw_arc_to_demo(surface)
