"""Drawing surface: the path, the active styles and the frame lifecycle.

A surface spans one frame. Entering it begins the frame on the rasterizer;
leaving it flushes the frame exactly once, whether the drawing code returned
normally or raised::

    with DrawingSurface(rasterizer, width, height) as surface:
        surface.begin_path()
        surface.ellipse(Point(100, 100), Point(300, 300))
        surface.fill()
"""

import math
from enum import Enum

import structlog

from vecpath.config import VecPathSettings, get_default_settings
from vecpath.core import Path, Subpath
from vecpath.domain import (
    DrawCommand,
    EllipseSector,
    FillStyle,
    Line,
    Point,
    Rect,
    RGBAColor,
    RoundRect,
    StrokeStyle,
)
from vecpath.exceptions import FrameStateError
from vecpath.render.rasterizer import Rasterizer
from vecpath.utils import FrameLogger, FrameStats, get_logger


class FrameState(str, Enum):
    """Lifecycle of the surface's frame."""

    IDLE = "idle"
    ACTIVE = "active"
    FINISHED = "finished"


class DrawingSurface:
    """Owns the current path and styles and forwards geometry to a rasterizer.

    Shape commands append entries to the current path; ``stroke`` and ``fill``
    apply the active style to the whole path in insertion order.

    Attributes:
        stroke_style: Style used by ``stroke``
        fill_style: Style used by ``fill`` and ``clear``
    """

    def __init__(
        self,
        rasterizer: Rasterizer,
        width: int,
        height: int,
        settings: VecPathSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize a surface for one frame.

        Args:
            rasterizer: Backend receiving the generated geometry
            width: Surface width in pixels
            height: Surface height in pixels
            settings: Geometry and triangulation settings (defaults if None)
            logger: Structured logger (a stdlib-backed one if None)
        """
        self._rasterizer = rasterizer
        self._width = width
        self._height = height
        self._settings = settings or get_default_settings()
        self._path = Path(
            geometry=self._settings.geometry,
            triangulation=self._settings.triangulation,
        )
        self._state = FrameState.IDLE
        self._frame_logger = FrameLogger(logger or get_logger("vecpath.surface"))

        self.stroke_style = StrokeStyle()
        self.fill_style = FillStyle()

    def __enter__(self) -> "DrawingSurface":
        self.begin()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.finish()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def state(self) -> FrameState:
        return self._state

    @property
    def path(self) -> Path:
        """The current path."""
        return self._path

    @property
    def stats(self) -> FrameStats:
        """Drawing statistics for this frame."""
        return self._frame_logger.stats

    # -- Frame lifecycle ----------------------------------------------------

    def begin(self) -> None:
        """Begin the frame on the rasterizer.

        Raises:
            FrameStateError: If the frame was already begun
        """
        if self._state is not FrameState.IDLE:
            raise FrameStateError("begin frame", self._state.value)

        self._rasterizer.begin(self._width, self._height)
        self._rasterizer.viewport(0, 0, self._width, self._height)
        self._state = FrameState.ACTIVE
        self._frame_logger.log_frame_begin(self._width, self._height)

    def finish(self) -> None:
        """Flush the frame to the rasterizer; later calls do nothing.

        ``end`` and ``present`` still run when ``flush`` raises.

        Raises:
            FrameStateError: If the frame was never begun
        """
        if self._state is FrameState.FINISHED:
            return
        if self._state is FrameState.IDLE:
            raise FrameStateError("finish frame", self._state.value)

        self._state = FrameState.FINISHED
        try:
            self._rasterizer.flush()
        finally:
            try:
                self._rasterizer.end()
            finally:
                self._rasterizer.present()
                self._frame_logger.log_frame_end()

    def _require_active(self, operation: str) -> None:
        if self._state is not FrameState.ACTIVE:
            raise FrameStateError(operation, self._state.value)

    # -- Path construction --------------------------------------------------

    def begin_path(self) -> None:
        """Start a new path, discarding the current one."""
        self._require_active("begin path")
        self._path.reset()

    def line(self, start: Point, end: Point) -> None:
        self._require_active("add line")
        self._path.append(Line(start, end))

    def rectangle(self, corner1: Point, corner2: Point) -> None:
        self._require_active("add rectangle")
        self._path.append(Rect(corner1, corner2))

    def roundrect(self, corner1: Point, corner2: Point, rx: float, ry: float) -> None:
        self._require_active("add rounded rectangle")
        self._path.append(RoundRect(corner1, corner2, rx, ry))

    def ellipse(
        self,
        corner1: Point,
        corner2: Point,
        angle_start: float = 0.0,
        angle_end: float = 2.0 * math.pi,
    ) -> None:
        """Add an ellipse, or an arc sector of it, inscribed in a box."""
        self._require_active("add ellipse")
        self._path.append(EllipseSector(corner1, corner2, angle_start, angle_end))

    def _current_subpath(self, anchor: Point) -> tuple[Subpath, bool]:
        """Get the open subpath, creating one anchored at ``anchor`` if needed.

        Returns:
            The subpath and whether it was just created
        """
        subpath = self._path.last_as_subpath()
        if subpath is not None and not subpath.is_empty():
            return subpath, False

        if subpath is None:
            subpath = Subpath(config=self._settings.geometry)
            self._path.append(subpath)
        subpath.move_to(anchor)
        return subpath, True

    def move_to(self, point: Point) -> None:
        """Start a new free-form subpath at ``point``."""
        self._require_active("move to")
        subpath = self._path.last_as_subpath()
        if subpath is None or not subpath.is_empty():
            subpath = Subpath(config=self._settings.geometry)
            self._path.append(subpath)
        subpath.move_to(point)

    def line_to(self, point: Point) -> None:
        """Extend the current subpath with a straight segment to ``point``."""
        self._require_active("line to")
        subpath, created = self._current_subpath(point)
        if not created:
            subpath.line_to(point)

    def arc_to(self, p1: Point, p2: Point, radius: float) -> None:
        """Round the corner at ``p1`` of the current subpath toward ``p2``."""
        self._require_active("arc to")
        subpath, _ = self._current_subpath(p1)
        subpath.arc_to(p1, p2, radius)

    def close_path(self) -> None:
        """Close the current subpath; no-op when there is none."""
        self._require_active("close path")
        subpath = self._path.last_as_subpath()
        if subpath is not None:
            subpath.close_path()

    # -- Painting -----------------------------------------------------------

    def _issue(self, operation: str, color: RGBAColor, commands: list[DrawCommand]) -> None:
        self._rasterizer.set_color(*color.to_tuple())
        for command in commands:
            command.issue(self._rasterizer)
        self._frame_logger.log_pass(operation, commands)

    def stroke(self) -> None:
        """Outline every entry of the path with the active stroke style."""
        self._require_active("stroke")
        commands = self._path.stroke_all(self.stroke_style)
        self._issue("stroke", self.stroke_style.color, commands)

    def fill(self) -> None:
        """Fill every entry of the path with the active fill style."""
        self._require_active("fill")
        commands = self._path.fill_all(self.fill_style)
        self._issue("fill", self.fill_style.color, commands)

    def clear(self) -> None:
        """Fill the whole surface with the active fill color."""
        self._require_active("clear")
        self._rasterizer.set_color(*self.fill_style.color.to_tuple())
        self._rasterizer.clear()
        self._frame_logger.log_clear()
