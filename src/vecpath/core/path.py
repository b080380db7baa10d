"""Ordered collection of shape entries stroked or filled as one unit.

Insertion order is draw order: ``stroke_all`` and ``fill_all`` visit entries
in the order they were appended and concatenate their commands.
"""

from collections.abc import Iterator

from vecpath.config import GeometryConfig, TriangulationConfig
from vecpath.core.generators import Shape, fill_geometry, stroke_geometry
from vecpath.core.subpath import Subpath
from vecpath.domain import DrawCommand, FillStyle, ShapeKind, StrokeStyle


class Path:
    """A path made of shape entries and free-form subpaths.

    The path owns its entries; ``reset`` discards them.

    Example:
        path = Path()
        path.append(Rect(Point(0, 0), Point(10, 10)))
        commands = path.fill_all(FillStyle())
    """

    def __init__(
        self,
        geometry: GeometryConfig | None = None,
        triangulation: TriangulationConfig | None = None,
    ) -> None:
        self._entries: list[Shape] = []
        self._geometry = geometry or GeometryConfig()
        self._triangulation = triangulation or TriangulationConfig()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._entries)

    def reset(self) -> None:
        """Discard all entries."""
        self._entries.clear()

    def append(self, shape: Shape) -> None:
        """Add a shape entry at the end of the draw order."""
        self._entries.append(shape)

    def is_empty(self) -> bool:
        return not self._entries

    def last_as_subpath(self) -> Subpath | None:
        """Return the most recent entry if it is a free-form subpath.

        Returns:
            The subpath, or None when the path is empty or its last entry is
            another shape kind
        """
        if self._entries and self._entries[-1].kind is ShapeKind.SUBPATH:
            return self._entries[-1]
        return None

    def stroke_all(self, style: StrokeStyle) -> list[DrawCommand]:
        """Stroke every entry in insertion order."""
        commands: list[DrawCommand] = []
        for shape in self._entries:
            commands.extend(stroke_geometry(shape, style, self._geometry))
        return commands

    def fill_all(self, style: FillStyle) -> list[DrawCommand]:
        """Fill every entry in insertion order."""
        commands: list[DrawCommand] = []
        for shape in self._entries:
            commands.extend(fill_geometry(shape, style, self._geometry, self._triangulation))
        return commands
