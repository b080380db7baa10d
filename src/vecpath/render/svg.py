"""SVG rasterizer backend.

Turns the emitted point and triangle arrays into an SVG document. Hairlines
become stroked ``line``/``polyline`` elements one unit wide; filled geometry
becomes ``rect`` and ``polygon`` elements. No attempt is made to merge
triangles back into larger shapes: the output mirrors what a GPU backend
would receive.
"""

from collections.abc import Sequence
from pathlib import Path
from xml.etree.ElementTree import Element, SubElement, tostring

from vecpath.domain import Point, Segment, Triangle
from vecpath.exceptions import ExportError, RasterizerError

SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float) -> str:
    """Compact number formatting for SVG attributes."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _points_attr(points: Sequence[Point]) -> str:
    return " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in points)


class SvgRasterizer:
    """Rasterizer that accumulates SVG elements for one frame.

    Example:
        rasterizer = SvgRasterizer()
        with DrawingSurface(rasterizer, 640, 480) as surface:
            ...
        rasterizer.save(Path("frame.svg"))
    """

    def __init__(self) -> None:
        self._root: Element | None = None
        self._layer: Element | None = None
        self._viewport: tuple[int, int, int, int] = (0, 0, 0, 0)
        self._color: tuple[str, str] = ("rgb(0,0,0)", "1")
        self._element_count = 0
        self._finished = False

    @property
    def finished(self) -> bool:
        """Whether end() has been called for the current frame."""
        return self._finished

    @property
    def element_count(self) -> int:
        """Number of drawing elements emitted so far."""
        return self._element_count

    def _require_layer(self) -> Element:
        if self._layer is None:
            raise RasterizerError("SVG rasterizer used before begin()")
        return self._layer

    def _add(self, tag: str, attrs: dict[str, str]) -> None:
        SubElement(self._require_layer(), tag, attrs)
        self._element_count += 1

    def _stroke_attrs(self) -> dict[str, str]:
        color, opacity = self._color
        return {
            "fill": "none",
            "stroke": color,
            "stroke-opacity": opacity,
            "stroke-width": "1",
        }

    def _fill_attrs(self) -> dict[str, str]:
        color, opacity = self._color
        return {"fill": color, "fill-opacity": opacity, "stroke": "none"}

    def begin(self, width: int, height: int) -> None:
        self._root = Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "version": "1.1",
                "width": str(width),
                "height": str(height),
                "viewBox": f"0 0 {width} {height}",
            },
        )
        self._layer = SubElement(self._root, "g", {"id": "vecpath-frame"})
        self._viewport = (0, 0, width, height)
        self._element_count = 0
        self._finished = False

    def viewport(self, x: int, y: int, width: int, height: int) -> None:
        self._viewport = (x, y, width, height)

    def set_color(self, r: float, g: float, b: float, a: float) -> None:
        channels = ",".join(str(round(c * 255)) for c in (r, g, b))
        self._color = (f"rgb({channels})", _fmt(a))

    def clear(self) -> None:
        x, y, width, height = self._viewport
        attrs = {"x": str(x), "y": str(y), "width": str(width), "height": str(height)}
        self._add("rect", {**attrs, **self._fill_attrs()})

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        attrs = {"x1": _fmt(x1), "y1": _fmt(y1), "x2": _fmt(x2), "y2": _fmt(y2)}
        self._add("line", {**attrs, **self._stroke_attrs()})

    def draw_line_strip(self, points: Sequence[Point]) -> None:
        self._add("polyline", {"points": _points_attr(points), **self._stroke_attrs()})

    def draw_lines(self, segments: Sequence[Segment]) -> None:
        for segment in segments:
            self.draw_line(segment.start.x, segment.start.y, segment.end.x, segment.end.y)

    def draw_filled_rect(self, x: float, y: float, width: float, height: float) -> None:
        attrs = {"x": _fmt(x), "y": _fmt(y), "width": _fmt(width), "height": _fmt(height)}
        self._add("rect", {**attrs, **self._fill_attrs()})

    def draw_filled_triangles(self, triangles: Sequence[Triangle]) -> None:
        for triangle in triangles:
            self._add("polygon", {"points": _points_attr(triangle.points()), **self._fill_attrs()})

    def draw_filled_triangle_strip(self, points: Sequence[Point]) -> None:
        for i in range(len(points) - 2):
            triangle = (points[i], points[i + 1], points[i + 2])
            self._add("polygon", {"points": _points_attr(triangle), **self._fill_attrs()})

    def flush(self) -> None:
        pass

    def end(self) -> None:
        self._finished = True

    def present(self) -> None:
        pass

    def to_string(self) -> str:
        """Serialize the frame as SVG markup.

        Raises:
            RasterizerError: If no frame has been started
        """
        if self._root is None:
            raise RasterizerError("No SVG frame to serialize; call begin() first")
        return tostring(self._root, encoding="unicode")

    def save(self, path: Path) -> Path:
        """Write the frame to ``path``, adding an .svg suffix when missing.

        Raises:
            ExportError: If the file cannot be written
        """
        if path.suffix.lower() != ".svg":
            path = path.with_suffix(".svg")

        markup = self.to_string()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(markup, encoding="utf-8")
        except OSError as e:
            raise ExportError(str(path), str(e)) from e
        return path
