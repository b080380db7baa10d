"""Color and style value types.

Styles are mutable surface-level state: a shape is stroked or filled with
whatever style is active on the surface when the operation is invoked.
"""

from dataclasses import dataclass, field

from vecpath.exceptions import StyleError


@dataclass
class RGBAColor:
    """A color with normalized float channels.

    Attributes:
        r: Red channel in 0..1
        g: Green channel in 0..1
        b: Blue channel in 0..1
        a: Alpha channel in 0..1
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise StyleError(f"color channel {name}", value, "must be within 0..1")

    @classmethod
    def from_argb(cls, argb: int) -> "RGBAColor":
        """Build a color from a packed 0xAARRGGBB integer.

        Args:
            argb: 32-bit packed color, alpha in the high byte

        Returns:
            RGBAColor with each channel normalized by 255

        Examples:
            >>> RGBAColor.from_argb(0xFFFF0000).to_tuple()
            (1.0, 0.0, 0.0, 1.0)
        """
        return cls(
            r=((argb >> 16) & 0xFF) / 255.0,
            g=((argb >> 8) & 0xFF) / 255.0,
            b=(argb & 0xFF) / 255.0,
            a=((argb >> 24) & 0xFF) / 255.0,
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to an (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)


@dataclass
class StrokeStyle:
    """Stroke style for path drawing.

    Attributes:
        color: Stroke color
        width: Stroke width; 1.0 is the hairline fast path, 0.0 strokes nothing
    """

    color: RGBAColor = field(default_factory=RGBAColor)
    width: float = 1.0

    def __post_init__(self) -> None:
        if self.width < 0:
            raise StyleError("stroke width", self.width, "must be >= 0")


@dataclass
class FillStyle:
    """Fill style for path drawing."""

    color: RGBAColor = field(default_factory=RGBAColor)
