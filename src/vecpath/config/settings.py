"""Configuration settings for Vecpath."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometry generation.

    Distances are in drawing-surface units (pixels for a screen backend).
    """

    hairline_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Stroke width drawn as single-pixel lines instead of quads",
    )
    epsilon: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-3,
        description="Segments shorter than this are treated as zero-length",
    )
    collinear_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=0.1,
        description="Minimum |sin| of the turn angle for a tangent-arc corner",
    )
    arc_resolution: float = Field(
        default=2.0,
        ge=0.1,
        le=50.0,
        description="Arc length covered by one tangent-arc segment",
    )
    arc_min_segments: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Minimum number of segments per tangent arc",
    )
    arc_max_segments: int = Field(
        default=1024,
        ge=4,
        le=65536,
        description="Maximum number of segments per tangent arc",
    )

    def is_hairline(self, width: float) -> bool:
        """Check whether a stroke width takes the hairline fast path."""
        return width == self.hairline_width


class TriangulationConfig(BaseModel):
    """Configuration for ear-clipping triangulation."""

    epsilon: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-3,
        description="Cross products at or below this magnitude count as collinear",
    )
    large_polygon_threshold: int = Field(
        default=500,
        ge=3,
        description="Vertex count above which a quadratic-cost diagnostic is logged",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class VecPathSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    triangulation: TriangulationConfig = Field(default_factory=TriangulationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VecPathSettings:
    """Get default application settings."""
    return VecPathSettings()
