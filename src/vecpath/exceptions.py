"""Exception hierarchy for Vecpath."""


class VecPathError(Exception):
    """Base exception for all Vecpath errors."""

    pass


class GeometryError(VecPathError):
    """Errors in geometric calculations."""

    pass


class DegenerateGeometryError(GeometryError, ValueError):
    """Input geometry has no extent (zero-length segment, zero-area box)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class StyleError(VecPathError):
    """Invalid stroke or fill style value."""

    def __init__(self, field_name: str, value: object, reason: str) -> None:
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name} {value!r}: {reason}")


class SurfaceError(VecPathError):
    """Errors related to the drawing surface."""

    pass


class FrameStateError(SurfaceError):
    """Drawing operation issued outside an active frame."""

    def __init__(self, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation}: surface frame is {state}")


class RasterizerError(VecPathError):
    """Errors raised by a rasterizer backend."""

    pass


class ExportError(RasterizerError):
    """Error writing rendered output to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export '{path}': {reason}")
