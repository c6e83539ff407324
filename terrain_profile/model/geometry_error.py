"""GeometryError - Errors raised when input geometry cannot be profiled.

Both errors are raised at the normalizer boundary and are never caught
inside the package. They subclass ValueError so callers that already guard
against bad values keep working.

Classes:
- MissingGeometryError: input is absent or has no vertices
- InvalidGeometryError: input is present but its shape is not supported
"""


class GeometryError(ValueError):
    """Base class for input geometry errors."""


class MissingGeometryError(GeometryError):
    """Raised when the geometry is None, empty, or yields no vertices."""


class InvalidGeometryError(GeometryError):
    """Raised when the geometry tag is missing/unrecognized or coordinates are malformed."""
