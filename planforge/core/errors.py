"""Exception and warning types raised by planforge.

All exceptions derive from :class:`PlanforgeError` so callers can catch every
library failure with a single ``except`` clause. Validation and index errors
also subclass the matching builtin (``ValueError`` / ``IndexError``).
"""


class PlanforgeError(Exception):
    """Base class for all planforge exceptions."""


class ValidationError(PlanforgeError, ValueError):
    """A value was constructed or passed outside its valid range.

    Raised for out-of-range units, polygons with fewer than three points,
    zero-length edges and non-positive target lengths.
    """


class VertexIndexError(PlanforgeError, IndexError):
    """A vertex or edge index does not exist in the polygon."""

    def __init__(self, index: int, size: int, what: str = "Vertex"):
        self.index = index
        self.size = size
        super().__init__(f"{what} index {index} out of bounds for polygon with {size} points")


class TriangulationError(PlanforgeError):
    """Ear clipping could not find an ear before the polygon was exhausted.

    Attributes:
        triangles: Triangles produced before the failure
        remaining: Number of vertices left unclipped
    """

    def __init__(self, message: str, triangles=None, remaining: int = 0):
        super().__init__(message)
        self.triangles = list(triangles or [])
        self.remaining = remaining


class BuilderStateError(PlanforgeError):
    """A :class:`~planforge.builder.PolygonBuilder` was used after ``build()``."""


class ConfigurationError(PlanforgeError, ValueError):
    """An :class:`~planforge.core.config.EditConfig` field is invalid."""


class TriangulationWarning(UserWarning):
    """Triangulation returned a partial result."""


__all__ = [
    'PlanforgeError',
    'ValidationError',
    'VertexIndexError',
    'TriangulationError',
    'BuilderStateError',
    'ConfigurationError',
    'TriangulationWarning',
]
