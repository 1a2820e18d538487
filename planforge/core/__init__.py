"""Core value types and utilities for planforge.

This module provides the unit and shape value types, enums, exceptions and
configuration used throughout the library.
"""

from .units import (
    MAX_INT,
    MIN_INT,
    Centimeter,
    Length,
    Degree,
    cm,
    degree,
)

from .values import (
    Point,
    Edge,
    Triangle,
    Polygon,
    Shape,
)

from .types import (
    TriangulationFallback,
    HitKind,
    RoomShapeType,
)

from .errors import (
    PlanforgeError,
    ValidationError,
    VertexIndexError,
    TriangulationError,
    BuilderStateError,
    ConfigurationError,
    TriangulationWarning,
)

from .config import EditConfig

__all__ = [
    # Units
    'MAX_INT',
    'MIN_INT',
    'Centimeter',
    'Length',
    'Degree',
    'cm',
    'degree',

    # Values
    'Point',
    'Edge',
    'Triangle',
    'Polygon',
    'Shape',

    # Enums
    'TriangulationFallback',
    'HitKind',
    'RoomShapeType',

    # Exceptions
    'PlanforgeError',
    'ValidationError',
    'VertexIndexError',
    'TriangulationError',
    'BuilderStateError',
    'ConfigurationError',
    'TriangulationWarning',

    # Configuration
    'EditConfig',
]
