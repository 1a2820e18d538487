"""Type definitions for planforge operations.

This module defines enums for strategy parameters and element kinds.
"""

from enum import Enum


class TriangulationFallback(Enum):
    """What :func:`~planforge.triangulate.triangulate` does when no ear is found.

    Attributes:
        PARTIAL: Warn and return the triangles produced so far (default)
        RAISE: Raise :class:`~planforge.core.errors.TriangulationError`

    Examples:
        >>> from planforge import triangulate, TriangulationFallback
        >>> triangles = triangulate(polygon, fallback=TriangulationFallback.RAISE)
    """
    PARTIAL = 'partial'
    RAISE = 'raise'


class HitKind(Enum):
    """Which polygon feature a tap landed on.

    Attributes:
        VERTEX: A corner point
        EDGE: A segment between two corners
    """
    VERTEX = 'vertex'
    EDGE = 'edge'


class RoomShapeType(Enum):
    """Kind of structural element drawn inside a room.

    Attributes:
        WALL: Straight wall segment with a thickness
        DOOR: Door swing, drawn as a fan
        WINDOW: Window opening along a wall
    """
    WALL = 'wall'
    DOOR = 'door'
    WINDOW = 'window'

    def display_name(self) -> str:
        return self.value.capitalize()


__all__ = [
    'TriangulationFallback',
    'HitKind',
    'RoomShapeType',
]
