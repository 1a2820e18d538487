"""Shapes placed in a room, and structural room elements.

These records are the contract with rendering and storage collaborators.
Their persistence format is not defined here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from .core.errors import ValidationError
from .core.types import RoomShapeType
from .core.units import Degree, Length, degree
from .core.values import Edge, Point, Polygon, Shape
from .edit import rotate_polygon, translate_polygon

DEFAULT_COLOR_ARGB = 0xFF4CAF50
DOOR_ARC_STEPS = 10
_LOCAL_ORIGIN = Point(0, 0)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class PlacedShape:
    """A polygon positioned and rotated inside a room.

    ``shape`` is in local coordinates. The world outline is obtained by
    rotating about the local origin ``(0, 0)`` and then translating by
    ``position``.

    Attributes:
        shape: Outline in local coordinates
        position: Offset of the local origin in room coordinates
        rotation: Counter-clockwise rotation. Plain numbers are wrapped into
            ``[0, 360)`` with :func:`~planforge.core.units.degree`
        color_argb: 32-bit ARGB fill colour
        name: Display label
    """
    shape: Polygon
    position: Point
    rotation: Degree = field(default_factory=lambda: Degree(0.0))
    color_argb: int = DEFAULT_COLOR_ARGB
    name: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'rotation', degree(self.rotation))

    def world_polygon(self) -> Polygon:
        local = self.shape
        if self.rotation.value != 0.0:
            local = rotate_polygon(local, self.rotation, origin=_LOCAL_ORIGIN)
        return translate_polygon(local, self.position.x.value, self.position.y.value)

    def world_points(self) -> Tuple[Point, ...]:
        return self.world_polygon().points

    def contains(self, point: Point) -> bool:
        """Hit-test a room-coordinate point against the placed outline."""
        return self.world_polygon().contains(point)

    def moved_to(self, position: Point) -> PlacedShape:
        return PlacedShape(self.shape, position, self.rotation, self.color_argb, self.name)

    def rotated_by(self, delta: Degree) -> PlacedShape:
        return PlacedShape(self.shape, self.position, self.rotation + delta, self.color_argb, self.name)


@dataclass(frozen=True)
class RoomShapeElement:
    """Wall, door or window drawn as part of a room outline."""
    type: RoomShapeType
    shape: Shape
    width: Length = field(default_factory=lambda: Length(10))

    @classmethod
    def create_wall(cls, start: Point, end: Point, width: Length = Length(10)) -> RoomShapeElement:
        """Wall from ``start`` to ``end`` as a rectangle ``width`` thick.

        Raises:
            ValidationError: ``start`` and ``end`` coincide, or ``width`` is 0
                or too thin to survive rounding to whole centimetres
        """
        width = width if isinstance(width, Length) else Length(width)
        edge = Edge(start, end)
        if width.value == 0:
            raise ValidationError("Wall width must be positive")

        half = width.value / 2.0
        ux = -(end.y.value - start.y.value) / edge.length
        uy = (end.x.value - start.x.value) / edge.length

        # One side takes the rounded half offset, the other side the rest of
        # the rounded full offset, so odd widths keep their total thickness.
        full_x, full_y = _round_half_up(ux * width.value), _round_half_up(uy * width.value)
        if full_x == 0 and full_y == 0:
            raise ValidationError(f"Wall width {width} is too thin to build a rectangle")
        low_x, low_y = _round_half_up(ux * half), _round_half_up(uy * half)
        high_x, high_y = full_x - low_x, full_y - low_y

        outline = Polygon([
            Point(start.x.value - low_x, start.y.value - low_y),
            Point(end.x.value - low_x, end.y.value - low_y),
            Point(end.x.value + high_x, end.y.value + high_y),
            Point(start.x.value + high_x, start.y.value + high_y),
        ])
        return cls(RoomShapeType.WALL, outline, width)

    @classmethod
    def create_door(
        cls,
        position: Point,
        width: Length = Length(80),
        angle: Degree = Degree(90.0),
    ) -> RoomShapeElement:
        """Door swing as a fan: the hinge followed by points along the arc.

        The arc is sampled at ``DOOR_ARC_STEPS + 1`` evenly spaced angles
        from 0 to ``angle``; coordinates are truncated to whole centimetres.
        """
        width = width if isinstance(width, Length) else Length(width)
        points = [position]
        for i in range(DOOR_ARC_STEPS + 1):
            radians = math.radians(angle.value * i / DOOR_ARC_STEPS)
            points.append(Point(
                position.x.value + int(width.value * math.cos(radians)),
                position.y.value + int(width.value * math.sin(radians)),
            ))
        return cls(RoomShapeType.DOOR, Polygon(points), width)


__all__ = [
    'DEFAULT_COLOR_ARGB',
    'PlacedShape',
    'RoomShapeElement',
]
