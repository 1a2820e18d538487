"""Length and angle value types.

Every unit validates its range in ``__post_init__`` and is frozen afterwards,
so an out-of-range instance cannot exist. Integer-like arguments (including
numpy integers) are normalized to plain ``int``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Union

from .errors import ValidationError

MAX_INT = 2**31 - 1
MIN_INT = -(2**31)


def _as_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True, eq=False)
class Centimeter:
    """Signed whole-centimetre length in ``[MIN_INT, MAX_INT)``.

    Compares equal to, and orders against, other ``Centimeter`` values,
    :class:`Length` values and plain integers.

    Examples:
        >>> Centimeter(120) + Centimeter(30)
        Centimeter(value=150)
        >>> Centimeter(50) < 60
        True
    """
    value: int

    def __post_init__(self):
        value = _as_int(self.value, "Centimeter")
        if value >= MAX_INT:
            raise ValidationError(f"Centimeter out of range: {value}")
        if value < MIN_INT:
            raise ValidationError(f"Centimeter out of range: {value}")
        object.__setattr__(self, 'value', value)

    def __add__(self, other: CentimeterLike) -> Centimeter:
        return Centimeter(self.value + _coerce(other))

    def __sub__(self, other: CentimeterLike) -> Centimeter:
        return Centimeter(self.value - _coerce(other))

    def __eq__(self, other):
        other_value = _try_coerce(other)
        if other_value is None:
            return NotImplemented
        return self.value == other_value

    def __lt__(self, other):
        other_value = _try_coerce(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    def __le__(self, other):
        other_value = _try_coerce(other)
        if other_value is None:
            return NotImplemented
        return self.value <= other_value

    def __gt__(self, other):
        other_value = _try_coerce(other)
        if other_value is None:
            return NotImplemented
        return self.value > other_value

    def __ge__(self, other):
        other_value = _try_coerce(other)
        if other_value is None:
            return NotImplemented
        return self.value >= other_value

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __str__(self):
        return f"{self.value}cm"


@dataclass(frozen=True, eq=False)
class Length:
    """A distance that cannot be negative, e.g. a furniture dimension."""
    cm: Centimeter

    def __post_init__(self):
        cm = self.cm if isinstance(self.cm, Centimeter) else Centimeter(self.cm)
        if cm.value < 0:
            raise ValidationError(f"Length must not be negative, got {cm}")
        object.__setattr__(self, 'cm', cm)

    @property
    def value(self) -> int:
        return self.cm.value

    def __add__(self, other: CentimeterLike) -> Length:
        return Length(self.cm + other)

    def __sub__(self, other: CentimeterLike) -> Length:
        return Length(self.cm - other)

    def __eq__(self, other):
        return self.cm.__eq__(other)

    def __lt__(self, other):
        return self.cm.__lt__(other)

    def __le__(self, other):
        return self.cm.__le__(other)

    def __gt__(self, other):
        return self.cm.__gt__(other)

    def __ge__(self, other):
        return self.cm.__ge__(other)

    def __hash__(self):
        return hash(self.cm)

    def __int__(self):
        return self.cm.value

    def __str__(self):
        return str(self.cm)


CentimeterLike = Union[Centimeter, Length, int]


def _try_coerce(value):
    if isinstance(value, Centimeter):
        return value.value
    if isinstance(value, Length):
        return value.cm.value
    if isinstance(value, Integral) and not isinstance(value, bool):
        return int(value)
    return None


def _coerce(value) -> int:
    result = _try_coerce(value)
    if result is None:
        raise TypeError(f"Expected Centimeter, Length or int, got {type(value).__name__}")
    return result


def _wrap_degrees(value: float) -> float:
    wrapped = value % 360.0
    # -1e-20 % 360.0 rounds to 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


@dataclass(frozen=True, order=True)
class Degree:
    """Angle in the half-open range ``[0, 360)``.

    Addition and subtraction wrap around, so the result is always another
    valid ``Degree``.

    Examples:
        >>> Degree(350.0) + Degree(20.0)
        Degree(value=10.0)
        >>> Degree(10.0) - Degree(20.0)
        Degree(value=350.0)
    """
    value: float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise ValidationError(f"Degree must be a real number, got {self.value!r}")
        value = float(self.value)
        if math.isnan(value) or value < 0.0:
            raise ValidationError(f"Degree must be greater than or equal to 0, got {value}")
        if value >= 360.0:
            raise ValidationError(f"Degree must be less than 360, got {value}")
        object.__setattr__(self, 'value', value)

    def __add__(self, other: Degree) -> Degree:
        return Degree(_wrap_degrees(self.value + other.value))

    def __sub__(self, other: Degree) -> Degree:
        return Degree(_wrap_degrees(self.value - other.value + 360.0))

    def __float__(self):
        return self.value

    @property
    def radians(self) -> float:
        return math.radians(self.value)

    def __str__(self):
        return f"{self.value}°"


def cm(value: int) -> Centimeter:
    """Shorthand constructor: ``cm(120)``."""
    return Centimeter(value)


def degree(value: float) -> Degree:
    """Build a :class:`Degree` from any real angle, wrapping it into range.

    Examples:
        >>> degree(-90)
        Degree(value=270.0)
        >>> degree(720.5)
        Degree(value=0.5)
    """
    if isinstance(value, Degree):
        return value
    if math.isnan(value) or math.isinf(value):
        raise ValidationError(f"Cannot normalize non-finite angle {value}")
    return Degree(_wrap_degrees(float(value)))


__all__ = [
    'MAX_INT',
    'MIN_INT',
    'Centimeter',
    'Length',
    'Degree',
    'CentimeterLike',
    'cm',
    'degree',
]
