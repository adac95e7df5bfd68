"""2D Vector Mathematics.

The Vector class is an immutable NamedTuple whose direction is reported as an
`Angle` measurement.

Examples:
    >>> from py_measure.dimensions import Angle
    >>> v = Vector(3.0, 4.0)
    >>> v.magnitude()
    5.0
    >>> v + Vector(1.0, 1.0)
    Vector(dx=4.0, dy=5.0)
    >>> round(Vector(0.0, 2.0).angle >> Angle.Degree, 9)
    90.0
"""
from __future__ import annotations

import math
from typing import NamedTuple, Union

from py_measure.converter import ieee_divide
from py_measure.dimensions import Angle
from py_measure.unit import Measurement

__all__ = ('Vector',)


class Vector(NamedTuple):
    """Immutable 2D vector.

    Attributes:
        dx: Horizontal component.
        dy: Vertical component.
    """

    dx: float
    dy: float

    @classmethod
    def from_polar(cls, magnitude: float, angle: Measurement[Angle]) -> Vector:
        """Build a vector from its length and direction.

        Examples:
            >>> from py_measure.dimensions import Angle
            >>> v = Vector.from_polar(2.0, Angle.Degree(60))
            >>> round(v.dx, 9), round(v.dy, 9)
            (1.0, 1.732050808)
        """
        radians = angle >> Angle.Radian
        return cls(magnitude * math.cos(radians), magnitude * math.sin(radians))

    def magnitude(self) -> float:
        """Euclidean norm of the vector, computed with math.hypot()."""
        return math.hypot(self.dx, self.dy)

    @property
    def angle(self) -> Measurement[Angle]:
        """Direction from the positive x-axis, in radians within [-π, π]."""
        return Angle.Radian(math.atan2(self.dy, self.dx))

    def mul_by_const(self, a: float) -> Vector:
        return Vector(self.dx * a, self.dy * a)

    def mul_by_vector(self, b: Vector) -> float:
        """Dot product."""
        return self.dx * b.dx + self.dy * b.dy

    def add(self, b: Vector) -> Vector:
        return Vector(self.dx + b.dx, self.dy + b.dy)

    def subtract(self, b: Vector) -> Vector:
        return Vector(self.dx - b.dx, self.dy - b.dy)

    def negate(self) -> Vector:
        return Vector(-self.dx, -self.dy)

    def normalize(self) -> Vector:
        """Unit vector in the same direction.

        Note:
            Vectors with magnitude < 1e-10 are returned unchanged.
        """
        m = self.magnitude()
        if math.fabs(m) < 1e-10:
            return Vector(self.dx, self.dy)
        return self.mul_by_const(1.0 / m)

    def __mul__(self, other: Union[int, float, Vector]) -> Union[float, Vector]:  # type: ignore[override]
        """Scale by a number, or dot product with another Vector."""
        if isinstance(other, (int, float)):
            return self.mul_by_const(other)
        if isinstance(other, Vector):
            return self.mul_by_vector(other)
        raise TypeError(other)

    def __rmul__(self, other: Union[int, float]) -> Vector:  # type: ignore[override]
        if isinstance(other, (int, float)):
            return self.mul_by_const(other)
        raise TypeError(other)

    def __truediv__(self, other: Union[int, float]) -> Vector:
        """Divide both components by a number; division by zero gives ±inf/NaN components."""
        if isinstance(other, (int, float)):
            return Vector(ieee_divide(self.dx, float(other)), ieee_divide(self.dy, float(other)))
        raise TypeError(other)

    def __add__(self, other: Vector) -> Vector:  # type: ignore[override]
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.subtract(other)

    def __neg__(self) -> Vector:
        return self.negate()
