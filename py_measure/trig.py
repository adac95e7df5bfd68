"""Trigonometry on Angle measurements.

Forward functions take an `Angle` measurement in any unit; inverse functions return
an `Angle` measurement in radians.

Examples:
    >>> from py_measure.dimensions import Angle
    >>> round(sin(Angle.Degree(90)), 12)
    1.0
    >>> round(atan2(1, 1) >> Angle.Degree, 9)
    45.0
"""
from __future__ import annotations

import math
from typing import Any

from py_measure.dimensions import Angle
from py_measure.exceptions import UnitTypeError
from py_measure.unit import Measurement, Number

__all__ = ('sin', 'cos', 'tan', 'asin', 'acos', 'atan', 'atan2')


def _radians(angle: Any) -> float:
    if not isinstance(angle, Measurement):
        raise UnitTypeError(f"Angle measurement expected, got {type(angle).__name__} ({angle})")
    # value_in() rejects measurements of other families with DimensionMismatchError
    return angle.value_in(Angle.Radian)


def sin(angle: Measurement[Angle]) -> float:
    return math.sin(_radians(angle))


def cos(angle: Measurement[Angle]) -> float:
    return math.cos(_radians(angle))


def tan(angle: Measurement[Angle]) -> float:
    return math.tan(_radians(angle))


def asin(x: Number) -> Measurement[Angle]:
    """Arc sine as an Angle in radians.

    Raises:
        ValueError: If `x` is outside [-1, 1].
    """
    return Angle.Radian(math.asin(x))


def acos(x: Number) -> Measurement[Angle]:
    """Arc cosine as an Angle in radians.

    Raises:
        ValueError: If `x` is outside [-1, 1].
    """
    return Angle.Radian(math.acos(x))


def atan(x: Number) -> Measurement[Angle]:
    return Angle.Radian(math.atan(x))


def atan2(y: Number, x: Number) -> Measurement[Angle]:
    """Angle of the point `(x, y)` from the positive x-axis, in radians within [-π, π]."""
    return Angle.Radian(math.atan2(y, x))
