"""Unit converters: the numeric strategies relating a unit to its family's base unit.

Two strategies share the [`UnitConverter`][py_measure.converter.UnitConverter] interface:

* [`LinearConverter`][py_measure.converter.LinearConverter]: affine transform
  `base = value * coefficient + constant`. Used by every additive/multiplicative family
  (length, mass, energy, ...) and by temperature, where `constant != 0`.
* [`ReciprocalConverter`][py_measure.converter.ReciprocalConverter]: inverse transform
  `base = reciprocal / value`, used by fuel efficiency (mpg vs. L/100km). The same formula
  converts in both directions. `reciprocal == 0` marks the identity converter.

Converters are immutable values with value equality, safe to share between threads.
They never raise on numeric input: division by zero yields ±inf or NaN as IEEE-754 prescribes.

This module is compiled with mypyc when a C compiler is available.

Examples:
    >>> cm = LinearConverter(0.01)
    >>> cm.to_base(250)
    2.5
    >>> cm.from_base(2.5)
    250.0
    >>> mpg = ReciprocalConverter(235.214583)
    >>> round(mpg.to_base(23.5214583), 6)
    10.0
    >>> ReciprocalConverter(0).to_base(7.5)
    7.5
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping

__all__ = (
    'ieee_divide',
    'UnitConverter',
    'LinearConverter',
    'ReciprocalConverter',
)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide two floats, returning ±inf or NaN where Python's `/` raises `ZeroDivisionError`.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class UnitConverter(ABC):
    """Abstract conversion strategy between a unit and the base unit of its dimension family.

    Subclasses implement `to_base`, `from_base` and `to_dict`.
    """

    @abstractmethod
    def to_base(self, value: float) -> float:
        """Convert `value` expressed in this converter's unit into the base unit."""

    @abstractmethod
    def from_base(self, value: float) -> float:
        """Convert `value` expressed in the base unit into this converter's unit."""

    def is_identity(self) -> bool:
        """True if both directions return their argument unchanged."""
        return False

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Structural encoding of the converter parameters."""

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> UnitConverter:
        """Rebuild a converter from `to_dict()` output.

        Raises:
            ValueError: If the converter type is unknown.
        """
        kind = data.get('type')
        if kind == 'linear':
            return LinearConverter(float(data['coefficient']), float(data.get('constant', 0.0)))
        if kind == 'reciprocal':
            return ReciprocalConverter(float(data['reciprocal']))
        raise ValueError(f"Unknown converter type {kind!r}")


class LinearConverter(UnitConverter):
    """Affine converter: `to_base(v) = v * coefficient + constant`.

    `coefficient` must be non-zero. This is not checked: a zero coefficient collapses every value
    to `constant` and makes `from_base` return ±inf/NaN.
    """

    def __init__(self, coefficient: float, constant: float = 0.0) -> None:
        self._coefficient: float = float(coefficient)
        self._constant: float = float(constant)

    @property
    def coefficient(self) -> float:
        return self._coefficient

    @property
    def constant(self) -> float:
        return self._constant

    def is_identity(self) -> bool:
        return self._coefficient == 1.0 and self._constant == 0.0

    def to_base(self, value: float) -> float:
        return value * self._coefficient + self._constant

    def from_base(self, value: float) -> float:
        return ieee_divide(value - self._constant, self._coefficient)

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'linear', 'coefficient': self._coefficient, 'constant': self._constant}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearConverter):
            return NotImplemented
        return self._coefficient == other._coefficient and self._constant == other._constant

    def __hash__(self) -> int:
        return hash(('linear', self._coefficient, self._constant))

    def __repr__(self) -> str:
        return f'LinearConverter(coefficient={self._coefficient!r}, constant={self._constant!r})'


class ReciprocalConverter(UnitConverter):
    """Reciprocal converter: `to_base(v) = from_base(v) = reciprocal / v`.

    `reciprocal == 0` is the identity marker, used for the base unit of a reciprocal family.
    For any other reciprocal, converting 0 gives ±inf.
    """

    def __init__(self, reciprocal: float) -> None:
        self._reciprocal: float = float(reciprocal)

    @property
    def reciprocal(self) -> float:
        return self._reciprocal

    def is_identity(self) -> bool:
        return self._reciprocal == 0.0

    def _invert(self, value: float) -> float:
        if self._reciprocal == 0.0:
            return value
        return ieee_divide(self._reciprocal, value)

    def to_base(self, value: float) -> float:
        return self._invert(value)

    def from_base(self, value: float) -> float:
        return self._invert(value)

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'reciprocal', 'reciprocal': self._reciprocal}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReciprocalConverter):
            return NotImplemented
        return self._reciprocal == other._reciprocal

    def __hash__(self) -> int:
        return hash(('reciprocal', self._reciprocal))

    def __repr__(self) -> str:
        return f'ReciprocalConverter(reciprocal={self._reciprocal!r})'
