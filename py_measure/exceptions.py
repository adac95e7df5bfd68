"""py_measure exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── TypeError
│   └── UnitTypeError
│       ├── UnitConversionError
│       └── DimensionMismatchError
└── ValueError
    └── UnitAliasError

Exception Types
---------------

- UnitTypeError: Base class for unit-related type errors. Raised when something that is not a unit
  is passed where a unit is required, or when a dimension family is declared incorrectly
  (e.g. without exactly one base unit).

- UnitConversionError: Raised when a conversion is not defined for the given units. Occurs when
  affine units (e.g. Celsius) are used to synthesize a derived unit.

- DimensionMismatchError: Raised when measurements or units of different dimension families are
  compared, combined or converted into one another outside the registered derived quotients
  (e.g. adding a Length to a Duration).

- UnitAliasError: Raised when a unit alias cannot be resolved where one is required.

Numeric edge cases (NaN, infinities from division by zero) are never reported by exceptions:
they propagate per IEEE-754.
"""
from __future__ import annotations

from typing import Any

__all__ = (
    'UnitTypeError',
    'UnitConversionError',
    'DimensionMismatchError',
    'UnitAliasError',
)


class UnitTypeError(TypeError):
    """Unit type error."""


class UnitConversionError(UnitTypeError):
    """Unit conversion error."""


class DimensionMismatchError(UnitTypeError):
    """Exception for operations mixing dimension families.

    Contains:
    - The left-hand dimension family
    - The right-hand dimension family
    - The attempted operation
    """

    def __init__(self, left: Any, right: Any, operation: str = ""):
        """
        Parameters:
        - left: Dimension family (class) of the left operand
        - right: Dimension family (class) of the right operand
        - operation: Short description of the attempted operation
        """
        self.left = left
        self.right = right
        self.operation: str = operation
        msg = f"Can't combine {_family_name(left)} with {_family_name(right)}"
        if operation:
            msg += f" ({operation})"
        super().__init__(msg)


class UnitAliasError(ValueError):
    """Unit alias error."""


def _family_name(family: Any) -> str:
    return getattr(family, '__name__', type(family).__name__)
