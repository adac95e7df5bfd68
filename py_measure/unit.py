"""Dimension families, units and measurements.

A *dimension family* is a subclass of [`Dimension`][py_measure.unit.Dimension] (e.g. `Length`).
Its units are instances of that subclass, each carrying a display `symbol` and a
[`UnitConverter`][py_measure.converter.UnitConverter] relating it to the family's `base` unit.
A [`Measurement`][py_measure.unit.Measurement] pairs a float with one such unit.

Key Features:
    * Units are values, not enum members: a new unit is a new instance, never a code change
    * Type-safe comparisons and arithmetic: mixing families raises `DimensionMismatchError`
    * Equality and hashing normalize through the base unit
    * Derived units from registered quotients (Length / Duration -> Speed)
    * Structural encoding with `to_dict()` / `from_dict()`

Examples:
    >>> from py_measure.dimensions import Length, Duration, Speed
    >>> d = Length.Meter(5)
    >>> d >> Length.Centimeter             # Conversion operator -> float
    500.0
    >>> d << Length.Centimeter             # Conversion operator -> Measurement
    <Length: 500.0 cm (5.0)>
    >>> Length.Centimeter(100) == Length.Meter(1)
    True
    >>> d + Length.Centimeter(50)
    <Length: 5.5 m (5.5)>
    >>> (d / Duration.Second(2)).unit.symbol
    'm/s'
"""

# Standard library imports
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Generic, Mapping, NamedTuple, Optional, Tuple, Type, TypeVar, Union

from typing_extensions import Self, TypeAlias

# Local imports
from py_measure.converter import UnitConverter, LinearConverter, ReciprocalConverter, ieee_divide
from py_measure.exceptions import UnitTypeError, UnitConversionError, DimensionMismatchError, UnitAliasError
from py_measure.logger import logger

Number: TypeAlias = Union[float, int]

_DimensionType = TypeVar('_DimensionType', bound='Dimension')


class UnitSpec(NamedTuple):
    """Declaration of a named unit inside a dimension family class body.

    Attributes:
        symbol: Display symbol of the unit.
        converter: Converter relating the unit to the family base unit.
        is_base: True for the single base unit of the family.
    """

    symbol: str
    converter: UnitConverter
    is_base: bool = False


def base_unit(symbol: str, converter: Optional[UnitConverter] = None) -> UnitSpec:
    """Declare the base unit of a family. The converter defaults to the linear identity."""
    return UnitSpec(symbol, converter if converter is not None else LinearConverter(1.0), True)


def linear_unit(symbol: str, coefficient: float, constant: float = 0.0) -> UnitSpec:
    """Declare a unit with `base = value * coefficient + constant`."""
    return UnitSpec(symbol, LinearConverter(coefficient, constant))


def reciprocal_unit(symbol: str, reciprocal: float) -> UnitSpec:
    """Declare a unit with `base = reciprocal / value`."""
    return UnitSpec(symbol, ReciprocalConverter(reciprocal))


def _snake_case(name: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


def _normalize_alias(alias: str) -> str:
    return re.sub(r"[\s_\-]+", "", alias).lower()


@dataclass(frozen=True, repr=False)
class Dimension:
    """Base class for dimension families; instances are units.

    Subclasses declare their units in the class body with `base_unit`, `linear_unit` and
    `reciprocal_unit`. On class creation the declarations become instances of the subclass,
    exactly one of which becomes `Family.base`.

    Units are immutable and compare by `(family, symbol, converter)`: two units with the same
    converter but different symbols are different units. `name` is the catalog attribute name
    and does not take part in equality.

    Attributes:
        symbol: Display symbol (e.g. 'km').
        converter: Strategy converting to and from the family base unit.
        name: Catalog attribute name (e.g. 'Kilometer'), None for ad-hoc units.

    Examples:
        >>> from py_measure.converter import LinearConverter
        >>> class Distance(Dimension):
        ...     Meter = base_unit('m')
        ...     Yard = linear_unit('yd', 0.9144)
        >>> Distance.base
        Distance.Meter
        >>> round(Distance.convert(100, Distance.Meter, Distance.Yard), 3)
        109.361
        >>> Distance('smoot', LinearConverter(1.7018))(2) >> Distance.Meter
        3.4036
    """

    symbol: str
    converter: UnitConverter
    name: Optional[str] = field(default=None, compare=False)

    base: ClassVar[Dimension]
    _units: ClassVar[Dict[str, Dimension]]
    _aliases: ClassVar[Dict[str, Dimension]]
    _families: ClassVar[Dict[str, Type[Dimension]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        units: Dict[str, Dimension] = {}
        aliases: Dict[str, Dimension] = {}
        created: Dict[int, Dimension] = {}
        base: Optional[Dimension] = None

        for attr, spec in list(vars(cls).items()):
            if not isinstance(spec, UnitSpec):
                continue
            # `Feet = Foot` in a class body re-binds the same spec: keep one unit, record an alias
            if id(spec) in created:
                unit = created[id(spec)]
                aliases[attr] = unit
                setattr(cls, attr, unit)
                continue
            unit = cls(spec.symbol, spec.converter, attr)
            created[id(spec)] = unit
            units[attr] = unit
            setattr(cls, attr, unit)
            if spec.is_base:
                if base is not None:
                    raise UnitTypeError(f"{cls.__name__} declares more than one base unit: "
                                        f"{base.name}, {attr}")
                if not spec.converter.is_identity():
                    raise UnitTypeError(f"{cls.__name__}.{attr}: base unit needs an identity converter, "
                                        f"got {spec.converter!r}")
                base = unit

        if base is None:
            raise UnitTypeError(f"{cls.__name__} must declare exactly one base unit")

        cls.base = base
        cls._units = units
        cls._aliases = aliases
        # First registration wins: `from_dict` keeps decoding to the family it was encoded from
        if (registered := Dimension._families.get(cls.__name__)) is not None:
            logger.warning(f"Dimension family {cls.__name__} is already registered "
                           f"from {registered.__module__}; {cls.__module__}.{cls.__qualname__} "
                           f"will not be found by name")
        else:
            Dimension._families[cls.__name__] = cls

    def __repr__(self) -> str:
        if self.name is not None:
            return f'{self.__class__.__name__}.{self.name}'
        return f'{self.__class__.__name__}({self.symbol!r}, {self.converter!r})'

    def __str__(self) -> str:
        return self.symbol

    def __call__(self, value: Number) -> Measurement[Self]:
        """Create a measurement in this unit: `Length.Meter(5)`."""
        return Measurement(value, self)

    @classmethod
    def key(cls) -> str:
        """Snake-case family key used by configuration (e.g. 'fuel_efficiency')."""
        return _snake_case(cls.__name__)

    @classmethod
    def units(cls) -> Dict[str, Self]:
        """Named units of this family in declaration order (aliases excluded)."""
        return dict(cls._units)  # type: ignore[arg-type]

    @classmethod
    def define_unit(cls, name: str, symbol: str, converter: UnitConverter) -> Self:
        """Add a named unit to this family without touching its declaration.

        Args:
            name: Attribute name of the new unit (e.g. 'Smoot').
            symbol: Display symbol.
            converter: Converter relative to the family base unit.

        Returns:
            The new unit, also available as `Family.<name>`.

        Raises:
            UnitTypeError: If the family already has an attribute with that name.
        """
        if hasattr(cls, name):
            raise UnitTypeError(f"{cls.__name__}.{name} is already defined")
        unit = cls(symbol, converter, name)
        setattr(cls, name, unit)
        cls._units[name] = unit
        logger.debug(f"Registered unit {cls.__name__}.{name} ({symbol})")
        return unit

    @classmethod
    def lookup(cls, alias: str) -> Optional[Self]:
        """Resolve a unit of this family from a symbol or an attribute name.

        Symbols match exactly first ('Mm' is not 'mm'); names match ignoring case, whitespace,
        underscores and a trailing plural 's'/'es'.

        Returns:
            The unit if found, None otherwise.

        Examples:
            >>> from py_measure.dimensions import Length
            >>> Length.lookup('km')
            Length.Kilometer
            >>> Length.lookup(' nautical miles ')
            Length.NauticalMile
            >>> Length.lookup('furlongs per fortnight') is None
            True
        """
        if not isinstance(alias, str):
            raise TypeError(f"String expected, got {type(alias)=}, {alias=}")
        stripped = alias.strip()
        for unit in cls._units.values():
            if unit.symbol == stripped:
                return unit  # type: ignore[return-value]

        candidates: Dict[str, Dimension] = {}
        for name, unit in (*cls._units.items(), *cls._aliases.items()):
            candidates[_normalize_alias(name)] = unit
        key = _normalize_alias(stripped)
        for variant in (key, key[:-1] if key.endswith('s') else None, key[:-2] if key.endswith('es') else None):
            if variant and variant in candidates:
                return candidates[variant]  # type: ignore[return-value]
        return None

    @classmethod
    def parse_unit(cls, alias: str) -> Self:
        """Like `lookup`, but an unknown alias is an error.

        Raises:
            UnitAliasError: If `alias` does not name a unit of this family.
        """
        if (unit := cls.lookup(alias)) is None:
            raise UnitAliasError(f"Unsupported {cls.__name__} unit {alias=}")
        return unit

    @classmethod
    def convert(cls, value: Number, from_unit: Self, to_unit: Self) -> float:
        """Convert a number between two units of this family.

        Examples:
            >>> from py_measure.dimensions import Length
            >>> Length.convert(5, Length.Meter, Length.Centimeter)
            500.0
        """
        for unit in (from_unit, to_unit):
            _check_family(cls, unit, 'convert')
        return Measurement(value, from_unit).value_in(to_unit)

    @classmethod
    def zero(cls) -> Measurement[Self]:
        """Zero measurement in the base unit."""
        return Measurement(0.0, cls.base)  # type: ignore[arg-type]

    @staticmethod
    def family(key: str) -> Type[Dimension]:
        """Find a registered family by class name ('ElectricCharge') or key ('electric_charge').

        Names are registered by the first family class defined with them.

        Raises:
            UnitTypeError: If no family is registered under that name.
        """
        if key in Dimension._families:
            return Dimension._families[key]
        for family in Dimension._families.values():
            if family.key() == key:
                return family
        raise UnitTypeError(f"Unknown dimension family {key!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Structural encoding: family name, symbol and converter parameters."""
        data: Dict[str, Any] = {
            'dimension': self.__class__.__name__,
            'symbol': self.symbol,
            'converter': self.converter.to_dict(),
        }
        if self.name is not None:
            data['name'] = self.name
        return data

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Dimension:
        """Rebuild a unit from `to_dict()` output."""
        family = Dimension.family(data['dimension'])
        return family(data['symbol'], UnitConverter.from_dict(data['converter']), data.get('name'))


def _check_family(family: Type[Dimension], unit: Any, operation: str) -> None:
    if not isinstance(unit, Dimension):
        raise UnitTypeError(f"Type expected: {Dimension.__name__}; got: {type(unit).__name__} ({unit})")
    if type(unit) is not family:
        raise DimensionMismatchError(family, type(unit), operation)


#region Derived units
_QUOTIENTS: Dict[Tuple[Type[Dimension], Type[Dimension]], Type[Dimension]] = {}


def register_quotient(numerator: Type[Dimension], denominator: Type[Dimension], result: Type[Dimension]) -> None:
    """Allow `Measurement[numerator] / Measurement[denominator] -> Measurement[result]`."""
    _QUOTIENTS[(numerator, denominator)] = result
    logger.debug(f"Registered derived unit {result.__name__} = {numerator.__name__} / {denominator.__name__}")


def quotient_unit(numerator: Dimension, denominator: Dimension) -> Dimension:
    """Synthesize the unit of `numerator / denominator` from the operands' converters.

    The coefficient of the result is the ratio of the operand coefficients, and the symbol is
    `'<numerator symbol>/<denominator symbol>'`.

    Raises:
        UnitConversionError: If either converter is not linear and constant-free
            (e.g. Celsius, or a reciprocal unit). Checked before the families.
        DimensionMismatchError: If no quotient is registered for the two families.

    Examples:
        >>> from py_measure.dimensions import Length, Duration
        >>> quotient_unit(Length.Kilometer, Duration.Hour)
        Speed('km/hr', LinearConverter(coefficient=0.2777777777777778, constant=0.0))
    """
    num, den = numerator.converter, denominator.converter
    if not (isinstance(num, LinearConverter) and isinstance(den, LinearConverter)) \
            or num.constant != 0.0 or den.constant != 0.0:
        raise UnitConversionError(f"Derived units need linear converters without constant: "
                                  f"{numerator!r} / {denominator!r}")
    result = _QUOTIENTS.get((type(numerator), type(denominator)))
    if result is None:
        raise DimensionMismatchError(type(numerator), type(denominator), '/')
    coefficient = ieee_divide(num.coefficient, den.coefficient)
    return result(f'{numerator.symbol}/{denominator.symbol}', LinearConverter(coefficient))
#endregion Derived units


class Measurement(Generic[_DimensionType]):
    """A float value tagged with a unit.

    `value` is expressed in `unit`, not in the base unit. Equality, hashing and ordering
    normalize both operands to the family base unit; operations across families raise
    `DimensionMismatchError`. Measurements are immutable except for `convert()`, which reassigns
    value and unit together. `convert()` is not synchronized: share a measurement between
    threads only if callers serialize access.

    NaN and infinities are accepted and propagate per IEEE-754.

    Examples:
        >>> from py_measure.dimensions import Duration
        >>> Duration.Hour(1) == Duration.Second(3600)
        True
        >>> Duration.Second(3) + Duration.Second(2)
        <Duration: 5.0 s (5.0)>
        >>> t = Duration.Minute(90)
        >>> t.convert(Duration.Hour)
        >>> t
        <Duration: 1.5 hr (5400.0)>
    """

    _value: float
    _unit: _DimensionType
    __slots__ = ('_value', '_unit')

    def __init__(self, value: Number, unit: _DimensionType):
        """Initialize a measurement.

        Args:
            value: Numeric value expressed in `unit`.
            unit: Unit of a dimension family.

        Raises:
            UnitTypeError: If `unit` is not a `Dimension` instance.
        """
        if not isinstance(unit, Dimension):
            raise UnitTypeError(f"Type expected: {Dimension.__name__}; got: {type(unit).__name__} ({unit})")
        self._value = float(value)
        self._unit = unit

    @property
    def value(self) -> float:
        """Numeric value expressed in `unit`."""
        return self._value

    @property
    def unit(self) -> _DimensionType:
        return self._unit

    @property
    def dimension(self) -> Type[_DimensionType]:
        """Dimension family (class) of this measurement."""
        return type(self._unit)

    @property
    def value_in_base(self) -> float:
        return self._unit.converter.to_base(self._value)

    def _check(self, unit: Any, operation: str) -> None:
        _check_family(type(self._unit), unit, operation)

    def value_in(self, unit: _DimensionType) -> float:
        """Numeric value of this measurement in `unit`.

        Raises:
            DimensionMismatchError: If `unit` belongs to another family.
        """
        self._check(unit, 'value_in')
        if unit == self._unit:
            return self._value
        return unit.converter.from_base(self._unit.converter.to_base(self._value))

    def converted(self, unit: _DimensionType) -> Measurement[_DimensionType]:
        """New measurement of the same quantity expressed in `unit`."""
        return Measurement(self.value_in(unit), unit)

    def convert(self, unit: _DimensionType) -> None:
        """Re-express this measurement in `unit`, in place."""
        value = self.value_in(unit)
        self._value, self._unit = value, unit

    def to_preferred(self) -> Measurement[_DimensionType]:
        """New measurement in the `PreferredUnits` entry of this family."""
        from py_measure.dimensions import PreferredUnits
        return self.converted(PreferredUnits.get(type(self._unit)))

    # operators: non-mutating
    __rshift__ = value_in
    __lshift__ = converted

    def __float__(self) -> float:
        return float(self.value_in_base)

    def __str__(self) -> str:
        return f'{self._value} {self._unit.symbol}'

    def __repr__(self) -> str:
        return f'<{type(self._unit).__name__}: {self} ({round(self.value_in_base, 4)})>'

    #region Measurement comparison
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check(other._unit, '==')
        return self.value_in_base == other.value_in_base

    def __hash__(self) -> int:
        return hash((type(self._unit), self.value_in_base))

    def __lt__(self, other: Measurement[_DimensionType]) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check(other._unit, '<')
        return self.value_in_base < other.value_in_base

    def __gt__(self, other: Measurement[_DimensionType]) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check(other._unit, '>')
        return self.value_in_base > other.value_in_base

    def __le__(self, other: Measurement[_DimensionType]) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check(other._unit, '<=')
        return self.value_in_base <= other.value_in_base

    def __ge__(self, other: Measurement[_DimensionType]) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check(other._unit, '>=')
        return self.value_in_base >= other.value_in_base
    #endregion Measurement comparison

    #region Measurement arithmetic operators
    def __add__(self, other: Measurement[_DimensionType]) -> Measurement[_DimensionType]:
        """Sum in the left operand's units: `this + other`."""
        if isinstance(other, Measurement):
            self._check(other._unit, '+')
            return Measurement(self._value + other.value_in(self._unit), self._unit)
        return NotImplemented

    def __sub__(self, other: Measurement[_DimensionType]) -> Measurement[_DimensionType]:
        """Difference in the left operand's units: `this - other`."""
        if isinstance(other, Measurement):
            self._check(other._unit, '-')
            return Measurement(self._value - other.value_in(self._unit), self._unit)
        return NotImplemented

    def __mul__(self, other: Number) -> Measurement[_DimensionType]:
        """Scale by a number, keeping the units: `this * other`."""
        if isinstance(other, (int, float)):
            return Measurement(self._value * other, self._unit)
        return NotImplemented

    def __rmul__(self, other: Number) -> Measurement[_DimensionType]:
        """Right-hand multiplication by a number (commutative): `other * this`."""
        return self.__mul__(other)

    def __truediv__(self, other: Union[Number, Measurement[Any]]) -> Union[Measurement[Any], float]:
        """Divide this measurement: `this / other`.

        Returns:
            - By a number: same units, value divided (±inf/NaN when dividing by zero).
            - By the same family: float ratio of the base values.
            - By another family: a derived measurement if the quotient is registered.

        Raises:
            DimensionMismatchError: If no quotient is registered for the two families.
            UnitConversionError: If an operand unit cannot take part in a derived unit.
        """
        if isinstance(other, (int, float)):
            return Measurement(ieee_divide(self._value, float(other)), self._unit)
        if isinstance(other, Measurement):
            if type(other._unit) is type(self._unit):
                return ieee_divide(self.value_in_base, other.value_in_base)
            unit = quotient_unit(self._unit, other._unit)
            return Measurement(ieee_divide(self._value, other._value), unit)
        return NotImplemented
    #endregion Measurement arithmetic operators

    def to_dict(self) -> Dict[str, Any]:
        """Structural encoding: value and the unit's defining fields."""
        return {'value': self._value, 'unit': self._unit.to_dict()}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Measurement[Any]:
        """Rebuild a measurement from `to_dict()` output."""
        return Measurement(data['value'], Dimension.from_dict(data['unit']))


__all__ = (
    'Number',
    'UnitSpec',
    'base_unit',
    'linear_unit',
    'reciprocal_unit',
    'Dimension',
    'Measurement',
    'register_quotient',
    'quotient_unit',
)
