"""Catalog of dimension families.

Each family is a [`Dimension`][py_measure.unit.Dimension] subclass whose class attributes are
its units. All conversions route through the family's `base` unit.

Supported Dimensions (base unit first):
    * Length: `m`, `Mm`, `km`, `hm`, `dam`, `dm`, `cm`, `mm`, `µm`, `nm`, `pm`, `in`, `ft`, `yd`, `mi`, ...
    * Area: `m²`, `km²`, `cm²`, ..., `ac`, `a`, `ha`
    * Duration: `s`, `ps`, `ns`, `µs`, `ms`, `min`, `hr`
    * Angle: `°`, `ʹ`, `ʺ`, `rad`, `grad`, `rev`
    * Volume: `L` and metric, cubic, US customary and imperial volumes
    * Mass: `kg`, `g`, ..., `oz`, `lb`, `st`, `t`, `ton`, `ct`, `oz t`, `slug`
    * Pressure: `N/m²`, `Pa`, `GPa`, `MPa`, `kPa`, `hPa`, `inHg`, `bar`, `mbar`, `mmHg`, `psi`
    * Acceleration: `m/s²`, `g`
    * Frequency: `Hz`, `THz` ... `nHz`, `FPS`
    * Speed: `m/s`, `km/h`, `mph`, `kn`
    * Energy: `J`, `kJ`, `kCal`, `cal`, `kWh`, `ft·lb`
    * Power: `W`, `TW` ... `fW`, `hp`
    * Temperature: `K`, `°C`, `°F`, `°R` (affine)
    * Illuminance: `lx`
    * ElectricCharge: `C`, `MAh`, `kAh`, `Ah`, `mAh`, `µAh`
    * ElectricCurrent: `A`, `MA`, `kA`, `mA`, `µA`
    * ElectricPotentialDifference: `V`, `MV`, `kV`, `mV`, `µV`
    * ElectricResistance: `Ω`, `MΩ`, `kΩ`, `mΩ`, `µΩ`
    * ConcentrationOfMass: `g/L`, `mg/dL`, parametric `mmol/L`
    * Dispersion: `ppm`
    * FuelEfficiency: `L/100km`, `mpg`, `mpg (imp)` (reciprocal)
    * InformationStorage: `bit`, `nibble`, `B`, decimal and binary multiples of bits and bytes

`Length / Duration` produces `Speed`.

Examples:
    >>> Area.convert(1, Area.SquareCentimeter, Area.SquareMeter)
    0.0001
    >>> InformationStorage.Byte(1) >> InformationStorage.Bit
    8.0
    >>> round(Temperature.Celsius(100) >> Temperature.Fahrenheit, 6)
    212.0
    >>> Length.Meter(3) / Duration.Second(5) == Speed.MetersPerSecond(0.6)
    True
"""

# Standard library imports
from __future__ import annotations

from dataclasses import dataclass, fields, MISSING
from math import pi
from typing import Type, Union

# Local imports
from py_measure.converter import LinearConverter, ReciprocalConverter
from py_measure.logger import logger
from py_measure.unit import Dimension, base_unit, linear_unit, reciprocal_unit, register_quotient

__all__ = (
    'Length',
    'Area',
    'Duration',
    'Angle',
    'Volume',
    'Mass',
    'Pressure',
    'Acceleration',
    'Frequency',
    'Speed',
    'Energy',
    'Power',
    'Temperature',
    'Illuminance',
    'ElectricCharge',
    'ElectricCurrent',
    'ElectricPotentialDifference',
    'ElectricResistance',
    'ConcentrationOfMass',
    'Dispersion',
    'FuelEfficiency',
    'InformationStorage',
    'PreferredUnits',
)


class Length(Dimension):
    """Length measurements.  Base unit is meters."""

    Megameter = linear_unit('Mm', 1e6)
    Kilometer = linear_unit('km', 1e3)
    Hectometer = linear_unit('hm', 1e2)
    Decameter = linear_unit('dam', 1e1)
    Meter = base_unit('m')
    Decimeter = linear_unit('dm', 1e-1)
    Centimeter = linear_unit('cm', 1e-2)
    Millimeter = linear_unit('mm', 1e-3)
    Micrometer = linear_unit('µm', 1e-6)
    Nanometer = linear_unit('nm', 1e-9)
    Picometer = linear_unit('pm', 1e-12)
    Inch = linear_unit('in', 0.0254)
    Foot = linear_unit('ft', 0.3048)
    Feet = Foot
    Yard = linear_unit('yd', 0.9144)
    Mile = linear_unit('mi', 1609.344)
    ScandinavianMile = linear_unit('smi', 10_000.)
    Lightyear = linear_unit('ly', 9.4607304725808e15)
    NauticalMile = linear_unit('NM', 1852.)
    Fathom = linear_unit('ftm', 1.8288)
    Furlong = linear_unit('fur', 201.168)
    AstronomicalUnit = linear_unit('ua', 149_597_870_700.)
    Parsec = linear_unit('pc', 3.0856775814913673e16)


class Area(Dimension):
    """Area measurements.  Base unit is square meters."""

    SquareMegameter = linear_unit('Mm²', 1e12)
    SquareKilometer = linear_unit('km²', 1e6)
    SquareMeter = base_unit('m²')
    SquareCentimeter = linear_unit('cm²', 1e-4)
    SquareMillimeter = linear_unit('mm²', 1e-6)
    SquareMicrometer = linear_unit('µm²', 1e-12)
    SquareNanometer = linear_unit('nm²', 1e-18)
    SquareInch = linear_unit('in²', 0.00064516)
    SquareFoot = linear_unit('ft²', 0.09290304)
    SquareYard = linear_unit('yd²', 0.83612736)
    SquareMile = linear_unit('mi²', 2_589_988.110336)
    Acre = linear_unit('ac', 4046.8564224)
    Are = linear_unit('a', 100.)
    Hectare = linear_unit('ha', 10_000.)


class Duration(Dimension):
    """Time intervals.  Base unit is seconds."""

    Picosecond = linear_unit('ps', 1e-12)
    Nanosecond = linear_unit('ns', 1e-9)
    Microsecond = linear_unit('µs', 1e-6)
    Millisecond = linear_unit('ms', 1e-3)
    Second = base_unit('s')
    Minute = linear_unit('min', 60.)
    Hour = linear_unit('hr', 3600.)


class Angle(Dimension):
    """Angular measurements.  Base unit is degrees.

    Values are not normalized: `Angle.Degree(540)` stays 540°.
    """

    Degree = base_unit('°')
    ArcMinute = linear_unit('ʹ', 1. / 60)
    ArcSecond = linear_unit('ʺ', 1. / 3600)
    Radian = linear_unit('rad', 180. / pi)
    Gradian = linear_unit('grad', 0.9)
    Revolution = linear_unit('rev', 360.)


class Volume(Dimension):
    """Volume measurements.  Base unit is liters."""

    Megaliter = linear_unit('ML', 1e6)
    Kiloliter = linear_unit('kL', 1e3)
    Liter = base_unit('L')
    Deciliter = linear_unit('dL', 1e-1)
    Centiliter = linear_unit('cL', 1e-2)
    Milliliter = linear_unit('mL', 1e-3)
    CubicKilometer = linear_unit('km³', 1e12)
    CubicMeter = linear_unit('m³', 1e3)
    CubicDecimeter = linear_unit('dm³', 1.)
    CubicCentimeter = linear_unit('cm³', 1e-3)
    CubicMillimeter = linear_unit('mm³', 1e-6)
    CubicInch = linear_unit('in³', 0.016387064)
    CubicFoot = linear_unit('ft³', 28.316846592)
    CubicYard = linear_unit('yd³', 764.554857984)
    CubicMile = linear_unit('mi³', 4.168181825440579584e12)
    AcreFoot = linear_unit('af', 1_233_481.83754752)
    Bushel = linear_unit('bsh', 35.23907016688)
    Teaspoon = linear_unit('tsp', 0.00492892159375)
    Tablespoon = linear_unit('tbsp', 0.01478676478125)
    FluidOunce = linear_unit('fl oz', 0.0295735295625)
    Cup = linear_unit('cup', 0.2365882365)
    Pint = linear_unit('pt', 0.473176473)
    Quart = linear_unit('qt', 0.946352946)
    Gallon = linear_unit('gal', 3.785411784)
    ImperialTeaspoon = linear_unit('tsp (imp)', 0.00591938802083)
    ImperialTablespoon = linear_unit('tbsp (imp)', 0.0177581640625)
    ImperialFluidOunce = linear_unit('fl oz (imp)', 0.0284130625)
    ImperialPint = linear_unit('pt (imp)', 0.56826125)
    ImperialQuart = linear_unit('qt (imp)', 1.1365225)
    ImperialGallon = linear_unit('gal (imp)', 4.54609)
    MetricCup = linear_unit('metric cup', 0.25)


class Mass(Dimension):
    """Mass measurements.  Base unit is kilograms."""

    Kilogram = base_unit('kg')
    Gram = linear_unit('g', 1e-3)
    Decigram = linear_unit('dg', 1e-4)
    Centigram = linear_unit('cg', 1e-5)
    Milligram = linear_unit('mg', 1e-6)
    Microgram = linear_unit('µg', 1e-9)
    Nanogram = linear_unit('ng', 1e-12)
    Picogram = linear_unit('pg', 1e-15)
    Ounce = linear_unit('oz', 0.028349523125)
    Pound = linear_unit('lb', 0.45359237)
    Stone = linear_unit('st', 6.35029318)
    MetricTon = linear_unit('t', 1000.)
    ShortTon = linear_unit('ton', 907.18474)
    Carat = linear_unit('ct', 0.0002)
    OunceTroy = linear_unit('oz t', 0.0311034768)
    Slug = linear_unit('slug', 14.5939029372)


class Pressure(Dimension):
    """Pressure measurements.  Base unit is newtons per square meter."""

    NewtonPerSquareMeter = base_unit('N/m²')
    Pascal = linear_unit('Pa', 1.)
    Gigapascal = linear_unit('GPa', 1e9)
    Megapascal = linear_unit('MPa', 1e6)
    Kilopascal = linear_unit('kPa', 1e3)
    Hectopascal = linear_unit('hPa', 1e2)
    InchOfMercury = linear_unit('inHg', 3386.389)
    Bar = linear_unit('bar', 1e5)
    Millibar = linear_unit('mbar', 1e2)
    MillimeterOfMercury = linear_unit('mmHg', 133.322387415)
    PSI = linear_unit('psi', 6894.757293168)


class Acceleration(Dimension):
    """Acceleration measurements.  Base unit is meters per second squared."""

    MetersPerSecondSquared = base_unit('m/s²')
    Gravity = linear_unit('g', 9.80665)


class Frequency(Dimension):
    """Frequency measurements.  Base unit is hertz.

    `FramePerSecond` has the same factor as `Hertz` but is a distinct unit.
    """

    Terahertz = linear_unit('THz', 1e12)
    Gigahertz = linear_unit('GHz', 1e9)
    Megahertz = linear_unit('MHz', 1e6)
    Kilohertz = linear_unit('kHz', 1e3)
    Hertz = base_unit('Hz')
    Millihertz = linear_unit('mHz', 1e-3)
    Microhertz = linear_unit('µHz', 1e-6)
    Nanohertz = linear_unit('nHz', 1e-9)
    FramePerSecond = linear_unit('FPS', 1.)


class Speed(Dimension):
    """Speed measurements.  Base unit is meters per second.

    Also produced by dividing a Length measurement by a Duration measurement.
    """

    MetersPerSecond = base_unit('m/s')
    KilometersPerHour = linear_unit('km/h', 1. / 3.6)
    MilesPerHour = linear_unit('mph', 0.44704)
    Knot = linear_unit('kn', 1852. / 3600)


class Energy(Dimension):
    """Energy measurements.  Base unit is joules."""

    Kilojoule = linear_unit('kJ', 1e3)
    Joule = base_unit('J')
    Kilocalorie = linear_unit('kCal', 4184.)
    Calorie = linear_unit('cal', 4.184)
    KilowattHour = linear_unit('kWh', 3.6e6)
    FootPound = linear_unit('ft·lb', 1.3558179483314004)


class Power(Dimension):
    """Power measurements.  Base unit is watts."""

    Terawatt = linear_unit('TW', 1e12)
    Gigawatt = linear_unit('GW', 1e9)
    Megawatt = linear_unit('MW', 1e6)
    Kilowatt = linear_unit('kW', 1e3)
    Watt = base_unit('W')
    Milliwatt = linear_unit('mW', 1e-3)
    Microwatt = linear_unit('µW', 1e-6)
    Nanowatt = linear_unit('nW', 1e-9)
    Picowatt = linear_unit('pW', 1e-12)
    Femtowatt = linear_unit('fW', 1e-15)
    Horsepower = linear_unit('hp', 745.6998715822702)


class Temperature(Dimension):
    """Temperature measurements.  Base unit is kelvin.

    Celsius and Fahrenheit are affine (non-zero constant) and can't form derived units.
    """

    Kelvin = base_unit('K')
    Celsius = linear_unit('°C', 1., 273.15)
    Fahrenheit = linear_unit('°F', 5. / 9, 459.67 * 5. / 9)
    Rankine = linear_unit('°R', 5. / 9)


class Illuminance(Dimension):
    """Illuminance measurements.  Base unit is lux."""

    Lux = base_unit('lx')


class ElectricCharge(Dimension):
    """Electric charge measurements.  Base unit is coulombs."""

    Coulomb = base_unit('C')
    MegaampereHour = linear_unit('MAh', 3.6e9)
    KiloampereHour = linear_unit('kAh', 3.6e6)
    AmpereHour = linear_unit('Ah', 3600.)
    MilliampereHour = linear_unit('mAh', 3.6)
    MicroampereHour = linear_unit('µAh', 0.0036)


class ElectricCurrent(Dimension):
    """Electric current measurements.  Base unit is amperes."""

    Megaampere = linear_unit('MA', 1e6)
    Kiloampere = linear_unit('kA', 1e3)
    Ampere = base_unit('A')
    Milliampere = linear_unit('mA', 1e-3)
    Microampere = linear_unit('µA', 1e-6)


class ElectricPotentialDifference(Dimension):
    """Electric potential difference measurements.  Base unit is volts."""

    Megavolt = linear_unit('MV', 1e6)
    Kilovolt = linear_unit('kV', 1e3)
    Volt = base_unit('V')
    Millivolt = linear_unit('mV', 1e-3)
    Microvolt = linear_unit('µV', 1e-6)


class ElectricResistance(Dimension):
    """Electric resistance measurements.  Base unit is ohms."""

    Megaohm = linear_unit('MΩ', 1e6)
    Kiloohm = linear_unit('kΩ', 1e3)
    Ohm = base_unit('Ω')
    Milliohm = linear_unit('mΩ', 1e-3)
    Microohm = linear_unit('µΩ', 1e-6)


class ConcentrationOfMass(Dimension):
    """Mass concentration measurements.  Base unit is grams per liter."""

    GramsPerLiter = base_unit('g/L')
    MilligramsPerDeciliter = linear_unit('mg/dL', 0.01)

    @classmethod
    def millimoles_per_liter(cls, grams_per_mole: float) -> ConcentrationOfMass:
        """Molar concentration unit for a solute of the given molar mass.

        Examples:
            >>> glucose = ConcentrationOfMass.millimoles_per_liter(180.156)
            >>> round(glucose(5.5) >> ConcentrationOfMass.MilligramsPerDeciliter, 2)
            99.09
        """
        return cls('mmol/L', LinearConverter(grams_per_mole / 1000))


class Dispersion(Dimension):
    """Dispersion measurements.  Base unit is parts per million."""

    PartsPerMillion = base_unit('ppm')


class FuelEfficiency(Dimension):
    """Fuel efficiency measurements.  Base unit is liters per 100 kilometers.

    Miles per gallon are reciprocal to the base unit: `L/100km = 235.214583 / mpg`.
    """

    LitersPer100Kilometers = base_unit('L/100km', ReciprocalConverter(0.))
    MilesPerImperialGallon = reciprocal_unit('mpg (imp)', 282.480936)
    MilesPerGallon = reciprocal_unit('mpg', 235.214583)


class InformationStorage(Dimension):
    """Information storage measurements.  Base unit is bits."""

    Bit = base_unit('bit')
    Nibble = linear_unit('nibble', 4.)
    Byte = linear_unit('B', 8.)

    Kilobyte = linear_unit('kB', 8e3)
    Megabyte = linear_unit('MB', 8e6)
    Gigabyte = linear_unit('GB', 8e9)
    Terabyte = linear_unit('TB', 8e12)
    Petabyte = linear_unit('PB', 8e15)
    Exabyte = linear_unit('EB', 8e18)
    Zettabyte = linear_unit('ZB', 8e21)
    Yottabyte = linear_unit('YB', 8e24)

    Kibibyte = linear_unit('KiB', 8. * 1024)
    Mebibyte = linear_unit('MiB', 8. * 1024 ** 2)
    Gibibyte = linear_unit('GiB', 8. * 1024 ** 3)
    Tebibyte = linear_unit('TiB', 8. * 1024 ** 4)
    Pebibyte = linear_unit('PiB', 8. * 1024 ** 5)
    Exbibyte = linear_unit('EiB', 8. * 1024 ** 6)
    Zebibyte = linear_unit('ZiB', 8. * 1024 ** 7)
    Yobibyte = linear_unit('YiB', 8. * 1024 ** 8)

    Kilobit = linear_unit('kb', 1e3)
    Megabit = linear_unit('Mb', 1e6)
    Gigabit = linear_unit('Gb', 1e9)
    Terabit = linear_unit('Tb', 1e12)
    Petabit = linear_unit('Pb', 1e15)
    Exabit = linear_unit('Eb', 1e18)
    Zettabit = linear_unit('Zb', 1e21)
    Yottabit = linear_unit('Yb', 1e24)

    Kibibit = linear_unit('Kib', 1024.)
    Mebibit = linear_unit('Mib', 1024. ** 2)
    Gibibit = linear_unit('Gib', 1024. ** 3)
    Tebibit = linear_unit('Tib', 1024. ** 4)
    Pebibit = linear_unit('Pib', 1024. ** 5)
    Exbibit = linear_unit('Eib', 1024. ** 6)
    Zebibit = linear_unit('Zib', 1024. ** 7)
    Yobibit = linear_unit('Yib', 1024. ** 8)


register_quotient(Length, Duration, Speed)


class PreferredUnitsMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{field} = {getattr(cls, field)!r}'
                         for field in getattr(cls, '__dataclass_fields__'))


@dataclass
class PreferredUnits(metaclass=PreferredUnitsMeta):  # pylint: disable=too-many-instance-attributes
    """Default display units per dimension family, used by `Measurement.to_preferred()`.

    One attribute per family, named by the family key, defaulting to the family base unit.
    Load presets with `loadImperialUnits()` / `loadMetricUnits()` or a `pymeasure.toml` file.

    Examples:
        >>> PreferredUnits.length = Length.Foot
        >>> Length.Meter(3).to_preferred().unit
        Length.Foot
        >>> PreferredUnits.set(speed='km/h', temperature='celsius')
        >>> PreferredUnits.speed
        Speed.KilometersPerHour
        >>> PreferredUnits.restore_defaults()
        >>> PreferredUnits.length
        Length.Meter

    Note:
        Changing preferred units affects every subsequent `to_preferred()` call.
    """

    # Defaults
    length: Dimension = Length.Meter
    area: Dimension = Area.SquareMeter
    duration: Dimension = Duration.Second
    angle: Dimension = Angle.Degree
    volume: Dimension = Volume.Liter
    mass: Dimension = Mass.Kilogram
    pressure: Dimension = Pressure.NewtonPerSquareMeter
    acceleration: Dimension = Acceleration.MetersPerSecondSquared
    frequency: Dimension = Frequency.Hertz
    speed: Dimension = Speed.MetersPerSecond
    energy: Dimension = Energy.Joule
    power: Dimension = Power.Watt
    temperature: Dimension = Temperature.Kelvin
    illuminance: Dimension = Illuminance.Lux
    electric_charge: Dimension = ElectricCharge.Coulomb
    electric_current: Dimension = ElectricCurrent.Ampere
    electric_potential_difference: Dimension = ElectricPotentialDifference.Volt
    electric_resistance: Dimension = ElectricResistance.Ohm
    concentration_of_mass: Dimension = ConcentrationOfMass.GramsPerLiter
    dispersion: Dimension = Dispersion.PartsPerMillion
    fuel_efficiency: Dimension = FuelEfficiency.LitersPer100Kilometers
    information_storage: Dimension = InformationStorage.Byte

    @classmethod
    def restore_defaults(cls):
        """Reset all preferred units to their default values."""
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)

    @classmethod
    def get(cls, family: Type[Dimension]) -> Dimension:
        """Preferred unit of `family`; the family base unit if it has no entry."""
        unit = getattr(cls, family.key(), None)
        if isinstance(unit, family):
            return unit
        return family.base

    @classmethod
    def set(cls, **kwargs: Union[Dimension, str]):
        """Set preferred units from keyword arguments.

        Values are units of the matching family or aliases resolved by `Family.lookup`.
        Invalid attributes or values are logged as warnings but do not raise exceptions.

        Examples:
            >>> PreferredUnits.set(length=Length.Kilometer, mass='lb', volume='nonsense')
            >>> PreferredUnits.mass
            Mass.Pound
            >>> PreferredUnits.restore_defaults()
        """
        defaults = {f.name: f.default for f in fields(cls)}
        for attribute, value in kwargs.items():
            if attribute not in defaults:
                logger.warning(f"{attribute=} not found in preferred_units")
                continue
            family = type(defaults[attribute])
            if isinstance(value, Dimension):
                if isinstance(value, family):
                    setattr(cls, attribute, value)
                else:
                    logger.warning(f"{value!r} is not a {family.__name__} unit")
            elif isinstance(value, str):
                if (unit := family.lookup(value)) is not None:
                    setattr(cls, attribute, unit)
                else:
                    logger.warning(f"{value=} not a {family.__name__} unit")
            else:
                logger.warning(f"type of {value=} have not been converted to a {family.__name__} unit")
