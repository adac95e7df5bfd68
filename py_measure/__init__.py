"""Dimensional measurements and unit conversions."""

import importlib.metadata

__version__ = importlib.metadata.version("py_measure")

# Standard library imports
import importlib.resources
import os
import sys
from typing import Union

# Third-party imports
from typing_extensions import Dict, Optional

# Local imports
from .logger import logger as log
from .unit import Dimension
from .dimensions import PreferredUnits

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load preferred units from a .pymeasure.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pymeasure.toml or pymeasure.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pymeasure_toml(start_dir: str = os.getcwd()) -> Optional[str]:
        """Search for the config file starting from the specified directory and moving up.

        Args:
            start_dir: The directory to start searching from. Default is the current working directory.

        Returns:
            The absolute path to the config file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir)
        while True:
            config_paths = [
                os.path.join(current_dir, '.pymeasure.toml'),
                os.path.join(current_dir, 'pymeasure.toml'),
            ]
            for config_path in config_paths:
                if os.path.exists(config_path):
                    return os.path.abspath(config_path)

            parent_dir = os.path.dirname(current_dir)

            # Reached the filesystem root
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pymeasure_toml()) is None:
            filepath = find_pymeasure_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

            if _pymeasure := _config.get('pymeasure'):
                if preferred_units := _pymeasure.get('preferred_units'):
                    PreferredUnits.set(**preferred_units)
                else:
                    if not suppress_warnings:
                        log.warning("Config has no `pymeasure.preferred_units` section")
            else:
                if not suppress_warnings:
                    log.warning("Config has no `pymeasure` section")

    log.debug("PreferredUnits load success")


def _basic_config(filename: Optional[str] = None,
                  preferred_units: Optional[Dict[str, Union[Dimension, str]]] = None,
                  suppress_warnings: bool = False) -> None:
    """Load preferred units from file or Mapping.

    Args:
        filename: Configuration file path
        preferred_units: Mapping of family keys to units or unit aliases
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and preferred_units are provided
    """
    if filename and preferred_units:
        raise ValueError("Can't use preferred_units and config file at same time")
    if not filename and preferred_units:
        PreferredUnits.set(**preferred_units)
    else:
        # trying to load definitions from pymeasure.toml
        _load_config(filename, suppress_warnings)


def _resolve_resource_path(path: str) -> str:
    """Resolve a resource path relative to the package."""
    return str(importlib.resources.files('py_measure').joinpath(path))


def _load_imperial_units() -> None:
    """Load imperial unit preferences."""
    _basic_config(_resolve_resource_path('assets/.pymeasure-imperial.toml'), suppress_warnings=True)


def _load_metric_units() -> None:
    """Load metric unit preferences."""
    _basic_config(_resolve_resource_path('assets/.pymeasure-metric.toml'), suppress_warnings=True)


loadImperialUnits = _load_imperial_units
loadMetricUnits = _load_metric_units

basicConfig = _basic_config

basicConfig()


from .converter import UnitConverter, LinearConverter, ReciprocalConverter, ieee_divide
from .dimensions import (Length, Area, Duration, Angle, Volume, Mass, Pressure, Acceleration,
                         Frequency, Speed, Energy, Power, Temperature, Illuminance,
                         ElectricCharge, ElectricCurrent, ElectricPotentialDifference,
                         ElectricResistance, ConcentrationOfMass, Dispersion, FuelEfficiency,
                         InformationStorage)
from .exceptions import UnitTypeError, UnitConversionError, DimensionMismatchError, UnitAliasError
from .logger import logger, enable_file_logging, disable_file_logging
from .trig import sin, cos, tan, asin, acos, atan, atan2
from .unit import (Number, UnitSpec, base_unit, linear_unit, reciprocal_unit, Measurement,
                   register_quotient, quotient_unit)
from .vector import Vector

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip submodules bound as package attributes by the imports above
    "converter", "dimensions", "exceptions", "trig", "unit", "vector",
    # Skip typing helpers
    "Dict", "Optional", "Union", "log",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
