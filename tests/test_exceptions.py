import pytest

from py_measure.dimensions import Length, Duration, Temperature, Mass
from py_measure.exceptions import UnitTypeError, UnitConversionError, DimensionMismatchError, UnitAliasError


def test_hierarchy():
    assert issubclass(UnitTypeError, TypeError)
    assert issubclass(UnitConversionError, UnitTypeError)
    assert issubclass(DimensionMismatchError, UnitTypeError)
    assert issubclass(UnitAliasError, ValueError)


def test_dimension_mismatch_message_and_attrs():
    err = DimensionMismatchError(Length, Duration, '+')
    assert err.left is Length
    assert err.right is Duration
    assert err.operation == '+'
    assert str(err) == "Can't combine Length with Duration (+)"


def test_dimension_mismatch_without_operation():
    assert str(DimensionMismatchError(Length, Mass)) == "Can't combine Length with Mass"


def test_raised_mismatch_is_catchable_as_type_error():
    with pytest.raises(TypeError):
        Length.Meter(1) + Duration.Second(1)


def test_conversion_error_names_operands():
    with pytest.raises(UnitConversionError, match="Temperature.Celsius"):
        Temperature.Celsius(1) / Duration.Second(1)


def test_alias_error_is_value_error():
    with pytest.raises(ValueError, match="Unsupported Length unit"):
        Length.parse_unit('cubits')
