import math

import pytest

from py_measure.converter import ieee_divide, UnitConverter, LinearConverter, ReciprocalConverter


class TestIEEEDivide:

    @pytest.mark.parametrize(
        "numerator, denominator, expected",
        [
            (1.0, 0.0, math.inf),
            (-1.0, 0.0, -math.inf),
            (1.0, -0.0, -math.inf),
            (-2.5, -0.0, math.inf),
            (6.0, 3.0, 2.0),
        ],
    )
    def test_division(self, numerator, denominator, expected):
        assert ieee_divide(numerator, denominator) == expected

    @pytest.mark.parametrize("numerator", [0.0, -0.0, math.nan])
    def test_nan(self, numerator):
        assert math.isnan(ieee_divide(numerator, 0.0))


class TestLinearConverter:

    def test_to_base(self):
        assert LinearConverter(0.01).to_base(250) == pytest.approx(2.5)
        assert LinearConverter(1.0, 273.15).to_base(0) == 273.15

    def test_from_base(self):
        assert LinearConverter(0.01).from_base(2.5) == pytest.approx(250)
        assert LinearConverter(1.0, 273.15).from_base(273.15) == 0.0

    @pytest.mark.parametrize(
        "converter",
        [LinearConverter(1e-12), LinearConverter(1609.344), LinearConverter(5 / 9, 459.67 * 5 / 9)],
        ids=repr,
    )
    @pytest.mark.parametrize("value", [-40.0, 0.0, 1.0, 123.456, 1e9])
    def test_round_trip(self, converter, value):
        assert converter.from_base(converter.to_base(value)) == pytest.approx(value, rel=1e-9, abs=1e-9)

    def test_identity(self):
        assert LinearConverter(1.0).is_identity()
        assert not LinearConverter(1.0, 1.0).is_identity()
        assert not LinearConverter(2.0).is_identity()

    def test_zero_coefficient_is_not_an_error(self):
        converter = LinearConverter(0.0, 3.0)
        assert converter.to_base(100) == 3.0
        assert converter.from_base(4.0) == math.inf
        assert math.isnan(converter.from_base(3.0))

    def test_nan_and_inf_propagate(self):
        converter = LinearConverter(0.3048)
        assert math.isnan(converter.to_base(math.nan))
        assert converter.to_base(math.inf) == math.inf
        assert converter.from_base(-math.inf) == -math.inf

    def test_equality(self):
        assert LinearConverter(2) == LinearConverter(2.0, 0.0)
        assert LinearConverter(2) != LinearConverter(2, 1)
        assert LinearConverter(1) != ReciprocalConverter(1)
        assert hash(LinearConverter(2)) == hash(LinearConverter(2.0))

    def test_repr(self):
        assert repr(LinearConverter(0.5)) == 'LinearConverter(coefficient=0.5, constant=0.0)'


class TestReciprocalConverter:

    def test_both_directions_use_the_same_formula(self):
        converter = ReciprocalConverter(235.214583)
        assert converter.to_base(10) == pytest.approx(23.5214583)
        assert converter.from_base(10) == pytest.approx(23.5214583)

    @pytest.mark.parametrize("value", [0.5, 1.0, 23.5, 1e6])
    def test_round_trip(self, value):
        converter = ReciprocalConverter(282.480936)
        assert converter.from_base(converter.to_base(value)) == pytest.approx(value)

    def test_zero_reciprocal_is_identity(self):
        converter = ReciprocalConverter(0)
        assert converter.is_identity()
        assert converter.to_base(7.5) == 7.5
        assert converter.from_base(7.5) == 7.5
        assert converter.to_base(0.0) == 0.0

    def test_zero_value_gives_infinity(self):
        converter = ReciprocalConverter(235.214583)
        assert converter.to_base(0.0) == math.inf
        assert converter.to_base(-0.0) == -math.inf

    def test_equality(self):
        assert ReciprocalConverter(3) == ReciprocalConverter(3.0)
        assert ReciprocalConverter(3) != ReciprocalConverter(4)
        assert not ReciprocalConverter(3).is_identity()


class TestUnitConverter:

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            UnitConverter()

    def test_subclass_must_implement_conversions(self):
        class ToBaseOnly(UnitConverter):
            def to_base(self, value):
                return value

        with pytest.raises(TypeError, match="from_base"):
            ToBaseOnly()

    def test_complete_subclass(self):
        class Doubling(UnitConverter):
            def to_base(self, value):
                return value * 2

            def from_base(self, value):
                return value / 2

            def to_dict(self):
                return {'type': 'doubling'}

        converter = Doubling()
        assert converter.from_base(converter.to_base(3.5)) == 3.5
        assert not converter.is_identity()


class TestConverterDict:

    @pytest.mark.parametrize(
        "converter",
        [LinearConverter(0.3048), LinearConverter(1.0, 273.15), ReciprocalConverter(235.214583)],
        ids=repr,
    )
    def test_round_trip(self, converter):
        assert UnitConverter.from_dict(converter.to_dict()) == converter

    def test_linear_constant_defaults_to_zero(self):
        assert UnitConverter.from_dict({'type': 'linear', 'coefficient': 2}) == LinearConverter(2)

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown converter type"):
            UnitConverter.from_dict({'type': 'logarithmic'})
