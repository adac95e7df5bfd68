import math

import pytest

from py_measure import trig
from py_measure.dimensions import Angle, Length
from py_measure.exceptions import UnitTypeError, DimensionMismatchError


class TestTrig:

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (Angle.Degree(90), 1.0),
            (Angle.Degree(30), 0.5),
            (Angle.Radian(math.pi / 6), 0.5),
            (Angle.Revolution(0.75), -1.0),
            (Angle.Gradian(100), 1.0),
            (Angle.ArcMinute(90 * 60), 1.0),
        ],
        ids=repr,
    )
    def test_sin(self, angle, expected):
        assert trig.sin(angle) == pytest.approx(expected)

    def test_cos(self):
        assert trig.cos(Angle.Degree(60)) == pytest.approx(0.5)
        assert trig.cos(Angle.Degree(180)) == pytest.approx(-1)

    def test_tan(self):
        assert trig.tan(Angle.Degree(45)) == pytest.approx(1)

    def test_inverse_functions_return_radians(self):
        for angle in (trig.asin(1), trig.acos(0), trig.atan(1), trig.atan2(1, 0)):
            assert angle.unit == Angle.Radian
        assert trig.asin(1) >> Angle.Degree == pytest.approx(90)
        assert trig.acos(0.5) >> Angle.Degree == pytest.approx(60)
        assert trig.atan(1) >> Angle.Degree == pytest.approx(45)
        assert trig.atan2(-1, -1) >> Angle.Degree == pytest.approx(-135)

    def test_asin_out_of_domain(self):
        with pytest.raises(ValueError):
            trig.asin(2)

    def test_round_trip(self):
        angle = Angle.Degree(37)
        assert trig.asin(trig.sin(angle)) >> Angle.Degree == pytest.approx(37)

    def test_rejects_other_dimensions(self):
        with pytest.raises(DimensionMismatchError):
            trig.sin(Length.Meter(1))

    def test_rejects_plain_numbers(self):
        with pytest.raises(UnitTypeError):
            trig.cos(0.5)  # type: ignore[arg-type]
