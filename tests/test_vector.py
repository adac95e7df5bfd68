import math

import pytest

from py_measure import Vector
from py_measure.dimensions import Angle


class TestVector:

    def test_magnitude(self):
        assert Vector(3, 4).magnitude() == 5
        assert Vector(0, 0).magnitude() == 0

    def test_mul_by_constant(self):
        assert Vector(-1, -2).mul_by_const(2) == Vector(-2, -4)

    def test_mul_by_vector(self):
        assert Vector(-1, -2).mul_by_vector(Vector(4, 5)) == -14

    def test_add(self):
        assert Vector(-1, -2).add(Vector(4, 6)) == Vector(3, 4)

    def test_subtract(self):
        assert Vector(-1, -2).subtract(Vector(4, 5)) == Vector(-5, -7)

    def test_negate(self):
        assert Vector(-1, -2).negate() == Vector(1, 2)

    def test_normalize(self):
        normalized = Vector(3, 4).normalize()
        assert normalized.magnitude() == pytest.approx(1)
        assert normalized == (pytest.approx(0.6), pytest.approx(0.8))

    def test_normalize_zero(self):
        assert Vector(0, 0).normalize() == Vector(0, 0)

    def test_operators(self):
        v = Vector(1, 2)
        assert v + Vector(1, 1) == Vector(2, 3)
        assert v - Vector(1, 1) == Vector(0, 1)
        assert v * 2 == Vector(2, 4)
        assert 2 * v == Vector(2, 4)
        assert v * Vector(3, 4) == 11
        assert v / 2 == Vector(0.5, 1)
        assert -v == Vector(-1, -2)

    def test_division_by_zero(self):
        v = Vector(1, -1) / 0
        assert v.dx == math.inf
        assert v.dy == -math.inf

    def test_unsupported_operands(self):
        with pytest.raises(TypeError):
            Vector(1, 2) * 'x'  # type: ignore[operator]
        with pytest.raises(TypeError):
            Vector(1, 2) / Vector(1, 2)  # type: ignore[operator]


class TestVectorAngle:

    def test_diagonal(self):
        angle = Vector(5, 5).angle
        assert angle.unit == Angle.Radian
        assert angle >> Angle.Radian == pytest.approx(Angle.convert(45, Angle.Degree, Angle.Radian))
        assert angle >> Angle.Degree == pytest.approx(45)

    @pytest.mark.parametrize(
        "dx, dy, degrees",
        [(1, 0, 0), (0, 1, 90), (-1, 0, 180), (0, -1, -90), (-1, -1, -135)],
    )
    def test_quadrants(self, dx, dy, degrees):
        assert Vector(dx, dy).angle >> Angle.Degree == pytest.approx(degrees)

    def test_from_polar(self):
        v = Vector.from_polar(2.0, Angle.Degree(30))
        assert v.dx == pytest.approx(math.sqrt(3))
        assert v.dy == pytest.approx(1)
        assert v.magnitude() == pytest.approx(2)
        assert v.angle >> Angle.Degree == pytest.approx(30)

    def test_from_polar_in_any_angle_unit(self):
        v = Vector.from_polar(1.0, Angle.Revolution(0.5))
        assert v == (pytest.approx(-1), pytest.approx(0, abs=1e-12))
