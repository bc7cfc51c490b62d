import pytest

from lamina.bigint import BigInt
from lamina.rational import Rational


def test_reduces_to_lowest_terms():
    r = Rational(6, 8)
    assert r.numerator == BigInt(3)
    assert r.denominator == BigInt(4)


def test_negative_denominator_moves_sign():
    r = Rational(3, -9)
    assert r.denominator > BigInt(0)
    assert r == Rational(-1, 3)


def test_string_forms():
    assert str(Rational(2, 4)) == "1/2"
    assert str(Rational(10, 5)) == "2"


def test_zero_denominator_raises():
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)


def test_accepts_bigint_parts():
    assert Rational(BigInt(4), BigInt(2)) == Rational(2)


@pytest.mark.parametrize("a,b", [((1, 3), (2, 5)), ((-7, 4), (3, 8)), ((5, 1), (-2, 9))])
def test_add_sub_round_trip(a, b):
    x, y = Rational(*a), Rational(*b)
    assert (x + y) - y == x
    assert x - y == -(y - x)


@pytest.mark.parametrize("a,b", [((1, 3), (2, 5)), ((-7, 4), (3, 8))])
def test_mul_div_round_trip(a, b):
    x, y = Rational(*a), Rational(*b)
    assert (x * y) / y == x
    assert x / y == x * y.reciprocal()


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Rational(1, 2) / Rational(0)


def test_mixed_int_arithmetic():
    half = Rational(1, 2)
    assert half + 1 == Rational(3, 2)
    assert 1 - half == half
    assert 2 * half == 1


def test_power_positive_and_negative():
    r = Rational(2, 3)
    assert r.power(2) == Rational(4, 9)
    assert r.power(-2) == Rational(9, 4)
    assert r.power(BigInt(3)) * r.power(-3) == Rational(1)


def test_power_negative_base_negative_exponent_keeps_positive_denominator():
    r = Rational(-2, 3).power(-1)
    assert r.denominator > BigInt(0)
    assert r == Rational(3, -2)


def test_power_errors():
    with pytest.raises(ValueError):
        Rational(0).power(0)
    with pytest.raises(ZeroDivisionError):
        Rational(0).power(-1)


def test_nonzero_to_zero_power_is_one():
    assert Rational(5, 7).power(0) == Rational(1)


def test_reciprocal_of_zero():
    with pytest.raises(ZeroDivisionError):
        Rational(0).reciprocal()


def test_reciprocal_twice_is_identity():
    r = Rational(-5, 11)
    assert r.reciprocal().reciprocal() == r


def test_abs_and_neg():
    r = Rational(-3, 7)
    assert abs(r) == -r
    assert -(-r) == r


def test_ordering():
    small, big = Rational(1, 3), Rational(1, 2)
    assert small < big
    assert small <= big
    assert big > small
    assert big >= small
    assert not big < small


def test_to_bigint():
    assert Rational(8, 2).to_bigint() == BigInt(4)
    with pytest.raises(ValueError):
        Rational(1, 2).to_bigint()


def test_is_integer_and_zero():
    assert Rational(4, 2).is_integer()
    assert not Rational(1, 2).is_integer()
    assert Rational(0, 5).is_zero()


def test_to_float():
    assert Rational(1, 4).to_float() == 0.25


def test_from_float_round_trips():
    assert Rational.from_float(0.5) == Rational(1, 2)
    assert Rational.from_float(-0.125) == Rational(-1, 8)
    assert Rational.from_float(0.0) == Rational(0)
    assert Rational.from_float(3.0) == Rational(3)


def test_from_float_rejects_nan():
    with pytest.raises(ValueError):
        Rational.from_float(float("nan"))


def test_hash_consistent_with_equality():
    assert hash(Rational(2, 4)) == hash(Rational(1, 2))
    assert hash(Rational(6, 3)) == hash(2)
    assert len({Rational(1, 2), Rational(3, 6)}) == 1


def test_sorting_rationals():
    values = [Rational(1, 2), Rational(-1, 3), Rational(1, 5)]
    assert sorted(values) == [Rational(-1, 3), Rational(1, 5), Rational(1, 2)]