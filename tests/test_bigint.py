import math

import pytest

from lamina.bigint import BigInt

LARGE = "9" * 150 + "123456789" * 20
VALUES = [0, 1, -1, 7, -13, 2147483647, -2147483648, 10**40 + 3, -(10**35) - 17, int(LARGE)]


@pytest.mark.parametrize("n", VALUES)
def test_int_round_trip(n):
    assert str(BigInt(n)) == str(n)
    assert BigInt(str(n)) == BigInt(n)


def test_string_parsing_skips_non_digits():
    assert BigInt("12a3") == BigInt("123")
    assert BigInt("+45") == BigInt(45)


def test_empty_and_negative_zero_strings():
    assert BigInt("").is_zero()
    zero = BigInt("-0")
    assert zero.is_zero()
    assert not zero.negative


def test_digits_low_first():
    assert BigInt(120).digits == (0, 2, 1)
    assert BigInt(-5).negative


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", [3, -8, 10**130 + 7, -(10**140) - 1])
def test_add_sub_mul_match_int(a, b):
    x, y = BigInt(a), BigInt(b)
    assert x + y == BigInt(a + b)
    assert x - y == BigInt(a - b)
    assert x * y == BigInt(a * b)


@pytest.mark.parametrize("a", [7, -7, 100, -1000003, int(LARGE)])
@pytest.mark.parametrize("b", [2, -2, 3, -97])
def test_division_truncates_and_remainder_invariant(a, b):
    x, y = BigInt(a), BigInt(b)
    q, r = x // y, x % y
    assert q * y + r == x
    assert BigInt.abs_compare(r, y) < 0
    assert r.is_zero() or r.negative == x.negative
    assert abs(q) == BigInt(abs(a) // abs(b))


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigInt(5) // BigInt(0)
    with pytest.raises(ZeroDivisionError):
        BigInt(5) % BigInt(0)


@pytest.mark.parametrize("base,exp", [(2, 100), (-3, 7), (0, 0), (10, 0), (7, 1)])
def test_power_matches_int(base, exp):
    assert BigInt(base).power(BigInt(exp)) == BigInt(base**exp)
    assert BigInt(base) ** exp == BigInt(base) ^ BigInt(exp)


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        BigInt(2).power(BigInt(-1))


def test_shifts():
    x = BigInt(12345)
    assert x << 2 == BigInt(345)
    assert x << 5 == BigInt(0)
    assert x >> 9 == BigInt(0)


@pytest.mark.parametrize("n", [1, 3, 10, 100])
def test_shift_split_reassembles(n):
    x = BigInt(LARGE)
    length = len(x.digits)
    assert (x >> n).mul_pow10(n) + (x << (length - n)) == x


def test_trailing_zero_helpers():
    x = BigInt(-4200)
    assert x.trailing_zeros() == 2
    stripped = x.strip_trailing_zeros()
    assert stripped.mul_pow10(x.trailing_zeros()) == x
    assert stripped.trailing_zeros() == 0
    assert BigInt(0).trailing_zeros() == 0


def test_to_int_clamps():
    assert BigInt(10**20).to_int() == 2147483647
    assert BigInt(-(10**20)).to_int() == -2147483648
    assert BigInt(-12345).to_int() == -12345


def test_to_float():
    assert BigInt(-12345).to_float() == -12345.0
    assert BigInt(10**20).to_float() == pytest.approx(1e20)


@pytest.mark.parametrize("n", [0, 1, 2, 15, 16, 17, 10**30 + 1, int(LARGE)])
def test_sqrt_is_floor(n):
    r = BigInt(n).sqrt()
    assert r * r <= BigInt(n) < (r + 1) * (r + 1)
    assert BigInt(n).is_perfect_square() == (r * r == BigInt(n))


def test_sqrt_negative_rejected():
    with pytest.raises(ValueError):
        BigInt(-4).sqrt()
    assert not BigInt(-4).is_perfect_square()


@pytest.mark.parametrize("n", [0, 1, 5, 30])
def test_factorial(n):
    assert BigInt.factorial(BigInt(n)) == BigInt(math.factorial(n))


def test_factorial_negative():
    with pytest.raises(ValueError):
        BigInt.factorial(BigInt(-1))


@pytest.mark.parametrize("a,b", [(12, 18), (-12, 18), (0, 9), (10**25, 10**20 * 6)])
def test_gcd_lcm(a, b):
    g = BigInt.gcd(BigInt(a), BigInt(b))
    assert g == BigInt(math.gcd(a, b))
    lcm = BigInt.lcm(BigInt(a), BigInt(b))
    if a == 0 or b == 0:
        assert lcm.is_zero()
    else:
        assert lcm * g == abs(BigInt(a) * BigInt(b))


def test_ordering_matches_int():
    shuffled = [BigInt(v) for v in reversed(VALUES)]
    assert [int(v) for v in sorted(shuffled)] == sorted(VALUES)
    assert BigInt(-5) < BigInt(3) <= BigInt(3) < BigInt(4)
    assert BigInt(-2) > BigInt(-9) >= BigInt(-9)


def test_hash_and_equality():
    assert hash(BigInt("007")) == hash(BigInt(7))
    assert len({BigInt(7), BigInt("7"), BigInt(-7)}) == 2


def test_neg_abs():
    assert -BigInt(0) == BigInt(0)
    assert not (-BigInt(0)).negative
    assert abs(BigInt(-9)) == BigInt(9)
    assert BigInt.abs_compare(BigInt(-9), BigInt(9)) == 0