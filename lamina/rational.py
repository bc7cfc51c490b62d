"""Exact rational numbers kept in lowest terms."""

from __future__ import annotations

import math
from typing import Union

from lamina.bigint import BigInt

IntLike = Union[BigInt, int]


def _to_int(value: object) -> int | None:
    if isinstance(value, BigInt):
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _coerce(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    number = _to_int(value)
    return None if number is None else Rational(number)


class Rational:
    """An immutable fraction with a positive denominator, always reduced."""

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: IntLike = 0, denominator: IntLike = 1) -> None:
        num = _to_int(numerator)
        den = _to_int(denominator)
        if num is None or den is None:
            raise TypeError("Rational parts must be integers")
        if den == 0:
            raise ZeroDivisionError("Denominator cannot be zero")
        if den < 0:
            num, den = -num, -den
        g = math.gcd(num, den)
        if g > 1:
            num //= g
            den //= g
        self._num = num
        self._den = den

    @staticmethod
    def from_float(value: float) -> Rational:
        """Build the fraction a float shows when written with 16 significant digits."""
        if not math.isfinite(value):
            raise ValueError("cannot convert a non-finite float to Rational")
        if value == 0.0:
            return Rational()
        if math.floor(value) == value:
            return Rational(int(value))
        text = f"{value:.15e}"
        mantissa, _, exp_text = text.partition("e")
        negative = mantissa.startswith("-")
        mantissa = mantissa.lstrip("-").replace(".", "").rstrip("0")
        exponent = int(exp_text)
        decimal_places = max(0, len(mantissa) - exponent - 1)
        numerator = int(mantissa)
        if negative:
            numerator = -numerator
        return Rational(numerator, 10**decimal_places)

    @property
    def numerator(self) -> BigInt:
        return BigInt(self._num)

    @property
    def denominator(self) -> BigInt:
        return BigInt(self._den)

    def is_integer(self) -> bool:
        return self._den == 1

    def is_zero(self) -> bool:
        return self._num == 0

    def __str__(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"

    def to_bigint(self) -> BigInt:
        if self._den != 1:
            raise ValueError("Cannot convert non-integer fraction to BigInt")
        return BigInt(self._num)

    def to_float(self) -> float:
        """Approximate value; both parts are first clamped to 32-bit range."""
        return BigInt(self._num).to_int() / BigInt(self._den).to_int()

    # --- arithmetic -----------------------------------------------------

    def __add__(self, other: Rational | IntLike) -> Rational:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den + rhs._num * self._den, self._den * rhs._den)

    __radd__ = __add__

    def __sub__(self, other: Rational | IntLike) -> Rational:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den - rhs._num * self._den, self._den * rhs._den)

    def __rsub__(self, other: IntLike) -> Rational:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Rational | IntLike) -> Rational:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._num, self._den * rhs._den)

    __rmul__ = __mul__

    def __truediv__(self, other: Rational | IntLike) -> Rational:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._num == 0:
            raise ZeroDivisionError("Division by zero")
        return Rational(self._num * rhs._den, self._den * rhs._num)

    def __rtruediv__(self, other: IntLike) -> Rational:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def power(self, exponent: IntLike) -> Rational:
        """Raise to an integer power; negative powers invert the fraction."""
        exp = _to_int(exponent)
        if exp is None:
            raise TypeError("exponent must be an integer")
        if exp < 0:
            if self._num == 0:
                raise ZeroDivisionError("Cannot raise zero to negative power")
            return Rational(self._den ** (-exp), self._num ** (-exp))
        if exp == 0:
            if self._num == 0:
                raise ValueError("0^0 is undefined")
            return Rational(1)
        return Rational(self._num**exp, self._den**exp)

    def __pow__(self, exponent: IntLike) -> Rational:
        return self.power(exponent)

    def reciprocal(self) -> Rational:
        if self._num == 0:
            raise ZeroDivisionError("Cannot take reciprocal of zero")
        return Rational(self._den, self._num)

    def __abs__(self) -> Rational:
        return Rational(abs(self._num), self._den)

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    # --- comparison -----------------------------------------------------

    def _cross(self, other: object) -> tuple[int, int] | None:
        rhs = _coerce(other)
        if rhs is None:
            return None
        return self._num * rhs._den, rhs._num * self._den

    def __eq__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __lt__(self, other: Rational | IntLike) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: Rational | IntLike) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: Rational | IntLike) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: Rational | IntLike) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __hash__(self) -> int:
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))