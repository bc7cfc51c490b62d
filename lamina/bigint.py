"""Arbitrary-precision signed integers with a decimal-digit view."""

from __future__ import annotations

import math
from typing import Union

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DECIMAL = frozenset("0123456789")
_FLOAT_DIGIT_LIMIT = 309

IntLike = Union["BigInt", int]


def _as_bigint(value: object) -> BigInt | None:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt(value)
    return None


def _parse(text: str) -> int:
    if not text or text == "0":
        return 0
    sign = 1
    body = text
    if text[0] == "-":
        sign, body = -1, text[1:]
    elif text[0] == "+":
        body = text[1:]
    digits = "".join(ch for ch in body if ch in _DECIMAL)
    return sign * int(digits or "0")


class BigInt:
    """An immutable signed integer of unbounded size.

    Strings are read leniently: an optional leading sign, then every
    decimal digit is kept and any other character is skipped. Division
    truncates toward zero and the remainder takes the dividend's sign.
    """

    __slots__ = ("_value",)

    def __init__(self, value: BigInt | int | str = 0) -> None:
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, bool):
            raise TypeError("BigInt cannot be built from a bool")
        elif isinstance(value, int):
            self._value = value
        elif isinstance(value, str):
            self._value = _parse(value)
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")

    # --- representation -------------------------------------------------

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt('{self._value}')"

    @property
    def negative(self) -> bool:
        """True when the number is below zero."""
        return self._value < 0

    @property
    def digits(self) -> tuple[int, ...]:
        """Decimal digits of the magnitude, least significant first."""
        return tuple(int(ch) for ch in reversed(str(abs(self._value))))

    def is_zero(self) -> bool:
        return self._value == 0

    def to_int(self) -> int:
        """Return the value clamped to the signed 32-bit range."""
        return max(INT_MIN, min(INT_MAX, self._value))

    def to_float(self) -> float:
        """Approximate as a float, using at most the 309 lowest digits."""
        magnitude = abs(self._value) % (10**_FLOAT_DIGIT_LIMIT)
        try:
            result = float(magnitude)
        except OverflowError:
            result = math.inf
        return -result if self._value < 0 else result

    # --- decimal digit operations --------------------------------------

    def mul_pow10(self, n: int) -> BigInt:
        """Return this number times 10**n."""
        if n <= 0:
            return BigInt(self._value)
        return BigInt(self._value * 10**n)

    def trailing_zeros(self) -> int:
        """Count the zero digits at the low end of the number."""
        if self._value == 0:
            return 0
        text = str(abs(self._value))
        return len(text) - len(text.rstrip("0"))

    def strip_trailing_zeros(self) -> BigInt:
        """Return the number with its low-end zero digits removed."""
        if self._value == 0:
            return BigInt(0)
        return BigInt(self._value // 10 ** self.trailing_zeros())

    def __lshift__(self, n: int) -> BigInt:
        """Drop the n most significant digits (no zero padding)."""
        if n < 0:
            raise ValueError("negative shift count")
        length = len(str(abs(self._value)))
        if n >= length:
            return BigInt(0)
        kept = abs(self._value) % 10 ** (length - n)
        return BigInt(-kept if self._value < 0 else kept)

    def __rshift__(self, n: int) -> BigInt:
        """Drop the n least significant digits."""
        if n < 0:
            raise ValueError("negative shift count")
        length = len(str(abs(self._value)))
        if n >= length:
            return BigInt(0)
        kept = abs(self._value) // 10**n
        return BigInt(-kept if self._value < 0 else kept)

    # --- arithmetic -----------------------------------------------------

    def __add__(self, other: IntLike) -> BigInt:
        rhs = _as_bigint(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value + rhs._value)

    def __sub__(self, other: IntLike) -> BigInt:
        rhs = _as_bigint(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value - rhs._value)

    def __mul__(self, other: IntLike) -> BigInt:
        rhs = _as_bigint(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value * rhs._value)

    def __floordiv__(self, other: IntLike) -> BigInt:
        """Integer division truncating toward zero."""
        rhs = _as_bigint(other)
        if rhs is None:
            return NotImplemented
        if rhs._value == 0:
            raise ZeroDivisionError("Division by zero")
        quotient = abs(self._value) // abs(rhs._value)
        if (self._value < 0) != (rhs._value < 0):
            quotient = -quotient
        return BigInt(quotient)

    def __mod__(self, other: IntLike) -> BigInt:
        """Remainder of truncating division; carries the dividend's sign."""
        rhs = _as_bigint(other)
        if rhs is None:
            return NotImplemented
        if rhs._value == 0:
            raise ZeroDivisionError("Modulo by zero")
        quotient = self // rhs
        return self - quotient * rhs

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __abs__(self) -> BigInt:
        return BigInt(abs(self._value))

    def power(self, exponent: IntLike) -> BigInt:
        """Raise to a non-negative integer power; 0**0 is 1."""
        exp = _as_bigint(exponent)
        if exp is None:
            raise TypeError("exponent must be an integer")
        if exp._value < 0:
            raise ValueError("Negative exponent not supported for integer power")
        return BigInt(self._value**exp._value)

    def __pow__(self, exponent: IntLike) -> BigInt:
        return self.power(exponent)

    def __xor__(self, exponent: IntLike) -> BigInt:
        return self.power(exponent)

    def sqrt(self) -> BigInt:
        """Floor of the square root."""
        if self._value < 0:
            raise ValueError("Square root of negative BigInt is undefined")
        return BigInt(math.isqrt(self._value))

    def is_perfect_square(self) -> bool:
        if self._value < 0:
            return False
        root = math.isqrt(self._value)
        return root * root == self._value

    # --- comparison -----------------------------------------------------

    def _cmp_value(self, other: object) -> int | None:
        rhs = _as_bigint(other)
        return None if rhs is None else rhs._value

    def __eq__(self, other: object) -> bool:
        rhs = self._cmp_value(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs

    def __lt__(self, other: IntLike) -> bool:
        rhs = self._cmp_value(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs

    def __le__(self, other: IntLike) -> bool:
        rhs = self._cmp_value(other)
        if rhs is None:
            return NotImplemented
        return self._value <= rhs

    def __gt__(self, other: IntLike) -> bool:
        rhs = self._cmp_value(other)
        if rhs is None:
            return NotImplemented
        return self._value > rhs

    def __ge__(self, other: IntLike) -> bool:
        rhs = self._cmp_value(other)
        if rhs is None:
            return NotImplemented
        return self._value >= rhs

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    # --- static helpers -------------------------------------------------

    @staticmethod
    def abs_compare(a: BigInt, b: BigInt) -> int:
        """Compare magnitudes: -1, 0 or 1."""
        x, y = abs(a._value), abs(b._value)
        return (x > y) - (x < y)

    @staticmethod
    def factorial(n: IntLike) -> BigInt:
        value = BigInt(n)._value
        if value < 0:
            raise ValueError("Factorial of negative number is undefined")
        return BigInt(math.factorial(value))

    @staticmethod
    def gcd(a: IntLike, b: IntLike) -> BigInt:
        return BigInt(math.gcd(BigInt(a)._value, BigInt(b)._value))

    @staticmethod
    def lcm(a: IntLike, b: IntLike) -> BigInt:
        x, y = BigInt(a)._value, BigInt(b)._value
        if x == 0 or y == 0:
            return BigInt(0)
        return BigInt(abs(x) // math.gcd(x, y) * abs(y))