"""Exact symbolic expressions built from numbers, roots, sums and powers."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Union

from lamina.bigint import INT_MAX, INT_MIN, BigInt
from lamina.rational import Rational

NumberValue = Union[int, BigInt, Rational]


class ExprType(enum.Enum):
    NUMBER = "number"
    SQRT = "sqrt"
    ROOT = "root"
    POWER = "power"
    MULTIPLY = "multiply"
    ADD = "add"
    SUBTRACT = "subtract"
    DIVIDE = "divide"
    VARIABLE = "variable"


_PI_NAMES = frozenset({"π", "pi"})


@dataclass(eq=False)
class SymbolicExpr:
    """A node of a symbolic expression tree; no numeric approximation is made."""

    type: ExprType
    number_value: NumberValue = 0
    operands: list[SymbolicExpr] = field(default_factory=list)
    identifier: str = ""

    # --- constructors ---------------------------------------------------

    @staticmethod
    def number(value: NumberValue) -> SymbolicExpr:
        if isinstance(value, bool):
            raise TypeError("a bool is not a number")
        if isinstance(value, int):
            if not INT_MIN <= value <= INT_MAX:
                value = BigInt(value)
        elif not isinstance(value, (BigInt, Rational)):
            raise TypeError(f"unsupported number type {type(value).__name__}")
        return SymbolicExpr(ExprType.NUMBER, number_value=value)

    @staticmethod
    def sqrt(operand: SymbolicExpr) -> SymbolicExpr:
        return SymbolicExpr(ExprType.SQRT, operands=[operand])

    @staticmethod
    def multiply(left: SymbolicExpr, right: SymbolicExpr) -> SymbolicExpr:
        """Build a product; a numeric right factor is moved to the front."""
        if right.is_number():
            return SymbolicExpr(ExprType.MULTIPLY, operands=[right, left])
        return SymbolicExpr(ExprType.MULTIPLY, operands=[left, right])

    @staticmethod
    def add(left: SymbolicExpr, right: SymbolicExpr) -> SymbolicExpr:
        return SymbolicExpr(ExprType.ADD, operands=[left, right])

    @staticmethod
    def power(base: SymbolicExpr, exponent: SymbolicExpr) -> SymbolicExpr:
        return SymbolicExpr(ExprType.POWER, operands=[base, exponent])

    @staticmethod
    def variable(name: str) -> SymbolicExpr:
        return SymbolicExpr(ExprType.VARIABLE, identifier=name)

    def simplify(self) -> SymbolicExpr:
        """Return a simplified copy of this expression."""
        from lamina.simplify import simplify as _simplify

        return _simplify(self)

    # --- rendering ------------------------------------------------------

    def __str__(self) -> str:
        kind = self.type
        if kind is ExprType.NUMBER:
            return str(self.number_value)
        if kind is ExprType.VARIABLE:
            return self.identifier
        if kind is ExprType.SQRT:
            if not self.operands:
                return "√()"
            return "√" + str(self.operands[0])
        if kind is ExprType.MULTIPLY:
            if len(self.operands) < 2:
                return "*(?)"
            left, right = self.operands[0], self.operands[1]
            if left.is_number() and right.type is ExprType.SQRT:
                return f"{left}{right}"
            return f"{left}*{right}"
        if kind is ExprType.ADD:
            if len(self.operands) < 2:
                return "+(?)"
            return "+".join(str(term) for term in self._add_terms())
        if kind is ExprType.POWER:
            if len(self.operands) < 2:
                return "^(?)"
            return f"{self.operands[0]}^{self.operands[1]}"
        return "Unknown"

    def _add_terms(self) -> list[SymbolicExpr]:
        if self.type is ExprType.ADD and len(self.operands) == 2:
            return self.operands[0]._add_terms() + self.operands[1]._add_terms()
        return [self]

    # --- number access --------------------------------------------------

    def is_number(self) -> bool:
        return self.type is ExprType.NUMBER

    def is_big_int(self) -> bool:
        return self.is_number() and isinstance(self.number_value, BigInt)

    def is_rational(self) -> bool:
        return self.is_number() and isinstance(self.number_value, Rational)

    def is_int(self) -> bool:
        return (
            self.is_number()
            and isinstance(self.number_value, int)
            and not isinstance(self.number_value, bool)
        )

    def get_number(self) -> NumberValue:
        if not self.is_number():
            raise ValueError("Expression is not a number")
        return self.number_value

    def get_int(self) -> int:
        if not self.is_int():
            raise ValueError("Expression is not a int")
        return self.number_value

    def get_big_int(self) -> BigInt:
        if not self.is_big_int():
            raise ValueError("Expression is not a BigInt")
        return self.number_value

    def get_rational(self) -> Rational:
        if not self.is_rational():
            raise ValueError("Expression is not a Rational")
        return self.number_value

    def convert_rational(self) -> Rational:
        if not self.is_number():
            raise ValueError("Expression cannot be converted into Rational")
        if self.is_rational():
            return self.number_value
        return Rational(self.number_value)

    # --- approximation --------------------------------------------------

    def to_float(self) -> float:
        """Approximate the expression numerically; π and pi are known."""
        kind = self.type
        if kind is ExprType.NUMBER:
            value = self.number_value
            if isinstance(value, (BigInt, Rational)):
                return value.to_float()
            return float(value)
        if kind is ExprType.VARIABLE:
            if self.identifier in _PI_NAMES:
                return math.pi
            raise ValueError("Symbolic variable cannot be converted to double")
        if kind is ExprType.SQRT:
            if not self.operands:
                return 0.0
            inner = self.operands[0].to_float()
            return math.sqrt(inner) if inner >= 0 else math.nan
        if kind is ExprType.MULTIPLY:
            if len(self.operands) < 2:
                return 0.0
            return self.operands[0].to_float() * self.operands[1].to_float()
        if kind is ExprType.ADD:
            if len(self.operands) < 2:
                return 0.0
            return self.operands[0].to_float() + self.operands[1].to_float()
        if kind is ExprType.POWER:
            if len(self.operands) < 2:
                return 0.0
            base = self.operands[0].to_float()
            exponent = self.operands[1].to_float()
            try:
                return math.pow(base, exponent)
            except OverflowError:
                return math.inf
            except ValueError:
                return math.nan
        return 0.0