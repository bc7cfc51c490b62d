"""Rewrite rules that simplify symbolic expressions without approximating them."""

from __future__ import annotations

from typing import Callable

from lamina.bigint import INT_MAX, INT_MIN
from lamina.rational import Rational
from lamina.symbolic import ExprType, SymbolicExpr

_PI_NAMES = frozenset({"π", "pi"})


def _copy(expr: SymbolicExpr) -> SymbolicExpr:
    """Shallow copy: a new node that shares the operand nodes."""
    return SymbolicExpr(expr.type, expr.number_value, list(expr.operands), expr.identifier)


def simplify(expr: SymbolicExpr) -> SymbolicExpr:
    """Return a simplified version of ``expr``; the input is left untouched."""
    handler = _HANDLERS.get(expr.type)
    if handler is None:
        return _copy(expr)
    return handler(expr)


# --- square roots ---------------------------------------------------------


def _extract_square_factor(n: int) -> tuple[int, int]:
    """Split n into factor**2 * remaining with remaining square-free."""
    factor, remaining = 1, n
    i = 2
    while i * i <= remaining:
        while remaining % (i * i) == 0:
            factor *= i
            remaining //= i * i
        i += 1
    return factor, remaining


def _product_variable(expr: SymbolicExpr) -> str:
    if expr.type is ExprType.VARIABLE:
        return expr.identifier
    if expr.type is ExprType.MULTIPLY and len(expr.operands) == 2:
        if expr.operands[1].type is ExprType.VARIABLE:
            return expr.operands[1].identifier
    return ""


def _leading_coefficient(expr: SymbolicExpr) -> SymbolicExpr:
    if expr.type is ExprType.MULTIPLY and expr.operands[0].is_number():
        return expr.operands[0]
    return SymbolicExpr.number(1)


def simplify_sqrt(expr: SymbolicExpr) -> SymbolicExpr:
    """Simplify a square-root node."""
    if not expr.operands:
        return _copy(expr)

    operand = simplify(expr.operands[0])

    if operand.is_number():
        value = operand.convert_rational()
        if value.is_integer():
            n = value.numerator
            operand = SymbolicExpr.number(n)
            if n.negative:
                raise ValueError("Square root of negative number")
            if n.is_zero() or n == 1:
                return SymbolicExpr.number(n)
            if n.is_perfect_square():
                return SymbolicExpr.number(n.sqrt())
            plain = int(n)
            if INT_MIN <= plain <= INT_MAX:
                factor, remaining = _extract_square_factor(plain)
                if factor > 1:
                    if remaining == 1:
                        return SymbolicExpr.number(factor)
                    return SymbolicExpr.multiply(
                        SymbolicExpr.number(factor),
                        SymbolicExpr.sqrt(SymbolicExpr.number(remaining)),
                    )

    if operand.type is ExprType.MULTIPLY and len(operand.operands) == 2:
        a, b = operand.operands
        if (
            a.type is ExprType.VARIABLE
            and b.type is ExprType.VARIABLE
            and a.identifier == b.identifier
        ):
            return a
        if str(a) == str(b):
            return a
        var_a = _product_variable(a)
        var_b = _product_variable(b)
        if var_a and var_a == var_b:
            coeff = simplify(
                SymbolicExpr.multiply(_leading_coefficient(a), _leading_coefficient(b))
            )
            if coeff.is_number():
                root = simplify(SymbolicExpr.sqrt(coeff))
                if root.is_number() and str(root) == "1":
                    return SymbolicExpr.variable(var_a)
                return SymbolicExpr.multiply(root, SymbolicExpr.variable(var_a))
            squared = SymbolicExpr.power(SymbolicExpr.variable(var_a), SymbolicExpr.number(2))
            return simplify(SymbolicExpr.sqrt(squared))

    if operand.type is ExprType.POWER and len(operand.operands) == 2:
        base, exponent = operand.operands
        if exponent.is_number():
            is_two = False
            if exponent.is_int():
                is_two = exponent.get_int() == 2
            elif exponent.is_rational():
                ratio = exponent.get_rational()
                is_two = ratio.is_integer() and ratio.numerator == 2
            if is_two:
                return base

    return SymbolicExpr.sqrt(operand)


# --- products -------------------------------------------------------------


def _is_power_compatible(expr: SymbolicExpr) -> bool:
    return expr.type in (ExprType.NUMBER, ExprType.SQRT, ExprType.POWER)


def _as_power(expr: SymbolicExpr) -> SymbolicExpr:
    if expr.type is ExprType.NUMBER:
        return SymbolicExpr.power(expr, SymbolicExpr.number(1))
    if expr.type is ExprType.SQRT:
        return SymbolicExpr.power(expr, SymbolicExpr.number(Rational(1, 2)))
    return expr


def _is_compounded_sqrt(expr: SymbolicExpr) -> bool:
    return (
        expr.type is ExprType.MULTIPLY
        and len(expr.operands) >= 2
        and expr.operands[0].type is ExprType.NUMBER
        and expr.operands[1].type is ExprType.SQRT
    )


def _radicand_part(expr: SymbolicExpr) -> SymbolicExpr:
    if expr.type is ExprType.NUMBER:
        return simplify(SymbolicExpr.multiply(expr, expr))
    return expr.operands[0]


def _merge_compound(res: SymbolicExpr) -> None:
    inner = res.operands[1]
    if _is_compounded_sqrt(inner):
        res.operands[0] = simplify(SymbolicExpr.multiply(res.operands[0], inner.operands[0]))
        res.operands[1] = inner.operands[1]


def simplify_multiply(expr: SymbolicExpr) -> SymbolicExpr:
    """Simplify a two-factor product."""
    if len(expr.operands) != 2:
        return _copy(expr)

    left = simplify(expr.operands[0])
    right = simplify(expr.operands[1])

    if left.is_number() and right.is_number():
        if left.is_int() and right.is_int():
            return SymbolicExpr.number(left.get_int() * right.get_int())
        return SymbolicExpr.number(left.convert_rational() * right.convert_rational())

    if left.type is ExprType.ADD or right.type is ExprType.ADD:
        result = SymbolicExpr.number(0)
        if left.type is ExprType.ADD and right.type is ExprType.ADD:
            for i in left.operands:
                for j in right.operands:
                    term = simplify(SymbolicExpr.multiply(i, j))
                    result = simplify(SymbolicExpr.add(result, term))
        else:
            if left.type is not ExprType.ADD:
                left, right = right, left
            for i in left.operands:
                term = simplify(SymbolicExpr.multiply(i, right))
                result = simplify(SymbolicExpr.add(result, term))
        return result

    if (left.type is ExprType.POWER or right.type is ExprType.POWER) and (
        _is_power_compatible(left) and _is_power_compatible(right)
    ):
        if left.type is not ExprType.POWER:
            left, right = right, left
        rcom = _as_power(right)
        lcr = left.operands[1].convert_rational()
        rcr = rcom.operands[1].convert_rational()
        if lcr.denominator == rcr.denominator:
            if lcr == rcr:
                return SymbolicExpr.power(
                    SymbolicExpr.multiply(left.operands[0], rcom.operands[0]),
                    SymbolicExpr.number(lcr),
                )
            return simplify(
                SymbolicExpr.power(
                    SymbolicExpr.multiply(
                        SymbolicExpr.power(left.operands[0], SymbolicExpr.number(lcr.numerator)),
                        SymbolicExpr.power(rcom.operands[0], SymbolicExpr.number(rcr.numerator)),
                    ),
                    SymbolicExpr.number(lcr.denominator),
                )
            )
        if left.operands[0] is rcom.operands[0]:
            return simplify(
                SymbolicExpr.power(
                    left.operands[0], SymbolicExpr.add(left.operands[1], rcom.operands[1])
                )
            )

    if (
        left.type is ExprType.SQRT
        or _is_compounded_sqrt(left)
        or right.type is ExprType.SQRT
        or _is_compounded_sqrt(right)
    ):
        if not _is_compounded_sqrt(left) and not _is_compounded_sqrt(right):
            if right.type is ExprType.SQRT:
                left, right = right, left
            if right.is_number() or right.operands:
                product = SymbolicExpr.multiply(_radicand_part(left), _radicand_part(right))
                return simplify(SymbolicExpr.sqrt(product))
        else:
            if not _is_compounded_sqrt(left):
                left, right = right, left
            res = _copy(left)
            if right.type is ExprType.NUMBER:
                res.operands[0] = simplify(SymbolicExpr.multiply(res.operands[0], right))
                return res
            if right.type is ExprType.SQRT:
                res.operands[1] = simplify(SymbolicExpr.multiply(res.operands[1], right))
                _merge_compound(res)
                return res
            if _is_compounded_sqrt(right):
                res.operands[0] = simplify(
                    SymbolicExpr.multiply(res.operands[0], right.operands[0])
                )
                res.operands[1] = simplify(
                    SymbolicExpr.multiply(res.operands[1], right.operands[1])
                )
                _merge_compound(res)
                return res

    return SymbolicExpr.multiply(left, right)


# --- sums -----------------------------------------------------------------


def _sqrt_term(expr: SymbolicExpr) -> tuple[Rational, Rational] | None:
    """Return (coefficient, radicand) when expr is c·√n with numeric n."""
    if (
        expr.type is ExprType.SQRT
        and len(expr.operands) == 1
        and expr.operands[0].is_number()
    ):
        return Rational(1), expr.operands[0].convert_rational()
    if expr.type is ExprType.MULTIPLY and len(expr.operands) == 2:
        coeff, root = expr.operands
        if (
            coeff.is_number()
            and root.type is ExprType.SQRT
            and len(root.operands) == 1
            and root.operands[0].is_number()
        ):
            return coeff.convert_rational(), root.operands[0].convert_rational()
    return None


def _flatten_add(expr: SymbolicExpr) -> list[SymbolicExpr]:
    if expr.type is ExprType.ADD and len(expr.operands) == 2:
        return _flatten_add(expr.operands[0]) + _flatten_add(expr.operands[1])
    return [expr]


def simplify_add(expr: SymbolicExpr) -> SymbolicExpr:
    """Simplify a sum: like square roots and numbers are collected."""
    if len(expr.operands) != 2:
        return _copy(expr)

    left = simplify(expr.operands[0])
    right = simplify(expr.operands[1])
    terms = _flatten_add(left) + _flatten_add(right)

    sqrt_terms: dict[Rational, Rational] = {}
    number_term = Rational(0)
    others: list[SymbolicExpr] = []
    for term in terms:
        parts = _sqrt_term(term)
        if parts is not None:
            coeff, radicand = parts
            sqrt_terms[radicand] = sqrt_terms.get(radicand, Rational(0)) + coeff
        elif term.type is ExprType.NUMBER:
            number_term = number_term + term.convert_rational()
        else:
            others.append(term)

    result_terms: list[SymbolicExpr] = []
    for radicand in sorted(sqrt_terms):
        coeff = sqrt_terms[radicand]
        if coeff.is_zero():
            continue
        root = SymbolicExpr.sqrt(SymbolicExpr.number(radicand))
        if coeff == 1:
            result_terms.append(root)
        else:
            result_terms.append(SymbolicExpr.multiply(SymbolicExpr.number(coeff), root))
    result_terms.extend(others)
    if number_term != 0:
        result_terms.append(SymbolicExpr.number(number_term))

    if not result_terms:
        return SymbolicExpr.number(0)
    total = result_terms[0]
    for term in result_terms[1:]:
        total = SymbolicExpr.add(total, term)
    return total


# --- powers ---------------------------------------------------------------


def simplify_power(expr: SymbolicExpr) -> SymbolicExpr:
    """Evaluate numeric powers with integer exponents exactly."""
    base = simplify(expr.operands[0])
    exponent = simplify(expr.operands[1])

    if base.is_number() and (exponent.is_int() or exponent.is_big_int()):
        exp_value = exponent.get_number()
        if base.is_rational():
            return SymbolicExpr.number(base.get_rational().power(exp_value))
        b = base.convert_rational().numerator
        e = exponent.convert_rational().numerator
        if e.to_int() >= 0:
            return SymbolicExpr.number(b.power(e))
        return SymbolicExpr.number(Rational(1, b.power(-e)))

    return SymbolicExpr.power(base, exponent)


_HANDLERS: dict[ExprType, Callable[[SymbolicExpr], SymbolicExpr]] = {
    ExprType.SQRT: simplify_sqrt,
    ExprType.MULTIPLY: simplify_multiply,
    ExprType.ADD: simplify_add,
    ExprType.POWER: simplify_power,
}