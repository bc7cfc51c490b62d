# lamina

Exact arithmetic in pure Python, with no third-party dependencies.

The package has four parts:

- `lamina.bigint.BigInt` is an immutable signed integer of unbounded size.
  Its `digits` property gives the decimal digits, least significant first.
  It supports the usual arithmetic and comparison operators, and also
  provides an integer square root, factorial, gcd and lcm.
- `lamina.rational.Rational` is an immutable exact fraction. It is always
  kept in lowest terms with a positive denominator. Its `numerator` and
  `denominator` are returned as `BigInt`.
- `lamina.symbolic.SymbolicExpr` is a small expression tree of numbers,
  variables, square roots, products, sums and powers. It can be
  simplified without rounding to a float.
- `lamina.repl_input` is a line editor for interactive prompts. It handles
  cursor keys, keeps a bounded history and offers Ctrl+R reverse search.

## Big integers

```python
from lamina.bigint import BigInt

a = BigInt("123456789012345678901234567890")
b = BigInt(987654321)

print(a * b)                               # exact product
print(a // b, a % b)                       # truncating division and remainder
print(BigInt(2) ** BigInt(100))            # power; `^` does the same
print(BigInt.factorial(BigInt(25)))
print(BigInt.gcd(BigInt(84), BigInt(36)))  # 12
print(BigInt(50).sqrt())                   # 7, the floor of the square root
```

Strings are read leniently. An optional leading sign is allowed. After
it, every decimal digit is kept and any other character is ignored.

Division truncates toward zero, and the remainder takes the sign of the
dividend. `to_int()` clamps the value to the signed 32-bit range.

Errors raised:

- `ZeroDivisionError` for division or modulo by zero.
- `ValueError` for a negative exponent.
- `ValueError` for the factorial of a negative number.
- `ValueError` for the square root of a negative number.

## Rationals

```python
from lamina.rational import Rational

x = Rational(1, 2) + Rational(1, 3)
print(x)                           # 5/6
print(x.reciprocal())              # 6/5
print(Rational(4, 2))              # 2
print(Rational.from_float(0.125))  # 1/8
```

Errors raised:

- `ZeroDivisionError` for a zero denominator.
- `ZeroDivisionError` for division by zero.
- `ZeroDivisionError` for the reciprocal of zero.
- `ZeroDivisionError` for raising zero to a negative power.
- `ValueError` for `Rational(0).power(0)`.

`to_float()` is an approximation. It first clamps both the numerator and
the denominator to the 32-bit range.

## Symbolic expressions

```python
from lamina.symbolic import SymbolicExpr

root8 = SymbolicExpr.sqrt(SymbolicExpr.number(8))
print(root8.simplify())        # 2√2

total = SymbolicExpr.add(root8, SymbolicExpr.sqrt(SymbolicExpr.number(2)))
print(total.simplify())        # 3√2

pi = SymbolicExpr.variable("π")
print(SymbolicExpr.multiply(SymbolicExpr.number(2), pi).to_float())
```

`ExprType` lists the kinds of node.

`simplify()` returns a new expression. The rules behind it are also
available in `lamina.simplify`:

- `simplify(expr)` applies whichever rule fits the node.
- `simplify_sqrt` pulls square factors out of roots.
- `simplify_multiply` multiplies numbers and roots and expands sums.
- `simplify_add` collects like square roots and numeric terms.
- `simplify_power` evaluates numeric powers with integer exponents exactly.

`to_float()` gives a numeric value. It knows `π` and `pi`. Any other
variable raises `ValueError`.

## Interactive input

```python
from lamina.repl_input import CtrlCInterrupt, repl_readline

try:
    line = repl_readline("> ")
except CtrlCInterrupt:
    print("interrupted")
```

On a terminal, `repl_readline` reads one line with editing enabled.
When standard input is not a terminal, it reads a plain line instead.
In both cases the line goes into a history of up to 100 entries, which
is shared between calls. `EOFError` is raised when input ends.

The editing itself is done by `LineEditor(prompt, history, output)`:

- `handle_key(key)` takes one key press, either a `Key` or a printable
  character. It returns `True` once Enter is pressed.
- `finish()` records the line in the `History` and returns it.

`decode_keys(chars)` turns raw terminal characters, including ANSI escape
sequences, into key presses. Together these let you drive or test the
editor without a real terminal.

## What it does not do

The package provides no command-line program. `repl_readline` only reads
lines. Nothing here parses or evaluates what is typed.