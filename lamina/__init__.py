"""Exact big-integer, rational and symbolic arithmetic, with an interactive line editor."""

__version__ = "1.0.0"

__all__ = ["bigint", "rational", "symbolic", "simplify", "repl_input"]