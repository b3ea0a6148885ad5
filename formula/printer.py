"""Printing of syntax trees and runtime values.

`to_source` writes an expression back out as text the reader accepts;
`format_value` renders evaluation results for display.
"""

from decimal import Decimal

from formula import SExpression, LispValue
from formula.types.symbol import Symbol


def format_number(x: float) -> str:
    if x.is_integer():
        return str(int(x))
    if x != x or x in (float("inf"), float("-inf")):
        return repr(x)
    # positional notation only; the reader has no exponent syntax
    return format(Decimal(repr(x)), "f")


def to_source(expr: SExpression) -> str:
    if isinstance(expr, list):
        return f"({' '.join(to_source(e) for e in expr)})"
    if isinstance(expr, Symbol):
        return str(expr)
    if isinstance(expr, float):
        return format_number(expr)
    raise TypeError(f"Not an expression: {expr!r}")


def format_value(value: LispValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return repr(value)
