"""Built-in functions for the Formula runtime environment.

This module defines the arithmetic and comparison primitives exposed to Lisp
code and the constructor for a session's global environment.

Numbers are IEEE-754 binary64 floats: integers are exact up to 2**53 and
overflow saturates to +/-inf as the float type does. Division is the one
exception; a zero divisor raises FormulaDivisionByZero instead of producing
an infinity.
"""
from __future__ import annotations

from formula import LispValue
from formula.errors import FormulaDivisionByZero
from formula.types.environment import Environment
from formula.types.primitive import Primitive
from formula.types.symbol import Symbol


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> float:
    """Return the numeric sum of all arguments; (+) is 0."""
    return sum(args, 0.0)


def sub(args: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(args: list[LispValue]) -> float:
    """Return the product of all arguments; (*) is 1."""
    result = 1.0
    for x in args:
        result *= x
    return result


def div(args: list[LispValue]) -> float:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if len(args) == 1:
        args = [1.0, args[0]]
    try:
        result = args[0]
        for x in args[1:]:
            if x == 0.0:
                raise ZeroDivisionError
            result /= x
        return result
    except ZeroDivisionError:
        raise FormulaDivisionByZero("Division by zero") from None


# -------------------------------
# Comparison
# -------------------------------
def equals(args: list[LispValue]) -> bool:
    """Chainable equality: true if every adjacent pair is equal."""
    return all(a == b for a, b in zip(args, args[1:]))


def not_equals(args: list[LispValue]) -> bool:
    """Logical negation of equals."""
    return not equals(args)


def lt(args: list[LispValue]) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    return all(a < b for a, b in zip(args, args[1:]))


def lte(args: list[LispValue]) -> bool:
    """Chainable less-or-equal: true if a0 <= a1 <= a2 ... holds for all pairs."""
    return all(a <= b for a, b in zip(args, args[1:]))


def gt(args: list[LispValue]) -> bool:
    """Chainable greater-than: true if a0 > a1 > a2 ... holds for all pairs."""
    return all(a > b for a, b in zip(args, args[1:]))


def gte(args: list[LispValue]) -> bool:
    """Chainable greater-or-equal: true if a0 >= a1 >= a2 ... holds for all pairs."""
    return all(a >= b for a, b in zip(args, args[1:]))


PRIMITIVES = [
    Primitive("+", add),
    Primitive("*", mul),
    Primitive("-", sub, min_args=1),
    Primitive("/", div, min_args=1),
    Primitive("=", equals, min_args=1),
    Primitive("/=", not_equals, min_args=1),
    Primitive("<", lt, min_args=1),
    Primitive("<=", lte, min_args=1),
    Primitive(">", gt, min_args=1),
    Primitive(">=", gte, min_args=1),
]


def register(env: Environment) -> None:
    env.update({Symbol(p.name): p for p in PRIMITIVES})
    env.define(Symbol("true"), True)
    env.define(Symbol("false"), False)


def new_global_environment() -> Environment:
    """Build a fresh environment pre-populated with the primitives."""
    env = Environment()
    register(env)
    return env
