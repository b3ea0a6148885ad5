"""Core evaluator for the Formula interpreter.

A recursive tree walk over the closed expression union (float, Symbol, list).
Special forms are looked up in a fixed registry before falling through to
ordinary call evaluation. Recursion depth is bounded only by the nesting of
the input.
"""

from __future__ import annotations

from formula import SExpression, LispValue
from formula.errors import FormulaEvalError
from formula.types.environment import Environment
from formula.types.symbol import Symbol
from formula.evaluation.apply import apply, ensure_callable
from formula.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` against `env` and return its value."""
    match expr:
        case []:
            raise FormulaEvalError("Cannot evaluate empty combination ()")

        case [Symbol() as head, *tail_args] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, evaluate)

        case [head_expr, *tail_args]:
            # Head first, then arguments strictly left to right.
            head = ensure_callable(evaluate(head_expr, env), head_expr)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(head, args)

        case Symbol():
            return env.lookup(expr)

        case float():
            return expr

    raise FormulaEvalError(f"Cannot evaluate {expr!r}")
