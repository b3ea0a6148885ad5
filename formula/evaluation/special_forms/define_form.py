import logging

from formula import EvaluatorFn
from formula import SExpression, LispValue
from formula.errors import FormulaArityError, FormulaTypeError
from formula.types.environment import Environment
from formula.types.symbol import Symbol

logger = logging.getLogger(__name__)

RESERVED = frozenset({Symbol("if"), Symbol("define"), Symbol("begin")})


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated before anything is bound, so a failing value
    expression leaves the environment untouched. Returns the bound value.
    """
    if len(tail) != 2:
        raise FormulaArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise FormulaTypeError(f"define expects a symbol name, got {name!r}")
    if name in RESERVED:
        raise FormulaTypeError(f"Cannot redefine special form {name}")

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("define %s = %r", name, value)
    return value
