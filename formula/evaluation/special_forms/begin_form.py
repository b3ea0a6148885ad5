from formula import EvaluatorFn
from formula import SExpression, LispValue
from formula.errors import FormulaArityError
from formula.types.environment import Environment


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise FormulaArityError("begin requires at least 1 expression")
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(tail[-1], env)
