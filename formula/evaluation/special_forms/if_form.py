from formula import EvaluatorFn
from formula import SExpression, LispValue
from formula.errors import FormulaArityError
from formula.types.environment import Environment


def is_truthy(value: LispValue) -> bool:
    # False and zero are false; everything else (including primitives) is true
    if value is False:
        return False
    if isinstance(value, float):
        return value != 0.0
    return True


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise FormulaArityError(
            f"if requires a condition, a then-expression and an else-expression, got {len(tail)} operand(s)"
        )

    cond, then_expr, else_expr = tail
    if is_truthy(evaluate_fn(cond, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
