"""Application engine for Formula.

Centralizes call semantics for the evaluator: the head of a combination must
evaluate to a Primitive, which is then invoked with the already-evaluated
argument list.
"""

from formula import LispValue, SExpression
from formula.errors import FormulaNotCallable
from formula.types.primitive import Primitive


def ensure_callable(head: LispValue, head_expr: SExpression) -> Primitive:
    """Return `head` if it can be applied, else raise FormulaNotCallable."""
    if not isinstance(head, Primitive):
        raise FormulaNotCallable(f"Cannot apply non-function {head_expr!r} (value {head!r})")
    return head


def apply(head: LispValue, args: list[LispValue]) -> LispValue:
    """Apply a Primitive to evaluated arguments."""
    if isinstance(head, Primitive):
        return head(args)
    raise FormulaNotCallable(f"Cannot apply non-function {head!r}")
