"""Built-in callable values.

A Primitive wraps a Python function over a list of already-evaluated
arguments. Arity and operand types are checked here, before the wrapped
function runs, so primitive bodies can assume well-formed input.
"""

from __future__ import annotations

import logging
from typing import Callable

from formula import LispValue
from formula.errors import FormulaArityError, FormulaTypeError

logger = logging.getLogger(__name__)


def is_number(value: LispValue) -> bool:
    """Numbers are floats; booleans are a separate value kind."""
    return isinstance(value, float)


class Primitive:
    """A named built-in operator with a fixed or variadic arity."""

    __slots__ = ("name", "fn", "min_args", "max_args", "numeric")

    def __init__(
        self,
        name: str,
        fn: Callable[[list[LispValue]], LispValue],
        min_args: int = 0,
        max_args: int | None = None,
        numeric: bool = True,
    ):
        self.name = name
        self.fn = fn
        self.min_args = min_args
        # None means variadic
        self.max_args = max_args
        # When set, every operand must be a number
        self.numeric = numeric

    def check_arity(self, args: list[LispValue]) -> None:
        n = len(args)
        if n < self.min_args or (self.max_args is not None and n > self.max_args):
            if self.max_args is None:
                expected = f"at least {self.min_args}"
            elif self.max_args == self.min_args:
                expected = f"exactly {self.min_args}"
            else:
                expected = f"{self.min_args} to {self.max_args}"
            raise FormulaArityError(
                f"{self.name} requires {expected} argument(s), got {n}"
            )

    def check_types(self, args: list[LispValue]) -> None:
        if not self.numeric:
            return
        for i, arg in enumerate(args):
            if not is_number(arg):
                raise FormulaTypeError(
                    f"All arguments to {self.name} must be numbers "
                    f"(argument {i + 1} is {type(arg).__name__})"
                )

    def __call__(self, args: list[LispValue]) -> LispValue:
        self.check_arity(args)
        self.check_types(args)
        logger.debug("apply %s to %r", self.name, args)
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"
