from __future__ import annotations

import logging
from typing import Iterator

from formula import LispValue
from formula.errors import FormulaError
from formula.reader.lexer import tokenize
from formula.reader.parser import TokenStream
from formula.types.environment import Environment
from formula.types.symbol import Symbol
from formula.evaluation.evaluator import evaluate
from formula.builtin.env_builtin import new_global_environment
from formula.printer import format_value, to_source

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Formula code against one Environment kept across calls.
    An error aborts the form that raised it; earlier definitions survive.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else new_global_environment()

    def define(self, name: str | Symbol, value: LispValue) -> None:
        """Bind a host-provided value (or Primitive) in the session environment."""
        self.env.define(name if isinstance(name, Symbol) else Symbol(name), value)

    def eval_all(self, code: str) -> Iterator[LispValue]:
        """Evaluate each top-level form in `code` in order, yielding its value."""
        stream = TokenStream(tokenize(code))
        for expr in stream.parse_all():
            logger.debug("eval %s", to_source(expr))
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue | None:
        """Evaluate all forms in `code`; return the last value, or None if there were none."""
        result = None
        for result in self.eval_all(code):
            pass
        return result

    def rep(self, code: str) -> str:
        """One read-eval-print step: the formatted result, or the formatted error."""
        try:
            result = self.eval(code)
        except FormulaError as e:
            logger.debug("error: %s", e)
            return f"error: {e}"
        return "" if result is None else format_value(result)
