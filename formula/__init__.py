# Core type aliases for Formula's data model.
# Plain Python types represent both code (forms) and runtime values:
#
#   forms:  float (number atom), Symbol (symbol atom), list (combination)
#   values: float (number), bool (boolean), Primitive (callable)
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:   use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Syntax tree alias
SExpression = Any

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

from formula.errors import (  # noqa: E402
    FormulaError,
    FormulaLexError,
    FormulaParseError,
    FormulaUnexpectedToken,
    FormulaUnexpectedEof,
    FormulaEvalError,
    FormulaUnboundSymbol,
    FormulaNotCallable,
    FormulaArityError,
    FormulaTypeError,
    FormulaDivisionByZero,
)
from formula.reader.lexer import tokenize  # noqa: E402
from formula.reader.parser import parse  # noqa: E402
from formula.evaluation.evaluator import evaluate  # noqa: E402
from formula.builtin.env_builtin import new_global_environment  # noqa: E402
from formula.printer import to_source, format_value  # noqa: E402
from formula.interpreter import Interpreter  # noqa: E402
