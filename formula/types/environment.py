"""Runtime environment for Formula.

The Environment stores bindings of Symbols to evaluated values. There is a
single flat frame: no nesting, no shadowing. A global environment is built
once per session (see ``new_global_environment``) and passed explicitly to
every evaluation; only one evaluation may use it at a time.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

from formula import LispValue
from formula.errors import FormulaTypeError, FormulaUnboundSymbol
from formula.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Flat mapping from Symbols to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Symbol, LispValue] = {}

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value`, overwriting any existing binding.

        Raises FormulaTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise FormulaTypeError(f"Cannot define {name!r}: not a symbol")
        if name in self.vars:
            logger.debug("redefine %s", name)
        self.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises FormulaUnboundSymbol if not found.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise FormulaUnboundSymbol(f"Cannot lookup unbound symbol {name}") from None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v!r}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
