"""
  Lisp Reader: Parser

Recursive descent over a token stream with one token of lookahead.
Emits Python primitives:

    - numbers -> float
    - symbols -> Symbol
    - lists   -> Python list
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from formula import SExpression
from formula.errors import FormulaUnexpectedEof, FormulaUnexpectedToken
from formula.reader.lexer import Token, LPAREN, RPAREN, NUMBER, SYMBOL
from formula.types.symbol import Symbol

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self) -> SExpression:
        """Parse exactly one expression; trailing tokens stay in the stream."""
        tok = self.advance()
        if tok is None:
            raise FormulaUnexpectedEof("Unexpected end of input")

        if tok.kind == NUMBER:
            return tok.value

        if tok.kind == SYMBOL:
            return Symbol(tok.value)

        if tok.kind == RPAREN:
            raise FormulaUnexpectedToken("Unexpected ')'", tok.pos)

        if tok.kind == LPAREN:
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise FormulaUnexpectedEof("Unmatched '('", tok.pos)
                if nxt.kind == RPAREN:
                    self.advance()
                    break
                items.append(self.parse_expr())
            return items

        raise FormulaUnexpectedToken(f"Unknown token: {tok.kind} {tok.value!r}", tok.pos)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            expr = self.parse_expr()
            logger.debug("parsed %r", expr)
            yield expr


def parse(tokens: Iterable[Token]) -> SExpression:
    """Parse a single top-level expression from `tokens`."""
    return TokenStream(tokens).parse_expr()
