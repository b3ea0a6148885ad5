"""
  Lisp Reader: Lexer

- Streaming, lazy tokenisation over a source string
- Four token kinds:

    - lparen  -> "("
    - rparen  -> ")"
    - number  -> float, for text matching -?[0-9]+(.[0-9]+)?
    - symbol  -> str, any other run of non-whitespace, non-paren text

  There is no comment syntax; ';' is ordinary symbol text.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterator, NamedTuple

from formula.errors import FormulaLexError

logger = logging.getLogger(__name__)

LPAREN = "lparen"
RPAREN = "rparen"
NUMBER = "number"
SYMBOL = "symbol"


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s()]+)"  # everything else up to whitespace or a paren
    r")"
)

NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

# Text that starts like a number must be one
NUMERIC_PREFIX_RE = re.compile(r"-?[0-9]")


class Token(NamedTuple):
    kind: str
    value: str | float
    pos: int


def classify_atom(text: str, pos: int) -> Token:
    """Turn an atom lexeme into a number or symbol token."""
    if NUMBER_RE.fullmatch(text):
        value = float(text)
        if math.isinf(value):
            raise FormulaLexError(f"Number out of range {text!r}", pos)
        return Token(NUMBER, value, pos)
    if NUMERIC_PREFIX_RE.match(text):
        raise FormulaLexError(f"Malformed number {text!r}", pos)
    return Token(SYMBOL, text, pos)


def tokenize(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value, pos) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # only trailing whitespace remains
            break
        start = m.start(m.lastgroup)
        pos = m.end()
        if m.lastgroup == LPAREN:
            token = Token(LPAREN, "(", start)
        elif m.lastgroup == RPAREN:
            token = Token(RPAREN, ")", start)
        else:
            token = classify_atom(m.group("atom"), start)
        logger.debug("token %s %r at %d", token.kind, token.value, token.pos)
        yield token
