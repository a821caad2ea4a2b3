"""
  PostLisp token classifier and parser

Grammar:

    expr := atom | '(' expr+ ')'

- `(e)` is pure grouping and parses to `e` itself
- `(e1 ... en-1 op)` with n > 1 is a call; `op` must be a bare symbol and
  becomes the head, `e1 ... en-1` become the tail in order
- the whole token stream must form exactly one expression

The parser never raises. Every syntax failure is reported as `None`; the
consuming layer turns that into the fixed message "parse error".
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, TextIO

from postlisp.types.atoms import Atom, Boolean, Number, Symbol
from postlisp.types.expression import Expression
from postlisp.reader.tokenizer import LPAREN, RPAREN, tokenize

# Geometry constructor names are always symbols.
CONSTRUCTOR_NAMES = frozenset({"point", "line", "arc", "rect", "fill_rect", "ellipse"})

NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def token_to_atom(token: str) -> Optional[Atom]:
    """Classify one token, or return None when it is not a valid atom."""
    if token == "True":
        return Boolean(True)
    if token == "False":
        return Boolean(False)

    if token in CONSTRUCTOR_NAMES:
        return Symbol(token)

    # The entire token must be a number; partial parses like "3abc" are rejected.
    if NUMBER_RE.fullmatch(token):
        return Number(float(token))

    if token and not ("0" <= token[0] <= "9"):
        return Symbol(token)

    return None


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_atom(self) -> Optional[Expression]:
        tok = self.peek()
        if tok is None or tok in (LPAREN, RPAREN):
            return None
        atom = token_to_atom(tok)
        if atom is None:
            return None
        self.advance()
        return Expression.of(atom)

    def parse_expr(self) -> Optional[Expression]:
        tok = self.peek()
        if tok is None:
            return None

        if tok != LPAREN:
            return self.parse_atom()

        self.advance()  # consume '('
        items: list[Expression] = []
        while True:
            tok = self.peek()
            if tok is None:
                return None  # Unmatched '('
            if tok == RPAREN:
                self.advance()
                break
            sub = self.parse_expr()
            if sub is None:
                return None
            items.append(sub)

        if not items:
            return None  # empty ()

        if len(items) == 1:
            return items[0]  # grouping

        op = items[-1]
        if not (isinstance(op.head, Symbol) and op.is_literal):
            return None
        return Expression.call(op.head, items[:-1])


def parens_balanced(tokens: list[str]) -> bool:
    """Cheap pre-check: equal counts of '(' and ')'."""
    return tokens.count(LPAREN) == tokens.count(RPAREN)


def parse_tokens(tokens: list[str]) -> Optional[Expression]:
    """Parse a full token sequence into exactly one Expression, or None."""
    if not tokens:
        return None
    if not parens_balanced(tokens):
        return None
    stream = TokenStream(tokens)
    try:
        expr = stream.parse_expr()
    except RecursionError:
        return None
    if expr is None or not stream.exhausted:
        return None
    return expr


def parse(source: str | TextIO) -> Optional[Expression]:
    """Tokenize and parse source text; None signals a syntax error."""
    return parse_tokens(tokenize(source))
