"""
  Kappa parser

Builds Cons trees from the token stream of kappa.reader.tokenizer:

    - atoms   -> int / float / bool / str / Symbol
    - lists   -> Cons chains ending in Nil; () -> Nil
    - dotted  -> (a b . c) -> Cons chain ending in c
    - 'expr   -> (quote expr)
    - [ ... ] -> same as ( ... ), but must be closed by ]
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from kappa import SExpression
from kappa.errors import KappaSyntaxError
from kappa.types.cons import Cons, from_iterable
from kappa.types.symbol import Symbol
from kappa.reader.tokenizer import Token, lex

QUOTE = Symbol("quote")

CLOSERS: dict[str, str] = {"open": "close", "openbracket": "closebracket"}


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

    def parse_expr(self) -> SExpression:
        """Read one datum; raises KappaSyntaxError on malformed input."""
        tok = self.advance()
        if tok is None:
            raise KappaSyntaxError("Unexpected end of input")

        if tok.kind in ("integer", "double", "boolean", "string"):
            return tok.value
        if tok.kind == "symbol":
            return Symbol(tok.value)

        # Quote sugar
        if tok.kind == "quote":
            if self.peek() is None:
                raise KappaSyntaxError(f"Nothing to quote on line {tok.line}")
            return Cons(QUOTE, Cons(self.parse_expr()))

        if tok.kind in CLOSERS:
            return self._parse_list(tok)

        if tok.kind in ("close", "closebracket"):
            raise KappaSyntaxError(f"Too many close parentheses on line {tok.line}")
        if tok.kind == "dot":
            raise KappaSyntaxError(f"Unexpected '.' on line {tok.line}")

        raise KappaSyntaxError(f"Unknown token: {tok.kind} {tok.value!r}")

    def _parse_list(self, opener: Token) -> SExpression:
        closer = CLOSERS[opener.kind]
        items: list[SExpression] = []
        tail: SExpression = None
        while True:
            tok = self.peek()
            if tok is None:
                raise KappaSyntaxError(
                    f"Not enough close parentheses for {opener.value!r} on line {opener.line}"
                )
            if tok.kind in ("close", "closebracket"):
                self.advance()
                if tok.kind != closer:
                    raise KappaSyntaxError(
                        f"Mismatched {tok.value!r} on line {tok.line} closing "
                        f"{opener.value!r} from line {opener.line}"
                    )
                break
            if tail is not None:
                raise KappaSyntaxError(f"Expected exactly 1 datum after '.' on line {tok.line}")
            if tok.kind == "dot":
                self.advance()
                nxt = self.peek()
                if not items or nxt is None or nxt.kind in ("close", "closebracket", "dot"):
                    raise KappaSyntaxError(f"Misplaced '.' on line {tok.line}")
                tail = self.parse_expr()
                continue
            items.append(self.parse_expr())
        if tail is None:
            return from_iterable(items)
        return from_iterable(items, tail)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> list[SExpression]:
    """Parse every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
