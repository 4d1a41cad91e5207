"""
  Recursive-descent parser

Consumes the token stream produced by `lex` and emits S-expressions:

    - numbers  -> float
    - strings  -> str
    - nil      -> Nil
    - symbols  -> Symbol
    - ( ... )  -> proper Cons list, () -> Nil
    - 'expr    -> (quote expr)

Parsing is lazy: `parse_expr` reads one top-level form at a time so earlier
forms can be evaluated before a later syntax error is reached.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from tinylisp import SExpression
from tinylisp.errors import ParseError
from tinylisp.reader.lexer import Token, TokenType, lex
from tinylisp.types.cons import Cons, from_list
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol

QUOTE = Symbol("quote")


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)
        self.buffer: list[Token] = []
        self.last_position = 0

    def peek(self) -> Token:
        if not self.buffer:
            # A stream that runs dry without an EOF token is treated as ended
            tok = next(self.tokens, None)
            if tok is None:
                tok = Token(TokenType.EOF, "", self.last_position)
            self.buffer.append(tok)
        return self.buffer[0]

    def advance(self) -> Token:
        tok = self.peek()
        if tok.type is not TokenType.EOF:
            self.buffer.pop(0)
        self.last_position = tok.position
        return tok

    def at_end(self) -> bool:
        return self.peek().type is TokenType.EOF

    def parse_expr(self) -> Optional[SExpression]:
        """Parse one top-level form, or return None at end of input."""
        tok = self.peek()
        if tok.type is TokenType.EOF:
            return None
        if tok.type is TokenType.RPAREN:
            raise ParseError("Unexpected ')'", tok.position)
        return self._parse()

    def _parse(self) -> SExpression:
        tok = self.advance()

        if tok.type is TokenType.EOF:
            raise ParseError("Unexpected end of input", tok.position)

        if tok.type is TokenType.LPAREN:
            return self._parse_list(tok)

        if tok.type is TokenType.RPAREN:
            raise ParseError("Unexpected ')'", tok.position)

        if tok.type is TokenType.QUOTE:
            if self.at_end():
                raise ParseError("Nothing to quote after \"'\"", tok.position)
            return Cons(QUOTE, Cons(self._parse(), Nil))

        if tok.type is TokenType.NUMBER:
            try:
                return float(tok.value)
            except ValueError:
                raise ParseError(f"Invalid number literal {tok.value!r}", tok.position) from None

        if tok.type is TokenType.STRING:
            return tok.value

        if tok.type is TokenType.SYMBOL:
            if tok.value == "nil":
                return Nil
            return Symbol(tok.value)

        raise ParseError(f"Unknown token: {tok.type} {tok.value!r}", tok.position)

    def _parse_list(self, opening: Token) -> SExpression:
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok.type is TokenType.RPAREN:
                self.advance()
                return from_list(items)
            if tok.type is TokenType.EOF:
                raise ParseError("Unexpected end of input: unmatched '('", opening.position)
            items.append(self._parse())

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> list[SExpression]:
    """Parse every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def read_one(source: str) -> SExpression:
    """Parse exactly one form; anything else is a ParseError."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise ParseError("Unexpected end of input", 0)
    if not stream.at_end():
        raise ParseError("Expected a single form", stream.peek().position)
    return expr
