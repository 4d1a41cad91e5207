"""
  Lisp lexer

Turns source text into a stream of typed tokens ending with exactly one EOF.

    - ( and )           -> LPAREN / RPAREN
    - '                 -> QUOTE
    - "..."             -> STRING, escapes \\n \\t \\r \\\\ \\" resolved,
                           any other escaped char kept without the backslash
    - [+-]?digit[0-9.]*  -> NUMBER, optional exponent (a sign alone starts a SYMBOL)
    - anything else up to whitespace ( ) " ;  -> SYMBOL
    - ; to end of line  -> comment, skipped
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator, NamedTuple

from tinylisp.errors import ParseError


class TokenType(Enum):
    LPAREN = "lparen"
    RPAREN = "rparen"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    QUOTE = "quote"
    EOF = "eof"


class Token(NamedTuple):
    type: TokenType
    value: str
    position: int


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<number>[+-]?\d[\d.]*(?:[eE][+-]?\d+)?)"  # sign only when a digit follows
    r'|(?P<symbol>[^\s()";]+)',  # fallback: symbols
    re.DOTALL,
)

ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}

SKIPPED = ("whitespace", "comment")


def unescape(body: str) -> str:
    """Resolve backslash escapes inside a string literal body."""
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens, finishing with a single EOF token."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # Only an opening quote with no closing partner can fail to match
            raise ParseError("Unterminated string literal", pos)
        kind = m.lastgroup
        text = m.group(kind)
        start, pos = pos, m.end()
        if kind in SKIPPED:
            continue
        if kind == "string":
            yield Token(TokenType.STRING, unescape(text[1:-1]), start)
        else:
            yield Token(TokenType(kind), text, start)
    yield Token(TokenType.EOF, "", n)


def tokenize(source: str) -> list[Token]:
    """Lex the whole source eagerly."""
    return list(lex(source))
