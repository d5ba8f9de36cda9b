"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of Cons cells:

    - nil -> Nil
    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - quote forms -> [quote, expr], [quasiquote, expr], etc.

`parse` never raises: every top-level unit becomes either a form or a
ParseFailure, so a caller can decide what to do with bad input. `parse_all` is
the strict variant used for files.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from ember import SExpression
from ember.errors import EmberSyntaxError
from ember.types.nil import Nil
from ember.types.symbol import Symbol

Token = tuple[str, str, int]

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>['`])"  # ' and `
    r"|(?P<unquote>,@|,)"  # , and ,@
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>"(?:\\.|[^\\"])*\\?\Z)'  # string missing its closing quote
    r'|(?P<symbol>[^\s()\'`,";]+)',  # fallback: symbols and numbers
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?\Z")

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    ",": Symbol("unquote"),
    ",@": Symbol("unquote-splicing"),
}

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples.

    The lexer never raises; malformed text becomes an `unterminated` token and
    is rejected by the parser.
    """
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        # every non-space character starts some token
        assert m is not None
        kind = m.lastgroup
        if kind != "comment":
            yield kind, m.group(kind), pos
        pos = m.end()


def decode_string(token: str) -> str:
    """Strip the quotes of a string token and resolve its escapes."""
    body = token[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append(ESCAPES.get(nxt, "\\" + nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def read_atom(text: str, offset: int = 0) -> SExpression:
    if text.lower() == "nil":
        return Nil
    try:
        if INT_RE.match(text):
            return int(text)
        if FLOAT_RE.match(text):
            return float(text)
    except ValueError:
        # int() refuses literals beyond sys.get_int_max_str_digits()
        raise EmberSyntaxError(f"Number literal too large at {offset}") from None
    return Symbol(text)


@dataclass(frozen=True)
class ParseFailure:
    """A top-level unit the reader rejected."""

    error: EmberSyntaxError
    offset: int

    def __str__(self) -> str:
        return str(self.error)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        """Parse one expression; raises EmberSyntaxError on malformed input."""
        tok_type, tok_val, offset = self.advance()
        if tok_type is None:
            raise EmberSyntaxError("Unexpected end of input")

        if tok_type == "symbol":
            return read_atom(tok_val, offset)

        if tok_type == "string":
            return decode_string(tok_val)

        if tok_type == "unterminated":
            raise EmberSyntaxError(f"Unterminated string at {offset}")

        if tok_type == "rparen":
            raise EmberSyntaxError(f"Unexpected ')' at {offset}")

        # Quote forms
        if tok_type in ("quote", "unquote"):
            if self.at_end():
                raise EmberSyntaxError(f"Nothing to quote after {tok_val!r} at {offset}")
            return [QUOTE_FORMS[tok_val], self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type is None:
                    raise EmberSyntaxError(f"Unmatched '(' at {offset}")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        raise EmberSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(source: str) -> Iterator[SExpression | ParseFailure]:
    """Lazily yield every top-level form in `source`, or a ParseFailure for
    each unit that could not be read. Reading resumes after the bad unit."""
    stream = TokenStream(lex(source))
    while not stream.at_end():
        offset = stream.peek()[2]
        try:
            yield stream.parse_expr()
        except EmberSyntaxError as e:
            yield ParseFailure(e, offset)
        except RecursionError:
            yield ParseFailure(EmberSyntaxError(f"Form at {offset} is nested too deeply"), offset)


def parse_all(source: str) -> Iterator[SExpression]:
    """Strict parsing: raise on the first malformed form."""
    return TokenStream(lex(source)).parse_all()
