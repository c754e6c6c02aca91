"""
  Yocto Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of dedicated AST nodes:

    - numbers -> float
    - strings -> str
    - names -> Symbol
    - lists -> Python list
    - 'x   -> [quote, x]
    - `x   -> [quasiquote, x]
    - ,x   -> [unquote, x]
    - ,@x  -> [unquote-splicing, x]

  `true` and `false` are read as plain names; the root environment binds them.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from yocto import SExpression
from yocto.errors import YoctoSyntaxError
from yocto.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>[\'`])"  # ' and `
    r"|(?P<unquote>,@|,)"  # , and ,@
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'`",;]+)'  # fallback: names and numbers
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\Z")

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    ",": Symbol("unquote"),
    ",@": Symbol("unquote-splicing"),
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise YoctoSyntaxError(f"Unterminated string at {pos}")
            raise YoctoSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            if nm != "comment" and m.group(nm):
                yield nm, m.group(nm)
                break


def read_string(token: str) -> str:
    """Strip the quotes from a string token and decode its escapes."""
    body = token[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            i += 1
            out.append(STRING_ESCAPES.get(body[i], body[i]))
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def read_atom(token: str) -> SExpression:
    if NUMBER_RE.match(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Read one expression, or return None when the tokens are exhausted."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return read_atom(tok_val)

        if tok_type == "string":
            self.advance()
            return read_string(tok_val)

        # Quote forms
        if tok_type in ("quote", "unquote"):
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise YoctoSyntaxError(f"Expected an expression after {tok_val}")
            return [QUOTE_FORMS[tok_val], expr]

        if tok_type == "lparen":
            self.advance()
            return self._parse_list()

        if tok_type == "rparen":
            raise YoctoSyntaxError("Unexpected closing parenthesis")

        raise YoctoSyntaxError(f"Unknown token {tok_val!r}")

    def _parse_list(self) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise YoctoSyntaxError("Missing closing parenthesis")
            if tok_type == "rparen":
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level expression in `source`."""
    return TokenStream(lex(source)).parse_all()


def parse(source: str) -> SExpression:
    """Read the first expression in `source` (None for blank input)."""
    return TokenStream(lex(source)).parse_expr()
