"""
  Lispy Lexer and Parser

- Streaming, lazy tokenizing
- Emits a generic syntax tree of SyntaxNode(tag, contents, children):

    - program  -> root node, one implicit S-expression per chunk of input
    - number   -> atom matching -?[0-9]+
    - symbol   -> any other atom
    - string   -> double-quoted literal, contents keep the quotes and escapes
    - sexpr    -> ( ... )
    - qexpr    -> { ... }
    - comment  -> ; to end of line

  Turning nodes into runtime values is the job of lispy.reader.read.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from lispy.errors import LispySyntaxError


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&%^]+)",  # numbers and symbols
    re.DOTALL,
)

NUMBER_RE = re.compile(r"-?[0-9]+")

CLOSERS: dict[str, str] = {
    "lparen": "rparen",
    "lbrace": "rbrace",
}

BRACKETS: dict[str, str] = {
    "rparen": ")",
    "rbrace": "}",
}


@dataclass
class SyntaxNode:
    tag: str
    contents: str = ""
    children: list[SyntaxNode] = field(default_factory=list)


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
                raise LispySyntaxError(f"Unterminated string at {pos}", pos)
            raise LispySyntaxError(f"Unexpected char at {pos}: {source[pos]!r}", pos)
        yield m.lastgroup, m.group()
        pos = m.end()


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

    def parse_expr(self) -> Optional[SyntaxNode]:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            if NUMBER_RE.fullmatch(tok_val):
                return SyntaxNode("number", tok_val)
            return SyntaxNode("symbol", tok_val)

        if tok_type == "string":
            self.advance()
            return SyntaxNode("string", tok_val)

        if tok_type == "comment":
            self.advance()
            return SyntaxNode("comment", tok_val)

        # S- and Q-expressions
        if tok_type in CLOSERS:
            self.advance()
            closer = CLOSERS[tok_type]
            node = SyntaxNode("sexpr" if tok_type == "lparen" else "qexpr")
            while True:
                nxt, nxt_val = self.peek()
                if nxt is None:
                    raise LispySyntaxError(f"Missing '{BRACKETS[closer]}'")
                if nxt == closer:
                    self.advance()
                    return node
                if nxt in BRACKETS:
                    raise LispySyntaxError(f"Expected '{BRACKETS[closer]}', got '{nxt_val}'")
                node.children.append(self.parse_expr())

        raise LispySyntaxError(f"Unexpected '{tok_val}'")

    def parse_all(self) -> Iterator[SyntaxNode]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()

    def parse_program(self) -> SyntaxNode:
        """Parse every remaining token as children of a single `program` node."""
        return SyntaxNode("program", children=list(self.parse_all()))


def parse(source: str) -> SyntaxNode:
    return TokenStream(lex(source)).parse_program()


def open_depth(source: str) -> int:
    """Count brackets still open at the end of `source`, ignoring strings and comments."""
    depth = 0
    pos = 0
    n = len(source)
    while pos < n:
        c = source[pos]
        if c == ";":
            while pos < n and source[pos] != "\n":
                pos += 1
        elif c == '"':
            pos += 1
            while pos < n and source[pos] != '"':
                if source[pos] == "\\":
                    pos += 1
                pos += 1
        elif c in "({":
            depth += 1
        elif c in ")}":
            depth -= 1
        pos += 1
    return depth


def is_blank(source: str) -> bool:
    """True when `source` holds nothing but whitespace and comments."""
    try:
        return all(tok_type == "comment" for tok_type, _ in lex(source))
    except LispySyntaxError:
        return False
