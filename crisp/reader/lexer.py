"""
  crisp lexer

Splits source text into a flat list of tokens. Each '(' and ')' is a token of
its own and every other maximal run of non-whitespace characters is an atom,
which is the same as surrounding every paren with spaces and splitting on
whitespace. There are no comments, strings or escapes: a paren can never be
part of an atom.

Tokens are plain strings that also remember where they started, so
    lex("(3 4 5)") == ["(", "3", "4", "5", ")"]
"""

from __future__ import annotations

import re
from typing import Iterator

TOKEN_RE = re.compile(r"[()]|[^\s()]+")

LPAREN = "("
RPAREN = ")"


class Token(str):
    """A source token; `line` is 1-based, `column` is 0-based."""

    line: int
    column: int

    def __new__(cls, text: str, line: int = 1, column: int = 0) -> Token:
        token = str.__new__(cls, text)
        token.line = line
        token.column = column
        return token

    def __repr__(self) -> str:
        return f"Token({str(self)!r}, {self.line}, {self.column})"


def tokenize(source: str) -> Iterator[Token]:
    """Token generator: yields tokens in source order."""
    line = 1
    line_start = 0
    scanned = 0
    for match in TOKEN_RE.finditer(source):
        start = match.start()
        # Advance the line counter over the whitespace skipped since the last token
        newlines = source.count("\n", scanned, start)
        if newlines:
            line += newlines
            line_start = source.rfind("\n", scanned, start) + 1
        scanned = match.end()
        yield Token(match.group(), line, start - line_start)


def lex(source: str) -> list[Token]:
    return list(tokenize(source))
