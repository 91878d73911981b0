"""
  crisp recursive-descent parser

Turns a token sequence into one expression plus the tokens left over:

    - '(' ... ')'        -> Python list
    - float32 literal    -> numpy.float32
    - true / false       -> bool
    - anything else      -> Symbol
"""

from __future__ import annotations

from typing import Sequence

from crisp import Expression
from crisp.reader.lexer import LPAREN, RPAREN, lex
from crisp.types.errors import CrispMissingParen, CrispSyntaxError
from crisp.types.number import parse_number
from crisp.types.symbol import Symbol

BOOLEANS = {"true": True, "false": False}


def _position(token: str) -> tuple[int | None, int | None]:
    return getattr(token, "line", None), getattr(token, "column", None)


def parse_atom(token: str) -> Expression:
    number = parse_number(token)
    if number is not None:
        return number
    if token in BOOLEANS:
        return BOOLEANS[token]
    return Symbol(str(token))


def _parse_at(tokens: Sequence[str], pos: int) -> tuple[Expression, int]:
    if pos >= len(tokens):
        raise CrispMissingParen(1, 0)

    token = tokens[pos]
    if token == LPAREN:
        return _parse_list(tokens, pos + 1, token)
    if token == RPAREN:
        raise CrispSyntaxError("Unexpected ')'", *_position(token))
    return parse_atom(token), pos + 1


def _parse_list(tokens: Sequence[str], pos: int, opener: str) -> tuple[list, int]:
    items: list[Expression] = []
    while True:
        if pos >= len(tokens):
            raise CrispSyntaxError("Expected a ')'", *_position(opener))
        if tokens[pos] == RPAREN:
            return items, pos + 1
        item, pos = _parse_at(tokens, pos)
        items.append(item)


def parse(tokens: Sequence[str]) -> tuple[Expression, Sequence[str]]:
    """Parse one expression from the front of `tokens`.

    Returns the expression and the remaining, unconsumed tokens.
    """
    expr, pos = _parse_at(tokens, 0)
    return expr, tokens[pos:]


def parse_program(source: str) -> Expression:
    """Parse the first expression in `source`; trailing tokens are ignored."""
    expr, _ = parse(lex(source))
    return expr
