import numpy as np
import pytest
from hypothesis import given, strategies as st

from crisp.reader.lexer import Token, lex
from crisp.reader.parser import parse, parse_atom, parse_program
from crisp.types.errors import CrispMissingParen, CrispSyntaxError
from crisp.types.symbol import Symbol
from crisp.types.values import is_equal


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(3 4 5)", ["(", "3", "4", "5", ")"]),
        ("(+ 1 (* 2 3))", ["(", "+", "1", "(", "*", "2", "3", ")", ")"]),
        ("((a))", ["(", "(", "a", ")", ")"]),
        ("  x\t\ny  ", ["x", "y"]),
        ("(+　3 4 5)", ["(", "+", "3", "4", "5", ")"]),
        ("a(b)c", ["a", "(", "b", ")", "c"]),
        ("", []),
        ("   \n\t ", []),
    ]
)
def test_lexer_basic(source, expected):
    assert lex(source) == expected


def test_tokens_record_positions():
    tokens = lex("(def x\n   (+ 1 2))")
    assert [(t, t.line, t.column) for t in tokens] == [
        ("(", 1, 0), ("def", 1, 1), ("x", 1, 5),
        ("(", 2, 3), ("+", 2, 4), ("1", 2, 6), ("2", 2, 8), (")", 2, 9), (")", 2, 10),
    ]


def test_token_is_a_string():
    tok = Token("abc", 3, 4)
    assert tok == "abc"
    assert isinstance(tok, str)
    assert repr(tok) == "Token('abc', 3, 4)"


@pytest.mark.parametrize(
    "token, expected",
    [
        ("123", np.float32(123)),
        ("-45", np.float32(-45)),
        ("3.14", np.float32(3.14)),
        ("+2", np.float32(2)),
        (".5", np.float32(0.5)),
        ("5.", np.float32(5)),
        ("1e3", np.float32(1000)),
        ("-2.5E-1", np.float32(-0.25)),
        ("inf", np.float32("inf")),
        ("true", True),
        ("false", False),
        ("x", Symbol("x")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("1_000", Symbol("1_000")),
        ("True", Symbol("True")),
        ("1e", Symbol("1e")),
    ]
)
def test_parse_atom(token, expected):
    assert is_equal(parse_atom(token), expected)


def test_parse_atom_nan():
    assert np.isnan(parse_atom("NaN"))


def test_numbers_are_single_precision():
    value = parse_atom("0.1")
    assert isinstance(value, np.float32)
    assert value == np.float32(0.1)
    assert float(value) != 0.1


@given(st.floats(width=32, allow_nan=False, allow_infinity=False))
def test_float_literal_parses_to_itself(x):
    expr, rest = parse([repr(x)])
    assert isinstance(expr, np.float32)
    assert expr == np.float32(x)
    assert rest == []


@given(st.integers(min_value=-10**6, max_value=10**6))
def test_integer_literal_parses_to_float(n):
    expr, rest = parse([str(n)])
    assert expr == np.float32(n)
    assert rest == []


def test_parse_list():
    expr, rest = parse(lex("(3 5 7)"))
    assert rest == []
    assert is_equal(expr, [np.float32(3), np.float32(5), np.float32(7)])


def test_parse_fn_call():
    expr, rest = parse(lex("(+ 5 7)"))
    assert rest == []
    assert is_equal(expr, [Symbol("+"), np.float32(5), np.float32(7)])


def test_nested_lists():
    expr, rest = parse(lex("((-1 10 4) 6 7)"))
    assert rest == []
    assert is_equal(
        expr,
        [[np.float32(-1), np.float32(10), np.float32(4)], np.float32(6), np.float32(7)],
    )


def test_empty_list_parses():
    expr, rest = parse(lex("()"))
    assert expr == []
    assert rest == []


def test_remaining_tokens_are_returned():
    expr, rest = parse(lex("(a b) c (d)"))
    assert expr == [Symbol("a"), Symbol("b")]
    assert rest == ["c", "(", "d", ")"]


def test_parse_program_ignores_trailing_tokens():
    assert parse_program("x y z") == Symbol("x")


def test_missing_paren_on_empty_input():
    with pytest.raises(CrispMissingParen) as info:
        parse([])
    assert (info.value.line, info.value.char) == (1, 0)


def test_unclosed_list():
    with pytest.raises(CrispSyntaxError, match="Expected a '\\)'") as info:
        parse(lex("\n  (+ 1 (2"))
    assert (info.value.line, info.value.column) == (2, 7)


def test_unexpected_close_paren():
    with pytest.raises(CrispSyntaxError, match="Unexpected '\\)'") as info:
        parse(lex(") 1"))
    assert (info.value.line, info.value.column) == (1, 0)


def test_parse_accepts_plain_strings():
    expr, rest = parse(["(", "a", ")", "b"])
    assert expr == [Symbol("a")]
    assert rest == ["b"]


@pytest.mark.parametrize(
    "token, expected",
    [
        # 1 + 2**-24 is halfway between 1.0 and the next float32 up
        ("1.0000000596046447753906251", np.nextafter(np.float32(1), np.float32(2))),
        ("1.0000000596046447753906249", np.float32(1)),
        ("1.000000059604644775390625", np.float32(1)),
        ("-1.0000000596046447753906251", -np.nextafter(np.float32(1), np.float32(2))),
        ("1.0000001788139343261718749", np.nextafter(np.float32(1), np.float32(2))),
    ]
)
def test_literals_round_once_to_nearest_float32(token, expected):
    value = parse_atom(token)
    assert isinstance(value, np.float32)
    assert value == expected


def test_symbols_are_interned_values():
    a, b = Symbol("name"), Symbol("".join(["na", "me"]))
    assert a == b
    assert hash(a) == hash(b)
    assert a.name is b.name
    assert str(a) == "name"
    assert a != "name"
    with pytest.raises(AttributeError):
        a.name = "other"
