import numpy as np
from hypothesis import given, strategies as st

from crisp.builtin.env_builtin import default_environment
from crisp.display import to_source
from crisp.interpreter import run
from crisp.reader.parser import BOOLEANS, parse_program
from crisp.types.number import parse_number
from crisp.types.symbol import Symbol
from crisp.types.values import is_equal

symbols = (
    st.from_regex(r"[a-z+*<>=!?-][a-z0-9+*<>=!?-]{0,6}", fullmatch=True)
    .filter(lambda s: parse_number(s) is None and s not in BOOLEANS)
    .map(Symbol)
)
numbers = st.floats(width=32, allow_nan=False).map(np.float32)
atoms = st.one_of(symbols, numbers, st.booleans())
expressions = st.recursive(atoms, lambda children: st.lists(children, max_size=5), max_leaves=25)


@given(expressions)
def test_quote_returns_parsed_input_unevaluated(expr):
    source = to_source(expr)
    result = run(f"(quote {source})", default_environment())
    assert is_equal(result, parse_program(source))
    assert is_equal(result, expr)


def test_quoted_code_can_be_inspected(lisp):
    result = lisp("(quote (def x (fn (a) (+ a 1))))")
    assert result[0] == Symbol("def")
    assert result[2][1] == [Symbol("a")]


def test_quote_does_not_evaluate_special_forms(env):
    run("(quote (def x 1))", env)
    assert not env.contains_local("x")
