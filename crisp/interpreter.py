from __future__ import annotations

import logging

from crisp import LispValue
from crisp.builtin.env_builtin import default_environment
from crisp.config import EvalOptions, Scoping
from crisp.evaluation.evaluator import evaluate
from crisp.reader.lexer import lex
from crisp.reader.parser import parse
from crisp.types.environment import Environment
from crisp.types.errors import CrispEvalError

log = logging.getLogger(__name__)


def run(source: str, env: Environment, options: EvalOptions | None = None) -> LispValue:
    """Lex, parse and evaluate the first expression in `source` against `env`.

    Tokens after the first complete expression are ignored. The first error
    raised by any stage propagates to the caller.
    """
    tokens = lex(source)
    try:
        expr, rest = parse(tokens)
        if rest:
            log.debug("ignoring %d trailing token(s)", len(rest))
        return evaluate(expr, env, options)
    except RecursionError:
        raise CrispEvalError("Maximum recursion depth exceeded") from None


class Interpreter:
    """
    Owns one root Environment and feeds programs into `run`.
    Bindings made with `def` persist across calls to `eval`.
    """

    def __init__(
        self,
        options: EvalOptions | None = None,
        *,
        max_depth: int | None = None,
        scoping: Scoping | None = None,
    ):
        if options is None:
            options = EvalOptions.from_env()
        self.options: EvalOptions = options.with_overrides(max_depth, scoping)
        self.env: Environment = default_environment()

    def eval(self, code: str) -> LispValue:
        log.debug("eval %r", code)
        return run(code, self.env, self.options)
