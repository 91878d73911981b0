"""Core evaluator for the crisp interpreter.

Implements self-evaluating atoms, symbol resolution, special-form dispatch and
ordinary application. Evaluation is a plain recursive walk; the nesting depth
is counted so runaway recursion is reported as an error instead of exhausting
the Python stack.
"""

from __future__ import annotations

from functools import partial

import numpy as np

from crisp import Expression, LispValue
from crisp.config import EvalOptions
from crisp.evaluation.apply import apply
from crisp.evaluation.special_forms import SPECIAL_FORMS
from crisp.types.environment import Environment
from crisp.types.errors import CrispEvalError
from crisp.types.symbol import Symbol

DEFAULT_OPTIONS = EvalOptions()


def evaluate(
    expr: Expression,
    env: Environment,
    options: EvalOptions | None = None,
    depth: int = 0,
) -> LispValue:
    if options is None:
        options = DEFAULT_OPTIONS
    if options.max_depth is not None and depth > options.max_depth:
        raise CrispEvalError("Maximum recursion depth exceeded")

    evaluate_fn = partial(evaluate, options=options, depth=depth + 1)

    match expr:
        case bool() | np.float32():
            return expr

        case Symbol():
            return env.lookup(expr)

        case []:
            raise CrispEvalError("Can't eval an empty list")

        case [head, *tail_args]:
            # --- Special forms are matched by name before anything is evaluated ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate_fn)

            fn = evaluate_fn(head, env)
            args = [evaluate_fn(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate_fn, options.scoping)

    raise CrispEvalError(f"Cannot evaluate {expr}")
