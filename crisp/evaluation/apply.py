"""Application engine for crisp.

Centralizes function application for the evaluator:
- NativeFn values are called with the evaluated argument list and validate
  their own arguments.
- Lambda values get a fresh call scope binding each parameter, and their body
  is evaluated there. The scope's parent is the lambda's defining environment
  under lexical scoping, or the caller's environment under dynamic scoping.
"""

from __future__ import annotations

from crisp import EvaluatorFn, LispValue
from crisp.config import Scoping
from crisp.types.environment import Environment
from crisp.types.errors import CrispArityError, CrispEvalError
from crisp.types.lambda_fn import Lambda
from crisp.types.native_fn import NativeFn


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
    scoping: Scoping = "lexical",
) -> LispValue:
    """Apply a Lambda to already-evaluated arguments.

    Arity is fixed: the argument count must equal the parameter count.
    """
    if len(args) != fn.arity:
        raise CrispArityError("Wrong number of arguments were supplied")

    if scoping == "lexical" and fn.env is not None:
        parent = fn.env
    else:
        parent = caller_env
    call_env = fn.bind(args, parent)
    return evaluate_fn(fn.body, call_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    scoping: Scoping = "lexical",
) -> LispValue:
    """Apply either a NativeFn or a Lambda; anything else is not callable."""
    if isinstance(head, NativeFn):
        return head(args)
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn, scoping)
    raise CrispEvalError("First form must be a function")
