from crisp import EvaluatorFn
from crisp import Expression, LispValue
from crisp.types.environment import Environment
from crisp.types.errors import CrispArityError


def begin_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise CrispArityError("begin requires at least one expression")
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(tail[-1], env)
