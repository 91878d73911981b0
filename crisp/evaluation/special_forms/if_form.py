from crisp import EvaluatorFn
from crisp import Expression, LispValue
from crisp.types.environment import Environment
from crisp.types.errors import CrispArityError, CrispTypeError


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) > 3:
        raise CrispArityError("if takes at most 3 arguments")
    if not tail:
        raise CrispArityError("Expected a test expression")

    cond = evaluate_fn(tail[0], env)
    # No truthiness: only booleans select a branch
    if not isinstance(cond, bool):
        raise CrispTypeError("Test expression must evaluate to a boolean")

    branch = 1 if cond else 2
    if branch >= len(tail):
        raise CrispArityError("missing true or false clause")
    return evaluate_fn(tail[branch], env)
