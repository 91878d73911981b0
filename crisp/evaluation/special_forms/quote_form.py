from crisp import EvaluatorFn
from crisp import Expression, LispValue
from crisp.types.environment import Environment
from crisp.types.errors import CrispSyntaxError


def quote_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise CrispSyntaxError("quote takes a single argument")
    return tail[0]
