from crisp import EvaluatorFn
from crisp import Expression, LispValue
from crisp.types.environment import Environment
from crisp.types.errors import CrispArityError, CrispEvalError, CrispParamListError
from crisp.types.lambda_fn import Lambda
from crisp.types.symbol import Symbol


def parse_param_list(params: list[Expression]) -> list[Symbol]:
    """Parameters must be distinct bare symbols."""
    seen: set[Symbol] = set()
    for p in params:
        if not isinstance(p, Symbol) or p in seen:
            raise CrispParamListError()
        seen.add(p)
    return list(params)


def fn_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn (params...) body): exactly one body form, kept unevaluated.
    if len(tail) > 2:
        raise CrispArityError("fn takes exactly 2 arguments")
    if not tail:
        raise CrispArityError("Expected a param expression")

    params = tail[0]
    if not isinstance(params, list):
        raise CrispEvalError("Params should be a list")
    formals = parse_param_list(params)

    if len(tail) < 2:
        raise CrispArityError("fn takes exactly 2 arguments")

    return Lambda(formals, tail[1], env)
