from crisp import EvaluatorFn
from crisp import Expression, LispValue
from crisp.types.environment import Environment
from crisp.types.errors import CrispArityError, CrispEvalError, CrispNameError
from crisp.types.symbol import Symbol


def def_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds name in the current scope only and returns the name symbol.
    A name already bound in this scope is an error; outer scopes are not consulted.
    """
    if len(tail) > 2:
        raise CrispArityError("def takes exactly two arguments")
    if not tail:
        raise CrispArityError("Expected a name")

    name = tail[0]
    if not isinstance(name, Symbol):
        raise CrispEvalError("First argument must be a symbol")
    if env.contains_local(name):
        raise CrispNameError(f"Variable with name '{name}' already exists")
    if len(tail) < 2:
        raise CrispArityError("Expected a value")

    value = evaluate_fn(tail[1], env)
    env.insert(name, value)
    return name
