"""Built-in functions for the crisp runtime environment.

The root environment holds a fixed set of native functions: `+`, `-`, `*` and
`>`. Each validates its own arguments and works in 32-bit float arithmetic.
"""
from __future__ import annotations

from functools import reduce

import numpy as np

from crisp import LispValue
from crisp.types.environment import Environment
from crisp.types.errors import CrispArityError, CrispTypeError
from crisp.types.native_fn import NativeFn
from crisp.types.number import is_number


def parse_floats(args: list[LispValue]) -> list[np.float32]:
    """Return the arguments unchanged if every one is a number."""
    for x in args:
        if not is_number(x):
            raise CrispTypeError("Expected a number")
    return list(args)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> np.float32:
    """Sum of all arguments; (+) is 0."""
    floats = parse_floats(args)
    with np.errstate(over="ignore", invalid="ignore"):
        return reduce(np.add, floats, np.float32(0))


def sub(args: list[LispValue]) -> np.float32:
    """Subtract each following argument from the first."""
    if not args:
        raise CrispArityError("- requires at least one argument")
    first, *rest = parse_floats(args)
    with np.errstate(over="ignore", invalid="ignore"):
        return reduce(np.subtract, rest, first)


def mul(args: list[LispValue]) -> np.float32:
    """Product of all arguments; (*) is 1."""
    floats = parse_floats(args)
    with np.errstate(over="ignore", invalid="ignore"):
        return reduce(np.multiply, floats, np.float32(1))


# -------------------------------
# Comparison
# -------------------------------
def gt(args: list[LispValue]) -> bool:
    """(> a b ...): compares only the first two arguments."""
    if not args:
        raise CrispArityError("> requires at least one argument")
    floats = parse_floats(args)
    if len(floats) < 2:
        raise CrispArityError("> requires at least two arguments")
    return bool(floats[0] > floats[1])


NATIVES: dict[str, NativeFn] = {
    name: NativeFn(name, fn)
    for name, fn in (
        ("+", add),
        ("-", sub),
        ("*", mul),
        (">", gt),
    )
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    for name, native in NATIVES.items():
        env.insert(name, native)


def default_environment() -> Environment:
    """A fresh root environment holding the builtins."""
    env = Environment()
    register(env)
    return env
