"""Display forms for crisp values.

`to_display` is what the REPL and the file runner print for a result;
`to_source` renders an expression back as parenthesised source text and is
used when printing lambda bodies.
"""

from __future__ import annotations

import math

import numpy as np

from crisp import LispValue
from crisp.types.lambda_fn import Lambda
from crisp.types.native_fn import NativeFn
from crisp.types.symbol import Symbol


def format_number(x: np.float32) -> str:
    """Shortest decimal that round-trips the float32, without a trailing '.0'."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return np.format_float_positional(np.float32(x), unique=True, trim="-")


def _atom(value: LispValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, np.float32):
        return format_number(value)
    if isinstance(value, (Symbol, NativeFn, Lambda)):
        return str(value)
    raise TypeError(f"Not a crisp value: {value!r}")


def to_display(value: LispValue) -> str:
    if isinstance(value, list):
        return "[" + ", ".join(to_display(v) for v in value) + "]"
    return _atom(value)


def to_source(expr: LispValue) -> str:
    if isinstance(expr, list):
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    return _atom(expr)
