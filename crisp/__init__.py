# Core type aliases for the crisp data model.
# Host Python values represent both code (parsed forms) and runtime values:
# numpy.float32 for numbers, bool for booleans, list for lists, plus the
# Symbol, NativeFn and Lambda classes under crisp.types.
#
# Naming guidance:
# - Expression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable, the language being homoiconic.

from typing import Any, Callable

LispValue = Any
Expression = LispValue

# Evaluator function type handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
