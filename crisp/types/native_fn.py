"""Built-in function values.

Built-ins form a closed set identified by name, so two NativeFn values are
equal exactly when they name the same built-in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from crisp import LispValue


@dataclass(frozen=True)
class NativeFn:
    name: str
    fn: Callable[[list[LispValue]], LispValue] = field(compare=False, repr=False)

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"<native fn {self.name}>"
