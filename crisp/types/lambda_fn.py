"""User-defined function values."""

from __future__ import annotations

from io import StringIO

from crisp import Expression
from crisp.types.environment import Environment
from crisp.types.symbol import Symbol
from crisp.types.values import is_equal


class Lambda:
    """A first-class function with fixed parameters, one body form and its defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self, params: list[Symbol], body: Expression, env: Environment | None = None
    ):
        self.params: list[Symbol] = params
        self.body: Expression = body
        self.env: Environment | None = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, args: list, parent: Environment) -> Environment:
        """Return a fresh call scope under `parent` binding each param to its argument."""
        call_env = Environment(outer=parent)
        for param, arg in zip(self.params, args):
            call_env.insert(param, arg)
        return call_env

    def __eq__(self, other: object) -> bool:
        # The defining environment is not part of a lambda's value
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and is_equal(self.body, other.body)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        from crisp.display import to_source

        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda({self.params!r}, {self.body!r})"
