"""Runtime environment for crisp.

The Environment stores bindings of symbol names to evaluated values and
supports nested scopes via an `outer` link. Writes only ever touch the current
frame; reads walk outward so inner bindings shadow outer ones.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from crisp import LispValue
from crisp.types.errors import CrispUnboundSymbol
from crisp.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    return name.name if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def insert(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, never in an ancestor."""
        self.vars[_key(name)] = value

    def contains_local(self, name: Symbol | str) -> bool:
        return _key(name) in self.vars

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> Optional[LispValue]:
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_key(name)]

    def lookup(self, name: Symbol | str) -> LispValue:
        """Like get, but an unbound name raises CrispUnboundSymbol."""
        env = self.find(name)
        if env is None:
            raise CrispUnboundSymbol(f"Unknown symbol: {_key(name)}")
        return env.vars[_key(name)]

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
