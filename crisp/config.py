from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Literal

Scoping = Literal["lexical", "dynamic"]

SCOPINGS: tuple[str, ...] = ("lexical", "dynamic")

# Defaults
# No evaluator depth limit unless configured; the Python stack limit still applies
DEFAULT_MAX_DEPTH: int | None = None
DEFAULT_SCOPING: Scoping = "lexical"
DEFAULT_PROMPT = "> "


def int_from_env(var: str, default: int | None) -> int | None:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int | None:
    return int_from_env("CRISP_MAX_DEPTH", DEFAULT_MAX_DEPTH)


def get_scoping() -> Scoping:
    raw = os.environ.get("CRISP_SCOPING", "").strip().lower()
    if not raw:
        return DEFAULT_SCOPING
    if raw not in SCOPINGS:
        raise ValueError(f"CRISP_SCOPING must be one of {', '.join(SCOPINGS)}, got {raw!r}")
    return raw  # type: ignore[return-value]


def get_prompt() -> str:
    return os.environ.get("CRISP_PROMPT") or DEFAULT_PROMPT


@dataclass(frozen=True)
class EvalOptions:
    """Evaluator settings.

    max_depth: nesting depth at which evaluation stops with an error, or
               None to rely on the Python recursion limit alone.
    scoping:   "lexical" parents a call scope to the lambda's defining
               environment, "dynamic" to the caller's environment.
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH
    scoping: Scoping = DEFAULT_SCOPING

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.scoping not in SCOPINGS:
            raise ValueError(f"scoping must be one of {', '.join(SCOPINGS)}, got {self.scoping!r}")

    @classmethod
    def from_env(cls) -> EvalOptions:
        return cls(max_depth=get_max_depth(), scoping=get_scoping())

    def with_overrides(self, max_depth: int | None = None, scoping: Scoping | None = None) -> EvalOptions:
        changes = {}
        if max_depth is not None:
            changes["max_depth"] = max_depth
        if scoping is not None:
            changes["scoping"] = scoping
        return replace(self, **changes)
