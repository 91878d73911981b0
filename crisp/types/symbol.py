"""Identifiers resolved against an Environment."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str

    def __post_init__(self):
        # Names are interned: bindings are keyed by them on every lookup
        object.__setattr__(self, "name", sys.intern(str(self.name)))

    def __str__(self) -> str:
        return self.name
