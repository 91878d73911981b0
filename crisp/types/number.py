"""32-bit float numbers for crisp.

Every number in the language is a ``numpy.float32``: literals are parsed
straight into that type and arithmetic stays in single precision, so results
round exactly the way a C ``float`` would.
"""

from __future__ import annotations

import re
from decimal import Decimal

import numpy as np

FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def is_number(value: object) -> bool:
    return isinstance(value, np.float32)


def _round_to_float32(token: str) -> np.float32:
    """Round the decimal `token` once, to the nearest float32 (ties to even).

    Going through a double can land exactly on the midpoint between two
    float32 values; that tie is then settled from the exact decimal text.
    """
    wide = float(token)
    # Out-of-range literals saturate to +/-inf
    with np.errstate(over="ignore"):
        narrow = np.float32(wide)
    if not np.isfinite(narrow) or float(narrow) == wide:
        return narrow

    other = np.nextafter(narrow, np.float32(np.inf if wide > narrow else -np.inf))
    if (float(narrow) + float(other)) / 2 != wide:
        return narrow

    exact, midpoint = Decimal(token), Decimal(wide)
    if exact == midpoint:
        return narrow
    if (exact > midpoint) == (other > narrow):
        return other
    return narrow


def parse_number(token: str) -> np.float32 | None:
    """Return the float32 value of `token`, or None if it is not a float literal."""
    if not FLOAT_RE.fullmatch(token):
        return None
    return _round_to_float32(str(token))
