from __future__ import annotations

from crisp import LispValue


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for crisp values, element-wise for lists.

    Types must match exactly, so ``true`` never equals the number ``1``.
    """
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return bool(a == b)
