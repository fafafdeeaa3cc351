"""Turning call parameters into string cache keys."""

from __future__ import annotations

import math
from typing import Any


def _float_key(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def as_key(value: Any) -> str:
    """Return the cache-key fragment for ``value``.

    ``None`` and the empty tuple stand for the unit value ``"()"``; strings
    are used as they are; numbers use their shortest decimal form; lists
    become ``v[...]``; tuples of two or more items are joined with commas.
    Objects with their own ``as_key`` method are asked for their key.
    """
    custom = getattr(value, "as_key", None)
    if callable(custom) and not isinstance(value, type):
        return str(custom())
    if value is None or value == ():
        return "()"
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return _float_key(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, list):
        return "v[" + ",".join(as_key(item) for item in value) + "]"
    if isinstance(value, tuple):
        if len(value) < 2:
            raise TypeError("a one-element tuple has no key")
        return ",".join(as_key(item) for item in value)
    raise TypeError(f"cannot make a key from {type(value).__name__}")