"""Comparison operators used by the assertion library.

Two equality operators are provided: ``loose_equal`` coerces
between numbers, strings and booleans, ``strict_equal`` requires the same
concrete type.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any


class _Undefined:
    """Marker for a value that was never set (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

_SCALARS = (bool, numbers.Real, str)

# numeric string forms; ASCII digits only, no underscores
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+")
_INFINITY_RE = re.compile(r"[+-]?Infinity")


def is_nullish(value: Any) -> bool:
    return value is None or value is UNDEFINED


def _to_number(value: Any) -> float | numbers.Real:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Real):
        return value
    text = value.strip()
    if not text:
        return 0
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if _RADIX_RE.fullmatch(text):
        return int(text, 0)
    if _INFINITY_RE.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    return math.nan


def loose_equal(actual: Any, expected: Any) -> bool:
    """Coercive equality for scalars, plain ``==`` for everything else.

    >>> loose_equal(5, "5"), loose_equal(True, 1), loose_equal(None, UNDEFINED)
    (True, True, True)
    """
    if is_nullish(actual) or is_nullish(expected):
        return is_nullish(actual) and is_nullish(expected)
    if isinstance(actual, str) and isinstance(expected, str):
        return actual == expected
    if isinstance(actual, _SCALARS) and isinstance(expected, _SCALARS):
        return _to_number(actual) == _to_number(expected)
    return bool(actual == expected)


def strict_equal(actual: Any, expected: Any) -> bool:
    """Equal value and identical concrete type. NaN is never equal."""
    if type(actual) is not type(expected):
        return False
    return bool(actual == expected)


def type_tag(value: Any) -> str:
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value) and not isinstance(value, type):
        return "function"
    return type(value).__qualname__


def is_not_a_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return True
    return math.isnan(value)
