"""Assertion primitives and the comparison operators behind them."""

from unitlane.assertions.equality import UNDEFINED, loose_equal, strict_equal
from unitlane.assertions.library import AssertionLibrary
from unitlane.errors import AssertionFailure

__all__ = [
    "UNDEFINED",
    "AssertionFailure",
    "AssertionLibrary",
    "loose_equal",
    "strict_equal",
]
