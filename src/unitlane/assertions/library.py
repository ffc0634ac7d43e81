"""Assertion primitives.

Every assertion increments ``assertion_count`` before it evaluates anything,
so a comparison that blows up still counts as an attempted check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from unitlane.assertions.equality import (
    UNDEFINED,
    is_not_a_number,
    loose_equal,
    strict_equal,
    type_tag,
)
from unitlane.errors import AssertionFailure

logger = logging.getLogger("unitlane.assertions")

_SEQUENCES = (list, tuple)


class AssertionLibrary:
    """Evaluates named checks and raises ``AssertionFailure`` when they fail."""

    def __init__(
        self,
        name: str = "UnitTests",
        debug: bool = False,
        show_default_message: bool = True,
    ):
        self.name = name or "UnitTests"
        self.debug = debug
        self.show_default_message = show_default_message
        self._assertion_count = 0

    def __repr__(self) -> str:
        return (
            f"AssertionLibrary(name={self.name!r}, "
            f"assertion_count={self._assertion_count})"
        )

    @property
    def assertion_count(self) -> int:
        return self._assertion_count

    def reset_count(self) -> None:
        """Zero the counter. Owned by the test run, never called internally."""
        self._assertion_count = 0

    def debug_msg(self, msg: str) -> None:
        if self.debug:
            logger.debug(f"Debug: {msg}")

    def _default(self, msg: str, default: str) -> str:
        if not msg:
            return default
        if default and self.show_default_message:
            return f"{default} {msg}"
        return msg

    def _count(self) -> None:
        self._assertion_count += 1

    def _fail(
        self,
        msg: str,
        default: str,
        actual: Any,
        expected: Any,
        operator: str,
        code: str,
    ) -> AssertionFailure:
        failure = AssertionFailure(
            self._default(msg, default), actual, expected, operator, code
        )
        self.debug_msg(str(failure))
        return failure

    # -- unconditional -----------------------------------------------------

    def fail(self, msg: str, code: str = "") -> None:
        """Always raise. Equivalent to ``assert_true(msg, False)``."""
        self._count()
        raise self._fail(msg, "", True, False, "Fail", code)

    # -- truthiness --------------------------------------------------------

    def assert_true(self, msg: str, actual: Any, code: str = "") -> None:
        self._count()
        if not actual:
            raise self._fail(
                msg, "Expected actual to be true.", actual, True, "True", code
            )

    def assert_false(self, msg: str, actual: Any, code: str = "") -> None:
        self._count()
        if actual:
            raise self._fail(
                msg, "Expected actual to be false.", actual, False, "False", code
            )

    # -- presence ----------------------------------------------------------

    def assert_null(self, msg: str, actual: Any, code: str = "") -> None:
        self._count()
        if actual is not None:
            raise self._fail(
                msg, "Expected actual to be null.", actual, None, "Null", code
            )

    def assert_not_null(self, msg: str, actual: Any, code: str = "") -> None:
        self._count()
        if actual is None:
            raise self._fail(
                msg, "Expected actual to not be null.", actual, None, "NotNull", code
            )

    def assert_undefined(self, msg: str, actual: Any, code: str = "") -> None:
        self._count()
        if actual is not UNDEFINED:
            raise self._fail(
                msg,
                "Expected actual to be undefined.",
                actual,
                UNDEFINED,
                "Undefined",
                code,
            )

    def assert_not_undefined(self, msg: str, actual: Any, code: str = "") -> None:
        self._count()
        if actual is UNDEFINED:
            raise self._fail(
                msg,
                "Expected actual to not be undefined.",
                actual,
                UNDEFINED,
                "NotUndefined",
                code,
            )

    def assert_nan(self, msg: str, actual: Any, code: str = "") -> None:
        self._count()
        if not is_not_a_number(actual):
            raise self._fail(
                msg, "Expected actual to not be a number.", actual, True, "NaN", code
            )

    def assert_not_nan(self, msg: str, actual: Any, code: str = "") -> None:
        self._count()
        if is_not_a_number(actual):
            raise self._fail(
                msg, "Expected actual to be a number.", actual, True, "NotNaN", code
            )

    # -- equality ----------------------------------------------------------

    def assert_equal(self, msg: str, actual: Any, expected: Any, code: str = "") -> None:
        self._count()
        if not loose_equal(actual, expected):
            raise self._fail(
                msg,
                f'Expected "{expected}" got "{actual}".',
                actual,
                expected,
                "Equal",
                code,
            )

    def assert_not_equal(
        self, msg: str, actual: Any, expected: Any, code: str = ""
    ) -> None:
        self._count()
        if loose_equal(actual, expected):
            raise self._fail(
                msg,
                f'Expected "{actual}" to not equal expected value.',
                actual,
                expected,
                "NotEqual",
                code,
            )

    def assert_type_equal(
        self, msg: str, actual: Any, expected: Any, code: str = ""
    ) -> None:
        self._count()
        if not strict_equal(actual, expected):
            raise self._fail(
                msg,
                f'Expected "{expected!r}" to exactly equal "{actual!r}".',
                actual,
                expected,
                "TypeEqual",
                code,
            )

    def assert_same_type(
        self, msg: str, actual: Any, expected: Any, code: str = ""
    ) -> None:
        self._count()
        if type_tag(actual) != type_tag(expected):
            raise self._fail(
                msg,
                f'Expected type "{type_tag(expected)}" to match type '
                f'"{type_tag(actual)}".',
                actual,
                expected,
                "SameType",
                code,
            )

    def assert_roughly_equal(
        self,
        msg: str,
        actual: Any,
        expected: Any,
        tolerance: Any,
        code: str = "",
    ) -> None:
        self._count()
        if any(is_not_a_number(v) for v in (actual, expected, tolerance)):
            raise self._fail(
                msg,
                "One of the arguments is not a number.",
                actual,
                expected,
                "RoughlyEqual",
                code,
            )
        if abs(actual - expected) > tolerance:
            raise self._fail(
                msg,
                f"Out of tolerance: |{actual} - {expected}| > {tolerance}.",
                actual,
                expected,
                "RoughlyEqual",
                code,
            )

    # -- containers --------------------------------------------------------

    def assert_array_equal(
        self, msg: str, actual: Any, expected: Any, code: str = ""
    ) -> None:
        self._count()
        if not isinstance(actual, _SEQUENCES) or not isinstance(expected, _SEQUENCES):
            raise self._fail(
                msg,
                "One of the arguments is not an array.",
                actual,
                expected,
                "ArrayEqual",
                code,
            )
        if len(actual) != len(expected):
            raise self._fail(
                msg,
                f"Expected length {len(expected)} got {len(actual)}.",
                actual,
                expected,
                "ArrayEqual",
                code,
            )
        for index, (got, want) in enumerate(zip(actual, expected)):
            if not strict_equal(got, want):
                raise self._fail(
                    msg,
                    f'At index={index} expected="{want!r}" got="{got!r}".',
                    got,
                    want,
                    "ArrayEqual",
                    code,
                )

    def assert_hash_equal(
        self, msg: str, actual: Any, expected: Any, code: str = ""
    ) -> None:
        self._count()
        if not isinstance(actual, Mapping) or not isinstance(expected, Mapping):
            raise self._fail(
                msg,
                "One of the arguments is not a hash.",
                actual,
                expected,
                "HashEqual",
                code,
            )
        for key, value in actual.items():
            if key not in expected or not loose_equal(value, expected[key]):
                raise self._fail(
                    msg,
                    f"Actual key {key!r} is not found in expected hash "
                    "or the values are not equal.",
                    actual,
                    expected,
                    "HashEqual",
                    code,
                )
        for key in expected:
            if key not in actual:
                raise self._fail(
                    msg,
                    f"Expected key {key!r} is not found in actual hash.",
                    actual,
                    expected,
                    "HashEqual",
                    code,
                )

    def assert_array_contains(
        self, msg: str, actual: Any, value: Any, code: str = ""
    ) -> bool:
        self._count()
        if not isinstance(actual, _SEQUENCES):
            raise self._fail(
                msg, "Actual is not an array.", actual, value, "ArrayContains", code
            )
        if any(loose_equal(item, value) for item in actual):
            return True
        raise self._fail(
            msg,
            "Array does not contain expected value.",
            actual,
            value,
            "ArrayContains",
            code,
        )

    # -- strings -----------------------------------------------------------

    def assert_str_contains(
        self, msg: str, actual: Any, expected: Any, code: str = ""
    ) -> None:
        self._count()
        if not isinstance(actual, str) or not isinstance(expected, str):
            raise self._fail(
                msg,
                "One of the arguments is not a string.",
                actual,
                expected,
                "StrContains",
                code,
            )
        if expected not in actual:
            raise self._fail(
                msg,
                f'Expected string was not found: "{expected}"',
                actual,
                expected,
                "StrContains",
                code,
            )

    def assert_str_not_contains(
        self, msg: str, actual: Any, expected: Any, code: str = ""
    ) -> None:
        self._count()
        if not isinstance(actual, str) or not isinstance(expected, str):
            raise self._fail(
                msg,
                "One of the arguments is not a string.",
                actual,
                expected,
                "StrNotContains",
                code,
            )
        if expected in actual:
            raise self._fail(
                msg,
                f'Expected string was found: "{expected}"',
                actual,
                expected,
                "StrNotContains",
                code,
            )

    # -- expected failures -------------------------------------------------

    def assert_throw(
        self, msg: str, fn: Callable[[], Any], code: str = ""
    ) -> Exception:
        """Call ``fn()`` and return whatever it raised.

        Fails when ``fn`` is not callable or returns normally.
        """
        self._count()
        if not callable(fn):
            raise self._fail(
                msg, "Expected a callable.", fn, Exception, "Throw", code
            )
        try:
            result = fn()
        except Exception as e:
            return e
        raise self._fail(
            msg,
            "Expected the callable to raise.",
            result,
            Exception,
            "Throw",
            code,
        )
