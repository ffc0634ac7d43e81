"""Built-in suites that exercise the engine and the assertion library.

``smoke_suite`` is expected to end with 1 pass, 2 fails and 1 error.
``library_suite`` should pass completely.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from unitlane.assertions.equality import UNDEFINED

if TYPE_CHECKING:
    from unitlane.assertions.library import AssertionLibrary
    from unitlane.engine import TestEngine


def smoke_suite(engine: TestEngine) -> None:
    def test_asserts_pass(unit: AssertionLibrary) -> None:
        unit.assert_equal("These should be equal", 5, 5, code="smoke1")
        unit.assert_not_equal("These should not be equal", 5, 1, code="smoke2")

    def test_asserts_error(unit: AssertionLibrary) -> None:
        # no such assertion: classified as an error, not a failure
        unit.assert_equals("An Error is expected here.", 5, 1, code="smoke3")

    def test_asserts_fail_not_equal(unit: AssertionLibrary) -> None:
        unit.assert_not_equal("A Fail is expected here.", 5, 5, code="smoke4")

    def test_asserts_fail_equal(unit: AssertionLibrary) -> None:
        unit.assert_equal("A Fail is expected here.", 5, 1, code="smoke5")

    engine.register(test_asserts_pass)
    engine.register(test_asserts_error)
    engine.register(test_asserts_fail_not_equal)
    engine.register(test_asserts_fail_equal)


def library_suite(engine: TestEngine) -> None:
    def test_truthiness(unit: AssertionLibrary) -> None:
        unit.assert_true("non-empty list", [0], code="lib1")
        unit.assert_false("empty string", "", code="lib2")
        unit.assert_null("None", None, code="lib3")
        unit.assert_not_null("zero is not null", 0, code="lib4")
        unit.assert_undefined("sentinel", UNDEFINED, code="lib5")
        unit.assert_not_undefined("None is defined", None, code="lib6")
        unit.assert_nan("nan", math.nan, code="lib7")
        unit.assert_not_nan("a float", 1.5, code="lib8")

    def test_equality(unit: AssertionLibrary) -> None:
        unit.assert_equal("number and numeric string", 5, "5", code="lib9")
        unit.assert_equal("bool and int", True, 1, code="lib10")
        unit.assert_not_equal("different strings", "a", "b", code="lib11")
        unit.assert_type_equal("same value and type", 2.5, 2.5, code="lib12")
        unit.assert_same_type("both numbers", 1, 2.0, code="lib13")
        unit.assert_roughly_equal("close enough", 0.1 + 0.2, 0.3, 1e-9, code="lib14")

    def test_containers(unit: AssertionLibrary) -> None:
        unit.assert_array_equal("same order", [1, 2, 3], (1, 2, 3), code="lib15")
        unit.assert_hash_equal("same keys", {"a": 1, "b": "2"}, {"b": 2, "a": 1}, code="lib16")
        unit.assert_array_contains("has 2", [1, 2, 3], 2, code="lib17")
        unit.assert_str_contains("substring", "hello world", "lo w", code="lib18")
        unit.assert_str_not_contains("no substring", "hello", "xyz", code="lib19")

    def test_failures_carry_operator(unit: AssertionLibrary) -> None:
        failure = unit.assert_throw(
            "assert_equal must fail", lambda: unit.assert_equal("", 5, 1), code="lib20"
        )
        unit.assert_equal("operator", failure.operator, "Equal", code="lib21")
        unit.assert_equal("actual", failure.actual, 5, code="lib22")
        unit.assert_equal("expected", failure.expected, 1, code="lib23")

        failure = unit.assert_throw(
            "order matters", lambda: unit.assert_array_equal("", [1, 2, 3], [1, 3, 2])
        )
        unit.assert_str_contains("index reported", failure.message, "index=1", code="lib24")

    engine.register(test_truthiness)
    engine.register(test_equality)
    engine.register(test_containers)
    engine.register(test_failures_carry_operator)


def all_suite(engine: TestEngine) -> None:
    smoke_suite(engine)
    library_suite(engine)
