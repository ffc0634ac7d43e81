"""Exception hierarchy and the assertion failure signal."""

from __future__ import annotations

from typing import Any


class UnitlaneError(Exception):
    """Base exception for unitlane."""


class RegistrationError(UnitlaneError, TypeError):
    """A non-callable was handed to ``TestEngine.register``."""


class EngineStateError(UnitlaneError, RuntimeError):
    """Operation not allowed in the engine's current state."""


class SuiteLoadError(UnitlaneError, ImportError):
    """A ``module:function`` suite reference could not be resolved."""


class AssertionFailure(AssertionError):
    """Raised by an assertion whose check does not hold.

    Test engines tell this apart from every other exception: it marks a test
    as failed rather than errored.

    Attributes:
        message: Human-readable text (default template merged with the
            caller's message).
        actual: Value the assertion received.
        expected: Value the assertion compared against.
        operator: Assertion kind that raised, e.g. ``"Equal"``.
        code: Optional short identifier of the assertion site.
    """

    def __init__(
        self,
        message: str,
        actual: Any = None,
        expected: Any = None,
        operator: str = "",
        code: str = "",
    ):
        if not operator:
            raise ValueError("AssertionFailure requires a non-empty operator")
        self._message = message
        self._actual = actual
        self._expected = expected
        self._operator = operator
        self._code = str(code) if code is not None else ""
        super().__init__(self.render())

    @property
    def message(self) -> str:
        return self._message

    @property
    def actual(self) -> Any:
        return self._actual

    @property
    def expected(self) -> Any:
        return self._expected

    @property
    def operator(self) -> str:
        return self._operator

    @property
    def code(self) -> str:
        return self._code

    def render(self) -> str:
        text = f"for {self._operator}. {self._message}"
        if self._code:
            text += f" [{self._code}]"
        return text

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self._message,
            "actual": self._actual,
            "expected": self._expected,
            "operator": self._operator,
            "code": self._code,
        }

    def __reduce__(self):
        return (
            type(self),
            (self._message, self._actual, self._expected, self._operator, self._code),
        )
