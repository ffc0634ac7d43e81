"""Outcome records, run counters and the end-of-run summary."""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any


class Status(str, Enum):
    PASS = "Pass"
    FAIL = "Fail"
    ERROR = "Error"


@dataclass(frozen=True)
class OutcomeRecord:
    """Outcome of executing one registered test.

    Attributes:
        label: Display name derived from the test callable, e.g. "test_sum()".
        status: Pass, Fail (an assertion failed) or Error (anything else raised).
        detail: Empty for Pass, the rendered failure/error message otherwise.
        trace: Formatted traceback, only for Error outcomes.
        duration_seconds: Wall-clock time spent in the test body.
        index: 1-based position in the run.
        operator: Assertion kind for Fail outcomes.
        code: Assertion site code for Fail outcomes.
    """

    label: str
    status: Status
    detail: str = ""
    trace: str = ""
    duration_seconds: float = 0.0
    index: int = 0
    operator: str = ""
    code: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class RunCounters:
    passed: int = 0
    failed: int = 0
    errors: int = 0
    registration_errors: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.errors

    def clear_outcomes(self) -> None:
        self.passed = 0
        self.failed = 0
        self.errors = 0

    def clear(self) -> None:
        self.clear_outcomes()
        self.registration_errors = 0

    def tally(self, status: Status) -> None:
        if status is Status.PASS:
            self.passed += 1
        elif status is Status.FAIL:
            self.failed += 1
        else:
            self.errors += 1


@dataclass(frozen=True)
class RunSummary:
    """Counts emitted once at the end of a run."""

    name: str
    passed: int
    failed: int
    errors: int
    assertions: int
    registration_errors: int = 0
    duration_seconds: float = 0.0
    outcomes: tuple[OutcomeRecord, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.errors

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.errors == 0

    def as_rows(self) -> list[tuple[str, int]]:
        return [
            ("Pass", self.passed),
            ("Fail", self.failed),
            ("Error", self.errors),
            ("Total", self.total),
            ("Asserts", self.assertions),
        ]

    def render(self) -> str:
        return ";\n".join(f"{label} {value}" for label, value in self.as_rows())

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "total": self.total,
            "assertions": self.assertions,
            "registration_errors": self.registration_errors,
            "duration_seconds": self.duration_seconds,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }
