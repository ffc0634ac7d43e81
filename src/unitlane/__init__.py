"""Minimal unit-testing framework: assertion primitives and a sequential test engine."""

from unitlane.assertions.equality import UNDEFINED
from unitlane.assertions.library import AssertionLibrary
from unitlane.engine import EngineState, TestEngine
from unitlane.errors import (
    AssertionFailure,
    EngineStateError,
    RegistrationError,
    SuiteLoadError,
    UnitlaneError,
)
from unitlane.results import OutcomeRecord, RunSummary, Status

__all__ = [
    "UNDEFINED",
    "AssertionFailure",
    "AssertionLibrary",
    "EngineState",
    "EngineStateError",
    "OutcomeRecord",
    "RegistrationError",
    "RunSummary",
    "Status",
    "SuiteLoadError",
    "TestEngine",
    "UnitlaneError",
]
