"""Sequential test engine: registration, execution, classification, reporting."""

from __future__ import annotations

import functools
import inspect
import logging
import time
import traceback
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from unitlane.assertions.library import AssertionLibrary
from unitlane.errors import AssertionFailure, EngineStateError, RegistrationError
from unitlane.reporting.base import ReportSink
from unitlane.results import OutcomeRecord, RunCounters, RunSummary, Status

TestFunction = Callable[..., Any]


class EngineState(str, Enum):
    IDLE = "idle"
    REGISTERING = "registering"
    RUNNING = "running"
    REPORTING = "reporting"


def label_for(fn: TestFunction) -> str:
    """Display label for a registered test, e.g. ``"test_sum()"``."""
    target = fn
    while isinstance(target, functools.partial):
        target = target.func
    name = getattr(target, "__qualname__", None) or getattr(target, "__name__", None)
    if not name:
        name = type(target).__qualname__
    # local test functions defined inside a suite keep only their own name
    name = name.rsplit(".<locals>.", 1)[-1]
    return f"{name}()"


def _accepts_assertions(fn: TestFunction) -> bool:
    """True when the first parameter of ``fn`` is a required positional one."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    for param in signature.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            return param.default is param.empty
        return False
    return False


@dataclass(frozen=True)
class _Entry:
    fn: TestFunction
    label: str
    wants_assertions: bool


class LabelView:
    """Lazy, restartable view of registered test labels."""

    def __init__(self, entries: list[_Entry]):
        self._entries = entries

    def __iter__(self) -> Iterator[str]:
        for entry in self._entries:
            yield entry.label

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LabelView({list(self)!r})"


class TestEngine:
    """Runs registered tests one at a time and reports each outcome.

    A test body never propagates its exception out of ``run()``:
    ``AssertionFailure`` is classified as Fail, anything else it raises
    (``SystemExit`` included) as Error. ``KeyboardInterrupt`` stops the run.
    Only registering a non-callable raises to the caller.
    """

    # keep pytest from collecting this class
    __test__ = False

    def __init__(
        self,
        assertions: AssertionLibrary | None = None,
        sinks: Iterable[ReportSink] = (),
        name: str = "UnitTests",
        logger: logging.Logger | None = None,
    ):
        self.name = name or "UnitTests"
        self._assertions = assertions if assertions is not None else AssertionLibrary(name=self.name)
        self._sinks: list[ReportSink] = list(sinks)
        self._registry: list[_Entry] = []
        self._counters = RunCounters()
        self._state = EngineState.IDLE
        self.logger = logger or logging.getLogger("unitlane")

    # -- read-only state ---------------------------------------------------

    @property
    def assertions(self) -> AssertionLibrary:
        return self._assertions

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def sinks(self) -> tuple[ReportSink, ...]:
        return tuple(self._sinks)

    @property
    def counters(self) -> RunCounters:
        return RunCounters(
            passed=self._counters.passed,
            failed=self._counters.failed,
            errors=self._counters.errors,
            registration_errors=self._counters.registration_errors,
        )

    @property
    def pass_count(self) -> int:
        return self._counters.passed

    @property
    def fail_count(self) -> int:
        return self._counters.failed

    @property
    def error_count(self) -> int:
        return self._counters.errors

    @property
    def registration_errors(self) -> int:
        return self._counters.registration_errors

    def __len__(self) -> int:
        return len(self._registry)

    # -- registration ------------------------------------------------------

    def _require_not_running(self, operation: str) -> None:
        if self._state in (EngineState.RUNNING, EngineState.REPORTING):
            raise EngineStateError(
                f"Cannot {operation} while the engine is {self._state.value}"
            )

    def add_sink(self, sink: ReportSink) -> None:
        self._require_not_running("add a sink")
        self._sinks.append(sink)

    def register(self, fn: TestFunction) -> TestFunction:
        """Append ``fn`` to the run order. Returns ``fn`` (usable as a decorator)."""
        self._require_not_running("register tests")
        if not callable(fn):
            self._counters.registration_errors += 1
            self.logger.error(f"Rejected non-callable test: {fn!r}")
            raise RegistrationError(
                f"register() argument is not callable: {type(fn).__name__}"
            )
        entry = _Entry(fn=fn, label=label_for(fn), wants_assertions=_accepts_assertions(fn))
        self._registry.append(entry)
        self._state = EngineState.REGISTERING
        self.logger.debug(f"Registered test #{len(self._registry)}: {entry.label}")
        return fn

    def reset(self) -> None:
        """Clear every counter and empty the registry."""
        self._require_not_running("reset")
        self._counters.clear()
        self._registry.clear()
        self._assertions.reset_count()
        self._state = EngineState.IDLE

    def list_registered(self) -> LabelView:
        return LabelView(self._registry)

    # -- execution ---------------------------------------------------------

    def run(self) -> RunSummary:
        """Execute all registered tests in order and return the summary."""
        self._require_not_running("start a run")
        self._counters.clear_outcomes()
        self._assertions.reset_count()
        self._state = EngineState.RUNNING
        self.logger.info(f"Running {len(self._registry)} test(s) for '{self.name}'")

        outcomes: list[OutcomeRecord] = []
        started = time.perf_counter()
        try:
            for index, entry in enumerate(list(self._registry), start=1):
                outcome = self._execute(index, entry)
                self._counters.tally(outcome.status)
                outcomes.append(outcome)
                self.logger.debug(
                    f"[{index}/{len(self._registry)}] {outcome.status.value} {outcome.label}"
                    + (f": {outcome.detail}" if outcome.detail else "")
                )
                self._dispatch("record", outcome)

            self._state = EngineState.REPORTING
            summary = RunSummary(
                name=self.name,
                passed=self._counters.passed,
                failed=self._counters.failed,
                errors=self._counters.errors,
                assertions=self._assertions.assertion_count,
                registration_errors=self._counters.registration_errors,
                duration_seconds=time.perf_counter() - started,
                outcomes=tuple(outcomes),
            )
            self.logger.info(
                f"'{self.name}' finished: pass={summary.passed} fail={summary.failed} "
                f"error={summary.errors} total={summary.total} asserts={summary.assertions}"
            )
            self._dispatch("summarize", summary)
        finally:
            self._state = EngineState.IDLE

        return summary

    def _execute(self, index: int, entry: _Entry) -> OutcomeRecord:
        started = time.perf_counter()
        try:
            if entry.wants_assertions:
                entry.fn(self._assertions)
            else:
                entry.fn()
        except AssertionFailure as failure:
            return OutcomeRecord(
                label=entry.label,
                status=Status.FAIL,
                detail=str(failure),
                duration_seconds=time.perf_counter() - started,
                index=index,
                operator=failure.operator,
                code=failure.code,
            )
        except KeyboardInterrupt:
            raise
        except BaseException as e:
            # SystemExit and other non-Exception signals still only end this test
            return OutcomeRecord(
                label=entry.label,
                status=Status.ERROR,
                detail=f"{type(e).__name__}: {e}",
                trace="".join(traceback.format_exception(type(e), e, e.__traceback__)),
                duration_seconds=time.perf_counter() - started,
                index=index,
            )
        return OutcomeRecord(
            label=entry.label,
            status=Status.PASS,
            duration_seconds=time.perf_counter() - started,
            index=index,
        )

    def _dispatch(self, method: str, payload: Any) -> None:
        for sink in self._sinks:
            try:
                getattr(sink, method)(payload)
            except Exception:
                self.logger.exception(
                    f"Reporting sink {type(sink).__name__}.{method} failed"
                )
