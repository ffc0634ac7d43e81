"""Reporting sink interface and the in-memory sink."""

from __future__ import annotations

from abc import ABC, abstractmethod

from unitlane.results import OutcomeRecord, RunSummary


class ReportSink(ABC):
    """Consumer of per-test outcomes and the end-of-run summary."""

    @abstractmethod
    def record(self, outcome: OutcomeRecord) -> None:
        """Receive the outcome of one executed test."""
        ...

    @abstractmethod
    def summarize(self, summary: RunSummary) -> None:
        """Receive the summary once all tests have run."""
        ...


class MemorySink(ReportSink):
    """Keeps everything it receives in memory."""

    def __init__(self) -> None:
        self.outcomes: list[OutcomeRecord] = []
        self.summaries: list[RunSummary] = []

    def record(self, outcome: OutcomeRecord) -> None:
        self.outcomes.append(outcome)

    def summarize(self, summary: RunSummary) -> None:
        self.summaries.append(summary)

    @property
    def last_summary(self) -> RunSummary | None:
        return self.summaries[-1] if self.summaries else None
