"""Terminal reporting."""

from __future__ import annotations

import typer

from unitlane.reporting.base import ReportSink
from unitlane.results import OutcomeRecord, RunSummary, Status


class ConsoleSink(ReportSink):
    """Print outcomes as they arrive and the summary at the end.

    Fail and Error lines go to stderr; Pass lines are shown only with
    ``show_pass``.
    """

    def __init__(self, show_pass: bool = False, show_results: bool = True):
        self.show_pass = show_pass
        self.show_results = show_results

    def record(self, outcome: OutcomeRecord) -> None:
        status = outcome.status.value.upper()
        if outcome.status is Status.PASS:
            if self.show_pass:
                typer.echo(f"  [{outcome.index}] {status}  {outcome.label}")
            return

        typer.echo(
            f"  [{outcome.index}] {status}  {outcome.label} {outcome.detail}",
            err=True,
        )
        if outcome.status is Status.ERROR and outcome.trace:
            typer.echo(outcome.trace.rstrip(), err=True)

    def summarize(self, summary: RunSummary) -> None:
        if not self.show_results:
            return
        typer.echo(f"{summary.name}: {summary.duration_seconds:.3f}s")
        typer.echo(summary.render())
        if summary.registration_errors:
            typer.echo(
                f"Registration errors {summary.registration_errors}", err=True
            )
