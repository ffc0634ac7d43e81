from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from unitlane.reporting.base import ReportSink
from unitlane.results import OutcomeRecord, RunSummary, Status

logger = logging.getLogger("unitlane.reporting")

DEFAULT_COLORS = {
    "pass": "#bbffbb",
    "fail": "#ffbbbb",
    "error": "#bbbbff",
    "title": "#dddddd",
}


def render_report(
    summary: RunSummary,
    colors: dict[str, str] | None = None,
    show_pass: bool = True,
) -> str:
    """Render the HTML report for one run summary."""
    palette = {**DEFAULT_COLORS, **(colors or {})}
    row_color = {
        Status.PASS: palette["pass"],
        Status.FAIL: palette["fail"],
        Status.ERROR: palette["error"],
    }

    rows: list[dict[str, Any]] = []
    for outcome in summary.outcomes:
        if outcome.status is Status.PASS and not show_pass:
            continue
        rows.append(
            {
                "status": outcome.status.value,
                "index": outcome.index,
                "label": outcome.label,
                "detail": outcome.detail,
                "trace": outcome.trace,
                "color": row_color[outcome.status],
            }
        )

    summary_colors = {
        "Pass": palette["pass"],
        "Fail": palette["fail"],
        "Error": palette["error"],
    }
    summary_rows = [
        {"label": label, "value": value, "color": summary_colors.get(label, palette["title"])}
        for label, value in summary.as_rows()
    ]

    tmpl_dir = Path(__file__).parent / "templates"
    env = Environment(loader=FileSystemLoader(str(tmpl_dir)), autoescape=True)
    template = env.get_template("report.html.j2")

    return template.render(
        name=summary.name,
        rows=rows,
        summary_rows=summary_rows,
        registration_errors=summary.registration_errors,
        duration=f"{summary.duration_seconds:.3f}",
        title_color=palette["title"],
        generated=datetime.now(timezone.utc).isoformat(timespec="seconds"),
    )


class HtmlSink(ReportSink):
    """Render report.html with status rows coloured per outcome."""

    def __init__(
        self,
        path: Path,
        colors: dict[str, str] | None = None,
        show_pass: bool = True,
    ):
        self.path = Path(path)
        self.colors = colors
        self.show_pass = show_pass

    def record(self, outcome: OutcomeRecord) -> None:
        return None

    def summarize(self, summary: RunSummary) -> None:
        html = render_report(summary, colors=self.colors, show_pass=self.show_pass)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(html, encoding="utf-8")
        logger.debug(f"Wrote HTML report: {self.path}")
