from __future__ import annotations

import logging
from pathlib import Path

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

from unitlane.reporting.base import ReportSink
from unitlane.results import OutcomeRecord, RunSummary, Status

logger = logging.getLogger("unitlane.reporting")


def write_junit(path: Path, summary: RunSummary) -> Path:
    """Write junit.xml for one run summary, return path."""
    xml = JUnitXml(summary.name)
    suite = TestSuite(summary.name)

    suite.add_property("assertions", str(summary.assertions))
    suite.add_property("registration_errors", str(summary.registration_errors))

    # Test cases: one per executed test
    for outcome in summary.outcomes:
        case = TestCase(outcome.label)
        case.classname = summary.name
        case.time = outcome.duration_seconds
        if outcome.status is Status.FAIL:
            failure = Failure(outcome.detail, outcome.operator or None)
            case.result = failure
        elif outcome.status is Status.ERROR:
            error = Error(outcome.detail)
            if outcome.trace:
                error.text = outcome.trace
            case.result = error
        suite.add_testcase(case)

    # Set time after add_testcase (add_testcase resets it via update_statistics)
    suite.time = summary.duration_seconds

    # Use append (not +=) to preserve properties and time
    xml.append(suite)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path


class JUnitSink(ReportSink):
    """Write a JUnit XML file once the run is summarized."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def record(self, outcome: OutcomeRecord) -> None:
        # outcomes are read back from the summary
        return None

    def summarize(self, summary: RunSummary) -> None:
        written = write_junit(self.path, summary)
        logger.debug(f"Wrote JUnit report: {written}")
