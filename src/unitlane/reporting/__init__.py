from unitlane.reporting.base import MemorySink, ReportSink
from unitlane.reporting.console import ConsoleSink
from unitlane.reporting.html import HtmlSink
from unitlane.reporting.junit import JUnitSink

__all__ = [
    "ConsoleSink",
    "HtmlSink",
    "JUnitSink",
    "MemorySink",
    "ReportSink",
]
