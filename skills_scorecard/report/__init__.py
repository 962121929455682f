"""Report generation and publishing."""

from skills_scorecard.report.generator import ReportGenerator
from skills_scorecard.report.json_renderer import JSONReportRenderer
from skills_scorecard.report.sinks import FileReportSink, ReportSink, StdoutReportSink, publish

__all__ = [
    "ReportGenerator",
    "JSONReportRenderer",
    "ReportSink",
    "FileReportSink",
    "StdoutReportSink",
    "publish",
]
