"""Report sinks and the publish-to-every-sink operation."""

import sys
from abc import ABC, abstractmethod
from pathlib import Path

from skills_scorecard.exceptions import PublishError
from skills_scorecard.models import Report
from skills_scorecard.observability.audit import AuditSink
from skills_scorecard.report.json_renderer import JSONReportRenderer


class ReportSink(ABC):
    """Destination for a rendered report body."""

    @abstractmethod
    def write(self, body: str) -> None:
        """Write the rendered report body.

        Raises:
            PublishError: If the body cannot be written.
        """
        pass

    @property
    @abstractmethod
    def target(self) -> str:
        """Human-readable name of the destination."""
        pass


class FileReportSink(ReportSink):
    """Writes the report body to a file, creating parent directories."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def target(self) -> str:
        return str(self.path)

    def write(self, body: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(body, encoding='utf-8')
        except OSError as e:
            raise PublishError(f"Failed to write {self.path}: {e}")


class StdoutReportSink(ReportSink):
    """Writes the report body to stdout."""

    @property
    def target(self) -> str:
        return "<stdout>"

    def write(self, body: str) -> None:
        sys.stdout.write(body + "\n")


def publish(
    report: Report,
    sinks: list[ReportSink],
    audit_sink: AuditSink | None = None,
) -> str:
    """Render report once and hand the same body to every sink.

    Sinks are written sequentially in the given order, so every file output
    of one run is byte-identical.

    Args:
        report: The report to publish
        sinks: Destinations, primary first
        audit_sink: Optional AuditSink receiving one "publish" event per sink

    Returns:
        The rendered JSON body

    Raises:
        PublishError: If any sink fails; later sinks are not written.
    """
    body = JSONReportRenderer().render(report)

    for sink in sinks:
        sink.write(body)
        if audit_sink:
            audit_sink.record(
                "publish", "*", sink.target,
                count=report.count, bytes=len(body.encode('utf-8')),
            )

    return body
