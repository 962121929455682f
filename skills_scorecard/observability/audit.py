"""Audit trail for report generation and publishing.

ReportGenerator records one "scan" event per run, one "score" event per
skill and an "error" event for every SKILL.md it could not parse; publish()
records one "publish" event per sink written.
"""

import json
import sys
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import TextIO

from skills_scorecard.models import AuditEvent

EVENT_KINDS = ("scan", "score", "publish", "error")


def encode_event(event: AuditEvent) -> str:
    """Compact single-line JSON for one event."""
    return json.dumps(event.to_dict(), separators=(',', ':'), ensure_ascii=False)


class AuditSink(ABC):
    """Destination for scorecard audit events."""

    @abstractmethod
    def log(self, event: AuditEvent) -> None:
        """Record an audit event."""

    def record(self, kind: str, skill: str, path: str | Path | None = None, **detail) -> AuditEvent:
        """Build a UTC-stamped event and log it.

        Args:
            kind: One of EVENT_KINDS
            skill: Skill directory name, or "*" for run-wide events
            path: Skills root, skill folder or sink target the event concerns
            **detail: Event-specific fields (scores, counts, error text)

        Returns:
            The logged event
        """
        if kind not in EVENT_KINDS:
            raise ValueError(f"Unknown audit event kind: {kind}")
        event = AuditEvent(
            ts=datetime.now(timezone.utc),
            kind=kind,
            skill=skill,
            path=None if path is None else str(path),
            detail=detail,
        )
        self.log(event)
        return event


class JSONLAuditSink(AuditSink):
    """Appends scorecard events to a JSON Lines file, one event per line.

    Example log file content:
        {"ts":"2026-01-01T12:00:00+00:00","kind":"scan","skill":"*","path":"/skills","detail":{"skills_found":3}}
        {"ts":"2026-01-01T12:00:00+00:00","kind":"publish","skill":"*","path":"web/skills.json","detail":{"count":3,"bytes":2048}}
    """

    def __init__(self, log_path: Path):
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: AuditEvent) -> None:
        with open(self.log_path, 'a', encoding='utf-8') as f:
            f.write(encode_event(event) + '\n')


class StdoutAuditSink(AuditSink):
    """Writes scorecard events to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def log(self, event: AuditEvent) -> None:
        print(encode_event(event), file=self._stream or sys.stdout)
