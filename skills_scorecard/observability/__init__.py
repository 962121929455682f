"""Observability module for audit logging."""

from skills_scorecard.observability.audit import AuditSink, JSONLAuditSink, StdoutAuditSink

__all__ = ["AuditSink", "JSONLAuditSink", "StdoutAuditSink"]
