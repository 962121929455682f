"""Skills Scorecard - heuristic quality and security scoring for skill folders.

Scans a directory of skills, scores each SKILL.md for documentation quality
and textual risk signals, publishes the aggregate report as JSON, and renders
published reports as a searchable listing.
"""

from skills_scorecard.exceptions import (
    ScorecardError,
    SkillsDirectoryNotFoundError,
    SkillParseError,
    ReportLoadError,
    ReportValidationError,
    PublishError,
)

from skills_scorecard.models import (
    Band,
    RiskLevel,
    SkillReport,
    ReportSummary,
    Report,
    AuditEvent,
)

from skills_scorecard.config import ScorecardConfig
from skills_scorecard.observability import AuditSink, JSONLAuditSink, StdoutAuditSink
from skills_scorecard.scoring import QualityScorer, SecurityScorer, ScoreRule
from skills_scorecard.report import (
    FileReportSink,
    JSONReportRenderer,
    ReportGenerator,
    ReportSink,
    StdoutReportSink,
    publish,
)
from skills_scorecard.validation import SiteValidator
from skills_scorecard.viewer import ReportViewer, ViewerState, filter_skills

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "ScorecardError",
    "SkillsDirectoryNotFoundError",
    "SkillParseError",
    "ReportLoadError",
    "ReportValidationError",
    "PublishError",
    # Models
    "Band",
    "RiskLevel",
    "SkillReport",
    "ReportSummary",
    "Report",
    "AuditEvent",
    # Configuration
    "ScorecardConfig",
    # Observability
    "AuditSink",
    "JSONLAuditSink",
    "StdoutAuditSink",
    # Scoring
    "QualityScorer",
    "SecurityScorer",
    "ScoreRule",
    # Reports
    "ReportGenerator",
    "JSONReportRenderer",
    "ReportSink",
    "FileReportSink",
    "StdoutReportSink",
    "publish",
    "SiteValidator",
    # Viewer
    "ReportViewer",
    "ViewerState",
    "filter_skills",
]
