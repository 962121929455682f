"""Data models for the skills scorecard."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


DEFAULT_DESCRIPTION = "No description available."


class Band(Enum):
    """Coarse label derived from a skill's overall score."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_WORK = "needs-work"


class RiskLevel(Enum):
    """Security risk label derived from a skill's security score."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class SkillReport:
    """Scored view of a single skill directory."""
    name: str
    location: Path
    description: str = DEFAULT_DESCRIPTION
    has_skill_file: bool = False
    quality_score: int = 0
    security_score: int = 100
    overall_score: int = 0
    band: Band = Band.NEEDS_WORK
    security_risk: RiskLevel = RiskLevel.LOW
    strengths: list[str] = field(default_factory=list)
    quality_gaps: list[str] = field(default_factory=list)
    security_findings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to the JSON-compatible report entry."""
        return {
            "name": self.name,
            "location": str(self.location),
            "description": self.description,
            "hasSkillFile": self.has_skill_file,
            "qualityScore": self.quality_score,
            "securityScore": self.security_score,
            "overallScore": self.overall_score,
            "band": self.band.value,
            "securityRisk": self.security_risk.value,
            "strengths": list(self.strengths),
            "qualityGaps": list(self.quality_gaps),
            "securityFindings": list(self.security_findings),
        }


@dataclass
class ReportSummary:
    """Integer means across all scored skills."""
    avg_overall: int = 0
    avg_quality: int = 0
    avg_security: int = 0

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "avgOverall": self.avg_overall,
            "avgQuality": self.avg_quality,
            "avgSecurity": self.avg_security,
        }


@dataclass
class Report:
    """Whole-run artifact published to every sink."""
    generated_at: datetime
    source_dir: Path
    skills: list[SkillReport] = field(default_factory=list)
    summary: ReportSummary = field(default_factory=ReportSummary)

    @property
    def count(self) -> int:
        return len(self.skills)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "generatedAt": self.generated_at.isoformat().replace("+00:00", "Z"),
            "sourceDir": str(self.source_dir),
            "count": self.count,
            "summary": self.summary.to_dict(),
            "skills": [skill.to_dict() for skill in self.skills],
        }


@dataclass
class AuditEvent:
    """Record of a scorecard operation."""
    ts: datetime
    kind: str  # "scan", "score", "publish", "error"
    skill: str
    path: str | None = None
    detail: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "ts": self.ts.isoformat(),
            "kind": self.kind,
            "skill": self.skill,
            "path": self.path,
            "detail": self.detail,
        }
