"""Report generation across every skill directory.

ReportGenerator walks the skills root, scores each skill's SKILL.md with the
quality and security scorers, and aggregates the results into a Report.
"""

from datetime import datetime, timezone
from pathlib import Path

from skills_scorecard.discovery.scanner import SkillScanner
from skills_scorecard.exceptions import SkillParseError
from skills_scorecard.models import (
    DEFAULT_DESCRIPTION,
    Report,
    ReportSummary,
    SkillReport,
)
from skills_scorecard.observability.audit import AuditSink
from skills_scorecard.parsing.frontmatter import FrontmatterParser
from skills_scorecard.parsing.markdown import SkillMarkdownLoader, extract_description
from skills_scorecard.scoring.grades import band_for_score, mean_score, overall_score
from skills_scorecard.scoring.quality import QualityScorer
from skills_scorecard.scoring.security import SecurityScorer

MAX_STRENGTHS = 4
MAX_QUALITY_GAPS = 4


class ReportGenerator:
    """Builds a scored Report for one skills root.

    Example:
        >>> generator = ReportGenerator(Path("./skills"))
        >>> report = generator.generate()
        >>> print(f"Scored {report.count} skills, avg {report.summary.avg_overall}")
    """

    def __init__(
        self,
        skills_dir: Path,
        audit_sink: AuditSink | None = None,
        quality_scorer: QualityScorer | None = None,
        security_scorer: SecurityScorer | None = None,
    ):
        """Initialize the generator.

        Args:
            skills_dir: Root directory whose subdirectories are skills
            audit_sink: Optional AuditSink for scan/score/error events
            quality_scorer: Scorer override (defaults to the standard rules)
            security_scorer: Scorer override (defaults to the standard rules)
        """
        self.skills_dir = Path(skills_dir).expanduser()
        self._audit_sink = audit_sink
        self._scanner = SkillScanner()
        self._loader = SkillMarkdownLoader()
        self._frontmatter = FrontmatterParser()
        self._quality = quality_scorer or QualityScorer()
        self._security = security_scorer or SecurityScorer()

    def generate(self) -> Report:
        """Scan the skills root and score every skill.

        Returns:
            Report with skills in scan order and integer averages

        Raises:
            SkillsDirectoryNotFoundError: If the skills root does not exist
        """
        skill_dirs = self._scanner.scan(self.skills_dir)
        source_dir = self.skills_dir.absolute()

        self._log_event("scan", "*", source_dir, {"skills_found": len(skill_dirs)})

        skills = [self.score_skill(source_dir / skill_dir.name) for skill_dir in skill_dirs]

        summary = ReportSummary(
            avg_overall=mean_score([s.overall_score for s in skills]),
            avg_quality=mean_score([s.quality_score for s in skills]),
            avg_security=mean_score([s.security_score for s in skills]),
        )

        return Report(
            generated_at=datetime.now(timezone.utc),
            source_dir=source_dir,
            skills=skills,
            summary=summary,
        )

    def score_skill(self, skill_path: Path) -> SkillReport:
        """Score a single skill directory.

        A missing SKILL.md scores as empty text. An unreadable one is reported
        as a warning and also scores as empty text.
        """
        has_skill_file = self._loader.exists(skill_path)

        try:
            text = self._loader.load(skill_path)
        except SkillParseError as e:
            print(f"Warning: Failed to read skill at {skill_path}: {e}")
            self._log_event("error", skill_path.name, skill_path, {"error": str(e)})
            text = ''

        description = self._describe(skill_path, text) if text else DEFAULT_DESCRIPTION

        quality = self._quality.score(text)
        security = self._security.score(text)
        overall = overall_score(quality.score, security.score)

        report = SkillReport(
            name=skill_path.name,
            location=skill_path,
            description=description,
            has_skill_file=has_skill_file,
            quality_score=quality.score,
            security_score=security.score,
            overall_score=overall,
            band=band_for_score(overall),
            security_risk=security.risk_level,
            strengths=quality.strengths[:MAX_STRENGTHS],
            quality_gaps=quality.gaps[:MAX_QUALITY_GAPS],
            security_findings=security.findings,
        )

        self._log_event("score", report.name, skill_path, {
            "quality": report.quality_score,
            "security": report.security_score,
            "overall": report.overall_score,
            "band": report.band.value,
        })

        return report

    def _describe(self, skill_path: Path, text: str) -> str:
        """Pick the description from the body, then the frontmatter."""
        try:
            metadata, body = self._frontmatter.split(text)
        except SkillParseError as e:
            print(f"Warning: Ignoring frontmatter of {skill_path}: {e}")
            self._log_event("error", skill_path.name, skill_path, {"error": str(e)})
            metadata, body = {}, text

        fallback = metadata.get('description')
        if not isinstance(fallback, str) or not fallback.strip():
            fallback = None
        else:
            fallback = fallback.strip()

        return extract_description(body, fallback=fallback)

    def _log_event(self, kind: str, skill: str, path: Path, detail: dict) -> None:
        if not self._audit_sink:
            return
        self._audit_sink.record(kind, skill, path, **detail)
