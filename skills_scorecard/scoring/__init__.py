"""Heuristic quality and security scoring for SKILL.md text."""

from skills_scorecard.scoring.grades import (
    band_for_score,
    mean_score,
    overall_score,
    risk_for_score,
)
from skills_scorecard.scoring.quality import QualityAssessment, QualityScorer
from skills_scorecard.scoring.rules import QUALITY_RULES, SAFETY_RULE, SECURITY_RULES, ScoreRule
from skills_scorecard.scoring.security import SecurityAssessment, SecurityScorer

__all__ = [
    "ScoreRule",
    "QUALITY_RULES",
    "SECURITY_RULES",
    "SAFETY_RULE",
    "QualityScorer",
    "QualityAssessment",
    "SecurityScorer",
    "SecurityAssessment",
    "band_for_score",
    "risk_for_score",
    "overall_score",
    "mean_score",
]
