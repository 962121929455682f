"""Security risk scoring."""

from dataclasses import dataclass, field

from skills_scorecard.models import RiskLevel
from skills_scorecard.scoring.grades import clamp_score, risk_for_score
from skills_scorecard.scoring.rules import SAFETY_RULE, SECURITY_RULES, ScoreRule

BASE_SECURITY_SCORE = 100
MAX_FINDINGS = 6


@dataclass
class SecurityAssessment:
    """Outcome of running the risk rules over a document."""
    score: int
    risk_level: RiskLevel
    findings: list[str] = field(default_factory=list)


class SecurityScorer:
    """Scores textual risk signals in a SKILL.md.

    The score starts at 100. Every matching risk rule deducts its weight once
    and records a finding. Safety language earns a bonus; its absence is
    recorded as a finding instead. The result is clamped to [0, 100] and the
    findings are capped at MAX_FINDINGS, in rule order.
    """

    def __init__(
        self,
        rules: list[ScoreRule] | None = None,
        safety_rule: ScoreRule = SAFETY_RULE,
    ):
        self.rules = list(SECURITY_RULES if rules is None else rules)
        self.safety_rule = safety_rule

    def score(self, text: str) -> SecurityAssessment:
        """Score markdown text.

        Args:
            text: Raw SKILL.md content (empty string when the file is absent)

        Returns:
            SecurityAssessment with the clamped score, risk level and findings
        """
        score = BASE_SECURITY_SCORE
        findings = []

        for rule in self.rules:
            if rule.matches(text):
                score -= rule.weight
                findings.append(rule.note)

        if self.safety_rule.matches(text):
            score += self.safety_rule.weight
        else:
            findings.append(self.safety_rule.gap)

        score = clamp_score(score)
        return SecurityAssessment(
            score=score,
            risk_level=risk_for_score(score),
            findings=findings[:MAX_FINDINGS],
        )
