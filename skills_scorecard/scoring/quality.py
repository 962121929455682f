"""Documentation quality scoring."""

from dataclasses import dataclass, field

from skills_scorecard.scoring.rules import QUALITY_RULES, ScoreRule


@dataclass
class QualityAssessment:
    """Outcome of running every quality rule over a document."""
    score: int
    strengths: list[str] = field(default_factory=list)
    gaps: list[str] = field(default_factory=list)


class QualityScorer:
    """Scores how completely a SKILL.md documents its skill.

    Each rule that matches contributes its weight and a strength note; each
    rule that does not match contributes a gap note. With the default rules
    the weights sum to 100.
    """

    def __init__(self, rules: list[ScoreRule] | None = None):
        self.rules = list(QUALITY_RULES if rules is None else rules)

    def score(self, text: str) -> QualityAssessment:
        """Score markdown text.

        Args:
            text: Raw SKILL.md content (empty string when the file is absent)

        Returns:
            QualityAssessment with the summed points and per-rule notes

        Example:
            >>> QualityScorer().score("").score
            0
        """
        assessment = QualityAssessment(score=0)

        for rule in self.rules:
            if rule.matches(text):
                assessment.score += rule.weight
                assessment.strengths.append(rule.note)
            else:
                assessment.gaps.append(rule.gap)

        return assessment
