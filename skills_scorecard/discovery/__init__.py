"""Discovery module for skill directory scanning."""

from skills_scorecard.discovery.scanner import SkillScanner, collation_key

__all__ = ["SkillScanner", "collation_key"]
