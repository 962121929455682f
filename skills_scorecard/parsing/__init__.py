"""Parsing module for SKILL.md frontmatter and body."""

from skills_scorecard.parsing.frontmatter import FrontmatterParser
from skills_scorecard.parsing.markdown import SkillMarkdownLoader, extract_description

__all__ = ["FrontmatterParser", "SkillMarkdownLoader", "extract_description"]
