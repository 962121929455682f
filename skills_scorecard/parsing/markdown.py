"""SKILL.md loading and description extraction."""

import re
from pathlib import Path

from skills_scorecard.exceptions import SkillParseError
from skills_scorecard.models import DEFAULT_DESCRIPTION

SKILL_FILE = "SKILL.md"

MIN_DESCRIPTION_LENGTH = 20

_SKIPPED_PREFIXES = ("#", "```", "- ", "* ")


def extract_description(body: str, fallback: str | None = None) -> str:
    """Return the first prose line of a markdown body.

    Headings, code fences and list items are skipped, as is any line of
    MIN_DESCRIPTION_LENGTH characters or fewer.

    Args:
        body: Markdown body without frontmatter
        fallback: Value used when no line qualifies (defaults to
                  DEFAULT_DESCRIPTION)

    Example:
        >>> extract_description("# Title\\n\\nConverts CSV files into charts.")
        'Converts CSV files into charts.'
    """
    for raw_line in re.split(r"\r?\n", body):
        line = raw_line.strip()
        if not line or line.startswith(_SKIPPED_PREFIXES):
            continue
        if len(line) > MIN_DESCRIPTION_LENGTH:
            return line
    return fallback or DEFAULT_DESCRIPTION


class SkillMarkdownLoader:
    """Reads the SKILL.md file of a skill directory."""

    def skill_file(self, skill_path: Path) -> Path:
        return skill_path / SKILL_FILE

    def exists(self, skill_path: Path) -> bool:
        return self.skill_file(skill_path).is_file()

    def load(self, skill_path: Path) -> str:
        """
        Load the raw SKILL.md text.

        Args:
            skill_path: Path to the skill directory

        Returns:
            The file content, or an empty string if SKILL.md is absent.

        Raises:
            SkillParseError: If SKILL.md exists but cannot be read or decoded
        """
        skill_md_path = self.skill_file(skill_path)

        if not skill_md_path.is_file():
            return ''

        try:
            return skill_md_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise SkillParseError(f"Error reading {skill_md_path}: {e}")
