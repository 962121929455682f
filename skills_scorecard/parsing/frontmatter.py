"""Frontmatter splitting for SKILL.md files."""

from typing import Tuple

import yaml

from skills_scorecard.exceptions import SkillParseError


class FrontmatterParser:
    """Separates optional YAML frontmatter from the markdown body."""

    def split(self, text: str) -> Tuple[dict, str]:
        """
        Split SKILL.md text into (metadata_dict, body).

        Text that does not open with a '---' line has no frontmatter and is
        returned unchanged as the body.

        Args:
            text: Full SKILL.md content

        Returns:
            Tuple of (metadata dict, markdown body after the second delimiter)

        Raises:
            SkillParseError: If the frontmatter is unterminated, is not valid
                           YAML, or is not a mapping
        """
        lines = text.splitlines(keepends=True)
        if not lines or lines[0].strip() != '---':
            return {}, text

        frontmatter_lines = []
        for index, line in enumerate(lines[1:], start=1):
            if line.strip() == '---':
                body = ''.join(lines[index + 1:])
                break
            frontmatter_lines.append(line)
        else:
            raise SkillParseError(
                "SKILL.md ended before finding second '---' delimiter"
            )

        try:
            metadata = yaml.safe_load(''.join(frontmatter_lines))
        except yaml.YAMLError as e:
            raise SkillParseError(f"Invalid YAML in frontmatter: {e}")

        if metadata is None:
            metadata = {}

        if not isinstance(metadata, dict):
            raise SkillParseError(
                f"Frontmatter must be a YAML dictionary, got {type(metadata).__name__}"
            )

        return metadata, body
