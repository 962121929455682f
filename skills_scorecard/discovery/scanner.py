"""Filesystem scanning for skill discovery."""

from pathlib import Path

from skills_scorecard.exceptions import SkillsDirectoryNotFoundError


def collation_key(name: str) -> tuple[str, str]:
    """Sort key approximating locale-aware comparison.

    Names compare case-insensitively first, so "alpha" sorts before "Beta".
    Names equal up to case put lower case first ("alpha" before "Alpha").
    Punctuation and digits keep code-point order, so "a1" sorts before
    "a_", unlike a full locale collation.
    """
    return (name.casefold(), name.swapcase())


class SkillScanner:
    """Scans a skills root for skill directories.

    Every immediate subdirectory of the root is a skill, whether or not it
    contains a SKILL.md file. Regular files in the root are ignored.
    """

    def scan(self, root: Path) -> list[Path]:
        """List skill directories under root in collation order.

        Args:
            root: Skills root directory

        Returns:
            Paths of the immediate subdirectories, sorted by name

        Raises:
            SkillsDirectoryNotFoundError: If root does not exist or is not a directory

        Example:
            >>> scanner = SkillScanner()
            >>> skills = scanner.scan(Path("/usr/lib/node_modules/openclaw/skills"))
            >>> print(f"Found {len(skills)} skills")
        """
        root = Path(root).expanduser()

        if not root.is_dir():
            raise SkillsDirectoryNotFoundError(root)

        skill_dirs = [entry for entry in root.iterdir() if entry.is_dir()]
        return sorted(skill_dirs, key=lambda p: collation_key(p.name))
