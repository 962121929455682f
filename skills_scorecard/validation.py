"""Validation of a published report site."""

import json
from pathlib import Path

from pydantic import ValidationError

from skills_scorecard.exceptions import ReportValidationError
from skills_scorecard.schema import SkillEntry

REPORT_FILE = "skills.json"


class SiteValidator:
    """Checks that a site directory holds a well-formed report.

    Validation stops at the first failure and raises ReportValidationError
    with a diagnostic naming what is wrong.
    """

    def __init__(
        self,
        site_dir: Path,
        required_files: list[str] | None = None,
        report_file: str = REPORT_FILE,
    ):
        self.site_dir = Path(site_dir)
        self.report_file = report_file
        self.required_files = list(required_files or [])
        if report_file not in self.required_files:
            self.required_files.append(report_file)

    def validate(self) -> int:
        """Run every check.

        Returns:
            Number of validated skill entries

        Raises:
            ReportValidationError: On a missing file, invalid JSON, a non-array
                                 "skills" field, or an incomplete skill entry
        """
        for rel in self.required_files:
            if not (self.site_dir / rel).exists():
                raise ReportValidationError(f"Missing required file: {rel}")

        try:
            raw = (self.site_dir / self.report_file).read_text(encoding='utf-8')
        except OSError as e:
            raise ReportValidationError(f"Cannot read {self.report_file}: {e}")
        except UnicodeDecodeError:
            raise ReportValidationError(f"{self.report_file} is not valid JSON")

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            raise ReportValidationError(f"{self.report_file} is not valid JSON")

        skills = data.get("skills") if isinstance(data, dict) else None
        if not isinstance(skills, list):
            raise ReportValidationError(f'{self.report_file}: "skills" must be an array')

        for index, entry in enumerate(skills):
            try:
                SkillEntry.model_validate(entry)
            except ValidationError as e:
                fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
                detail = f" (missing or empty: {', '.join(fields)})" if fields else ""
                raise ReportValidationError(
                    f"{self.report_file} contains invalid skill entry at index {index}{detail}"
                )

        return len(skills)
