"""Report loading for the viewer."""

import json
from pathlib import Path

import requests
from pydantic import ValidationError

from skills_scorecard.exceptions import ReportLoadError
from skills_scorecard.schema import ReportDocument

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


def is_url(source: str) -> bool:
    return str(source).startswith(("http://", "https://"))


class ReportLoader:
    """Fetches a report document from a URL or a local path.

    Every call goes back to the source; nothing is cached.
    """

    def __init__(self, timeout_s: float = 10.0):
        self.timeout_s = timeout_s

    def load(self, source: str | Path) -> dict:
        """Load and decode a report.

        Args:
            source: http(s) URL or filesystem path of skills.json

        Returns:
            The decoded report document

        Raises:
            ReportLoadError: If the report cannot be fetched, is not valid
                           JSON, or its "skills" field is not a list
        """
        if is_url(str(source)):
            raw = self._fetch(str(source))
        else:
            raw = self._read(Path(source))

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ReportLoadError(f"Failed to load skills.json: invalid JSON ({e})")

        if not isinstance(data, dict):
            raise ReportLoadError("Failed to load skills.json: expected a JSON object")

        try:
            ReportDocument.model_validate(data)
        except ValidationError:
            raise ReportLoadError('Failed to load skills.json: "skills" must be an array')

        return data

    def _fetch(self, url: str) -> str:
        try:
            response = requests.get(url, headers=NO_CACHE_HEADERS, timeout=self.timeout_s)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ReportLoadError(f"Failed to load skills.json from {url}: {e}")
        return response.text

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ReportLoadError(f"Failed to load skills.json from {path}: {e}")
