"""JSON rendering of a scored report."""

import json

from skills_scorecard.models import Report


class JSONReportRenderer:
    """Renders a Report as the JSON document served to the viewer.

    Produces output in the format:
    {
      "generatedAt": "...",
      "sourceDir": "...",
      "count": 1,
      "summary": {"avgOverall": 0, "avgQuality": 0, "avgSecurity": 0},
      "skills": [{"name": "...", ...}]
    }
    """

    def render(self, report: Report) -> str:
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
