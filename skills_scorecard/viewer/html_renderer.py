"""Static HTML rendering of a loaded report."""

from skills_scorecard.viewer.cards import (
    COMMUNITY_PLACEHOLDER,
    MAX_CARD_FINDINGS,
    MAX_CARD_GAPS,
    community_status,
    risk_of,
    score_badges,
    summary_fields,
)
from skills_scorecard.viewer.community import MAX_COMMUNITY_ITEMS
from skills_scorecard.viewer.state import ViewerState


class HTMLRenderer:
    """Renders a report snapshot as a self-contained HTML page.

    Produces markup in the form:
    <ul id="skillList">
      <li class="card">
        <div class="row"><h3>name</h3><span class="pill low">LOW risk</span></div>
        ...
      </li>
    </ul>

    Every interpolated value is escaped.
    """

    def render(self, state: ViewerState, skills: list[dict], title: str = "Skills Scorecard") -> str:
        if skills:
            cards = "\n".join(self.render_card(skill) for skill in skills)
        else:
            cards = '<li class="card muted">No skills match.</li>'

        parts = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '  <meta charset="utf-8">',
            f"  <title>{self._escape(title)}</title>",
            "</head>",
            "<body>",
            f"  <h1>{self._escape(title)}</h1>",
            self.render_summary(state),
            f'  <ul id="skillList">\n{cards}\n  </ul>',
        ]

        if state.community is not None:
            parts.append(self.render_community(state))

        parts.extend(["</body>", "</html>"])
        return "\n".join(parts) + "\n"

    def render_summary(self, state: ViewerState) -> str:
        spans = "".join(
            f"<span>{self._escape(label)}: {self._escape(value)}</span>"
            for label, value in summary_fields(state.report)
        )
        return f'  <div class="summary">{spans}</div>'

    def render_card(self, skill: dict) -> str:
        risk = risk_of(skill)
        badges = "".join(
            f'<span class="score {css}">{label} {self._escape(str(score))}</span>'
            for label, score, css in score_badges(skill)
        )
        has_file = bool(skill.get("hasSkillFile"))
        file_badge = (
            f'<span class="badge {"ok" if has_file else "missing"}">'
            f'{"SKILL.md" if has_file else "No SKILL.md"}</span>'
        )

        sections = ""
        findings = (skill.get("securityFindings") or [])[:MAX_CARD_FINDINGS]
        if findings:
            sections += self._section("Security findings:", findings)
        gaps = (skill.get("qualityGaps") or [])[:MAX_CARD_GAPS]
        if gaps:
            sections += self._section("Quality gaps:", gaps)

        return (
            '    <li class="card">'
            f'<div class="row"><h3>{self._escape(skill.get("name", ""))}</h3>'
            f'<span class="pill {self._escape(risk)}">{self._escape(risk.upper())} risk</span></div>'
            f'<p>{self._escape(skill.get("description", ""))}</p>'
            f'<div class="score-row">{badges}</div>'
            f'<code>{self._escape(skill.get("location", ""))}</code>'
            f"{file_badge}{sections}</li>"
        )

    def render_community(self, state: ViewerState) -> str:
        status, count = community_status(state.community)
        items = state.community.items[:MAX_COMMUNITY_ITEMS] if state.community else []

        if items:
            entries = "".join(
                f'<li><a href="{self._escape(item["url"])}" target="_blank" rel="noopener">'
                f'{self._escape(item["name"])}</a>'
                f'{" - " + self._escape(item["description"]) if item["description"] else ""}</li>'
                for item in items
            )
        else:
            entries = f'<li class="muted">{self._escape(COMMUNITY_PLACEHOLDER)}</li>'

        return (
            '  <section class="community">'
            f'<p id="communityStatus">{self._escape(status)}</p>'
            f'<p id="communityCount">{self._escape(count)}</p>'
            f'<ul id="communityList">{entries}</ul></section>'
        )

    def render_error(self, message: str) -> str:
        return f'<li class="card">Error: {self._escape(message)}</li>'

    def _section(self, heading: str, notes: list[str]) -> str:
        items = "".join(f"<li>{self._escape(str(note))}</li>" for note in notes)
        return f'<div class="section"><strong>{heading}</strong><ul>{items}</ul></div>'

    def _escape(self, text) -> str:
        """Escape HTML special characters.

        Args:
            text: Text to escape

        Returns:
            Escaped text safe for element content and attributes
        """
        text = str(text)
        # '&' first so later entities are not double-escaped
        replacements = {
            "&": "&amp;",
            "<": "&lt;",
            ">": "&gt;",
            '"': "&quot;",
            "'": "&#x27;",
        }

        for char, escape in replacements.items():
            text = text.replace(char, escape)

        return text
