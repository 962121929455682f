"""Plain-text rendering of a loaded report for the terminal."""

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


class TextRenderer:
    """Renders the summary bar, skill cards and community list as text."""

    def render(self, state: ViewerState, skills: list[dict]) -> str:
        sections = [self.render_summary(state)]

        if skills:
            sections.extend(self.render_card(skill) for skill in skills)
        else:
            sections.append("No skills match.")

        if state.community is not None:
            sections.append(self.render_community(state))

        return "\n\n".join(sections)

    def render_summary(self, state: ViewerState) -> str:
        return " | ".join(f"{label}: {value}" for label, value in summary_fields(state.report))

    def render_card(self, skill: dict) -> str:
        lines = [
            f"{skill.get('name', '')}  [{risk_of(skill).upper()} risk]",
            f"  {skill.get('description', '')}",
            f"  Location: {skill.get('location', '')}",
            "  " + " | ".join(
                f"{label} {score} ({css})" for label, score, css in score_badges(skill)
            ),
            f"  SKILL.md: {'present' if skill.get('hasSkillFile') else 'missing'}",
        ]

        findings = (skill.get("securityFindings") or [])[:MAX_CARD_FINDINGS]
        if findings:
            lines.append("  Security findings:")
            lines.extend(f"    - {finding}" for finding in findings)

        gaps = (skill.get("qualityGaps") or [])[:MAX_CARD_GAPS]
        if gaps:
            lines.append("  Quality gaps:")
            lines.extend(f"    - {gap}" for gap in gaps)

        return "\n".join(lines)

    def render_community(self, state: ViewerState) -> str:
        status, count = community_status(state.community)
        lines = [status, count]

        items = state.community.items[:MAX_COMMUNITY_ITEMS] if state.community else []
        if not items:
            lines.append(f"  {COMMUNITY_PLACEHOLDER}")
        for item in items:
            line = f"  - {item['name']} <{item['url']}>"
            if item["description"]:
                line += f" - {item['description']}"
            lines.append(line)

        return "\n".join(lines)

    def render_error(self, message: str) -> str:
        return f"Error: {message}"
