"""Presentation helpers shared by the viewer renderers."""

from datetime import datetime

MAX_CARD_FINDINGS = 2
MAX_CARD_GAPS = 2
DEFAULT_RISK = "medium"
COMMUNITY_PLACEHOLDER = (
    "No community skills preview available yet. Open ClawHub for full catalog."
)


def badge_class(score) -> str:
    """Color band for a score badge."""
    if not isinstance(score, (int, float)):
        return "bad"
    if score >= 85:
        return "great"
    if score >= 70:
        return "good"
    if score >= 50:
        return "fair"
    return "bad"


def risk_of(skill: dict) -> str:
    return str(skill.get("securityRisk") or DEFAULT_RISK)


def format_generated_at(value: str | None) -> str:
    """Format an ISO timestamp for display, passing odd values through."""
    if not value:
        return "-"
    try:
        ts = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    return ts.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def summary_fields(report: dict) -> list[tuple[str, str]]:
    """Label/value pairs for the summary bar."""
    summary = report.get("summary") or {}
    skills = report.get("skills") or []

    def average(key: str) -> str:
        value = summary.get(key)
        return "-" if value is None else str(value)

    return [
        ("Generated", format_generated_at(report.get("generatedAt"))),
        ("Skills", str(report.get("count", len(skills)))),
        ("Avg overall", average("avgOverall")),
        ("Avg quality", average("avgQuality")),
        ("Avg security", average("avgSecurity")),
    ]


def score_badges(skill: dict) -> list[tuple[str, object, str]]:
    """(label, score, badge class) for the three card badges."""
    badges = []
    for label, key in (("Overall", "overallScore"), ("Quality", "qualityScore"), ("Security", "securityScore")):
        score = skill.get(key)
        badges.append((label, "-" if score is None else score, badge_class(score)))
    return badges


def community_status(listing) -> tuple[str, str]:
    """Status and count lines for the community section."""
    if listing is None or not listing.available:
        return (
            "Community source: clawhub.ai (directory link mode)",
            "Community skills: external catalog",
        )
    return (
        f"Community source: {listing.source}",
        f"Community skills: {len(listing.items)}",
    )
