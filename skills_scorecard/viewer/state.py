"""Viewer application state."""

from dataclasses import dataclass, field


@dataclass
class CommunityListing:
    """Outcome of loading the community catalog."""
    source: str | None = None
    items: list[dict] = field(default_factory=list)

    @property
    def available(self) -> bool:
        return self.source is not None


@dataclass
class ViewerState:
    """Everything the viewer has loaded and the current search query.

    `report` holds the raw decoded report document; `skills` and `summary`
    are views into it.
    """
    report: dict = field(default_factory=dict)
    query: str = ""
    community: CommunityListing | None = None
    source: str | None = None

    @property
    def skills(self) -> list[dict]:
        return self.report.get("skills") or []

    @property
    def summary(self) -> dict:
        return self.report.get("summary") or {}

    @property
    def loaded(self) -> bool:
        return bool(self.report)
