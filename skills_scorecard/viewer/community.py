"""Best-effort loading of the external community skills catalog."""

import requests

from skills_scorecard.config import DEFAULT_COMMUNITY_URLS
from skills_scorecard.viewer.state import CommunityListing

CATALOG_HOME = "https://clawhub.ai"
MAX_COMMUNITY_ITEMS = 8


def extract_items(data) -> list:
    """Accept a raw array or an object wrapping a "skills" or "items" list."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        items = data.get("skills") or data.get("items") or []
        return items if isinstance(items, list) else []
    return []


def normalize_item(item) -> dict:
    """Map a catalog entry onto name/description/url with fallbacks."""
    if not isinstance(item, dict):
        item = {}
    return {
        "name": str(item.get("name") or item.get("title") or "Unnamed skill"),
        "description": str(item.get("description") or item.get("summary") or ""),
        "url": str(item.get("url") or item.get("link") or CATALOG_HOME),
    }


class CommunityCatalog:
    """Tries each candidate URL in order and keeps the first that answers.

    Failures are never raised: an unreachable or malformed candidate is
    skipped, and if none succeed the listing is empty with no source.
    """

    def __init__(self, urls: list[str] | None = None, timeout_s: float = 5.0):
        self.urls = list(DEFAULT_COMMUNITY_URLS if urls is None else urls)
        self.timeout_s = timeout_s

    def load(self) -> CommunityListing:
        for url in self.urls:
            try:
                response = requests.get(url, timeout=self.timeout_s)
                if not response.ok:
                    continue
                data = response.json()
            except (requests.exceptions.RequestException, ValueError):
                continue
            return CommunityListing(
                source=url,
                items=[normalize_item(item) for item in extract_items(data)],
            )

        return CommunityListing()
