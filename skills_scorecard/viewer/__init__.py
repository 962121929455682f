"""Viewer for published skills reports."""

from skills_scorecard.viewer.app import ReportViewer
from skills_scorecard.viewer.cards import badge_class
from skills_scorecard.viewer.community import CommunityCatalog
from skills_scorecard.viewer.filtering import filter_skills
from skills_scorecard.viewer.html_renderer import HTMLRenderer
from skills_scorecard.viewer.loader import ReportLoader
from skills_scorecard.viewer.state import CommunityListing, ViewerState
from skills_scorecard.viewer.text_renderer import TextRenderer

__all__ = [
    "ReportViewer",
    "ViewerState",
    "CommunityListing",
    "CommunityCatalog",
    "ReportLoader",
    "TextRenderer",
    "HTMLRenderer",
    "filter_skills",
    "badge_class",
]
