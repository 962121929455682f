"""Unit tests for the text and HTML viewer renderers."""

import pytest

from skills_scorecard.viewer import HTMLRenderer, TextRenderer, ViewerState, badge_class
from skills_scorecard.viewer.cards import COMMUNITY_PLACEHOLDER, summary_fields
from skills_scorecard.viewer.state import CommunityListing


@pytest.mark.parametrize("score,css", [
    (100, "great"), (85, "great"), (84, "good"), (70, "good"),
    (69, "fair"), (50, "fair"), (49, "bad"), (None, "bad"),
])
def test_badge_class(score, css):
    assert badge_class(score) == css


def test_summary_fields(sample_report):
    fields = dict(summary_fields(sample_report))

    assert fields["Skills"] == "2"
    assert fields["Avg overall"] == "70"
    assert fields["Generated"].startswith("2026-01-02 03:04:05")


def test_summary_fields_without_summary():
    fields = dict(summary_fields({"skills": []}))

    assert fields["Avg quality"] == "-"
    assert fields["Generated"] == "-"


class TestTextRenderer:
    """Tests for TextRenderer."""

    def test_card(self, sample_report):
        card = TextRenderer().render_card(sample_report["skills"][1])

        assert card.startswith("Beta  [HIGH risk]")
        assert "Overall 18 (bad) | Quality 0 (bad) | Security 44 (bad)" in card
        assert "SKILL.md: missing" in card
        # only the first two findings and gaps are shown
        assert "Requests elevated privileges (sudo)." not in card
        assert "Split the document into '##' sections." not in card
        assert "Pipes remote content into a shell (curl | sh)." in card

    def test_render_lists_every_skill(self, sample_report):
        state = ViewerState(report=sample_report)

        output = TextRenderer().render(state, state.skills)

        assert "Alpha  [LOW risk]" in output
        assert "Beta  [HIGH risk]" in output
        assert output.startswith("Generated: ")

    def test_render_no_matches(self, sample_report):
        output = TextRenderer().render(ViewerState(report=sample_report), [])

        assert "No skills match." in output

    def test_community_placeholder(self, sample_report):
        state = ViewerState(report=sample_report, community=CommunityListing())

        output = TextRenderer().render(state, state.skills)

        assert "directory link mode" in output
        assert COMMUNITY_PLACEHOLDER in output

    def test_community_items_capped_at_eight(self, sample_report):
        items = [{"name": f"c{i}", "description": "", "url": "https://x"} for i in range(12)]
        state = ViewerState(
            report=sample_report,
            community=CommunityListing(source="https://x/skills.json", items=items),
        )

        output = TextRenderer().render_community(state)

        assert "Community skills: 12" in output
        assert "c7 <https://x>" in output
        assert "c8 <" not in output


class TestHTMLRenderer:
    """Tests for HTMLRenderer."""

    def test_card_markup(self, sample_report):
        card = HTMLRenderer().render_card(sample_report["skills"][0])

        assert "<h3>Alpha</h3>" in card
        assert '<span class="pill low">LOW risk</span>' in card
        assert '<span class="score great">Overall 90</span>' in card
        assert "No safety/permission language detected." in card
        assert "<code>/opt/skills/Alpha</code>" in card

    def test_values_are_escaped(self):
        skill = {
            "name": "<script>alert(1)</script>",
            "description": 'Uses "quotes" & ampersands',
            "location": "/x",
            "securityRisk": "low",
        }

        card = HTMLRenderer().render_card(skill)

        assert "<script>" not in card
        assert "&lt;script&gt;" in card
        assert "&quot;quotes&quot; &amp; ampersands" in card

    def test_missing_scores_render_placeholder(self):
        card = HTMLRenderer().render_card({"name": "n", "description": "d", "location": "/l"})

        assert '<span class="score bad">Overall -</span>' in card
        assert '<span class="pill medium">MEDIUM risk</span>' in card

    def test_full_page(self, sample_report):
        state = ViewerState(report=sample_report)

        page = HTMLRenderer().render(state, state.skills)

        assert page.startswith("<!DOCTYPE html>")
        assert page.count('<li class="card">') == 2
        assert "Avg security: 92" in page
        assert "communityList" not in page
        assert "<link" not in page

    def test_community_links(self, sample_report):
        state = ViewerState(
            report=sample_report,
            community=CommunityListing(
                source="https://x/skills.json",
                items=[{"name": "Helper", "description": "Does things", "url": "https://x/helper"}],
            ),
        )

        section = HTMLRenderer().render_community(state)

        assert '<a href="https://x/helper" target="_blank" rel="noopener">Helper</a> - Does things' in section
        assert "Community source: https://x/skills.json" in section

    def test_error_card(self):
        assert HTMLRenderer().render_error("boom <b>") == '<li class="card">Error: boom &lt;b&gt;</li>'
