"""Unit tests for ReportViewer."""

import json
import time
from pathlib import Path
from unittest.mock import Mock

import pytest

from skills_scorecard.exceptions import ReportLoadError
from skills_scorecard.viewer import CommunityListing, ReportViewer, ViewerState


@pytest.fixture
def report_path(temp_dir: Path, sample_report: dict) -> Path:
    path = temp_dir / "skills.json"
    path.write_text(json.dumps(sample_report))
    return path


class TestReportViewer:
    """Tests for load, search and render orchestration."""

    def test_refresh_loads_and_renders(self, report_path: Path):
        viewer = ReportViewer(report_path)

        output = viewer.refresh()

        assert viewer.state.loaded
        assert len(viewer.state.skills) == 2
        assert "Alpha" in output and "Beta" in output

    def test_search_filters_in_memory(self, report_path: Path):
        viewer = ReportViewer(report_path)
        viewer.refresh()

        output = viewer.search("alpha")

        assert [s["name"] for s in viewer.visible_skills()] == ["Alpha"]
        assert "Beta" not in output

    def test_search_then_clear(self, report_path: Path):
        viewer = ReportViewer(report_path)
        viewer.refresh()
        viewer.search("nothing-matches")

        assert viewer.visible_skills() == []

        viewer.search("")
        assert len(viewer.visible_skills()) == 2

    def test_refresh_rereads_source(self, report_path: Path, sample_report: dict):
        viewer = ReportViewer(report_path)
        viewer.refresh()

        sample_report["skills"] = sample_report["skills"][:1]
        report_path.write_text(json.dumps(sample_report))
        viewer.refresh()

        assert len(viewer.state.skills) == 1

    def test_load_failure_keeps_previous_state(self, report_path: Path):
        viewer = ReportViewer(report_path)
        viewer.refresh()

        report_path.write_text("not json")

        with pytest.raises(ReportLoadError):
            viewer.refresh()
        assert len(viewer.state.skills) == 2

    def test_refresh_does_not_fetch_community(self, report_path: Path):
        community = Mock()
        viewer = ReportViewer(report_path, community=community)

        output = viewer.refresh()

        community.load.assert_not_called()
        assert "Alpha" in output
        assert "Community source" not in output

    def test_refresh_is_not_delayed_by_slow_community(self, report_path: Path):
        def slow_load():
            time.sleep(0.5)
            return CommunityListing()

        community = Mock()
        community.load.side_effect = slow_load
        viewer = ReportViewer(report_path, community=community)

        started = time.monotonic()
        output = viewer.refresh()
        elapsed = time.monotonic() - started

        assert elapsed < 0.5
        assert "Alpha" in output

    def test_load_community_rerenders_with_catalog(self, report_path: Path):
        community = Mock()
        community.load.return_value = CommunityListing()
        viewer = ReportViewer(report_path, community=community)
        viewer.refresh()

        output = viewer.load_community()

        community.load.assert_called_once()
        assert "directory link mode" in output
        assert "Alpha" in output
        assert "directory link mode" in viewer.render_community()

    def test_load_community_without_catalog(self, report_path: Path):
        viewer = ReportViewer(report_path)
        viewer.refresh()

        assert not viewer.has_community
        assert "Community source" not in viewer.load_community()

    def test_search_tolerates_non_string_fields(self, temp_dir: Path, sample_report: dict):
        sample_report["skills"][0]["name"] = 7
        sample_report["skills"][0]["securityRisk"] = None
        path = temp_dir / "odd.json"
        path.write_text(json.dumps(sample_report))
        viewer = ReportViewer(path)
        viewer.refresh()

        output = viewer.search("7")

        assert [s["name"] for s in viewer.visible_skills()] == [7]
        assert "7  [MEDIUM risk]" in output

    def test_community_not_called_when_report_fails(self, temp_dir: Path):
        community = Mock()
        viewer = ReportViewer(temp_dir / "missing.json", community=community)

        with pytest.raises(ReportLoadError):
            viewer.refresh()
        community.load.assert_not_called()

    def test_html_format(self, report_path: Path):
        viewer = ReportViewer(report_path, fmt="html")

        assert viewer.refresh().startswith("<!DOCTYPE html>")
        assert viewer.render_error("x").startswith('<li class="card">')

    def test_unknown_format(self, report_path: Path):
        with pytest.raises(ValueError):
            ReportViewer(report_path, fmt="pdf")

    def test_explicit_state_is_used(self, report_path: Path):
        state = ViewerState(query="beta")
        viewer = ReportViewer(report_path, state=state)

        viewer.refresh()

        assert viewer.state is state
        assert [s["name"] for s in viewer.visible_skills()] == ["Beta"]
