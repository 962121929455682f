"""Report viewer orchestrating load, search and render."""

from pathlib import Path

from skills_scorecard.viewer.community import CommunityCatalog
from skills_scorecard.viewer.filtering import filter_skills
from skills_scorecard.viewer.html_renderer import HTMLRenderer
from skills_scorecard.viewer.loader import ReportLoader
from skills_scorecard.viewer.state import ViewerState
from skills_scorecard.viewer.text_renderer import TextRenderer


class ReportViewer:
    """Loads a published report and renders a searchable listing.

    refresh() renders the primary report on its own. The community catalog
    is a separate step, load_community(), run after the report is shown;
    its failures never propagate.

    Example:
        >>> viewer = ReportViewer("https://example.org/skills.json", fmt="text")
        >>> print(viewer.refresh())
        >>> print(viewer.load_community())
    """

    def __init__(
        self,
        source: str | Path,
        fmt: str = "text",
        loader: ReportLoader | None = None,
        community: CommunityCatalog | None = None,
        state: ViewerState | None = None,
    ):
        """Initialize the viewer.

        Args:
            source: URL or path of skills.json
            fmt: "text" or "html"
            loader: ReportLoader override
            community: CommunityCatalog consulted by load_community(), or
                      None to skip the community section
            state: Existing state to render into
        """
        if fmt not in ("text", "html"):
            raise ValueError(f"Unknown format: {fmt}")
        self.source = source
        self.state = state or ViewerState(source=str(source))
        self._loader = loader or ReportLoader()
        self._community = community
        self._renderer = HTMLRenderer() if fmt == "html" else TextRenderer()

    @property
    def has_community(self) -> bool:
        return self._community is not None

    def refresh(self) -> str:
        """Fetch the report again and render it with the current query.

        Raises:
            ReportLoadError: If the report cannot be loaded; the previous
                           state is kept.
        """
        report = self._loader.load(self.source)
        self.state.report = report
        self.state.source = str(self.source)
        return self.render()

    def load_community(self) -> str:
        """Fetch the community catalog into the state and render again.

        Does nothing but re-render when no catalog is configured.
        """
        if self._community is not None:
            self.state.community = self._community.load()
        return self.render()

    def search(self, query: str) -> str:
        """Re-filter the loaded skills and render the result."""
        self.state.query = query
        return self.render()

    def visible_skills(self) -> list[dict]:
        return filter_skills(self.state.skills, self.state.query)

    def render(self) -> str:
        return self._renderer.render(self.state, self.visible_skills())

    def render_community(self) -> str:
        return self._renderer.render_community(self.state)

    def render_error(self, message: str) -> str:
        return self._renderer.render_error(message)
