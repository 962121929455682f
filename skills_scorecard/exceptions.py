"""Exception classes for the skills scorecard."""


class ScorecardError(Exception):
    """Base exception for all skills-scorecard errors."""
    pass


class SkillsDirectoryNotFoundError(ScorecardError):
    """Raised when the skills root directory does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Skills directory not found: {path}")


class SkillParseError(ScorecardError):
    """Raised when a SKILL.md file cannot be read or its frontmatter is invalid."""
    pass


class ReportLoadError(ScorecardError):
    """Raised when a report cannot be fetched or decoded."""
    pass


class ReportValidationError(ScorecardError):
    """Raised when a published site or report fails validation."""
    pass


class PublishError(ScorecardError):
    """Raised when a report sink cannot be written."""
    pass
