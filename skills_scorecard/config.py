"""Configuration for report generation and viewing."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping


SKILLS_DIR_ENV = "OPENCLAW_SKILLS_DIR"
DEFAULT_SKILLS_DIR = Path("/usr/lib/node_modules/openclaw/skills")

# Primary location first, published mirror second.
DEFAULT_OUTPUTS = ("web/skills.json", "docs/skills.json")

DEFAULT_COMMUNITY_URLS = (
    "https://clawhub.ai/skills.json",
    "https://clawhub.ai/api/skills.json",
    "https://clawhub.ai/community-skills.json",
)


@dataclass
class ScorecardConfig:
    """Settings shared by the generator, publisher and viewer."""
    skills_dir: Path = DEFAULT_SKILLS_DIR
    site_root: Path = field(default_factory=Path.cwd)
    outputs: list[str] = field(default_factory=lambda: list(DEFAULT_OUTPUTS))
    community_urls: list[str] = field(default_factory=lambda: list(DEFAULT_COMMUNITY_URLS))
    community_timeout_s: float = 5.0
    report_timeout_s: float = 10.0

    @property
    def output_paths(self) -> list[Path]:
        """Resolve every configured output against the site root."""
        return [self.site_root / output for output in self.outputs]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "ScorecardConfig":
        """Build a config, letting OPENCLAW_SKILLS_DIR override the skills root.

        Explicit keyword overrides that are not None win over the environment.
        """
        environ = os.environ if environ is None else environ
        config = cls()

        env_dir = environ.get(SKILLS_DIR_ENV)
        if env_dir:
            config.skills_dir = Path(env_dir)

        for key, value in overrides.items():
            if value is None:
                continue
            if not hasattr(config, key):
                raise TypeError(f"Unknown config option: {key}")
            setattr(config, key, value)

        config.skills_dir = Path(config.skills_dir).expanduser()
        config.site_root = Path(config.site_root).expanduser()
        return config
