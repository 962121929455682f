"""Pydantic schemas for report documents read back from disk or HTTP."""

from pydantic import BaseModel, ConfigDict, Field


class SkillEntry(BaseModel):
    """A report entry as the viewer needs it."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1, description="Skill directory name")
    description: str = Field(min_length=1, description="One-line summary")
    location: str = Field(min_length=1, description="Absolute path of the skill")


class ReportDocument(BaseModel):
    """Top-level shape of a published report."""
    model_config = ConfigDict(extra="allow")

    skills: list[dict] = Field(description="Scored skill entries")
