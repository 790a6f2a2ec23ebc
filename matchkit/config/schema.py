"""Configuration schema for matchkit."""

from pydantic import BaseModel, ConfigDict, Field


class DiffConfig(BaseModel):
    """Configuration for sequence diff rendering.

    Controls how edit scripts are summarized in failure explanations.
    Rendering stays deterministic for a given config.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    context_lines: int = Field(
        default=2,
        ge=0,
        description="Unchanged elements kept next to every change",
    )
    max_edit_distance: int = Field(
        default=25,
        ge=0,
        description="Above this edit distance the diff is omitted",
    )


class MatchkitConfig(BaseModel):
    """Configuration for matchkit."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    diff: DiffConfig = Field(
        default_factory=DiffConfig,
        description="Sequence diff rendering settings",
    )
