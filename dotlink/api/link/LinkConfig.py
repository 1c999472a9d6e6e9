"""Link installer configuration."""

from pydantic import BaseModel, ConfigDict, Field


class LinkConfig(BaseModel):
    """Link installer behaviour."""

    model_config = ConfigDict(extra="forbid")

    relink_mismatched: bool = Field(
        ...,
        description="Replace existing symlinks that point somewhere other than the dotfiles source",
    )
