"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


@register_output_schema("link", "install")
class LinkInstallOutput(BaseOutputSchema):
    """Output schema for link install command."""

    label: str = Field(..., description="Display name of the link")
    source: str = Field(..., description="Path the link points at")
    target: str = Field(..., description="Path of the link itself")
    outcome: str = Field(..., description="Link outcome, empty string on failure")
    backup_path: str = Field(..., description="Backup written for the previous target, empty string if none")


@register_output_schema("link", "status")
class LinkStatusOutput(BaseOutputSchema):
    """Output schema for link status command.

    Each entry of links has label, source, target, state and destination
    (the current symlink destination, empty string if target is not a symlink).
    """

    platform: str = Field(..., description="Detected platform tag")
    links: list[dict[str, Any]] = Field(..., description="Inspected links")
