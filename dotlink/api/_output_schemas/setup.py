"""Output schemas for setup commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


@register_output_schema("setup", "plan")
class SetupPlanOutput(BaseOutputSchema):
    """Output schema for setup plan command."""

    platform: str = Field(..., description="Detected platform tag")
    dotfiles_dir: str = Field(..., description="Dotfiles directory")
    links: list[dict[str, str]] = Field(..., description="Planned links (label, source, target)")
    stow_packages: list[str] = Field(..., description="Packages to relink through the package linker")
    skipped: list[dict[str, str]] = Field(..., description="Skipped entries (label, reason)")


@register_output_schema("setup", "run")
class SetupRunOutput(BaseOutputSchema):
    """Output schema for setup run command.

    results entries: label, source, target, outcome, backup_path, error.
    stow entries: package, status (relinked, failed, skipped), error.
    """

    platform: str = Field(..., description="Detected platform tag")
    dotfiles_dir: str = Field(..., description="Dotfiles directory")
    results: list[dict[str, Any]] = Field(..., description="Per-link results")
    stow: list[dict[str, Any]] = Field(..., description="Per-package results")
    skipped: list[dict[str, str]] = Field(..., description="Skipped entries (label, reason)")
    failed: int = Field(..., description="Number of failed links and packages")
