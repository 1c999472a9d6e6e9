"""Output schemas for stow commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


@register_output_schema("stow", "relink")
class StowRelinkOutput(BaseOutputSchema):
    """Output schema for stow relink command."""

    dotfiles_dir: str = Field(..., description="Directory the package linker runs in")
    packages: list[dict[str, Any]] = Field(..., description="Per-package results (package, status, error)")
