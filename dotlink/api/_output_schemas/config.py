"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


@register_output_schema("config", "show")
class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - section: str - section name or dotted path, empty string when listing all sections
    - content: Any - {"sections": [...]} when listing, otherwise the section value
    - config_path: str - path to the configuration file
    - from_file: bool - False when built-in defaults are in use
    """

    section: str = Field(..., description="Section name or dotted path, empty string when listing sections")
    content: Any = Field(..., description="Section listing or the section value")
    config_path: str = Field(..., description="Path to the configuration file")
    from_file: bool = Field(..., description="Whether the configuration was read from disk")


@register_output_schema("config", "init")
class ConfigInitOutput(BaseOutputSchema):
    """Output schema for config init command."""

    config_path: str = Field(..., description="Path to the configuration file")
    created: bool = Field(..., description="Whether a configuration file was written")


@register_output_schema("config", "version")
class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")
    git_sha: str = Field(..., description="Git commit SHA (short), empty string if not available")
    full_version: str = Field(..., description="Full version string (version + git_sha if available)")
    python_version: str = Field(..., description="Version of the running Python interpreter")
