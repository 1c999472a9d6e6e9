"""Output schemas for platform commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


@register_output_schema("platform", "detect")
class PlatformDetectOutput(BaseOutputSchema):
    """Output schema for platform detect command."""

    platform: str = Field(..., description="Platform tag (macos, linux, windows, unknown)")
    windows_flavor: str = Field(..., description="wsl or native on Windows, empty string otherwise")
    wsl_distro: str = Field(..., description="WSL distribution name, empty string if not WSL")
    vscode_user_dir: str = Field(..., description="Resolved VSCode user directory, empty string if unknown")
