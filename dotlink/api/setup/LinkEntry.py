"""Configured link entry."""

from string import Formatter

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..platform.PlatformTag import PlatformTag

# Placeholders available in target templates
TARGET_PLACEHOLDERS = ("home", "dotfiles_dir", "vscode_user_dir")


def template_fields(template: str) -> list[str]:
    """Names of the ``{placeholder}`` fields used in ``template``.

    An auto-numbered ``{}`` field shows up as an empty name.
    """
    return [name for _, name, _, _ in Formatter().parse(template) if name is not None]


class LinkEntry(BaseModel):
    """One configured link: a dotfiles source and a per-platform target template."""

    model_config = ConfigDict(extra="forbid")

    label: str = Field(..., min_length=1, description="Display name")
    source: str = Field(..., min_length=1, description="Path relative to the dotfiles directory (or absolute)")
    target: str = Field(..., min_length=1, description="Target path template, may start with ~ and use placeholders")
    platforms: list[PlatformTag] = Field(..., min_length=1, description="Platforms the link applies to")
    optional: bool = Field(False, description="Skip instead of linking when the source does not exist")
    requires_wsl: bool = Field(False, description="On Windows, only link under WSL")

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        try:
            names = template_fields(v)
        except ValueError as e:
            raise ValueError(f"links.target is not a valid template: {v!r} ({e})") from e
        if any(name == "" or name.isdigit() for name in names):
            raise ValueError(f"links.target uses a positional placeholder: {v!r} (use a named placeholder)")
        unknown = [name for name in names if name not in TARGET_PLACEHOLDERS]
        if unknown:
            raise ValueError(
                f"links.target uses unknown placeholder(s) {unknown} (supported: {list(TARGET_PLACEHOLDERS)})"
            )
        return v
