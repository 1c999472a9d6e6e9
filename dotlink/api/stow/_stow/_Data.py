"""GNU stow specific package linker configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """GNU stow configuration data."""

    model_config = ConfigDict(extra="forbid")

    executable: str = Field(..., description="Executable name or path (e.g., 'stow')")
    flags: list[str] = Field(..., description="Flags passed before the package name (e.g., ['-R'] to restow)")
    target_dir: str | None = Field(None, description="Passed as -t when set, otherwise stow uses its default target")

    @field_validator("executable")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("stow.data.executable is required when stow.type is 'stow'")
        return v
