"""Base output schema with standard errors and warnings fields."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseOutputSchema(BaseModel):
    """Base schema for all API command outputs.

    Every command reports errors and warnings, even when both are empty.
    Repeated messages are collapsed, keeping the first occurrence.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages, empty list if none")
    warnings: list[str] = Field(default_factory=list, description="Warning messages, empty list if none")

    @field_validator("errors", "warnings")
    @classmethod
    def collapse_repeats(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))
