"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ...constants import LOG_BACKUP_COUNT, LOG_MAX_BYTES


class LogConfig(BaseModel):
    """Level and rotation of ``$DOTLINK_HOME/dotlink.log``."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(..., description="Logging level")
    max_bytes: int = Field(LOG_MAX_BYTES, gt=0, description="Rotate the log file when it reaches this size")
    backup_count: int = Field(LOG_BACKUP_COUNT, ge=0, description="Rotated log files to keep")
