"""Top-level dotlink configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from ...utils.expand_path import expand_path
from ..link.LinkConfig import LinkConfig
from ..setup.LinkEntry import LinkEntry
from ..stow.StowConfig import StowConfig
from .default_config_dict import default_config_dict
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class DotlinkConfig(BaseModel):
    """Top-level configuration for dotlink."""

    model_config = ConfigDict(extra="forbid")

    dotfiles_dir: str = Field(..., min_length=1, description="Directory holding the canonical dotfiles")
    links: list[LinkEntry]
    stow: StowConfig
    link: LinkConfig
    log: LogConfig

    _from_file: bool = PrivateAttr(default=False)

    @property
    def from_file(self) -> bool:
        """Whether this configuration was read from the config file."""
        return self._from_file

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get dotlink home directory based on DOTLINK_HOME or default to ~/.dotlink."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file."""
        return get_home_dir("config.json")

    @classmethod
    def default(cls) -> "DotlinkConfig":
        """Configuration built from the built-in defaults."""
        return cls(**default_config_dict())

    @classmethod
    def load(cls) -> "DotlinkConfig":
        """Load and validate config from file, or the defaults when there is none.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls.default()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration file {path} must contain a JSON object")

        try:
            config = cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
        config._from_file = True
        return config

    def dotfiles_path(self, home: Path | None = None) -> Path:
        """Absolute dotfiles directory (``~`` expanded against ``home`` when given)."""
        return expand_path(self.dotfiles_dir, home)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "dotfiles_dir": self.dotfiles_dir,
            "links": [entry.model_dump(mode="json") for entry in self.links],
            "stow": self.stow.model_dump(mode="json"),
            "link": self.link.model_dump(mode="json"),
            "log": self.log.model_dump(mode="json"),
        }

    def save(self) -> None:
        """Save the configuration to the config file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
