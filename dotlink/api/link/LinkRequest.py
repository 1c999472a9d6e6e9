"""A single source -> target link to install."""

from dataclasses import dataclass
from pathlib import Path

from ...constants import BACKUP_SUFFIX


@dataclass(frozen=True)
class LinkRequest:
    """Request to make ``target`` a symlink to ``source``.

    label is used for reporting only.
    """

    source: Path
    target: Path
    label: str = ""

    def __post_init__(self) -> None:
        for name in ("source", "target"):
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValueError(f"LinkRequest.{name} must be a non-empty path")
            object.__setattr__(self, name, Path(value))
        if not self.label:
            object.__setattr__(self, "label", self.target.name)

    @property
    def backup_path(self) -> Path:
        """Where a pre-existing target is moved before it is replaced."""
        return Path(f"{self.target}{BACKUP_SUFFIX}")

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "source": str(self.source), "target": str(self.target)}
