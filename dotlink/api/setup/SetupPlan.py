"""Resolved setup plan."""

from dataclasses import dataclass, field
from pathlib import Path

from ..link.LinkRequest import LinkRequest
from ..platform.PlatformInfo import PlatformInfo


@dataclass
class SetupPlan:
    """Everything a setup run will do on one platform."""

    platform: PlatformInfo
    dotfiles_dir: Path
    requests: list[LinkRequest] = field(default_factory=list)
    stow_packages: list[str] = field(default_factory=list)
    skipped: list[dict[str, str]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def skip(self, label: str, reason: str) -> None:
        self.skipped.append({"label": label, "reason": reason})
