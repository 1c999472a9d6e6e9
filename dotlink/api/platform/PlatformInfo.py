"""Detected platform description."""

from dataclasses import dataclass
from typing import Literal

from .PlatformTag import PlatformTag


@dataclass(frozen=True)
class PlatformInfo:
    """Platform tag plus the Windows flavor signals it was derived from.

    windows_flavor is only set for PlatformTag.WINDOWS: "wsl" when a WSL
    distribution is present, "native" when the Windows APPDATA variable is
    visible, None when neither is.
    """

    tag: PlatformTag
    windows_flavor: Literal["wsl", "native"] | None = None
    wsl_distro: str | None = None

    @property
    def is_wsl(self) -> bool:
        return self.windows_flavor == "wsl"
