"""Platform module - operating system detection and per-OS paths."""

from .detect_platform import detect_platform
from .PlatformInfo import PlatformInfo
from .PlatformTag import PlatformTag

__all__ = ["PlatformInfo", "PlatformTag", "detect_platform"]
