"""Closed set of platform tags."""

from enum import Enum


class PlatformTag(str, Enum):
    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"
    UNKNOWN = "unknown"
