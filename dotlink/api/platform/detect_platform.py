"""Detect the platform from an environment mapping."""

from collections.abc import Mapping

from .PlatformInfo import PlatformInfo
from .PlatformTag import PlatformTag


def detect_platform(env: Mapping[str, str]) -> PlatformInfo:
    """Map environment signals to a platform.

    Checks are evaluated in order, so a WSL shell that reports
    ``OSTYPE=linux-gnu`` is detected as linux.

    Args:
        env: Environment mapping with OSTYPE and, optionally, WSL_DISTRO_NAME and APPDATA

    Returns:
        PlatformInfo for the environment
    """
    ostype = env.get("OSTYPE", "")
    wsl_distro = env.get("WSL_DISTRO_NAME") or None

    if ostype.startswith("darwin"):
        return PlatformInfo(tag=PlatformTag.MACOS)
    if ostype.startswith("linux-gnu"):
        return PlatformInfo(tag=PlatformTag.LINUX)
    if ostype in ("msys", "cygwin") or wsl_distro:
        if wsl_distro:
            return PlatformInfo(tag=PlatformTag.WINDOWS, windows_flavor="wsl", wsl_distro=wsl_distro)
        if env.get("APPDATA"):
            return PlatformInfo(tag=PlatformTag.WINDOWS, windows_flavor="native")
        return PlatformInfo(tag=PlatformTag.WINDOWS)
    return PlatformInfo(tag=PlatformTag.UNKNOWN)
