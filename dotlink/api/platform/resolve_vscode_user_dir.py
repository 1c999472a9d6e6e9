"""Resolve the VSCode user settings directory for a platform."""

from collections.abc import Callable, Mapping
from pathlib import Path

from .get_windows_username import get_windows_username
from .PlatformInfo import PlatformInfo
from .PlatformTag import PlatformTag


def resolve_vscode_user_dir(
    info: PlatformInfo,
    home: Path,
    env: Mapping[str, str],
    username_lookup: Callable[[], str | None] = get_windows_username,
) -> Path | None:
    """Return the VSCode ``User`` directory, or None when it cannot be determined.

    Args:
        info: Detected platform
        home: User home directory
        env: Environment mapping (APPDATA is read on native Windows)
        username_lookup: Returns the Windows username under WSL
    """
    if info.tag == PlatformTag.MACOS:
        return home / "Library" / "Application Support" / "Code" / "User"
    if info.tag == PlatformTag.LINUX:
        return home / ".config" / "Code" / "User"
    if info.tag == PlatformTag.WINDOWS:
        if info.is_wsl:
            username = username_lookup()
            if not username:
                return None
            return Path("/mnt/c/Users") / username / "AppData" / "Roaming" / "Code" / "User"
        appdata = env.get("APPDATA")
        if appdata:
            return Path(appdata) / "Code" / "User"
    return None
