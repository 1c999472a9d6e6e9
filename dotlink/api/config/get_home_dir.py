"""Get dotlink home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DOTLINK_HOME_ENV, DOTLINK_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get dotlink home directory path or path under it.

    Checks DOTLINK_HOME environment variable first, defaults to ~/.dotlink if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.dotlink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.dotlink/config.json")
    """
    home_env = os.environ.get(DOTLINK_HOME_ENV)
    if home_env:
        dotlink_home = Path(home_env).expanduser().resolve()
    else:
        dotlink_home = Path.home() / DOTLINK_HOME_EXT

    return dotlink_home / Path(*parts) if parts else dotlink_home
