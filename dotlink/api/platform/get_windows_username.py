"""Query the logged-in Windows user from inside WSL."""

import subprocess
from collections.abc import Callable

from ...utils.get_logger import get_logger

logger = get_logger("platform")


def get_windows_username(run: Callable[..., subprocess.CompletedProcess] = subprocess.run) -> str | None:
    """Return the Windows username reported by ``cmd.exe``, or None if it cannot be queried.

    Args:
        run: subprocess.run compatible callable
    """
    try:
        completed = run(
            ["cmd.exe", "/c", "echo %USERNAME%"],
            capture_output=True,
            text=True,
            check=True,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning(f"Could not query Windows username: {e}")
        return None

    username = completed.stdout.replace("\r", "").strip()
    return username or None
