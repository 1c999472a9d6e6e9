"""Snapshot the process environment for platform detection."""

import os
import sys

# sys.platform -> the OSTYPE value bash would report
_OSTYPE_BY_SYS_PLATFORM = {
    "darwin": "darwin",
    "linux": "linux-gnu",
    "cygwin": "cygwin",
    "win32": "msys",
}


def current_environment() -> dict[str, str]:
    """Copy os.environ, filling OSTYPE from sys.platform when the shell did not export it."""
    env = dict(os.environ)
    if not env.get("OSTYPE"):
        env["OSTYPE"] = _OSTYPE_BY_SYS_PLATFORM.get(sys.platform, sys.platform)
    return env
