"""Expand user path (~/...) to absolute path."""

from pathlib import Path


def expand_path(path: str | Path, home: Path | None = None) -> Path:
    """Expand user path (~/...) to absolute path.

    Args:
        path: Path string, possibly starting with ``~``
        home: Home directory to expand ``~`` against. Defaults to the user's home.

    Returns:
        Absolute path (symlinks are not resolved)
    """
    text = str(path)
    if home is not None and (text == "~" or text.startswith("~/")):
        return Path(home) / text[2:] if text != "~" else Path(home)
    return Path(text).expanduser().absolute()
