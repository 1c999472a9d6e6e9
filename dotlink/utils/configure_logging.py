"""Configure the rotating dotlink log file."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import DOTLINK_HOME_ENV, DOTLINK_HOME_EXT, LOG_BACKUP_COUNT, LOG_FILE_NAME, LOG_MAX_BYTES

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(
    dotlink_home: Path | None = None,
    level: str = "INFO",
    max_bytes: int = LOG_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
) -> None:
    """Attach a rotating file handler to the ``dotlink`` logger, once per process.

    Args:
        dotlink_home: Directory for the log file. If None, derived from environment.
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        max_bytes: Size at which the log file is rotated
        backup_count: Number of rotated files kept
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if dotlink_home is None:
        env_home = os.environ.get(DOTLINK_HOME_ENV)
        dotlink_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / DOTLINK_HOME_EXT

    dotlink_home.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("dotlink")
    root_logger.setLevel(logging.getLevelName(level))

    file_handler = RotatingFileHandler(dotlink_home / LOG_FILE_NAME, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
