"""Shared constants for dotlink dot-directories and link artefacts."""

DOTLINK_HOME_EXT = ".dotlink"  # user-level state/config directory suffix

DOTLINK_HOME_ENV = "DOTLINK_HOME"

DEFAULT_DOTFILES_DIR = "~/.dotfiles"

# Suffix appended to a pre-existing target before it is replaced by a link
BACKUP_SUFFIX = ".backup"

# Suffix of the sibling link created before it is moved over the target
TEMP_LINK_SUFFIX = ".dotlink-tmp"

LOG_FILE_NAME = "dotlink.log"

LOG_MAX_BYTES = 5 * 1024 * 1024

LOG_BACKUP_COUNT = 3
