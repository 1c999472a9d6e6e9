"""Link module - symlink installation with backup-on-conflict."""

from .install_link import install_link
from .LinkError import BackupFailed, DirectoryCreationFailed, LinkCreationFailed, LinkError
from .LinkOutcome import LinkOutcome
from .LinkRequest import LinkRequest

__all__ = [
    "BackupFailed",
    "DirectoryCreationFailed",
    "LinkCreationFailed",
    "LinkError",
    "LinkOutcome",
    "LinkRequest",
    "install_link",
]
