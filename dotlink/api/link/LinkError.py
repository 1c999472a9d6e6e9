"""Errors raised while installing a link."""

from pathlib import Path


class LinkError(OSError):
    """Base class for link installation errors.

    Carries the path that failed and the underlying OSError (also chained as __cause__).
    """

    code = "DL1000"
    message = "Link operation failed"

    def __init__(self, path: str | Path, cause: OSError | None = None):
        self.path = Path(path)
        self.cause = cause
        details = f"{self.path}"
        if cause is not None:
            details = f"{details} ({cause.strerror or cause})"
        super().__init__(f"[{self.code}] {self.message}: {details}")


class DirectoryCreationFailed(LinkError):
    code = "DL1001"
    message = "Could not create parent directory"


class BackupFailed(LinkError):
    code = "DL1002"
    message = "Could not back up existing target"


class LinkCreationFailed(LinkError):
    code = "DL1003"
    message = "Could not create symlink"
