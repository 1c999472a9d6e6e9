"""Install a symlink, backing up whatever was in the way."""

import errno
import os
from contextlib import suppress
from pathlib import Path

from ...constants import TEMP_LINK_SUFFIX
from ...utils.get_logger import get_logger
from .inspect_link import points_at
from .LinkError import BackupFailed, DirectoryCreationFailed, LinkCreationFailed
from .LinkOutcome import LinkOutcome
from .LinkRequest import LinkRequest

logger = get_logger("link")


def _temp_link_path(target: Path) -> Path:
    return target.with_name(f".{target.name}{TEMP_LINK_SUFFIX}")


def _create_temp_link(source: Path, target: Path) -> Path:
    temp_link = _temp_link_path(target)
    try:
        # Leftover from an interrupted run
        if temp_link.is_symlink():
            temp_link.unlink()
        temp_link.symlink_to(source, target_is_directory=source.is_dir())
    except OSError as e:
        raise LinkCreationFailed(target, e) from e
    return temp_link


def _discard(temp_link: Path) -> None:
    with suppress(FileNotFoundError):
        temp_link.unlink()


def _move_into_place(temp_link: Path, target: Path) -> None:
    try:
        os.replace(temp_link, target)
    except OSError as e:
        _discard(temp_link)
        raise LinkCreationFailed(target, e) from e


def install_link(request: LinkRequest, relink_mismatched: bool = False) -> LinkOutcome:
    """Make ``request.target`` a symlink to ``request.source``.

    Policy, evaluated once:

    1. Create the parent directory chain of the target.
    2. An existing symlink is left alone (ALREADY_LINKED). With
       ``relink_mismatched`` a symlink to another destination is replaced
       (RELINKED).
    3. Any other existing node is renamed to ``<target>.backup`` and the link
       takes its place (BACKED_UP_AND_LINKED).
    4. Otherwise the link is created (LINKED).

    The new link is created at a temporary sibling path and renamed over the
    target, so the target is never left empty after a successful backup.

    Args:
        request: Link to install
        relink_mismatched: Replace symlinks that point somewhere other than the source

    Returns:
        LinkOutcome describing what was done

    Raises:
        DirectoryCreationFailed: Parent directory could not be created
        BackupFailed: Backup slot occupied or rename not permitted
        LinkCreationFailed: Symlink could not be created or moved into place
    """
    source = request.source
    target = request.target

    if not target.parent.is_dir():
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationFailed(target.parent, e) from e
        logger.info(f"Created directory {target.parent}")

    if target.is_symlink():
        if not relink_mismatched or points_at(target, source):
            logger.debug(f"{request.label}: {target} already symlinked")
            return LinkOutcome.ALREADY_LINKED
        temp_link = _create_temp_link(source, target)
        _move_into_place(temp_link, target)
        logger.info(f"{request.label}: relinked {target} -> {source}")
        return LinkOutcome.RELINKED

    temp_link = _create_temp_link(source, target)

    backed_up = False
    if target.exists():
        backup = request.backup_path
        try:
            if backup.exists() or backup.is_symlink():
                raise FileExistsError(errno.EEXIST, "Backup already exists", str(backup))
            target.rename(backup)
        except OSError as e:
            _discard(temp_link)
            raise BackupFailed(target, e) from e
        backed_up = True
        logger.info(f"{request.label}: backed up {target} to {backup}")

    _move_into_place(temp_link, target)
    logger.info(f"{request.label}: symlinked {target} -> {source}")
    return LinkOutcome.BACKED_UP_AND_LINKED if backed_up else LinkOutcome.LINKED
