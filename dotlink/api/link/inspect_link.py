"""Inspect a link target without changing it."""

import os
from pathlib import Path

from .LinkRequest import LinkRequest
from .LinkState import LinkState


def link_destination(link: Path) -> Path:
    """Absolute destination of symlink ``link`` (relative destinations resolve against its parent)."""
    destination = Path(os.readlink(link))
    if not destination.is_absolute():
        destination = link.parent / destination
    return Path(os.path.normpath(destination))


def points_at(link: Path, source: Path) -> bool:
    """Whether symlink ``link`` points at ``source``."""
    return link_destination(link) == Path(os.path.normpath(source.absolute()))


def inspect_link(request: LinkRequest) -> LinkState:
    """Classify the current state of ``request.target``."""
    target = request.target
    if target.is_symlink():
        return LinkState.LINKED if points_at(target, request.source) else LinkState.MISLINKED
    if target.exists():
        return LinkState.CONFLICT
    return LinkState.MISSING
