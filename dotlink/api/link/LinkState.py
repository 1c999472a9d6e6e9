"""Observed state of a link target."""

from enum import Enum


class LinkState(str, Enum):
    MISSING = "missing"  # nothing at target
    LINKED = "linked"  # symlink to the requested source
    MISLINKED = "mislinked"  # symlink to somewhere else
    CONFLICT = "conflict"  # file or directory in the way
