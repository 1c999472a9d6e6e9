"""Outcome of a successful link installation."""

from enum import Enum


class LinkOutcome(str, Enum):
    LINKED = "linked"
    ALREADY_LINKED = "already_linked"
    BACKED_UP_AND_LINKED = "backed_up_and_linked"
    RELINKED = "relinked"
