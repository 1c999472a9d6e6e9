"""Output schemas for every dotlink command (importing registers them)."""

from . import config, link, platform, setup, stow

__all__ = ["config", "link", "platform", "setup", "stow"]
