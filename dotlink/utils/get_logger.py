"""Get a logger under the dotlink namespace."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"dotlink.{name}")
