"""Unit tests for dotlink.utils."""

import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from dotlink.utils.configure_logging import configure_logging
from dotlink.utils.expand_path import expand_path
from dotlink.utils.get_logger import get_logger


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow configure_logging to run again and drop the handlers it adds."""
    monkeypatch.setattr(sys.modules["dotlink.utils.configure_logging"], "_CONFIGURED", False)
    root = logging.getLogger("dotlink")
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logging_writes_to_home(fresh_logging, tmp_path):
    configure_logging(tmp_path / "dl", level="DEBUG")

    get_logger("link").debug("created link")
    for handler in fresh_logging.handlers:
        handler.flush()

    text = (tmp_path / "dl" / "dotlink.log").read_text()
    assert "dotlink.link - DEBUG - created link" in text
    assert fresh_logging.level == logging.DEBUG


def test_configure_logging_uses_env_home(fresh_logging, dotlink_home):
    configure_logging()
    assert (dotlink_home / "dotlink.log").exists()


def test_configure_logging_runs_once(fresh_logging, tmp_path):
    configure_logging(tmp_path / "a")
    configure_logging(tmp_path / "b")
    assert not (tmp_path / "b").exists()


def test_configure_logging_rotation_settings(fresh_logging, tmp_path):
    configure_logging(tmp_path, max_bytes=1024, backup_count=1)

    log_file = str(tmp_path / "dotlink.log")
    handler = next(h for h in fresh_logging.handlers if getattr(h, "baseFilename", "") == log_file)
    assert isinstance(handler, RotatingFileHandler)
    assert handler.maxBytes == 1024
    assert handler.backupCount == 1


def test_get_logger_namespace():
    assert get_logger("stow").name == "dotlink.stow"


def test_expand_path_against_home(tmp_path):
    assert expand_path("~/.config/nvim", tmp_path) == tmp_path / ".config" / "nvim"
    assert expand_path("~", tmp_path) == tmp_path


def test_expand_path_uses_user_home(home):
    assert expand_path("~/.vimrc") == home / ".vimrc"


def test_expand_path_makes_relative_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert expand_path("dots") == tmp_path / "dots"
