"""Shared pytest configuration and fixtures for all tests."""

import json
import os
from pathlib import Path

import pytest

from dotlink.api.config.default_config_dict import default_config_dict


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(executable: str = "dotlink-test-missing-stow") -> dict:
    """Default configuration with a package linker that is never on PATH."""
    config = default_config_dict()
    config["stow"]["data"]["executable"] = executable
    return config


def write_config(dotlink_home: Path, config: dict) -> Path:
    dotlink_home.mkdir(parents=True, exist_ok=True)
    config_path = dotlink_home / "config.json"
    config_path.write_text(json.dumps(config, indent=2))
    return config_path


def make_fake_stow(bin_dir: Path, exit_code: int = 0, name: str = "fake-stow") -> Path:
    """Write a stow stand-in that appends "<cwd> <args>" to $STOW_LOG."""
    bin_dir.mkdir(parents=True, exist_ok=True)
    script = bin_dir / name
    script.write_text(
        "#!/bin/sh\n"
        'echo "$(pwd) $*" >> "$STOW_LOG"\n'
        f'[ {exit_code} -eq 0 ] || echo "stow: conflict in $*" >&2\n'
        f"exit {exit_code}\n"
    )
    script.chmod(0o755)
    return script


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> dict[str, Path]:
    """Point HOME and DOTLINK_HOME into tmp_path and pin the platform to linux."""
    home = tmp_path / "home"
    home.mkdir()
    dotlink_home = tmp_path / ".dotlink"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("DOTLINK_HOME", str(dotlink_home))
    monkeypatch.setenv("OSTYPE", "linux-gnu")
    monkeypatch.delenv("WSL_DISTRO_NAME", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    return {"home": home, "dotlink_home": dotlink_home}


@pytest.fixture
def home(isolated_env) -> Path:
    return isolated_env["home"]


@pytest.fixture
def dotlink_home(isolated_env) -> Path:
    return isolated_env["dotlink_home"]


@pytest.fixture
def dotfiles(home: Path) -> Path:
    """A ~/.dotfiles tree with the files the default configuration links."""
    root = home / ".dotfiles"
    files = {
        "vscode/keybindings.json": "[]\n",
        "vscode/settings.json": "{}\n",
        "vsvimrc/.vsvimrc": "set ignorecase\n",
        "ideavimrc/.ideavimrc": "set surround\n",
        "nvim/.config/nvim/init.vim": "set number\n",
        "tmux/.config/tmux/tmux.conf": "set -g mouse on\n",
    }
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    return minimal_config_dict()


@pytest.fixture
def fake_stow(tmp_path: Path, monkeypatch) -> dict[str, Path]:
    """Put a stow stand-in on PATH and return its script and log paths."""
    bin_dir = tmp_path / "bin"
    script = make_fake_stow(bin_dir)
    log = tmp_path / "stow.log"
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.setenv("STOW_LOG", str(log))
    return {"script": script, "log": log, "bin_dir": bin_dir}


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Call a cmd function and run its progress callback to completion."""
    return cmd_func(*args, **kwargs).drain()
