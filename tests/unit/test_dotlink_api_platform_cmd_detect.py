"""Unit tests for dotlink.api.platform.cmd_detect module."""

from dotlink.api.platform.cmd_detect import cmd_detect
from tests.conftest import run_cmd


def test_cmd_detect_linux(home):
    result = run_cmd(cmd_detect)

    assert result.success is True
    assert result.output["platform"] == "linux"
    assert result.output["windows_flavor"] == ""
    assert result.output["vscode_user_dir"] == str(home / ".config" / "Code" / "User")
    assert result.output["warnings"] == []


def test_cmd_detect_native_windows_without_appdata(monkeypatch):
    monkeypatch.setenv("OSTYPE", "msys")

    result = run_cmd(cmd_detect)

    assert result.success is True
    assert result.output["platform"] == "windows"
    assert result.output["vscode_user_dir"] == ""
    assert result.output["warnings"] == ["Could not determine VSCode path on windows"]
