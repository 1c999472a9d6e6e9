"""Unit tests for dotlink.api.stow.cmd_relink module."""

from dotlink.api.stow.cmd_relink import cmd_relink
from tests.conftest import minimal_config_dict, run_cmd, write_config


def test_cmd_relink_configured_packages(dotlink_home, dotfiles, fake_stow):
    write_config(dotlink_home, minimal_config_dict(executable="fake-stow"))

    result = run_cmd(cmd_relink, [])

    assert result.success is True
    statuses = {entry["package"]: entry["status"] for entry in result.output["packages"]}
    assert statuses == {"nvim": "relinked", "tmux": "relinked", "ideavimrc": "relinked", "vsvimrc": "relinked"}
    assert len(fake_stow["log"].read_text().splitlines()) == 4


def test_cmd_relink_skips_missing_package_dir(dotlink_home, dotfiles, fake_stow):
    write_config(dotlink_home, minimal_config_dict(executable="fake-stow"))

    result = run_cmd(cmd_relink, ["nvim", "emacs"])

    assert result.success is True
    assert result.output["packages"] == [
        {"package": "nvim", "status": "relinked", "error": ""},
        {"package": "emacs", "status": "skipped", "error": ""},
    ]
    assert any("emacs" in warning for warning in result.output["warnings"])


def test_cmd_relink_missing_tool_is_not_a_failure(dotlink_home, dotfiles):
    write_config(dotlink_home, minimal_config_dict())

    result = run_cmd(cmd_relink, ["nvim"])

    assert result.success is True
    assert result.output["packages"] == [{"package": "nvim", "status": "skipped", "error": ""}]
    assert "sudo apt install stow" in result.output["warnings"][0]


def test_cmd_relink_reports_invalid_config(dotlink_home):
    dotlink_home.mkdir(parents=True)
    (dotlink_home / "config.json").write_text("{not json")

    result = run_cmd(cmd_relink, [])

    assert result.success is False
    assert "Invalid JSON" in result.output["errors"][0]
