"""Unit tests for dotlink.api.setup.cmd_plan module."""

from dotlink.api.setup.cmd_plan import cmd_plan
from tests.conftest import minimal_config_dict, run_cmd, write_config


def test_cmd_plan_uses_defaults_without_config(home, dotfiles):
    result = run_cmd(cmd_plan)

    assert result.success is True
    assert result.output["platform"] == "linux"
    assert result.output["dotfiles_dir"] == str(dotfiles)
    assert [link["label"] for link in result.output["links"]] == ["keybindings.json", "settings.json"]
    assert result.output["stow_packages"] == ["nvim", "tmux", "ideavimrc", "vsvimrc"]


def test_cmd_plan_does_not_touch_filesystem(home, dotfiles):
    run_cmd(cmd_plan)

    assert not (home / ".config").exists()


def test_cmd_plan_on_wsl_without_cmd_exe(home, dotfiles, tmp_path, monkeypatch):
    monkeypatch.setenv("OSTYPE", "msys")
    monkeypatch.setenv("WSL_DISTRO_NAME", "Ubuntu")
    monkeypatch.setenv("PATH", str(tmp_path / "empty-bin"))

    result = run_cmd(cmd_plan)

    assert result.success is True
    assert result.output["platform"] == "windows"
    assert result.output["stow_packages"] == []
    assert [link["label"] for link in result.output["links"]] == ["_vsvimrc", ".ideavimrc", "nvim", "tmux"]
    assert {entry["label"] for entry in result.output["skipped"]} == {"keybindings.json", "settings.json"}
    assert "Could not determine VSCode path on windows" in result.output["warnings"]


def test_cmd_plan_reports_positional_target_placeholder(dotlink_home, home, dotfiles):
    config = minimal_config_dict()
    config["links"][0]["target"] = "~/x{}"
    write_config(dotlink_home, config)

    result = run_cmd(cmd_plan)

    assert result.success is False
    assert "positional placeholder" in result.output["errors"][0]
