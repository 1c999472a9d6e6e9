"""Unit tests for dotlink.api.setup.cmd_run module."""

import os

from dotlink.api.setup.cmd_run import cmd_run
from tests.conftest import make_fake_stow, minimal_config_dict, run_cmd, write_config


def _vscode_dir(home):
    return home / ".config" / "Code" / "User"


def test_cmd_run_links_vscode_files(home, dotlink_home, dotfiles):
    write_config(dotlink_home, minimal_config_dict())

    result = run_cmd(cmd_run)

    assert result.success is True
    assert result.output["platform"] == "linux"
    assert result.output["failed"] == 0
    assert [entry["outcome"] for entry in result.output["results"]] == ["linked", "linked"]
    keybindings = _vscode_dir(home) / "keybindings.json"
    assert keybindings.is_symlink()
    assert keybindings.resolve() == (dotfiles / "vscode" / "keybindings.json").resolve()
    assert "Dotfiles setup complete" in result.result


def test_cmd_run_missing_stow_is_a_warning(dotlink_home, dotfiles):
    write_config(dotlink_home, minimal_config_dict())

    result = run_cmd(cmd_run)

    assert result.success is True
    assert [entry["status"] for entry in result.output["stow"]] == ["skipped"] * 4
    assert any("Package linker not found" in warning for warning in result.output["warnings"])


def test_cmd_run_relinks_stow_packages(dotlink_home, dotfiles, fake_stow):
    write_config(dotlink_home, minimal_config_dict(executable="fake-stow"))

    result = run_cmd(cmd_run)

    assert result.success is True
    assert [entry["status"] for entry in result.output["stow"]] == ["relinked"] * 4
    assert fake_stow["log"].read_text().splitlines()[0] == f"{dotfiles} -R nvim"


def test_cmd_run_stow_failure_fails_the_run(dotlink_home, dotfiles, fake_stow):
    make_fake_stow(fake_stow["bin_dir"], exit_code=1, name="failing-stow")
    write_config(dotlink_home, minimal_config_dict(executable="failing-stow"))

    result = run_cmd(cmd_run)

    assert result.success is False
    assert result.output["failed"] == 4
    assert all("[DL2002]" in error for error in result.output["errors"])


def test_cmd_run_backs_up_conflicting_file(home, dotlink_home, dotfiles):
    write_config(dotlink_home, minimal_config_dict())
    settings = _vscode_dir(home) / "settings.json"
    settings.parent.mkdir(parents=True)
    settings.write_text('{"editor.fontSize": 12}')

    result = run_cmd(cmd_run)

    assert result.success is True
    entry = next(item for item in result.output["results"] if item["label"] == "settings.json")
    assert entry["outcome"] == "backed_up_and_linked"
    assert entry["backup_path"] == f"{settings}.backup"
    assert (_vscode_dir(home) / "settings.json.backup").read_text() == '{"editor.fontSize": 12}'
    assert settings.is_symlink()
    assert any("Backed up existing settings.json" in warning for warning in result.output["warnings"])


def test_cmd_run_is_idempotent(home, dotlink_home, dotfiles):
    write_config(dotlink_home, minimal_config_dict())
    run_cmd(cmd_run)

    result = run_cmd(cmd_run)

    assert result.success is True
    assert [entry["outcome"] for entry in result.output["results"]] == ["already_linked", "already_linked"]
    assert not (_vscode_dir(home) / "keybindings.json.backup").exists()


def test_cmd_run_warns_about_mismatched_link(home, dotlink_home, dotfiles, tmp_path):
    write_config(dotlink_home, minimal_config_dict())
    keybindings = _vscode_dir(home) / "keybindings.json"
    keybindings.parent.mkdir(parents=True)
    os.symlink(tmp_path / "old-keybindings.json", keybindings)

    result = run_cmd(cmd_run)

    assert result.success is True
    assert result.output["results"][0]["outcome"] == "already_linked"
    assert any("keybindings.json is a symlink to" in warning for warning in result.output["warnings"])
    assert os.readlink(keybindings) == str(tmp_path / "old-keybindings.json")


def test_cmd_run_relinks_mismatched_link_when_enabled(home, dotlink_home, dotfiles, tmp_path):
    config = minimal_config_dict()
    config["link"]["relink_mismatched"] = True
    write_config(dotlink_home, config)
    keybindings = _vscode_dir(home) / "keybindings.json"
    keybindings.parent.mkdir(parents=True)
    os.symlink(tmp_path / "old-keybindings.json", keybindings)

    result = run_cmd(cmd_run)

    assert result.output["results"][0]["outcome"] == "relinked"
    assert os.readlink(keybindings) == str(dotfiles / "vscode" / "keybindings.json")


def test_cmd_run_collects_link_failures(home, dotlink_home, dotfiles):
    write_config(dotlink_home, minimal_config_dict())
    # A file where the VSCode directory chain should be
    code_dir = home / ".config" / "Code"
    code_dir.parent.mkdir(parents=True)
    code_dir.write_text("not a directory")

    result = run_cmd(cmd_run)

    assert result.success is False
    assert result.output["failed"] == 2
    assert all("[DL1001]" in entry["error"] for entry in result.output["results"])
    # stow still ran (and was skipped for the missing tool)
    assert len(result.output["stow"]) == 4
    assert "2 failure(s)" in result.result


def test_cmd_run_fail_fast_stops_at_first_failure(home, dotlink_home, dotfiles):
    write_config(dotlink_home, minimal_config_dict())
    code_dir = home / ".config" / "Code"
    code_dir.parent.mkdir(parents=True)
    code_dir.write_text("not a directory")

    result = run_cmd(cmd_run, fail_fast=True)

    assert result.success is False
    assert result.output["failed"] == 1
    assert len(result.output["results"]) == 1
    assert result.output["stow"] == []
    assert "stop on first failure" in result.announce


def test_cmd_run_reports_invalid_config(dotlink_home):
    write_config(dotlink_home, {"dotfiles_dir": "~/.dotfiles"})

    result = run_cmd(cmd_run)

    assert result.success is False
    assert "Configuration validation error" in result.output["errors"][0]
    assert result.output["failed"] == 1
