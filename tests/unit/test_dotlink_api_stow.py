"""Unit tests for dotlink.api.stow (package linker delegation).

A shell script stands in for GNU stow so the real subprocess path runs.
"""

import pytest

from dotlink.api.platform.PlatformTag import PlatformTag
from dotlink.api.stow.PackageLinker import PackageLinker
from dotlink.api.stow.relink_packages import relink_packages
from dotlink.api.stow.StowConfig import StowConfig
from dotlink.api.stow.StowError import ExternalToolInvocationFailed, ExternalToolMissing
from tests.conftest import make_fake_stow


def _stow_config(executable: str, **data) -> StowConfig:
    return StowConfig(
        type="stow",
        platforms=["linux"],
        packages=["nvim", "tmux"],
        data={"executable": executable, "flags": ["-R"], **data},
    )


def test_stow_config_rejects_unknown_type():
    with pytest.raises(ValueError, match="Unknown stow type"):
        StowConfig(type="chezmoi", platforms=[], packages=[], data={})


def test_stow_config_requires_data():
    with pytest.raises(ValueError, match="stow.data is required"):
        StowConfig(type="stow", platforms=[], packages=[])


def test_stow_config_rejects_blank_executable():
    with pytest.raises(ValueError, match="executable"):
        _stow_config("  ")


def test_stow_config_model_dump_includes_data():
    dumped = _stow_config("stow").model_dump(mode="json")
    assert dumped["data"] == {"executable": "stow", "flags": ["-R"], "target_dir": None}


def test_package_linker_requires_context(tmp_path):
    linker = PackageLinker(_stow_config("stow"), tmp_path)
    with pytest.raises(RuntimeError, match="context manager"):
        linker.relink("nvim")


def test_package_linker_runs_tool_in_dotfiles_dir(tmp_path, fake_stow):
    dotfiles = tmp_path / "dotfiles"
    dotfiles.mkdir()

    with PackageLinker(_stow_config("fake-stow"), dotfiles) as linker:
        linker.relink("nvim")

    assert fake_stow["log"].read_text().splitlines() == [f"{dotfiles} -R nvim"]


def test_package_linker_passes_target_dir(tmp_path, fake_stow):
    dotfiles = tmp_path / "dotfiles"
    dotfiles.mkdir()

    with PackageLinker(_stow_config("fake-stow", target_dir=str(tmp_path / "home")), dotfiles) as linker:
        linker.relink("tmux")

    assert fake_stow["log"].read_text().strip() == f"{dotfiles} -R -t {tmp_path / 'home'} tmux"


def test_package_linker_missing_tool(tmp_path):
    with PackageLinker(_stow_config("dotlink-test-missing-stow"), tmp_path) as linker:
        with pytest.raises(ExternalToolMissing) as exc_info:
            linker.relink("nvim")
    assert exc_info.value.executable == "dotlink-test-missing-stow"
    assert "[DL2001]" in str(exc_info.value)


def test_package_linker_tool_failure(tmp_path, fake_stow):
    make_fake_stow(fake_stow["bin_dir"], exit_code=2, name="failing-stow")
    dotfiles = tmp_path / "dotfiles"
    dotfiles.mkdir()

    with PackageLinker(_stow_config("failing-stow"), dotfiles) as linker:
        with pytest.raises(ExternalToolInvocationFailed) as exc_info:
            linker.relink("nvim")

    assert exc_info.value.package == "nvim"
    assert exc_info.value.returncode == 2
    assert "conflict" in exc_info.value.stderr


def test_relink_packages_success(tmp_path, fake_stow):
    results, warnings = relink_packages(_stow_config("fake-stow"), tmp_path, ["nvim", "tmux"], PlatformTag.LINUX)

    assert results == [
        {"package": "nvim", "status": "relinked", "error": ""},
        {"package": "tmux", "status": "relinked", "error": ""},
    ]
    assert warnings == []


def test_relink_packages_missing_tool_is_a_warning(tmp_path):
    results, warnings = relink_packages(
        _stow_config("dotlink-test-missing-stow"), tmp_path, ["nvim", "tmux"], PlatformTag.MACOS
    )

    assert [entry["status"] for entry in results] == ["skipped", "skipped"]
    assert len(warnings) == 1
    assert "brew install stow" in warnings[0]


def test_relink_packages_collects_failures(tmp_path, fake_stow):
    make_fake_stow(fake_stow["bin_dir"], exit_code=1, name="failing-stow")

    results, _ = relink_packages(_stow_config("failing-stow"), tmp_path, ["nvim", "tmux"], PlatformTag.LINUX)
    assert [entry["status"] for entry in results] == ["failed", "failed"]


def test_relink_packages_fail_fast_skips_remaining(tmp_path, fake_stow):
    make_fake_stow(fake_stow["bin_dir"], exit_code=1, name="failing-stow")

    results, warnings = relink_packages(
        _stow_config("failing-stow"), tmp_path, ["nvim", "tmux", "vsvimrc"], PlatformTag.LINUX, fail_fast=True
    )

    assert [(entry["package"], entry["status"]) for entry in results] == [
        ("nvim", "failed"),
        ("tmux", "skipped"),
        ("vsvimrc", "skipped"),
    ]
    assert warnings == []
    assert fake_stow["log"].read_text().splitlines() == [f"{tmp_path} -R nvim"]
