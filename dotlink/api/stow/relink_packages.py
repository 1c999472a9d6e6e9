"""Relink a list of packages, downgrading a missing tool to a warning."""

from pathlib import Path
from typing import Any

from ...utils.get_logger import get_logger
from ..platform.PlatformTag import PlatformTag
from .PackageLinker import PackageLinker
from .StowConfig import StowConfig
from .StowError import ExternalToolInvocationFailed, ExternalToolMissing

logger = get_logger("stow")


def relink_packages(
    stow_config: StowConfig,
    dotfiles_dir: Path,
    packages: list[str],
    tag: PlatformTag,
    fail_fast: bool = False,
) -> tuple[list[dict[str, Any]], list[str]]:
    """Relink packages in order.

    A missing tool marks this and every remaining package as skipped and adds
    a warning. A failing invocation marks the package failed; with
    ``fail_fast`` the remaining packages are marked skipped.

    Returns:
        (results, warnings) where each result has package, status and error
    """
    results: list[dict[str, Any]] = []
    warnings: list[str] = []

    with PackageLinker(stow_config, dotfiles_dir) as linker:
        for index, package in enumerate(packages):
            try:
                linker.relink(package)
            except ExternalToolMissing as e:
                hint = PackageLinker.install_hint(tag)
                warnings.append(f"{e}. {hint}" if hint else str(e))
                logger.warning(f"{e}; skipping packages {packages[index:]}")
                results.extend({"package": name, "status": "skipped", "error": ""} for name in packages[index:])
                break
            except ExternalToolInvocationFailed as e:
                logger.error(str(e))
                results.append({"package": package, "status": "failed", "error": str(e)})
                if fail_fast:
                    results.extend(
                        {"package": name, "status": "skipped", "error": ""} for name in packages[index + 1 :]
                    )
                    break
            else:
                results.append({"package": package, "status": "relinked", "error": ""})

    return results, warnings
