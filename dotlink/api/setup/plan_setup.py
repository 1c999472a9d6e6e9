"""Turn configuration and a detected platform into a setup plan."""

from collections.abc import Callable, Mapping
from pathlib import Path

from ...utils.expand_path import expand_path
from ..config.DotlinkConfig import DotlinkConfig
from ..link.LinkRequest import LinkRequest
from ..platform.get_windows_username import get_windows_username
from ..platform.PlatformInfo import PlatformInfo
from ..platform.PlatformTag import PlatformTag
from ..platform.resolve_vscode_user_dir import resolve_vscode_user_dir
from .LinkEntry import template_fields
from .SetupPlan import SetupPlan


def plan_setup(
    config: DotlinkConfig,
    info: PlatformInfo,
    env: Mapping[str, str],
    home: Path,
    username_lookup: Callable[[], str | None] = get_windows_username,
) -> SetupPlan:
    """Resolve configured links and packages for a platform.

    Does not touch the filesystem except to check whether optional sources and
    package directories exist.

    Args:
        config: dotlink configuration
        info: Detected platform
        env: Environment mapping (used for per-OS paths)
        home: User home directory
        username_lookup: Returns the Windows username under WSL
    """
    dotfiles_dir = config.dotfiles_path(home)
    plan = SetupPlan(platform=info, dotfiles_dir=dotfiles_dir)

    if not dotfiles_dir.is_dir():
        plan.warnings.append(f"Dotfiles directory not found: {dotfiles_dir}")

    entries = [entry for entry in config.links if info.tag in entry.platforms]

    placeholders: dict[str, Path | None] = {"home": home, "dotfiles_dir": dotfiles_dir}
    if any("vscode_user_dir" in template_fields(entry.target) for entry in entries):
        placeholders["vscode_user_dir"] = resolve_vscode_user_dir(info, home, env, username_lookup)
        if placeholders["vscode_user_dir"] is None:
            plan.warnings.append(f"Could not determine VSCode path on {info.tag.value}")

    for entry in entries:
        if entry.requires_wsl and info.tag == PlatformTag.WINDOWS and not info.is_wsl:
            plan.skip(entry.label, "not available on native Windows")
            continue

        missing = [name for name in template_fields(entry.target) if placeholders.get(name) is None]
        if missing:
            plan.skip(entry.label, f"could not determine {', '.join(missing)}")
            continue

        source = Path(entry.source)
        if not source.is_absolute():
            source = dotfiles_dir / source
        if entry.optional and not source.exists():
            plan.skip(entry.label, f"source not found: {source}")
            continue

        target = expand_path(entry.target.format(**{k: v for k, v in placeholders.items() if v is not None}), home)
        plan.requests.append(LinkRequest(source=source, target=target, label=entry.label))

    if info.tag in config.stow.platforms:
        for package in config.stow.packages:
            if (dotfiles_dir / package).is_dir():
                plan.stow_packages.append(package)
            else:
                plan.skip(package, f"package directory not found: {dotfiles_dir / package}")

    return plan
