"""Setup run command - links every planned file and relinks stow packages."""

from collections import Counter
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ...utils.get_logger import get_logger
from ..config.DotlinkConfig import DotlinkConfig
from ..link.inspect_link import link_destination, points_at
from ..link.install_link import install_link
from ..link.LinkError import LinkError
from ..link.LinkOutcome import LinkOutcome
from ..platform.current_environment import current_environment
from ..platform.detect_platform import detect_platform
from ..StageResult import StageResult
from ..stow.relink_packages import relink_packages
from .._output_schemas.setup import SetupRunOutput
from .plan_setup import plan_setup

logger = get_logger("setup")


def cmd_run(fail_fast: bool = False) -> StageResult:
    """Provision dotfiles for the current platform.

    Every link is attempted and failures are collected into the output. With
    ``fail_fast`` the run stops at the first failure.

    Args:
        fail_fast: Stop at the first failed link or package
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration...")
        try:
            config = DotlinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = SetupRunOutput(
                errors=[str(e)],
                warnings=[],
                platform="",
                dotfiles_dir="",
                results=[],
                stow=[],
                skipped=[],
                failed=1,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.1, "Detecting platform...")
        env = current_environment()
        info = detect_platform(env)
        plan = plan_setup(config, info, env, Path.home())
        logger.info(f"Setting up dotfiles for {info.tag.value} from {plan.dotfiles_dir}")

        errors: list[str] = []
        warnings: list[str] = list(plan.warnings)
        results: list[dict[str, Any]] = []
        stopped = False

        total = max(len(plan.requests), 1)
        for index, request in enumerate(plan.requests):
            yield (0.15 + 0.6 * index / total, f"Linking {request.label}...")
            entry: dict[str, Any] = {
                **request.to_dict(),
                "outcome": "",
                "backup_path": "",
                "error": "",
            }
            try:
                outcome = install_link(request, relink_mismatched=config.link.relink_mismatched)
            except LinkError as e:
                logger.error(str(e))
                entry["error"] = str(e)
                errors.append(f"{request.label}: {e}")
                results.append(entry)
                if fail_fast:
                    stopped = True
                    break
                continue

            entry["outcome"] = outcome.value
            if outcome == LinkOutcome.BACKED_UP_AND_LINKED:
                entry["backup_path"] = str(request.backup_path)
                warnings.append(f"Backed up existing {request.label} to {request.backup_path}")
            elif outcome == LinkOutcome.ALREADY_LINKED:
                if not points_at(request.target, request.source):
                    destination = link_destination(request.target)
                    warnings.append(f"{request.label} is a symlink to {destination}, not {request.source}")
            results.append(entry)

        stow_results: list[dict[str, Any]] = []
        if plan.stow_packages and not stopped:
            yield (0.8, f"Relinking {len(plan.stow_packages)} package(s)...")
            try:
                stow_results, linker_warnings = relink_packages(
                    config.stow, plan.dotfiles_dir, plan.stow_packages, info.tag, fail_fast=fail_fast
                )
            except ValueError as e:
                errors.append(str(e))
            else:
                warnings.extend(linker_warnings)
                errors.extend(entry["error"] for entry in stow_results if entry["status"] == "failed")

        yield (1.0, "Complete")
        failed = len(errors)
        counts = Counter(entry["outcome"] for entry in results if entry["outcome"])
        relinked = sum(1 for entry in stow_results if entry["status"] == "relinked")
        summary = (
            f"{counts[LinkOutcome.LINKED.value] + counts[LinkOutcome.RELINKED.value]} linked, "
            f"{counts[LinkOutcome.ALREADY_LINKED.value]} already linked, "
            f"{counts[LinkOutcome.BACKED_UP_AND_LINKED.value]} backed up, "
            f"{relinked} package(s) stowed, {len(plan.skipped)} skipped"
        )
        if failed:
            result_obj.result = f"Dotfiles setup finished with {failed} failure(s): {summary}"
        else:
            result_obj.result = f"Dotfiles setup complete: {summary}"
        result_obj.output = SetupRunOutput(
            errors=errors,
            warnings=warnings,
            platform=info.tag.value,
            dotfiles_dir=str(plan.dotfiles_dir),
            results=results,
            stow=stow_results,
            skipped=plan.skipped,
            failed=failed,
        ).model_dump(mode="python")
        result_obj.success = failed == 0

    announce = "Setting up dotfiles (stop on first failure)..." if fail_fast else "Setting up dotfiles..."
    return StageResult(announce=announce, progress_callback=do_work)
