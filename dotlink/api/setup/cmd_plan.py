"""Setup plan command - shows what a setup run would do."""

from collections.abc import Iterator
from pathlib import Path

from ..config.DotlinkConfig import DotlinkConfig
from ..platform.current_environment import current_environment
from ..platform.detect_platform import detect_platform
from ..StageResult import StageResult
from .._output_schemas.setup import SetupPlanOutput
from .plan_setup import plan_setup


def cmd_plan() -> StageResult:
    """Show the setup plan for the current platform without changing anything."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = DotlinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = SetupPlanOutput(
                errors=[str(e)],
                warnings=[],
                platform="",
                dotfiles_dir="",
                links=[],
                stow_packages=[],
                skipped=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Detecting platform...")
        env = current_environment()
        info = detect_platform(env)

        yield (0.8, "Resolving links...")
        plan = plan_setup(config, info, env, Path.home())

        yield (1.0, "Complete")
        result_obj.result = (
            f"Planned {len(plan.requests)} link(s) and {len(plan.stow_packages)} package(s) "
            f"for {info.tag.value}, {len(plan.skipped)} skipped"
        )
        result_obj.output = SetupPlanOutput(
            errors=[],
            warnings=plan.warnings,
            platform=info.tag.value,
            dotfiles_dir=str(plan.dotfiles_dir),
            links=[request.to_dict() for request in plan.requests],
            stow_packages=plan.stow_packages,
            skipped=plan.skipped,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Planning dotfiles setup...", progress_callback=do_work)
