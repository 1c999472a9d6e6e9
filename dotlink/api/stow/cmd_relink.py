"""Stow relink command - relinks named packages through the package linker."""

from collections.abc import Iterator

from ..config.DotlinkConfig import DotlinkConfig
from ..platform.current_environment import current_environment
from ..platform.detect_platform import detect_platform
from ..StageResult import StageResult
from .._output_schemas.stow import StowRelinkOutput
from .relink_packages import relink_packages


def cmd_relink(packages: list[str]) -> StageResult:
    """Relink packages from the dotfiles directory.

    Args:
        packages: Package names. Empty list relinks every configured package.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = DotlinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = StowRelinkOutput(
                errors=[str(e)], warnings=[], dotfiles_dir="", packages=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        dotfiles_dir = config.dotfiles_path()
        names = list(packages) or list(config.stow.packages)
        warnings: list[str] = []
        errors: list[str] = []

        missing = [name for name in names if not (dotfiles_dir / name).is_dir()]
        skipped = [{"package": name, "status": "skipped", "error": ""} for name in missing]
        for name in missing:
            warnings.append(f"Package directory not found: {dotfiles_dir / name}")
        present = [name for name in names if name not in missing]

        yield (0.4, f"Relinking {len(present)} package(s)...")
        results: list[dict] = []
        if present:
            tag = detect_platform(current_environment()).tag
            try:
                results, linker_warnings = relink_packages(config.stow, dotfiles_dir, present, tag)
            except ValueError as e:
                errors.append(str(e))
            else:
                warnings.extend(linker_warnings)
        errors.extend(entry["error"] for entry in results if entry["status"] == "failed")

        yield (1.0, "Complete")
        relinked = sum(1 for entry in results if entry["status"] == "relinked")
        if errors:
            result_obj.result = f"Relinked {relinked} package(s), {len(errors)} failed"
        else:
            result_obj.result = f"Relinked {relinked} package(s)"
        result_obj.output = StowRelinkOutput(
            errors=errors,
            warnings=warnings,
            dotfiles_dir=str(dotfiles_dir),
            packages=results + skipped,
        ).model_dump(mode="python")
        result_obj.success = len(errors) == 0

    return StageResult(announce="Relinking packages...", progress_callback=do_work)
