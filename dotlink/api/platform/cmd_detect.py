"""Platform detect command - shows the detected platform and per-OS paths."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.platform import PlatformDetectOutput
from .current_environment import current_environment
from .detect_platform import detect_platform
from .resolve_vscode_user_dir import resolve_vscode_user_dir


def cmd_detect() -> StageResult:
    """Detect the platform from the current environment."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Reading environment...")
        env = current_environment()
        info = detect_platform(env)

        yield (0.6, "Resolving VSCode user directory...")
        vscode_dir = resolve_vscode_user_dir(info, Path.home(), env)
        warnings: list[str] = []
        if vscode_dir is None:
            warnings.append(f"Could not determine VSCode path on {info.tag.value}")

        yield (1.0, "Complete")
        flavor = f" ({info.windows_flavor})" if info.windows_flavor else ""
        result_obj.result = f"Detected platform: {info.tag.value}{flavor}"
        result_obj.output = PlatformDetectOutput(
            errors=[],
            warnings=warnings,
            platform=info.tag.value,
            windows_flavor=info.windows_flavor or "",
            wsl_distro=info.wsl_distro or "",
            vscode_user_dir=str(vscode_dir) if vscode_dir else "",
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Detecting platform...", progress_callback=do_work)
