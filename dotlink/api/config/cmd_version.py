"""Version command - returns dotlink version information."""

import platform
import subprocess
from collections.abc import Iterator
from pathlib import Path

from ...utils.get_package_version import get_package_version
from ..StageResult import StageResult
from .._output_schemas.config import ConfigVersionOutput


def _git_sha(checkout: Path) -> str:
    """Short commit of a source checkout, empty string for installed packages."""
    if not (checkout / ".git").exists():
        return ""
    try:
        return subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=checkout,
            check=True,
            capture_output=True,
            text=True,
        ).stdout.strip()
    except (OSError, subprocess.CalledProcessError):
        return ""


def cmd_version() -> StageResult:
    """Report the dotlink version, the source commit when run from a checkout, and the Python version."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Getting package version...")
        version = get_package_version()

        yield (0.6, "Checking git commit...")
        git_sha = _git_sha(Path(__file__).resolve().parents[3])

        yield (1.0, "Complete")
        full_version = f"{version} ({git_sha})" if git_sha else version
        result_obj.result = f"dotlink version: {full_version}"
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
            git_sha=git_sha,
            full_version=full_version,
            python_version=platform.python_version(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Getting version information...", progress_callback=do_work)
