"""Link install command - installs a single symlink."""

from collections.abc import Iterator
from pathlib import Path

from ..config.DotlinkConfig import DotlinkConfig
from ..StageResult import StageResult
from .._output_schemas.link import LinkInstallOutput
from .install_link import install_link
from .LinkError import LinkError
from .LinkOutcome import LinkOutcome
from .LinkRequest import LinkRequest

_MESSAGES = {
    LinkOutcome.LINKED: "{label} symlinked",
    LinkOutcome.ALREADY_LINKED: "{label} already symlinked",
    LinkOutcome.BACKED_UP_AND_LINKED: "{label} symlinked (existing file backed up to {backup})",
    LinkOutcome.RELINKED: "{label} relinked",
}


def cmd_install(source: Path, target: Path, label: str = "") -> StageResult:
    """Make target a symlink to source, backing up a conflicting file.

    Args:
        source: Path the link should point at
        target: Path of the link
        label: Display name, defaults to the target file name
    """
    request = LinkRequest(
        source=Path(source).expanduser().absolute(),
        target=Path(target).expanduser().absolute(),
        label=label,
    )

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            relink_mismatched = DotlinkConfig.load().link.relink_mismatched
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(result_obj, request, f"Error loading configuration: {e}", str(e))
            return

        warnings: list[str] = []
        if not request.source.exists():
            warnings.append(f"Source does not exist: {request.source}")

        yield (0.5, f"Linking {request.label}...")
        try:
            outcome = install_link(request, relink_mismatched=relink_mismatched)
        except LinkError as e:
            yield (1.0, "Complete")
            _fail(result_obj, request, f"Error linking {request.label}: {e}", str(e), warnings)
            return

        yield (1.0, "Complete")
        backup = str(request.backup_path) if outcome == LinkOutcome.BACKED_UP_AND_LINKED else ""
        result_obj.result = _MESSAGES[outcome].format(label=request.label, backup=backup)
        result_obj.output = LinkInstallOutput(
            errors=[],
            warnings=warnings,
            label=request.label,
            source=str(request.source),
            target=str(request.target),
            outcome=outcome.value,
            backup_path=backup,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Installing link {request.label}...", progress_callback=do_work)


def _fail(
    result_obj: StageResult,
    request: LinkRequest,
    message: str,
    error: str,
    warnings: list[str] | None = None,
) -> None:
    result_obj.result = message
    result_obj.output = LinkInstallOutput(
        errors=[error],
        warnings=warnings or [],
        label=request.label,
        source=str(request.source),
        target=str(request.target),
        outcome="",
        backup_path="",
    ).model_dump(mode="python")
    result_obj.success = False
