"""Link status command - inspects every planned link without changing it."""

from collections.abc import Iterator
from pathlib import Path

from ..config.DotlinkConfig import DotlinkConfig
from ..platform.current_environment import current_environment
from ..platform.detect_platform import detect_platform
from ..setup.plan_setup import plan_setup
from ..StageResult import StageResult
from .._output_schemas.link import LinkStatusOutput
from .inspect_link import inspect_link, link_destination
from .LinkState import LinkState


def cmd_status() -> StageResult:
    """Report the state of each link planned for this platform."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = DotlinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = LinkStatusOutput(errors=[str(e)], warnings=[], platform="", links=[]).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (0.4, "Resolving links...")
        env = current_environment()
        info = detect_platform(env)
        plan = plan_setup(config, info, env, Path.home())

        yield (0.7, "Inspecting targets...")
        warnings = list(plan.warnings)
        links = []
        for request in plan.requests:
            state = inspect_link(request)
            destination = str(link_destination(request.target)) if request.target.is_symlink() else ""
            if state == LinkState.MISLINKED:
                warnings.append(f"{request.label} is a symlink to {destination}, not {request.source}")
            elif state == LinkState.CONFLICT:
                warnings.append(f"{request.label}: {request.target} exists and will be backed up")
            links.append({**request.to_dict(), "state": state.value, "destination": destination})

        yield (1.0, "Complete")
        linked = sum(1 for entry in links if entry["state"] == LinkState.LINKED.value)
        result_obj.result = f"{linked} of {len(links)} link(s) in place on {info.tag.value}"
        result_obj.output = LinkStatusOutput(
            errors=[],
            warnings=warnings,
            platform=info.tag.value,
            links=links,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Checking link status...", progress_callback=do_work)
