"""Init configuration command - writes the built-in defaults to the config file."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigInitOutput
from .DotlinkConfig import DotlinkConfig


def cmd_init(force: bool = False) -> StageResult:
    """Write the default configuration.

    Args:
        force: Overwrite an existing configuration file
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Checking for existing configuration...")
        config_path = DotlinkConfig.get_config_path()
        if config_path.exists() and not force:
            yield (1.0, "Complete")
            message = f"Configuration already exists at {config_path} (use --force to overwrite)"
            result_obj.result = message
            result_obj.output = ConfigInitOutput(
                errors=[message], warnings=[], config_path=str(config_path), created=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Writing default configuration...")
        try:
            DotlinkConfig.default().save()
        except RuntimeError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error writing configuration: {e}"
            result_obj.output = ConfigInitOutput(
                errors=[str(e)], warnings=[], config_path=str(config_path), created=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Wrote default configuration to {config_path}"
        result_obj.output = ConfigInitOutput(
            errors=[], warnings=[], config_path=str(config_path), created=True
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
