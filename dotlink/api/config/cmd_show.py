"""Show configuration command."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .DotlinkConfig import DotlinkConfig


def _lookup(config_dict: dict[str, Any], path: str) -> Any:
    """Value at a dotted path; list items are addressed by index (``links.0.target``).

    Raises:
        KeyError: If any part of the path does not exist
    """
    value: Any = config_dict
    for part in path.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        elif isinstance(value, list) and part.isdigit() and int(part) < len(value):
            value = value[int(part)]
        else:
            raise KeyError(part)
    return value


def cmd_show(section: str = "") -> StageResult:
    """Show the effective configuration.

    Args:
        section: Empty string lists the top-level sections. Otherwise a section
            name or dotted path such as ``stow.data.executable``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = str(DotlinkConfig.get_config_path())
        errors: list[str] = []
        warnings: list[str] = []
        content: Any = {}
        from_file = True
        try:
            config = DotlinkConfig.load()
        except ValueError as e:
            errors.append(str(e))
            result_obj.result = f"Error loading configuration: {e}"
        else:
            from_file = config.from_file
            if not from_file:
                warnings.append(f"No configuration file at {config_path}, using built-in defaults")

            yield (0.6, "Processing sections...")
            config_dict = config.to_dict()
            if section == "":
                content = {"sections": list(config_dict)}
                result_obj.result = f"Found {len(config_dict)} section(s)"
            else:
                try:
                    content = _lookup(config_dict, section)
                except KeyError:
                    errors.append(f"Unknown section: {section}")
                    result_obj.result = f"Section '{section}' not found"
                else:
                    result_obj.result = f"Retrieved configuration for '{section}'"

        yield (1.0, "Complete")
        result_obj.output = ConfigShowOutput(
            errors=errors,
            warnings=warnings,
            section=section,
            content=content,
            config_path=config_path,
            from_file=from_file,
        ).model_dump(mode="python")
        result_obj.success = not errors

    announce = "Listing configuration sections..." if section == "" else f"Showing configuration for '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
