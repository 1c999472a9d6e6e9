"""Check command output against the schema registered for the command."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from . import _output_schemas  # noqa: F401  (registers all schemas)
from ._output_schemas._registry import get_output_schema


def _command_key(func: Callable) -> tuple[str, str] | None:
    """(domain, command) for ``dotlink.api.<domain>.cmd_<command>``, None for anything else."""
    parts = func.__module__.split(".")
    if parts[:2] != ["dotlink", "api"] or len(parts) < 3 or not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return ``output`` validated and converted to JSON-compatible values.

    Output of functions without a registered schema is returned unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    key = _command_key(func)
    schema_class = get_output_schema(*key) if key else None
    if schema_class is None:
        return output

    try:
        return schema_class.model_validate(output).model_dump(mode="json")
    except ValidationError as e:
        domain, command = key
        raise ValueError(f"Output validation failed for {domain}.{command}: {e}") from e
