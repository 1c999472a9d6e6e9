"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from typing import TypeVar

import typer
from rich.markup import escape

from dotlink.api.validate_output import validate_output
from dotlink.cli.display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Run a command, render its stages and exit 0 on success, 1 on failure.

    Commands report domain errors through their output schema. An output that
    does not match the schema raises ValueError.
    """
    result = func(*args, **kwargs)
    display.status(result.announce)

    for fraction, message in result.progress_callback(result):
        display.info(f"[dim]Progress:[/dim] {message} ({fraction:.0%})")

    if not result.result or not result.output:
        raise ValueError(f"{func.__name__} finished without setting result and output")
    result.output = validate_output(func, result.output)

    for warning in result.output["warnings"]:
        display.warning(warning)
    for skipped in result.output.get("skipped", []):
        display.info(f"[dim]Skipped {escape(skipped['label'])}: {escape(skipped['reason'])}[/dim]")

    if result.success:
        display.success(result.result)
    else:
        display.error(result.result, details="\n".join(result.output["errors"]))

    display.json_output(result.output, format=display_format)
    raise typer.Exit(0 if result.success else 1)
