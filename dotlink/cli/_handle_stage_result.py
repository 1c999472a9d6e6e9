"""Adapt an API command into a typer command body."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

_FORMATS = ("json", "yaml")


def _extract_display_format(ctx: typer.Context | None) -> str:
    """``--display`` of the nearest enclosing app, yaml when no app set one."""
    current = ctx
    while current is not None:
        chosen = current.obj.get("display_format") if isinstance(current.obj, dict) else None
        if chosen in _FORMATS:
            return chosen
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F, ctx: typer.Context | None = None) -> F:
    """Wrap ``func`` so that calling it renders its StageResult and exits.

    ``ctx`` is the invoking command's context; its parent chain carries the
    root ``--display`` choice. Sub-apps invoked on their own (as in tests)
    have no root option and fall back to yaml.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from dotlink.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
