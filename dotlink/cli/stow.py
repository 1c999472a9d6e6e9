"""Stow Typer app factory."""

import typer

from dotlink.api.stow.cmd_relink import cmd_relink
from dotlink.cli._handle_stage_result import _handle_stage_result


def stow() -> typer.Typer:
    """Create and configure the stow Typer app."""
    app = typer.Typer(
        name="stow",
        help="Package linker (GNU stow) operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Stow operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="relink")
    def relink_cmd(
        ctx: typer.Context,
        packages: list[str] = typer.Argument(  # noqa: B008
            None, help="Packages to relink, omit for all configured packages"
        ),
    ) -> None:
        """Relink packages from the dotfiles directory."""
        _handle_stage_result(cmd_relink, ctx)(packages or [])

    return app
