"""Config Typer app factory."""

import typer

from dotlink.api.config.cmd_init import cmd_init
from dotlink.api.config.cmd_show import cmd_show
from dotlink.api.config.cmd_version import cmd_version
from dotlink.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        section: str = typer.Argument(
            "", help="Section name or dotted path (e.g. stow.data.executable), omit to list sections"
        ),
    ) -> None:
        """Show configuration sections or a specific section."""
        _handle_stage_result(cmd_show, ctx)(section)

    @app.command(name="init")
    def init_cmd(
        ctx: typer.Context,
        force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration file"),
    ) -> None:
        """Write the default configuration file."""
        _handle_stage_result(cmd_init, ctx)(force=force)

    @app.command(name="version")
    def version_cmd(ctx: typer.Context) -> None:
        """Show dotlink version information."""
        _handle_stage_result(cmd_version, ctx)()

    return app
