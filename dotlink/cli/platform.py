"""Platform Typer app factory."""

import typer

from dotlink.api.platform.cmd_detect import cmd_detect
from dotlink.cli._handle_stage_result import _handle_stage_result


def platform() -> typer.Typer:
    """Create and configure the platform Typer app."""
    app = typer.Typer(
        name="platform",
        help="Platform detection",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Platform operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="detect")
    def detect_cmd(ctx: typer.Context) -> None:
        """Show the detected platform and VSCode user directory."""
        _handle_stage_result(cmd_detect, ctx)()

    return app
