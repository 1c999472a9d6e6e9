"""Link Typer app factory."""

from pathlib import Path

import typer

from dotlink.api.link.cmd_install import cmd_install
from dotlink.api.link.cmd_status import cmd_status
from dotlink.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Single symlink operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Link operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd(
        ctx: typer.Context,
        source: Path = typer.Argument(..., help="Path the link should point at"),  # noqa: B008
        target: Path = typer.Argument(..., help="Where the link should appear"),  # noqa: B008
        label: str = typer.Option("", "--label", "-l", help="Display name (defaults to the target file name)"),
    ) -> None:
        """Symlink TARGET to SOURCE, backing up an existing file."""
        _handle_stage_result(cmd_install, ctx)(source, target, label=label)

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Show the state of every link planned for this platform."""
        _handle_stage_result(cmd_status, ctx)()

    return app
