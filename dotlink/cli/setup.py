"""Setup Typer app factory."""

import typer

from dotlink.api.setup.cmd_plan import cmd_plan
from dotlink.api.setup.cmd_run import cmd_run
from dotlink.cli._handle_stage_result import _handle_stage_result


def setup() -> typer.Typer:
    """Create and configure the setup Typer app."""
    app = typer.Typer(
        name="setup",
        help="Provision every configured dotfile for this platform",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Setup operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="plan")
    def plan_cmd(ctx: typer.Context) -> None:
        """Show what a setup run would do."""
        _handle_stage_result(cmd_plan, ctx)()

    @app.command(name="run")
    def run_cmd(
        ctx: typer.Context,
        fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop at the first failure"),
    ) -> None:
        """Link dotfiles and relink stow packages."""
        _handle_stage_result(cmd_run, ctx)(fail_fast=fail_fast)

    return app
