"""Create the main Typer CLI app."""

import typer

from dotlink.api.config.DotlinkConfig import DotlinkConfig
from dotlink.cli.config import config
from dotlink.cli.link import link
from dotlink.cli.platform import platform
from dotlink.cli.setup import setup
from dotlink.cli.stow import stow
from dotlink.utils.configure_logging import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="dotlink - provision dotfiles with symlinks",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    # Register all domain apps (call factory functions)
    app.add_typer(setup(), name="setup")
    app.add_typer(link(), name="link")
    app.add_typer(stow(), name="stow")
    app.add_typer(platform(), name="platform")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        # An invalid config is reported by the command itself
        try:
            log = DotlinkConfig.load().log
        except ValueError:
            log = DotlinkConfig.default().log
        configure_logging(level=log.level, max_bytes=log.max_bytes, backup_count=log.backup_count)

    return app
