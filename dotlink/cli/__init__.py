"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from dotlink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if argv[:1] in (["--version"], ["-v"]):
        from dotlink.api.config.cmd_version import cmd_version

        result = cmd_version().drain()
        print(f"dotlink {result.output.get('full_version', 'unknown')}")
        return 0 if result.success else 1

    # Standalone mode lets typer report usage errors and aborts itself
    app = _create_app()
    try:
        app(argv, prog_name="dotlink")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
