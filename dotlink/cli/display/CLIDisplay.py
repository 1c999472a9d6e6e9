"""Terminal display: rich messages on stderr, YAML or JSON on stdout."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console
from rich.markup import escape

from .Display import Display

_MARKERS = {
    "status": "[blue]i[/blue]",
    "success": "[green]✓[/green]",
    "error": "[red]✗[/red]",
}


class CLIDisplay(Display):
    """Human-facing messages go to stderr so stdout stays machine-readable.

    Messages are escaped before printing: paths and error codes such as
    ``[DL1002]`` are shown literally, never read as rich markup. ``info``
    messages are trusted and may carry markup.
    """

    def __init__(self):
        self.stderr_console = Console(stderr=True, highlight=False)

    def _stamped(self, kind: str, message: str) -> None:
        stamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{stamp}[/dim] {_MARKERS[kind]} {escape(message)}")

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("status", message)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("success", message)

    def error(self, message: str, **kwargs) -> None:
        self._stamped("error", message)
        for line in str(kwargs.get("details", "")).splitlines():
            self.stderr_console.print(f"  [dim]{escape(line)}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        if kwargs.get("format", "yaml") == "json":
            text = json.dumps(data, indent=kwargs.get("indent", 2), ensure_ascii=False) + "\n"
            lexer = JsonLexer()
        else:
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()

        if sys.stdout.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        sys.stdout.write(text)
