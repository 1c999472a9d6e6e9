#!/usr/bin/env python3
"""Run the dotlink quality gates: ruff, mypy and the unit tests."""

import argparse
import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()

REPO_ROOT = Path(__file__).resolve().parents[1]


def _tool(name: str) -> str:
    # Prefer the tool installed next to the running interpreter
    candidate = Path(sys.executable).parent / name
    return str(candidate) if candidate.exists() else name


def run_step(command: list[str], description: str) -> bool:
    console.print(f"[bold blue]Running {description}...[/bold blue]")
    try:
        result = subprocess.run([_tool(command[0]), *command[1:]], cwd=REPO_ROOT, check=False)
    except OSError as e:
        console.print(f"[bold red]Error running {description}: {e}[/bold red]")
        return False
    if result.returncode != 0:
        console.print(f"[bold red]FAILED: {description}[/bold red]")
        return False
    console.print(f"[bold green]PASSED: {description}[/bold green]")
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Run formatting, type and unit test checks")
    parser.add_argument("--fix", action="store_true", help="Let ruff fix what it can")
    parser.add_argument("--skip-tests", action="store_true", help="Only run the static checks")
    args = parser.parse_args()

    steps: list[tuple[list[str], str]] = []
    if args.fix:
        steps.append((["ruff", "format", "dotlink", "tests"], "Ruff Formatting (Fix)"))
        steps.append((["ruff", "check", "--fix", "dotlink", "tests"], "Ruff Linting (Fix)"))
    else:
        steps.append((["ruff", "format", "--check", "dotlink", "tests"], "Ruff Formatting (Check)"))
        steps.append((["ruff", "check", "dotlink", "tests"], "Ruff Linting (Check)"))
    steps.append((["mypy", "dotlink"], "Mypy Type Check"))
    if not args.skip_tests:
        steps.append((["pytest", "tests/unit", "-n", "auto", "--timeout", "60"], "Unit Tests"))

    results = [run_step(command, description) for command, description in steps]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
