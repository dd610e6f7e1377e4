"""Main CLI application for ghstatus."""

from __future__ import annotations

import asyncio
from enum import IntEnum

import typer
from rich.console import Console
from rich.markup import escape

from ghstatus.core.orchestrator import fetch_summary
from ghstatus.display.text import print_summary
from ghstatus.errors.types import GhStatusError

app = typer.Typer(
    name="ghstatus",
    help="Show GitHub component health and unresolved incidents",
    add_completion=False,
)


class ExitCode(IntEnum):
    """Exit codes for ghstatus."""

    SUCCESS = 0
    GENERAL_ERROR = 1


async def run_summary(console: Console, err_console: Console) -> ExitCode:
    """Fetch both feeds and print the summary.

    Nothing is written to ``console`` unless both fetches succeed.
    """
    try:
        components, incidents = await fetch_summary()
    except GhStatusError as e:
        show_error(err_console, e)
        return ExitCode.GENERAL_ERROR

    print_summary(console, components, incidents)
    return ExitCode.SUCCESS


def show_error(console: Console, error: GhStatusError) -> None:
    """Print a fetch failure and its remediation."""
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    if error.remediation:
        console.print(f"[dim]{escape(error.remediation)}[/dim]", highlight=False)


@app.command()
def main() -> None:
    """Show GitHub component health and unresolved incidents."""
    console = Console()
    err_console = Console(stderr=True)

    try:
        code = asyncio.run(run_summary(console, err_console))
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from None

    if code != ExitCode.SUCCESS:
        raise typer.Exit(code)


def run_app() -> None:
    """Run the CLI app."""
    app()
