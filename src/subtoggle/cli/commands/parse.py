"""subtoggle parse - Show how a substitute command is split."""

import typer
from rich.console import Console

from subtoggle.cli.console.renderer import print_command
from subtoggle.core.command import parse as parse_command

console = Console()


def parse(
    text: str = typer.Argument(..., help="Substitute command, e.g. '%s/foo/bar/g'"),
) -> None:
    """Parse a substitute command and print its parts."""
    cmd = parse_command(text)
    if cmd is None:
        console.print("[red]Not a substitute command.[/red]")
        raise typer.Exit(1)

    print_command(cmd)
