"""Rich output helpers for the console and CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from .dashboard import dialect_description, range_description

if TYPE_CHECKING:
    from subtoggle.core.command import ParsedCommand

console = Console()


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]{escape(message)}[/red]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_dim(message: str) -> None:
    """Print dimmed text."""
    console.print(f"[dim]{message}[/dim]")


def print_yaml(content: str, title: str | None = None) -> None:
    """Print syntax-highlighted YAML."""
    syntax = Syntax(content, "yaml", theme="monokai", line_numbers=False)
    if title:
        console.print(Panel(syntax, title=title, border_style="blue"))
    else:
        console.print(syntax)


def command_table(cmd: ParsedCommand, title: str | None = None) -> Table:
    """Build a summary table of a parsed command."""
    table = Table(
        title=Text(title) if title else None, show_header=False, box=None, padding=(0, 2)
    )
    table.add_column("Part", style="dim")
    table.add_column("Value", style="bold")
    table.add_column("Meaning", style="dim")
    # Text cells keep brackets in patterns from being read as markup
    table.add_row("Range", Text(cmd.range), range_description(cmd.range))
    table.add_row("Separator", Text(cmd.separator), "")
    table.add_row("Magic", Text(cmd.dialect or "none"), dialect_description(cmd.dialect))
    table.add_row("Search", Text(cmd.search_body), "")
    table.add_row("Replace", Text(cmd.replace), "")
    table.add_row("Flags", Text(cmd.flags or "none"), "")
    return table


def print_command(cmd: ParsedCommand, title: str | None = None) -> None:
    """Print a parsed command summary."""
    console.print(command_table(cmd, title=title))
