"""subtoggle toggle - Apply one toggle to a substitute command."""

import typer
from rich.console import Console
from rich.markup import escape

from subtoggle.core.session import Session
from subtoggle.core.toggles import ToggleOp, Toggler

from . import load_settings

console = Console()


def toggle(
    op: ToggleOp = typer.Argument(..., help="Operation to apply", case_sensitive=False),
    text: str = typer.Argument(..., help="Substitute command, e.g. '%s/foo/bar/g'"),
    flag: str = typer.Option(
        None,
        "--flag",
        "-f",
        help="Flag character for the 'flag' operation",
    ),
    show_cursor: bool = typer.Option(
        False,
        "--cursor",
        "-c",
        help="Also print the cursor offset",
    ),
) -> None:
    """
    Apply a toggle and print the rewritten command.

    Examples:
        subtoggle toggle flag '%s/foo/bar/g' --flag i
        subtoggle toggle range '%s/foo/bar/g'
    """
    if op is ToggleOp.FLAG and not flag:
        console.print("[red]The flag operation needs --flag.[/red]")
        raise typer.Exit(2)

    settings = load_settings()
    if op is ToggleOp.FLAG and flag not in settings.flags:
        expected = " ".join(settings.flags)
        console.print(f"[red]Unknown flag {escape(repr(flag))}; expected one of: {escape(expected)}[/red]")
        raise typer.Exit(2)

    result = Toggler(settings, Session()).apply(op, text, flag)
    if result is None:
        console.print("[red]Not a substitute command.[/red]")
        raise typer.Exit(1)

    # Plain output so the result can be piped
    print(result.text)
    if show_cursor:
        print(result.cursor)
