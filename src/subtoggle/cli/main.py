"""Main CLI entry point for Subtoggle."""

import typer
from rich.console import Console

from subtoggle import __version__
from subtoggle.config.log_setup import setup_logging
from subtoggle.config.paths import SubtogglePaths

from .commands import config, console as console_cmd, parse, toggle

app = typer.Typer(
    name="subtoggle",
    help="Subtoggle - compose substitute commands with toggles and a live preview",
    no_args_is_help=False,
    rich_markup_mode="rich",
)

_console = Console()

app.command()(console_cmd.console)
app.command()(parse.parse)
app.command()(toggle.toggle)
app.command()(config.config)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug output to stderr",
    ),
) -> None:
    """Subtoggle - substitute command composer."""
    if version:
        _console.print(f"Subtoggle v{__version__}")
        raise typer.Exit()

    paths = SubtogglePaths()
    setup_logging(paths.log_dir, verbose=verbose)

    # If no subcommand, launch interactive console
    if ctx.invoked_subcommand is None:
        console_cmd.console()


if __name__ == "__main__":
    app()
