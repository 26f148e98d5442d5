"""CLI subcommands."""

import logging

import typer
from rich.console import Console

from subtoggle.config.paths import SubtogglePaths
from subtoggle.config.settings import ConfigError, Settings

_console = Console()


def load_settings(paths: SubtogglePaths | None = None) -> Settings:
    """Load settings, exiting with a readable error when they are invalid."""
    paths = paths or SubtogglePaths()
    try:
        settings = Settings.load(paths=paths)
    except ConfigError as e:
        _console.print(f"[red]{paths.config_file}[/red]")
        _console.print(str(e), markup=False)
        raise typer.Exit(1)

    # --verbose wins over the configured level
    if logging.getLogger().level != logging.DEBUG:
        logging.getLogger("subtoggle").setLevel(settings.log_level)
    return settings
