"""subtoggle config - View or initialize configuration."""

import yaml
import typer
from rich.console import Console
from rich.syntax import Syntax

from subtoggle.config.paths import SubtogglePaths
from subtoggle.config.settings import Settings
from subtoggle.config.yaml_writer import write_yaml

from . import load_settings

console = Console()


def config(
    show: bool = typer.Option(
        False,
        "--show",
        "-s",
        help="Show effective config",
    ),
    path: bool = typer.Option(
        False,
        "--path",
        "-p",
        help="Show config file path",
    ),
    init: bool = typer.Option(
        False,
        "--init",
        help="Write a config file with all defaults",
    ),
) -> None:
    """
    View or initialize Subtoggle configuration.

    Without options, shows an overview of config options.
    """
    paths = SubtogglePaths()

    if path:
        print(paths.config_file)
        return

    if init:
        _init_config(paths)
        return

    if show:
        settings = load_settings(paths)
        content = yaml.dump(
            settings.to_yaml_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True
        )
        console.print(Syntax(content, "yaml", theme="monokai", line_numbers=False))
        return

    console.print("[bold]Subtoggle Configuration[/bold]")
    console.print()
    status = "exists" if paths.config_exists() else "not created, defaults in use"
    console.print(f"Config file: {paths.config_file} ({status})")
    console.print()
    console.print("Commands:")
    console.print("  [bold]subtoggle config --show[/bold]   Show effective config")
    console.print("  [bold]subtoggle config --init[/bold]   Write defaults to the config file")
    console.print("  [bold]subtoggle config --path[/bold]   Print config path")


def _init_config(paths: SubtogglePaths) -> None:
    """Write the default configuration unless a file already exists."""
    if paths.config_exists():
        console.print(f"[yellow]Config already exists:[/yellow] {paths.config_file}")
        raise typer.Exit(1)

    write_yaml(paths.config_file, Settings().to_yaml_dict())
    console.print(f"[green]Wrote default config to {paths.config_file}[/green]")
