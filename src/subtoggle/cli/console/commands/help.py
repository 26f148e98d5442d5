"""Help and quit commands."""

from rich.console import Console
from rich.table import Table

from subtoggle import __version__

from ..command_registry import BaseCommand
from ..slash import SlashCommand

console = Console()


def _names(command: BaseCommand) -> str:
    return ", ".join(f"/{name}" for name in (command.name, *command.aliases))


class HelpCommand(BaseCommand):
    name = "help"
    summary = "Show all commands or help for one"
    usage = "/help [command]"

    def execute(self, cmd: SlashCommand) -> None:
        if cmd.subcommand:
            self._show_command(cmd.subcommand.lstrip("/"))
        else:
            self._show_all()

    def _show_command(self, name: str) -> None:
        command = self.app.registry.lookup(name)
        if not command:
            console.print(f"[red]Unknown command: /{name}[/red]")
            return

        console.print(f"\n  [bold]{_names(command)}[/bold]  {command.summary}")
        if command.usage:
            console.print(f"  [bold]Usage:[/bold] {command.usage}")

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Subcommand", style="bold cyan")
        table.add_column("Action")
        for sub, action in command.subcommands.items():
            table.add_row(f"/{command.name} {sub}", action)
        if table.row_count:
            console.print(table)
        console.print()

    def _show_all(self) -> None:
        console.print(f"\n  [bold blue]Subtoggle Console[/bold blue] v{__version__}\n")

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Command", style="bold")
        table.add_column("Summary")
        for command in self.app.registry.commands():
            table.add_row(_names(command), command.summary)
        console.print(table)

        console.print("\n  Any other line is read as a substitute command, e.g. [cyan]%s/foo/bar/g[/cyan]")
        console.print("  [dim]/keys lists the toggle bindings; /help <command> shows one command.[/dim]\n")


class QuitCommand(BaseCommand):
    name = "quit"
    aliases = ("exit",)
    summary = "Exit the console"
    usage = "/quit"

    def execute(self, cmd: SlashCommand) -> None:
        self.app.quit()
