"""List toggle key bindings."""

from rich.console import Console
from rich.table import Table

from ..command_registry import BaseCommand
from ..dashboard import describe_key, key_hints
from ..slash import SlashCommand

console = Console()


class KeysCommand(BaseCommand):
    name = "keys"
    summary = "Show key bindings for compose and toggles"
    usage = "/keys"

    def execute(self, cmd: SlashCommand) -> None:
        settings = self.app.settings
        if not settings.keymaps_enabled:
            console.print("[dim]Key bindings are disabled (keymaps.enable: false).[/dim]")
            return

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Key", style="bold cyan")
        table.add_column("Action")

        populate = settings.keymaps.get("populate")
        if populate:
            table.add_row(describe_key(populate), "Compose from word under cursor or selection")
        for key, _flag, desc in key_hints(settings):
            table.add_row(key, desc)

        console.print(table)
