"""Main REPL loop for the Subtoggle interactive console."""

from __future__ import annotations

import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from rich.console import Console

from subtoggle import __version__
from subtoggle.config.paths import SubtogglePaths
from subtoggle.config.settings import Settings
from subtoggle.core.command import parse

from .bindings import build_key_bindings
from .command_registry import console_registry
from .completer import ConsoleCompleter
from .controller import ComposeController
from .dashboard import describe_key
from .host import PromptHost, ToolbarPanel
from .renderer import print_command, print_dim
from .slash import parse_input

logger = logging.getLogger(__name__)

console = Console()


class ConsoleApp:
    """Interactive console for composing substitute commands."""

    def __init__(self, paths: SubtogglePaths | None = None, settings: Settings | None = None) -> None:
        self.paths = paths or SubtogglePaths()
        self.paths.ensure_directories()
        self.settings = settings or Settings.load(paths=self.paths)
        self.registry = console_registry(self)
        self.accepted: list[str] = []
        self._running = True

        self.controller: ComposeController | None = None

    def _print_banner(self) -> None:
        """Print the welcome banner."""
        populate = self.settings.keymaps.get("populate")

        console.print()
        console.print(f"  [bold blue]Subtoggle[/bold blue] v{__version__}")
        console.print()
        if populate and self.settings.keymaps_enabled:
            console.print(
                f"  Type a word and press [bold]{describe_key(populate)}[/bold] "
                "to compose a substitute command."
            )
        console.print("  Type [bold]/help[/bold] for commands, [bold]/quit[/bold] to exit.")
        console.print()

    def quit(self) -> None:
        """Signal the REPL to exit."""
        self._running = False

    def build_session(self) -> PromptSession:
        """Create the prompt session and wire the controller to it."""
        history = FileHistory(str(self.paths.console_history))
        completer = ConsoleCompleter(self.registry, settings=self.settings)

        session: PromptSession = PromptSession(
            history=history,
            completer=completer,
            complete_while_typing=False,
        )

        panel = ToolbarPanel(invalidate=lambda: session.app.invalidate())
        host = PromptHost(session)
        self.controller = ComposeController(self.settings, host, panel)

        session.key_bindings = build_key_bindings(self.controller)
        session.bottom_toolbar = panel.render

        def _on_text_changed(buffer) -> None:
            if host.muted or not host.is_session_live():
                return
            self.controller.on_line_changed(buffer.text)

        session.default_buffer.on_text_changed += _on_text_changed
        return session

    def handle_line(self, text: str) -> None:
        """Act on an accepted line."""
        text = text.strip()
        if not text:
            return

        cmd = parse_input(text)
        if cmd is not None:
            found = self.registry.dispatch(cmd)
            if not found:
                console.print(f"[red]Unknown command: /{cmd.command}[/red]")
                console.print("[dim]Type /help for available commands.[/dim]")
            return

        parsed = parse(text)
        if parsed is None:
            print_dim("Not a substitute command. Use /help for a list of commands.")
            return

        self.accepted.append(text)
        logger.info(f"Accepted command: {text}")
        print_command(parsed, title=text)

    def run(self) -> None:
        """Run the interactive console REPL."""
        self._print_banner()
        session = self.build_session()

        while self._running:
            try:
                text = session.prompt(
                    "subtoggle> ",
                    pre_run=self.controller.on_session_entered,
                )
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            finally:
                self.controller.on_session_left()

            self.handle_line(text)

        console.print("[dim]Goodbye.[/dim]")
