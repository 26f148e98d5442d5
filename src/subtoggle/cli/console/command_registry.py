"""Console commands: the base class and the name -> command table."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .renderer import print_error
from .slash import SlashCommand

if TYPE_CHECKING:
    from .app import ConsoleApp

logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """
    A slash command bound to the running console.

    Subclasses declare their name, any aliases, a one-line summary and,
    when the first word selects an action, the accepted subcommands.
    """

    name: str = ""
    aliases: tuple[str, ...] = ()
    summary: str = ""
    usage: str = ""
    subcommands: dict[str, str] = {}

    def __init__(self, app: ConsoleApp):
        self.app = app

    @abstractmethod
    def execute(self, cmd: SlashCommand) -> None: ...


class CommandRegistry:
    """Looks up console commands by name or alias, in registration order."""

    def __init__(self) -> None:
        self._commands: list[BaseCommand] = []
        self._names: dict[str, BaseCommand] = {}

    def register(self, command: BaseCommand) -> None:
        for name in (command.name, *command.aliases):
            if name in self._names:
                raise ValueError(f"/{name} is already registered")
            self._names[name] = command
        self._commands.append(command)

    def lookup(self, name: str) -> BaseCommand | None:
        return self._names.get(name.lower())

    def commands(self) -> list[BaseCommand]:
        return list(self._commands)

    def subcommands(self, name: str) -> list[str]:
        command = self.lookup(name)
        return list(command.subcommands) if command else []

    def dispatch(self, cmd: SlashCommand) -> bool:
        """
        Run a parsed command. Returns False when no command has that name.

        Unknown subcommands and command failures are reported, not raised,
        so the console keeps running.
        """
        command = self.lookup(cmd.command)
        if command is None:
            return False

        if command.subcommands and cmd.subcommand and cmd.subcommand not in command.subcommands:
            print_error(f"Unknown subcommand: /{command.name} {cmd.subcommand}")
            print_error(f"Expected one of: {', '.join(command.subcommands)}")
            return True

        try:
            command.execute(cmd)
        except Exception as e:
            logger.exception(f"/{command.name} failed")
            print_error(f"Error: {e}")
        return True


def console_registry(app: ConsoleApp) -> CommandRegistry:
    """The registry holding /help, /quit, /config and /keys."""
    from .commands.config import ConfigCommand
    from .commands.help import HelpCommand, QuitCommand
    from .commands.keys import KeysCommand

    registry = CommandRegistry()
    for command_class in (HelpCommand, QuitCommand, ConfigCommand, KeysCommand):
        registry.register(command_class(app))
    return registry
