"""Tab completion for the interactive console."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

if TYPE_CHECKING:
    from subtoggle.config.settings import Settings

    from .command_registry import CommandRegistry


class ConsoleCompleter(Completer):
    """Completes slash commands; substitute commands are left alone."""

    def __init__(self, registry: CommandRegistry, settings: Settings | None = None) -> None:
        self._registry = registry
        self._settings = settings

    def _config_sections(self) -> list[str]:
        if self._settings is None:
            return []
        return list(self._settings.to_yaml_dict().keys())

    def get_completions(self, document: Document, complete_event: CompleteEvent):
        text = document.text_before_cursor.lstrip()

        if not text.startswith("/"):
            return

        parts = text.split()

        if len(parts) <= 1 and not text.endswith(" "):
            prefix = text[1:]
            for command in self._registry.commands():
                if command.name.startswith(prefix):
                    yield Completion(
                        f"/{command.name}", start_position=-len(text), display_meta=command.summary[:40]
                    )
            return

        cmd_name = parts[0][1:]
        current = "" if text.endswith(" ") else parts[-1]
        position = len(parts) if text.endswith(" ") else len(parts) - 1

        if position == 1:
            for sub in self._registry.subcommands(cmd_name):
                if sub.startswith(current.lower()):
                    yield Completion(sub, start_position=-len(current))
            return

        if position == 2 and cmd_name == "config" and parts[1] in ("show", "set"):
            for section in self._config_sections():
                if section.startswith(current):
                    yield Completion(section, start_position=-len(current), display_meta="section")
