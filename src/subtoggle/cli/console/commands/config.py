"""Configuration commands."""

import yaml
from rich.console import Console

from subtoggle.config.settings import ConfigError, Settings
from subtoggle.config.yaml_writer import assign, lookup, parse_value, read_yaml, write_yaml

from ..command_registry import BaseCommand
from ..renderer import print_error, print_success, print_yaml
from ..slash import SlashCommand

console = Console()


class ConfigCommand(BaseCommand):
    name = "config"
    summary = "View or modify configuration"
    usage = "/config [show|set|path] ..."
    subcommands = {
        "show": "Show effective config (optionally one key, e.g. keymaps or dashboard.symbols)",
        "set": "Set a value (e.g., /config set dashboard.enable false)",
        "path": "Print the config file path",
    }

    def execute(self, cmd: SlashCommand) -> None:
        if cmd.subcommand == "set":
            self._set(cmd)
        elif cmd.subcommand == "path":
            console.print(str(self.app.paths.config_file), soft_wrap=True)
        else:
            self._show(cmd)

    def _show(self, cmd: SlashCommand) -> None:
        data = self.app.settings.to_yaml_dict()
        section = cmd.args[0] if cmd.args else None

        if section:
            value = lookup(data, section)
            if value is None:
                print_error(f"Unknown section: {section}")
                console.print(f"[dim]Available: {', '.join(data.keys())}[/dim]")
                return
            data = {section: value}

        content = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        print_yaml(content, title="Effective configuration")

    def _set(self, cmd: SlashCommand) -> None:
        if len(cmd.args) < 2:
            print_error("Usage: /config set <key> <value>")
            return

        key, value = cmd.args[0], " ".join(cmd.args[1:])
        config_file = self.app.paths.config_file
        data = assign(read_yaml(config_file), key, parse_value(value))

        # Refuse values that would not load next time
        try:
            Settings.from_dict(data)
        except ConfigError as e:
            print_error(str(e))
            return

        write_yaml(config_file, data)
        print_success(f"Set {key} = {value}")
        console.print("[dim]Restart the console to apply key binding changes.[/dim]")
