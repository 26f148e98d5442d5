"""Tests for console slash commands (help, quit, config, keys)."""

from pathlib import Path
from unittest.mock import MagicMock

import yaml

from subtoggle.cli.console.command_registry import CommandRegistry
from subtoggle.cli.console.commands.config import ConfigCommand
from subtoggle.cli.console.commands.help import HelpCommand, QuitCommand
from subtoggle.cli.console.commands.keys import KeysCommand
from subtoggle.cli.console.slash import SlashCommand, parse_input
from subtoggle.config.settings import Settings
from subtoggle.config.yaml_writer import read_yaml


class FakeApp:
    """Fake ConsoleApp with temp directory for paths."""

    def __init__(self, tmp_path: Path):
        self.paths = MagicMock()
        self.paths.config_file = tmp_path / "config.yaml"
        self.paths.config_exists.return_value = True
        self.settings = Settings()
        self.registry = CommandRegistry()
        self._running = True

    def quit(self):
        self._running = False


class TestHelpCommand:
    def test_help_runs(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        app.registry.register(HelpCommand(app))
        app.registry.register(QuitCommand(app))
        HelpCommand(app).execute(SlashCommand(command="help"))
        out = capsys.readouterr().out
        assert "/help" in out
        assert "/quit" in out

    def test_help_specific_command(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        app.registry.register(ConfigCommand(app))
        HelpCommand(app).execute(SlashCommand("help", ["config"]))
        assert "/config set" in capsys.readouterr().out

    def test_help_unknown_command(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        HelpCommand(app).execute(SlashCommand("help", ["nonexistent"]))
        assert "Unknown command" in capsys.readouterr().out


class TestQuitCommand:
    def test_quit(self, tmp_path):
        app = FakeApp(tmp_path)
        assert app._running is True
        QuitCommand(app).execute(SlashCommand(command="quit"))
        assert app._running is False


class TestConfigCommand:
    def test_show(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(SlashCommand("config", ["show"]))
        out = capsys.readouterr().out
        assert "separators" in out
        assert "keymaps" in out

    def test_show_section(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config show flags"))
        out = capsys.readouterr().out
        assert "flags" in out
        assert "keymaps" not in out

    def test_show_nested_key(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config show dashboard.symbols"))
        out = capsys.readouterr().out
        assert "inactive" in out
        assert "styles" not in out

    def test_show_unknown_section(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config show nope"))
        assert "Unknown section" in capsys.readouterr().out

    def test_set_value(self, tmp_path):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config set dashboard.enable false"))
        assert read_yaml(app.paths.config_file) == {"dashboard": {"enable": False}}

    def test_set_quoted_keymap(self, tmp_path):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input('/config set keymaps.populate "c-t"'))
        assert read_yaml(app.paths.config_file)["keymaps"]["populate"] == "c-t"

    def test_set_preserves_existing(self, tmp_path):
        app = FakeApp(tmp_path)
        app.paths.config_file.write_text(yaml.dump({"default_flags": "g"}))
        ConfigCommand(app).execute(parse_input("/config set default_range %s"))
        assert read_yaml(app.paths.config_file) == {"default_flags": "g", "default_range": "%s"}

    def test_set_invalid_value_not_written(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config set echo_timeout -1"))
        assert not app.paths.config_file.exists()
        assert "echo_timeout" in capsys.readouterr().out

    def test_set_backslash_value(self, tmp_path):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config set default_dialect \\v"))
        assert read_yaml(app.paths.config_file) == {"default_dialect": "\\v"}

    def test_set_list_value(self, tmp_path):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config set flags [g, c, i, n]"))
        assert read_yaml(app.paths.config_file) == {"flags": ["g", "c", "i", "n"]}

    def test_set_missing_args(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config set dashboard.enable"))
        assert "Usage" in capsys.readouterr().out
        assert not app.paths.config_file.exists()

    def test_path(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        ConfigCommand(app).execute(parse_input("/config path"))
        assert "config.yaml" in capsys.readouterr().out


class TestKeysCommand:
    def test_lists_bindings(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        KeysCommand(app).execute(SlashCommand(command="keys"))
        out = capsys.readouterr().out
        assert "M-r" in out
        assert "M-g" in out
        assert "Cycle range" in out

    def test_disabled(self, tmp_path, capsys):
        app = FakeApp(tmp_path)
        app.settings = Settings.from_dict({"keymaps": {"enable": False}})
        KeysCommand(app).execute(SlashCommand(command="keys"))
        assert "disabled" in capsys.readouterr().out
