"""Tests for the typer CLI."""

import pytest
import yaml
from typer.testing import CliRunner

from subtoggle import __version__
from subtoggle.cli.main import app
from subtoggle.config.paths import SubtogglePaths

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(isolated_dirs):
    return isolated_dirs


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestParse:
    def test_parse(self):
        result = runner.invoke(app, ["parse", "%s/foo/bar/g"])
        assert result.exit_code == 0
        assert "Entire file" in result.output
        assert "foo" in result.output

    def test_not_a_command(self):
        result = runner.invoke(app, ["parse", "write"])
        assert result.exit_code == 1
        assert "Not a substitute command" in result.output


class TestToggle:
    def test_flag(self):
        result = runner.invoke(app, ["toggle", "flag", "%s/foo/bar/gc", "--flag", "i"])
        assert result.exit_code == 0
        assert result.output.strip() == "%s/foo/bar/gci"

    def test_range_with_cursor(self):
        result = runner.invoke(app, ["toggle", "range", "%s/foo/bar/g", "--cursor"])
        assert result.exit_code == 0
        assert result.output.split() == [".,$s/foo/bar/g", str(len(".,$s/foo/bar"))]

    def test_flag_requires_option(self):
        result = runner.invoke(app, ["toggle", "flag", "%s/foo/bar/g"])
        assert result.exit_code == 2

    def test_not_a_command(self):
        result = runner.invoke(app, ["toggle", "range", "hello"])
        assert result.exit_code == 1

    def test_uses_config(self):
        paths = SubtogglePaths()
        paths.config_dir.mkdir(parents=True, exist_ok=True)
        paths.config_file.write_text(yaml.dump({"separators": ["/", "#"]}))
        result = runner.invoke(app, ["toggle", "separator", "%s/a/b/"])
        assert result.output.strip() == "%s#a#b#"

    def test_invalid_config(self):
        paths = SubtogglePaths()
        paths.config_dir.mkdir(parents=True, exist_ok=True)
        paths.config_file.write_text(yaml.dump({"separators": []}))
        result = runner.invoke(app, ["toggle", "range", "%s/a/b/"])
        assert result.exit_code == 1
        assert "separators must not be empty" in result.output


class TestConfig:
    def test_path(self):
        result = runner.invoke(app, ["config", "--path"])
        assert result.exit_code == 0
        assert "config.yaml" in result.output

    def test_init_then_show(self):
        result = runner.invoke(app, ["config", "--init"])
        assert result.exit_code == 0
        assert SubtogglePaths().config_exists()

        result = runner.invoke(app, ["config", "--show"])
        assert result.exit_code == 0
        assert "separators" in result.output

    def test_init_refuses_overwrite(self):
        runner.invoke(app, ["config", "--init"])
        result = runner.invoke(app, ["config", "--init"])
        assert result.exit_code == 1

    def test_overview(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "Subtoggle Configuration" in result.output


class TestToggleValidation:
    def test_flag_outside_alphabet(self):
        result = runner.invoke(app, ["toggle", "flag", "%s/a/b/gn", "--flag", "x"])
        assert result.exit_code == 2
        assert "Unknown flag" in result.output

    def test_configured_flag_accepted(self):
        paths = SubtogglePaths()
        paths.config_dir.mkdir(parents=True, exist_ok=True)
        paths.config_file.write_text(yaml.dump({"flags": ["g", "c", "i", "n"]}))
        result = runner.invoke(app, ["toggle", "flag", "%s/a/b/g", "--flag", "n"])
        assert result.exit_code == 0
        assert result.output.strip() == "%s/a/b/gn"

    def test_wrong_type_in_config(self):
        paths = SubtogglePaths()
        paths.config_dir.mkdir(parents=True, exist_ok=True)
        paths.config_file.write_text(yaml.dump({"keymaps": "escape g"}))
        result = runner.invoke(app, ["toggle", "range", "%s/a/b/"])
        assert result.exit_code == 1
        assert "keymaps must be a mapping" in result.output
