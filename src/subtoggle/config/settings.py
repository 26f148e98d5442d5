"""Configuration settings loaded from YAML over built-in defaults."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from subtoggle.core.command import DIALECT_MARKERS, NO_DIALECT, is_valid_separator

from .paths import SubtogglePaths
from .yaml_writer import deep_merge, read_yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration values that would leave the tool unusable."""

    pass


DEFAULTS: dict[str, Any] = {
    "keymaps": {
        "enable": True,
        "populate": "escape r",  # compose from word under cursor / selection
        "toggle_g": "escape g",
        "toggle_c": "escape c",
        "toggle_i": "escape i",
        "toggle_replace": "escape d",
        "toggle_range": "escape 5",
        "toggle_separator": "escape /",
        "toggle_dialect": "escape m",
        "toggle_dashboard": "escape h",
    },
    "dashboard": {
        "enable": True,
        "symbols": {
            "active": "●",
            "inactive": "○",
        },
        "styles": {
            "title": "bold",
            "key": "ansicyan",
            "arrow": "ansibrightblack",
            "active_desc": "ansigreen",
            "inactive_desc": "ansibrightblack",
            "active_indicator": "ansigreen",
            "inactive_indicator": "ansibrightblack",
            "status_label": "ansibrightblack",
            "status_value": "ansiyellow",
        },
    },
    "separators": ["/", "?", "#", ":", "@"],
    "dialects": ["\\v", "\\m", "\\M", "\\V", ""],
    "flags": ["g", "c", "i"],
    "default_range": ".,$s",
    "default_flags": "gc",
    "default_dialect": "\\V",
    "echo_timeout": 0.1,
    "log_level": "INFO",
}

# Keymap names that are not per-flag toggles
ACTION_KEYMAPS = (
    "populate",
    "toggle_replace",
    "toggle_range",
    "toggle_separator",
    "toggle_dialect",
    "toggle_dashboard",
)


@dataclass
class DashboardSettings:
    """Preview panel options."""

    enable: bool = True
    symbols: dict[str, str] = field(default_factory=lambda: dict(DEFAULTS["dashboard"]["symbols"]))
    styles: dict[str, str] = field(default_factory=lambda: dict(DEFAULTS["dashboard"]["styles"]))


@dataclass
class Settings:
    """Application settings: YAML config deep-merged over DEFAULTS."""

    separators: list[str] = field(default_factory=lambda: list(DEFAULTS["separators"]))
    dialects: list[str] = field(default_factory=lambda: list(DEFAULTS["dialects"]))
    flags: list[str] = field(default_factory=lambda: list(DEFAULTS["flags"]))
    default_range: str = DEFAULTS["default_range"]
    default_flags: str = DEFAULTS["default_flags"]
    default_dialect: str = DEFAULTS["default_dialect"]
    echo_timeout: float = DEFAULTS["echo_timeout"]
    log_level: str = DEFAULTS["log_level"]

    keymaps_enabled: bool = True
    keymaps: dict[str, str] = field(
        default_factory=lambda: {k: v for k, v in DEFAULTS["keymaps"].items() if k != "enable"}
    )
    dashboard: DashboardSettings = field(default_factory=DashboardSettings)

    # Source file, if any
    config_file: Path | None = None

    @classmethod
    def load(cls, paths: SubtogglePaths | None = None) -> "Settings":
        """
        Load settings from the YAML config file, falling back to defaults.

        Raises:
            ConfigError: if the merged configuration is invalid
        """
        paths = paths or SubtogglePaths()
        data: dict = {}
        if paths.config_exists():
            logger.info(f"Loading settings from {paths.config_file}")
            data = read_yaml(paths.config_file)

        settings = cls.from_dict(data)
        settings.config_file = paths.config_file if paths.config_exists() else None
        return settings

    @classmethod
    def from_dict(cls, overrides: dict | None = None) -> "Settings":
        """
        Build settings from a partial config dict.

        Unknown keys are ignored. Raises ConfigError on invalid values.
        """
        if not isinstance(overrides or {}, dict):
            raise ConfigError("Invalid configuration:\n  top level must be a mapping")
        config = deep_merge(DEFAULTS, overrides or {})

        errors = _shape_errors(config)
        if errors:
            raise ConfigError("Invalid configuration:\n  " + "\n  ".join(errors))

        keymap_config = config.get("keymaps") or {}
        dashboard_config = config.get("dashboard") or {}

        settings = cls(
            separators=_as_list(config["separators"]),
            dialects=_as_list(config["dialects"]),
            flags=_as_list(config["flags"]),
            default_range=str(config["default_range"]),
            default_flags=str(config["default_flags"]),
            default_dialect=str(config["default_dialect"]),
            echo_timeout=config["echo_timeout"],
            log_level=str(config["log_level"]).upper(),
            keymaps_enabled=bool(keymap_config.get("enable", True)),
            keymaps={k: v for k, v in keymap_config.items() if k != "enable" and v},
            dashboard=DashboardSettings(
                enable=bool(dashboard_config.get("enable", True)),
                symbols=dict(dashboard_config.get("symbols") or {}),
                styles=dict(dashboard_config.get("styles") or {}),
            ),
        )

        errors = settings.validate()
        if errors:
            raise ConfigError("Invalid configuration:\n  " + "\n  ".join(errors))

        for name in settings.unknown_keymaps():
            logger.warning(f"Ignoring unknown keymap: {name}")
        return settings

    def flag_keymap_name(self, flag: str) -> str:
        return f"toggle_{flag}"

    def known_keymaps(self) -> list[str]:
        return list(ACTION_KEYMAPS) + [self.flag_keymap_name(f) for f in self.flags]

    def unknown_keymaps(self) -> list[str]:
        known = set(self.known_keymaps())
        return [name for name in self.keymaps if name not in known]

    def validate(self) -> list[str]:
        """Validate settings and return list of errors."""
        errors = []

        if not self.separators:
            errors.append("separators must not be empty")
        for sep in self.separators:
            if not isinstance(sep, str) or not is_valid_separator(sep):
                errors.append(f"separator {sep!r} must be one non-alphanumeric, non-space character")
        if len(set(self.separators)) != len(self.separators):
            errors.append("separators must be unique")

        if not self.dialects:
            errors.append("dialects must not be empty")
        for dialect in self.dialects:
            if dialect != NO_DIALECT and dialect not in DIALECT_MARKERS:
                errors.append(
                    f"dialect {dialect!r} must be one of {', '.join(DIALECT_MARKERS)} or ''"
                )

        if not self.flags:
            errors.append("flags must not be empty")
        for flag in self.flags:
            if not isinstance(flag, str) or len(flag) != 1:
                errors.append(f"flag {flag!r} must be a single character")

        if self.default_dialect != NO_DIALECT and self.default_dialect not in DIALECT_MARKERS:
            errors.append(f"default_dialect {self.default_dialect!r} is not a known dialect")
        if not self.default_range.endswith("s"):
            errors.append(f"default_range {self.default_range!r} must end with the command letter")

        if not isinstance(self.echo_timeout, (int, float)) or self.echo_timeout <= 0:
            errors.append("echo_timeout must be a positive number")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            errors.append(f"log_level {self.log_level!r} is not a logging level")

        return errors

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert settings to a dictionary suitable for YAML serialization."""
        return {
            "keymaps": {"enable": self.keymaps_enabled, **self.keymaps},
            "dashboard": {
                "enable": self.dashboard.enable,
                "symbols": dict(self.dashboard.symbols),
                "styles": dict(self.dashboard.styles),
            },
            "separators": list(self.separators),
            "dialects": list(self.dialects),
            "flags": list(self.flags),
            "default_range": self.default_range,
            "default_flags": self.default_flags,
            "default_dialect": self.default_dialect,
            "echo_timeout": self.echo_timeout,
            "log_level": self.log_level,
        }


def _shape_errors(config: dict) -> list[str]:
    """Type errors that would stop the merged config from being read at all."""
    errors = []

    for key in ("keymaps", "dashboard"):
        if config[key] is not None and not isinstance(config[key], dict):
            errors.append(f"{key} must be a mapping")

    dashboard = config["dashboard"] if isinstance(config["dashboard"], dict) else {}
    for key in ("symbols", "styles"):
        value = dashboard.get(key)
        if value is not None and not isinstance(value, dict):
            errors.append(f"dashboard.{key} must be a mapping")
        elif value:
            errors.extend(
                f"dashboard.{key}.{name} must be a string"
                for name, item in value.items()
                if not isinstance(item, str)
            )

    keymaps = config["keymaps"] if isinstance(config["keymaps"], dict) else {}
    for name, spec in keymaps.items():
        if name != "enable" and spec is not None and not isinstance(spec, str):
            errors.append(f"keymaps.{name} must be a key spec string or null")

    for key in ("separators", "dialects", "flags"):
        if config[key] is not None and not isinstance(config[key], (list, str)):
            errors.append(f"{key} must be a list or a string of characters")

    return errors


def _as_list(value: Any) -> list:
    """Accept a YAML list or a plain string of single characters."""
    if value is None:
        return []
    return list(value)
