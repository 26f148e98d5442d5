"""Preview panel content for the command being composed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from subtoggle.core.command import (
    CURRENT_LINE,
    CURSOR_TO_END,
    START_TO_CURSOR,
    WHOLE_BUFFER,
    ParsedCommand,
    parse,
)

if TYPE_CHECKING:
    from subtoggle.config.settings import Settings
    from subtoggle.core.host import PreviewPanel

logger = logging.getLogger(__name__)

# (style, text) fragments, one list per panel line
Fragment = tuple[str, str]
Line = list[Fragment]

TITLE = "Search & Replace"

RANGE_DESCRIPTIONS = {
    WHOLE_BUFFER: "Entire file",
    CURSOR_TO_END: "Current line to end of file",
    START_TO_CURSOR: "Start of file to current line",
    CURRENT_LINE: "Current line only",
    "." + CURRENT_LINE: "Current line only",
}

DIALECT_DESCRIPTIONS = {
    "\\v": "Very magic: Extended regex syntax",
    "\\m": "Magic: Standard regex syntax (default)",
    "\\M": "Nomagic: Minimal regex syntax",
    "\\V": "Very nomagic: Literal search",
}

FLAG_DESCRIPTIONS = {
    "g": "global",
    "c": "confirm",
    "i": "case-insensitive",
    "I": "case-sensitive",
    "n": "count only",
    "e": "no error",
}


def range_description(range_: str) -> str:
    return RANGE_DESCRIPTIONS.get(range_, "Custom range")


def dialect_description(dialect: str) -> str:
    return DIALECT_DESCRIPTIONS.get(dialect, "Default magic mode")


def describe_key(spec: str) -> str:
    """Render a prompt_toolkit key spec for humans: "escape g" -> "M-g"."""
    keys = spec.split()
    if len(keys) == 2 and keys[0] == "escape":
        return f"M-{keys[1]}"
    return " ".join(k.upper() if k.startswith("c-") else k for k in keys)


def key_hints(settings: Settings) -> list[tuple[str, str | None, str]]:
    """(key, flag or None, description) for every bound operation."""
    keymaps = settings.keymaps
    hints: list[tuple[str, str | None, str]] = []

    for flag in settings.flags:
        key = keymaps.get(settings.flag_keymap_name(flag))
        if key:
            desc = FLAG_DESCRIPTIONS.get(flag)
            label = f"Toggle '{flag}' flag" + (f" ({desc})" if desc else "")
            hints.append((describe_key(key), flag, label))

    for name, desc in [
        ("toggle_replace", "Toggle replace term"),
        ("toggle_range", "Cycle range"),
        ("toggle_separator", "Cycle separator"),
        ("toggle_dialect", "Cycle magic mode"),
        ("toggle_dashboard", "Toggle dashboard"),
    ]:
        key = keymaps.get(name)
        if key:
            hints.append((describe_key(key), None, desc))

    return hints


def build_lines(cmd: ParsedCommand, settings: Settings) -> list[Line]:
    """Lay out the panel for a parsed command."""
    styles = settings.dashboard.styles
    symbols = settings.dashboard.symbols

    def label_value(label: str, value: str) -> Line:
        return [
            ("", "  "),
            (styles.get("status_label", ""), label),
            (styles.get("status_value", ""), f" {value}"),
        ]

    def arrow(desc: str, desc_style: str) -> Line:
        return [("", "    "), (styles.get("arrow", ""), "->"), (desc_style, f" {desc}")]

    range_value = cmd.range or CURRENT_LINE
    active_flags = "".join(f for f in settings.flags if f in cmd.flags)
    inactive_desc = styles.get("inactive_desc", "")

    lines: list[Line] = [
        [(styles.get("title", ""), f"  {TITLE}")],
        [],
        label_value("Range:", range_value),
        arrow(range_description(range_value), inactive_desc),
        [],
        label_value("Magic:", cmd.dialect or "none"),
        arrow(dialect_description(cmd.dialect), inactive_desc),
        [],
        label_value("Sep:", cmd.separator) + [("", " ")] + label_value("Flags:", active_flags or "none"),
        [],
        label_value("Search: ", cmd.search_body),
        label_value("Replace:", cmd.replace),
        [],
    ]

    for key, flag, desc in key_hints(settings):
        if flag is None:
            indicator: Fragment = ("", "  ")
            desc_style = inactive_desc
        elif flag in cmd.flags:
            indicator = (styles.get("active_indicator", ""), symbols.get("active", "*") + " ")
            desc_style = styles.get("active_desc", "")
        else:
            indicator = (styles.get("inactive_indicator", ""), symbols.get("inactive", "-") + " ")
            desc_style = inactive_desc
        lines.append(
            [
                ("", "  "),
                indicator,
                (styles.get("key", ""), key),
                ("", "  "),
                (styles.get("arrow", ""), "->"),
                (desc_style, f"  {desc}"),
            ]
        )

    return lines


def to_plain(lines: list[Line]) -> str:
    """Join panel lines into plain text."""
    return "\n".join("".join(text for _, text in line) for line in lines)


class Dashboard:
    """Keeps the preview panel in step with the command line."""

    def __init__(self, settings: Settings, panel: PreviewPanel) -> None:
        self.settings = settings
        self.panel = panel
        self.hidden = False
        self._last_raw: str | None = None

    @property
    def enabled(self) -> bool:
        return self.settings.dashboard.enable and not self.hidden

    def invalidate(self) -> None:
        """Force the next refresh to redraw even if the text is unchanged."""
        self._last_raw = None

    def refresh(self, text: str) -> None:
        """Redraw the panel for the given command-line text."""
        if not self.enabled:
            return

        cmd = parse(text)
        if cmd is None:
            if self.panel.is_shown:
                self.close()
            return

        if text == self._last_raw and self.panel.is_shown:
            return

        self._last_raw = text
        self.panel.show(build_lines(cmd, self.settings))

    def close(self) -> None:
        self.panel.close()
        self._last_raw = None

    def toggle(self) -> bool:
        """Hide or unhide the panel. Returns True when it should now be shown."""
        self.hidden = not self.hidden
        if self.hidden:
            logger.debug("Dashboard hidden")
            self.close()
        return not self.hidden

    def on_session_entered(self) -> None:
        self.hidden = False
        self._last_raw = None
