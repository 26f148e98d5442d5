"""Toggle engine: reversible rewrites of a substitute command."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from .command import (
    CURSOR_TO_END,
    START_TO_CURSOR,
    WHOLE_BUFFER,
    ParsedCommand,
    parse,
    split_command,
)

if TYPE_CHECKING:
    from subtoggle.config.settings import Settings

    from .session import Session

logger = logging.getLogger(__name__)

RANGE_CYCLE = (WHOLE_BUFFER, CURSOR_TO_END, START_TO_CURSOR)


class ToggleOp(Enum):
    """Operations the toggle engine can apply."""
    FLAG = "flag"
    REPLACE = "replace"
    RANGE = "range"
    SEPARATOR = "separator"
    DIALECT = "dialect"


@dataclass(frozen=True)
class ToggleResult:
    """A rewritten command with the text and cursor to put on the line."""

    command: ParsedCommand
    text: str
    cursor: int


def cursor_offset(text: str, cmd: ParsedCommand) -> int:
    """Cursor position between the replace field and the flags."""
    return len(text) - len(cmd.separator) - len(cmd.flags)


def toggle_flag(cmd: ParsedCommand, flag: str, alphabet: Sequence[str]) -> ParsedCommand:
    """
    Add or remove a flag.

    Added flags are re-ordered to follow the alphabet, so "gc" + "i" gives
    "gci" no matter which flag was toggled first.
    """
    if flag in cmd.flags:
        return replace(cmd, flags=cmd.flags.replace(flag, ""))

    flags = "".join(f for f in alphabet if f in cmd.flags or f == flag)
    return replace(cmd, flags=flags)


def toggle_replace(cmd: ParsedCommand, restore_text: str) -> ParsedCommand:
    """Clear a non-empty replace term, or restore an empty one."""
    if cmd.replace:
        return replace(cmd, replace="")
    return replace(cmd, replace=restore_text)


def cycle_range(cmd: ParsedCommand) -> ParsedCommand:
    """Cycle %s -> .,$s -> 0,.s -> %s. Unknown ranges go to %s."""
    try:
        idx = RANGE_CYCLE.index(cmd.range)
    except ValueError:
        idx = len(RANGE_CYCLE) - 1
    return replace(cmd, range=RANGE_CYCLE[(idx + 1) % len(RANGE_CYCLE)])


def cycle_separator(cmd: ParsedCommand, candidates: Sequence[str]) -> ParsedCommand:
    """
    Move to the next candidate separator not found in search or replace.

    The separator stays as it is when every other candidate occurs in the
    text, since switching would make the command ambiguous.
    """
    try:
        idx = list(candidates).index(cmd.separator)
    except ValueError:
        idx = -1

    count = len(candidates)
    steps = count if idx < 0 else count - 1
    for step in range(1, steps + 1):
        candidate = candidates[(idx + step) % count]
        if candidate in cmd.search or candidate in cmd.replace:
            logger.debug(f"Skipping separator {candidate!r}: found in command text")
            continue
        return replace(cmd, separator=candidate)

    return cmd


def cycle_dialect(cmd: ParsedCommand, dialects: Sequence[str]) -> ParsedCommand:
    """Rewrite the dialect marker at the start of search to the next one."""
    try:
        idx = list(dialects).index(cmd.dialect)
    except ValueError:
        idx = -1
    new_dialect = dialects[(idx + 1) % len(dialects)]
    return cmd.with_search(new_dialect + cmd.search_body)


def unique_separator(candidates: Sequence[str], text: str) -> str:
    """First candidate that does not occur in text, or the first candidate."""
    for candidate in candidates:
        if candidate not in text:
            return candidate
    return candidates[0]


class Toggler:
    """Applies toggle operations to command-line text using session state."""

    def __init__(self, settings: Settings, session: Session) -> None:
        self.settings = settings
        self.session = session

    def should_process(self, text: str) -> bool:
        """An explicit session or a typed substitute command both qualify."""
        return self.session.state.active or parse(text) is not None

    def resolve(self, text: str) -> ParsedCommand | None:
        """
        Build a normalized command from the live line.

        Text that does not parse falls back to the session's separator while
        a compose session is active (the user may be mid-edit); otherwise
        there is nothing to toggle.
        """
        parsed = parse(text)
        if parsed is not None:
            separator = parsed.separator
        elif self.session.state.active:
            separator = self.session.state.separator
            logger.debug(f"Line not parseable, using session separator {separator!r}")
        else:
            return None

        return ParsedCommand.from_fields(split_command(text, separator), separator)

    def transform(self, cmd: ParsedCommand, op: ToggleOp, flag: str | None = None) -> ParsedCommand:
        if op is ToggleOp.FLAG:
            if not flag:
                raise ValueError("Flag toggle requires a flag character")
            return toggle_flag(cmd, flag, self.settings.flags)
        if op is ToggleOp.REPLACE:
            state = self.session.state
            restore = state.captured_text if state.active else cmd.search_body
            return toggle_replace(cmd, restore)
        if op is ToggleOp.RANGE:
            return cycle_range(cmd)
        if op is ToggleOp.SEPARATOR:
            return cycle_separator(cmd, self.settings.separators)
        if op is ToggleOp.DIALECT:
            return cycle_dialect(cmd, self.settings.dialects)
        raise ValueError(f"Unknown toggle operation: {op}")

    def apply(self, op: ToggleOp, text: str, flag: str | None = None) -> ToggleResult | None:
        """
        Apply a toggle to command-line text.

        Returns None when the text is not a substitute command, leaving the
        line untouched.
        """
        cmd = self.resolve(text)
        if cmd is None:
            return None

        new_cmd = self.transform(cmd, op, flag)
        self.session.remember(new_cmd.separator, new_cmd.dialect)

        new_text = new_cmd.serialize()
        logger.debug(f"{op.value}: {text!r} -> {new_text!r}")
        return ToggleResult(command=new_cmd, text=new_text, cursor=cursor_offset(new_text, new_cmd))

    def compose(self, captured_text: str) -> ToggleResult:
        """
        Start a compose session from a word or selection.

        Produces default_range + sep + default_dialect + word + sep + word +
        sep + default_flags with the cursor after the replace term.
        """
        settings = self.settings
        separator = unique_separator(settings.separators, captured_text)
        self.session.start(captured_text, separator, settings.default_dialect)

        search = settings.default_dialect + captured_text
        cmd = ParsedCommand.from_fields(
            [settings.default_range, search, captured_text, settings.default_flags],
            separator,
        )
        text = cmd.serialize()
        return ToggleResult(command=cmd, text=text, cursor=cursor_offset(text, cmd))
