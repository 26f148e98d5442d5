"""Substitute command parsing and normalization."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from .tokenizer import split

COMMAND_LETTER = "s"

# Range characters followed by the command letter and a non-word,
# non-space separator. The separator requirement keeps :set, :sort and
# :syntax from being detected as substitute commands.
COMMAND_PATTERN = re.compile(r"^[%.,0-9$]*s[^\w\s]")
RANGE_PATTERN = re.compile(r"^[%.,0-9$]*s")

DIALECT_MARKERS = ("\\v", "\\m", "\\M", "\\V")
NO_DIALECT = ""

WHOLE_BUFFER = "%s"
CURSOR_TO_END = ".,$s"
START_TO_CURSOR = "0,.s"
CURRENT_LINE = "s"

FIELD_COUNT = 4


def is_command_like(text: str | None) -> bool:
    """Check whether text looks like a substitute command."""
    if not text:
        return False
    return COMMAND_PATTERN.match(text) is not None


def is_valid_separator(char: str) -> bool:
    """A separator is one character that is neither alphanumeric nor whitespace."""
    return len(char) == 1 and not char.isalnum() and not char.isspace() and char != "_"


def detect_dialect(search: str) -> str:
    """Return the dialect marker at the start of a search field, or ""."""
    for marker in DIALECT_MARKERS:
        if search.startswith(marker):
            return marker
    return NO_DIALECT


@dataclass(frozen=True)
class ParsedCommand:
    """A substitute command split into its parts."""

    range: str  # e.g. "%s", ".,$s", "1,10s"
    separator: str
    dialect: str  # one of DIALECT_MARKERS or ""
    search: str  # still carries the dialect marker
    replace: str
    flags: str

    @property
    def search_body(self) -> str:
        """Search text with the dialect marker stripped."""
        return self.search[len(self.dialect) :]

    @property
    def flag_set(self) -> frozenset[str]:
        return frozenset(self.flags)

    def fields(self) -> list[str]:
        return [self.range, self.search, self.replace, self.flags]

    def serialize(self) -> str:
        """Join the parts back into command text."""
        return self.separator.join(self.fields())

    def with_search(self, search: str) -> ParsedCommand:
        return replace(self, search=search, dialect=detect_dialect(search))

    @classmethod
    def from_fields(cls, fields: list[str], separator: str) -> ParsedCommand:
        """Build a command from [range, search?, replace?, flags?]."""
        range_, search, replace_, flags = normalize(fields)
        return cls(
            range=range_,
            separator=separator,
            dialect=detect_dialect(search),
            search=search,
            replace=replace_,
            flags=flags,
        )


def parse(text: str | None) -> ParsedCommand | None:
    """
    Parse a substitute command.

    Returns None for anything that is not command-like. Incomplete commands
    parse with empty trailing fields:
        "%s/foo/bar/g" -> range="%s", separator="/", search="foo",
                          replace="bar", flags="g"
        "%s/"          -> search="", replace="", flags=""
    """
    if not is_command_like(text):
        return None

    match = RANGE_PATTERN.match(text)
    if match is None:
        return None
    range_ = match.group(0)

    after_range = text[len(range_) :]
    if not after_range:
        return None

    separator = after_range[0]
    parts = split(after_range[1:], separator, maxsplit=2)
    search = parts[0]
    replace_ = parts[1] if len(parts) > 1 else ""
    flags = parts[2] if len(parts) > 2 else ""

    return ParsedCommand(
        range=range_,
        separator=separator,
        dialect=detect_dialect(search),
        search=search,
        replace=replace_,
        flags=flags,
    )


def split_command(text: str, separator: str) -> list[str]:
    """
    Split command text into at most four raw fields.

    The range is taken whole when it is directly followed by the separator,
    so a separator such as "," or "$" that also appears in the range does
    not break it apart. Anything else is split from the start.
    """
    match = RANGE_PATTERN.match(text)
    if match is not None and text[match.end() : match.end() + 1] == separator:
        rest = text[match.end() + 1 :]
        return [match.group(0)] + split(rest, separator, maxsplit=FIELD_COUNT - 2)
    return split(text, separator, maxsplit=FIELD_COUNT - 1)


def normalize(fields: list[str]) -> list[str]:
    """
    Pad [range, search?, replace?, flags?] to exactly four fields.

    A missing search is empty, a missing replace copies the search (replacing
    text with itself is a no-op), missing flags are empty.
    """
    if not fields or len(fields) > FIELD_COUNT:
        raise ValueError(f"Expected 1-{FIELD_COUNT} command fields, got {len(fields)}")

    normalized = list(fields)
    if len(normalized) < 2:
        normalized.append("")
    if len(normalized) < 3:
        normalized.append(normalized[1])
    if len(normalized) < 4:
        normalized.append("")
    return normalized
