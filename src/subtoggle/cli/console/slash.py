"""Console lines that start with "/" are console commands, not substitutes."""

import shlex
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SlashCommand:
    """
    A console command split into its name and the words after it.

    `/config set keymaps.populate "escape r"` reads as command "config",
    subcommand "set" and args ["keymaps.populate", "escape r"].
    """

    command: str
    words: list[str] = field(default_factory=list)

    @property
    def subcommand(self) -> str | None:
        return self.words[0].lower() if self.words else None

    @property
    def args(self) -> list[str]:
        return self.words[1:]


def parse_input(raw: str) -> SlashCommand | None:
    """Split a console line into a SlashCommand, or None if it is not one."""
    raw = raw.strip()
    if not raw.startswith("/"):
        return None

    words = split_words(raw[1:])
    if not words:
        return None
    return SlashCommand(command=words[0].lower(), words=words[1:])


def split_words(text: str) -> list[str]:
    """
    Split on whitespace, honouring quotes.

    Backslashes and "#" are literal: both appear in dialect markers and
    separators. An unbalanced quote falls back to a plain split.
    """
    lexer = shlex.shlex(text, posix=True)
    lexer.whitespace_split = True
    lexer.escape = ""
    lexer.commenters = ""
    try:
        return list(lexer)
    except ValueError:
        return text.split()
