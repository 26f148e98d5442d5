"""Interfaces the core expects from the host line editor."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

BACKSPACE = "backspace"

# Insert-then-delete of a neutral character, fed as typed input
SYNTHETIC_KEYS: tuple[str, ...] = (" ", BACKSPACE)


class HostError(Exception):
    """The host rejected an operation (e.g. the editing session is gone)."""

    pass


class LineEditorHost(Protocol):
    """A single-line editor the core reads from and writes back to."""

    def get_line(self) -> str: ...

    def get_cursor(self) -> int: ...

    def set_line(self, text: str, cursor: int) -> None:
        """Replace the line without producing a typed-input change event."""
        ...

    def feed_typed(self, keys: Sequence[str]) -> None:
        """Inject keys as if typed; each key produces one change event."""
        ...

    def call_soon(self, callback: Callable[[], None]) -> None: ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> None: ...

    def is_session_live(self) -> bool: ...


class PreviewPanel(Protocol):
    """A read-only floating panel showing the command preview."""

    @property
    def is_shown(self) -> bool: ...

    def show(self, lines: list) -> None: ...

    def close(self) -> None: ...
