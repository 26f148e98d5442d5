"""prompt_toolkit implementation of the line editor host."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

from subtoggle.core.host import BACKSPACE, HostError

logger = logging.getLogger(__name__)


class PromptHost:
    """Reads and writes the input line of a running PromptSession."""

    def __init__(self, session: PromptSession) -> None:
        self._session = session
        self._muted = False

    @property
    def buffer(self):
        return self._session.default_buffer

    @property
    def muted(self) -> bool:
        """True while set_line is writing; change events then are not typing."""
        return self._muted

    def get_line(self) -> str:
        return self.buffer.text

    def get_cursor(self) -> int:
        return self.buffer.cursor_position

    def is_session_live(self) -> bool:
        app = self._session.app
        return app.is_running and not app.is_done

    def set_line(self, text: str, cursor: int) -> None:
        if not self.is_session_live():
            raise HostError("No prompt is running")
        self._muted = True
        try:
            self.buffer.set_document(Document(text, cursor), bypass_readonly=True)
        finally:
            self._muted = False

    def feed_typed(self, keys: Sequence[str]) -> None:
        if not self.is_session_live():
            raise HostError("No prompt is running")
        presses = [KeyPress(Keys.Backspace) if key == BACKSPACE else KeyPress(key) for key in keys]
        processor = self._session.app.key_processor
        processor.feed_multiple(presses)
        processor.process_keys()

    def call_soon(self, callback: Callable[[], None]) -> None:
        asyncio.get_running_loop().call_soon(callback)

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        asyncio.get_running_loop().call_later(delay, callback)


class ToolbarPanel:
    """Shows panel lines in the prompt's bottom toolbar."""

    def __init__(self, invalidate: Callable[[], None] | None = None) -> None:
        self._lines: list | None = None
        self._invalidate = invalidate

    @property
    def is_shown(self) -> bool:
        return self._lines is not None

    def show(self, lines: list) -> None:
        self._lines = lines
        if self._invalidate is not None:
            self._invalidate()

    def close(self) -> None:
        if self._lines is None:
            return
        self._lines = None
        if self._invalidate is not None:
            self._invalidate()

    def render(self) -> FormattedText | None:
        """bottom_toolbar callback: None hides the toolbar."""
        if self._lines is None:
            return None
        fragments: list[tuple[str, str]] = []
        for i, line in enumerate(self._lines):
            if i:
                fragments.append(("", "\n"))
            fragments.extend(line)
        return FormattedText(fragments)
