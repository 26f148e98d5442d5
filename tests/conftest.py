"""Shared fakes for the line editor host and preview panel."""

import pytest

from subtoggle.core.host import BACKSPACE, HostError


class FakeHost:
    """
    In-memory line editor.

    call_soon/call_later only queue callbacks; tests run them explicitly
    with run_soon()/run_later(). Typed keys edit the line at the cursor and
    notify `listener` once per key, like a real host's change event.
    """

    def __init__(self, text: str = "", cursor: int | None = None):
        self.text = text
        self.cursor = len(text) if cursor is None else cursor
        self.live = True
        self.reject_writes = False
        self.listener = None
        self.soon = []
        self.later = []
        self.writes = []
        self.fed = []

    def type(self, text: str, cursor: int | None = None) -> None:
        """Simulate the user replacing the line by typing."""
        self.text = text
        self.cursor = len(text) if cursor is None else cursor
        if self.listener:
            self.listener(text)

    # LineEditorHost

    def get_line(self) -> str:
        return self.text

    def get_cursor(self) -> int:
        return self.cursor

    def is_session_live(self) -> bool:
        return self.live

    def set_line(self, text: str, cursor: int) -> None:
        if self.reject_writes or not self.live:
            raise HostError("line is read-only")
        self.text = text
        self.cursor = cursor
        self.writes.append((text, cursor))

    def feed_typed(self, keys) -> None:
        if not self.live:
            raise HostError("no session")
        self.fed.append(tuple(keys))
        for key in keys:
            if key == BACKSPACE:
                if self.cursor:
                    self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
                    self.cursor -= 1
            else:
                self.text = self.text[: self.cursor] + key + self.text[self.cursor :]
                self.cursor += len(key)
            if self.listener:
                self.listener(self.text)

    def call_soon(self, callback) -> None:
        self.soon.append(callback)

    def call_later(self, delay, callback) -> None:
        self.later.append((delay, callback))

    # Loop control

    def run_soon(self) -> None:
        callbacks, self.soon = self.soon, []
        for callback in callbacks:
            callback()

    def run_later(self) -> None:
        callbacks, self.later = self.later, []
        for _delay, callback in callbacks:
            callback()


class FakePanel:
    """Records what the dashboard shows."""

    def __init__(self):
        self.lines = None
        self.show_count = 0
        self.close_count = 0

    @property
    def is_shown(self) -> bool:
        return self.lines is not None

    def show(self, lines) -> None:
        self.lines = lines
        self.show_count += 1

    def close(self) -> None:
        self.lines = None
        self.close_count += 1

    def text(self) -> str:
        return "\n".join("".join(t for _, t in line) for line in self.lines or [])


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def panel():
    return FakePanel()


@pytest.fixture
def isolated_dirs(tmp_path, monkeypatch):
    """Point platformdirs at a temp directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    return tmp_path
