"""Wires the toggle engine, session, dashboard and scheduler to a host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from subtoggle.core.scheduler import RefreshScheduler
from subtoggle.core.session import Session, SessionError
from subtoggle.core.toggles import ToggleOp, Toggler

from .dashboard import Dashboard

if TYPE_CHECKING:
    from subtoggle.config.settings import Settings
    from subtoggle.core.host import LineEditorHost, PreviewPanel

logger = logging.getLogger(__name__)


class ComposeController:
    """
    Entry point for host events and key bindings.

    Host events: session entered, line changed, session left.
    Key bindings: compose, toggles, dashboard visibility.
    """

    def __init__(self, settings: Settings, host: LineEditorHost, panel: PreviewPanel) -> None:
        self.settings = settings
        self.host = host
        self.session = Session()
        self.toggler = Toggler(settings, self.session)
        self.dashboard = Dashboard(settings, panel)
        self.scheduler = RefreshScheduler(
            host,
            refresh=self.dashboard.refresh,
            teardown=self.dashboard.close,
            invalidate=self.dashboard.invalidate,
            echo_timeout=settings.echo_timeout,
        )

    # Host events

    def on_session_entered(self) -> None:
        self.dashboard.on_session_entered()

    def on_line_changed(self, text: str) -> None:
        self.scheduler.on_line_changed(text)

    def on_session_left(self) -> None:
        self.session.leave()
        self.scheduler.cancel()

    def current_text(self) -> str:
        """The line as it will read once any queued write has landed."""
        pending = self.scheduler.pending_text
        return self.host.get_line() if pending is None else pending

    # Key bindings

    def compose(self, captured_text: str) -> bool:
        """Replace the line with a substitute command built from captured_text."""
        if not captured_text:
            logger.debug("Nothing to compose from")
            return False

        try:
            result = self.toggler.compose(captured_text)
        except SessionError:
            # A new compose replaces the outstanding one
            self.session.leave()
            result = self.toggler.compose(captured_text)

        self.scheduler.request_write(result.text, result.cursor)
        return True

    def toggle(self, op: ToggleOp, flag: str | None = None) -> bool:
        """Apply a toggle to the live line. Returns False for a no-op."""
        text = self.current_text()
        if not self.toggler.should_process(text):
            return False

        result = self.toggler.apply(op, text, flag)
        if result is None:
            return False

        self.scheduler.request_write(result.text, result.cursor)
        return True

    def toggle_dashboard(self) -> None:
        if self.dashboard.toggle():
            self.scheduler.request_refresh()
