"""Refresh scheduling for programmatic command-line rewrites.

The host's live preview only redraws on typed input, and the host does not
allow the line to be changed while a key handler is still computing it.
A rewrite is therefore deferred to the next loop iteration, written
silently, and followed by a typed insert-then-delete pair. The two change
events that pair produces are echoes of our own write: they are counted off
by a guard and only the last one recomputes the preview.

States:
    IDLE              nothing in flight, change events are user typing
    PENDING_WRITE     a write is queued for the next loop iteration
    SUPPRESSING_ECHO  synthetic keys fed, guard counts the echoes down
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from .host import SYNTHETIC_KEYS, HostError, LineEditorHost

logger = logging.getLogger(__name__)

DEFAULT_ECHO_TIMEOUT = 0.1  # seconds


class RefreshState(Enum):
    """States of the refresh protocol."""
    IDLE = "idle"
    PENDING_WRITE = "pending_write"
    SUPPRESSING_ECHO = "suppressing_echo"


class RefreshScheduler:
    """Turns toggle results into host-visible updates without echo loops."""

    def __init__(
        self,
        host: LineEditorHost,
        refresh: Callable[[str], None],
        teardown: Callable[[], None],
        invalidate: Callable[[], None] | None = None,
        echo_timeout: float = DEFAULT_ECHO_TIMEOUT,
    ) -> None:
        """
        Args:
            host: Line editor to write to
            refresh: Recomputes the preview from the current line text
            teardown: Removes any rendered preview
            invalidate: Drops cached preview state before a forced refresh
            echo_timeout: Seconds after which unseen echoes stop being awaited
        """
        self.host = host
        self._refresh = refresh
        self._teardown = teardown
        self._invalidate = invalidate
        self.echo_timeout = echo_timeout

        self.state = RefreshState.IDLE
        self.guard = 0
        self._generation = 0
        self._pending: tuple[str, int] | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending_text(self) -> str | None:
        """Text of the queued write, which the host line does not show yet."""
        if self.state is RefreshState.PENDING_WRITE and self._pending is not None:
            return self._pending[0]
        return None

    def request_write(self, text: str, cursor: int) -> None:
        """Queue a rewrite of the line for the next loop iteration."""
        self._pending = (text, cursor)
        self._schedule()

    def request_refresh(self) -> None:
        """
        Queue a preview redraw through synthetic typing.

        A write that is already queued is kept and carried out by the redraw.
        """
        if self.state is not RefreshState.PENDING_WRITE:
            self._pending = None
        self._schedule()

    def _schedule(self) -> None:
        # Echoes still outstanding from an earlier write keep the guard;
        # hosts that deliver them late must not see them as typing.
        self._generation += 1
        generation = self._generation
        self.state = RefreshState.PENDING_WRITE
        self.host.call_soon(lambda: self._perform(generation))

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation

    def _perform(self, generation: int) -> None:
        if self._is_stale(generation):
            logger.debug(f"Dropping superseded write (generation {generation})")
            return

        pending, self._pending = self._pending, None
        if not self.host.is_session_live():
            logger.debug("Dropping write: editing session is gone")
            self._reset()
            return

        if self._invalidate is not None:
            self._invalidate()

        try:
            if pending is not None:
                self.host.set_line(*pending)

            self.guard += len(SYNTHETIC_KEYS)
            self.state = RefreshState.SUPPRESSING_ECHO
            self.host.call_later(self.echo_timeout, lambda: self._expire(generation))
            self.host.feed_typed(SYNTHETIC_KEYS)
        except HostError as e:
            logger.debug(f"Host rejected deferred write: {e}")
            self._reset()

    def _expire(self, generation: int) -> None:
        """Stop waiting for echoes that never arrived."""
        if self._is_stale(generation) or self.state is not RefreshState.SUPPRESSING_ECHO:
            return
        logger.debug(f"Echo timeout with {self.guard} echo(es) outstanding")
        self.guard = 0
        self.state = RefreshState.IDLE
        if self.host.is_session_live():
            self._refresh(self.host.get_line())

    def on_line_changed(self, text: str) -> bool:
        """
        Handle a change event from the host.

        Returns True when the event was an echo of our own synthetic keys.
        """
        if self.guard > 0:
            self.guard -= 1
            # A write queued meanwhile redraws once it lands
            if self.guard == 0 and self.state is RefreshState.SUPPRESSING_ECHO:
                self.state = RefreshState.IDLE
                self._refresh(text)
            return True

        if self.state is RefreshState.PENDING_WRITE:
            # The queued write was computed from older text
            logger.debug("User edit supersedes queued write")
            self._generation += 1
            self._pending = None
            self.state = RefreshState.IDLE

        self._refresh(text)
        return False

    def cancel(self) -> None:
        """Session left: drop everything in flight and remove the preview."""
        self._generation += 1
        self._reset()
        self._teardown()

    def _reset(self) -> None:
        self.guard = 0
        self._pending = None
        self.state = RefreshState.IDLE
