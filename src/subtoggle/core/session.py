"""Compose session state."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .command import NO_DIALECT

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "/"


class SessionError(Exception):
    """A compose session was started while another is active."""

    pass


@dataclass
class SessionState:
    """State of the current compose session."""

    active: bool = False  # True only while an explicit compose is outstanding
    captured_text: str = ""  # word or selection the compose started from
    separator: str = DEFAULT_SEPARATOR
    dialect: str = NO_DIALECT


class Session:
    """
    Owns the single compose session.

    A session is "active" when started explicitly through compose, as
    opposed to a substitute command the user is typing unprompted. Only one
    session exists at a time; starting a second while one is active is an
    error.
    """

    def __init__(self) -> None:
        self.state = SessionState()

    @property
    def active(self) -> bool:
        return self.state.active

    def start(self, captured_text: str, separator: str, dialect: str) -> None:
        """Begin an explicit compose session."""
        if self.state.active:
            raise SessionError("A compose session is already active")

        self.state.active = True
        self.state.captured_text = captured_text
        self.state.separator = separator
        self.state.dialect = dialect
        logger.debug(f"Compose started: captured={captured_text!r}, separator={separator!r}")

    def remember(self, separator: str, dialect: str) -> None:
        """Record the last separator and dialect a toggle produced."""
        self.state.separator = separator
        self.state.dialect = dialect

    def leave(self) -> None:
        """Host left the line editor; the compose is over."""
        if self.state.active:
            logger.debug("Compose session ended")
        self.state.active = False
