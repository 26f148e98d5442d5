"""Core substitute-command engine."""

from .command import ParsedCommand, is_command_like, normalize, parse
from .scheduler import RefreshScheduler, RefreshState
from .session import Session, SessionError, SessionState
from .toggles import ToggleOp, ToggleResult, Toggler
from .tokenizer import split

__all__ = [
    "ParsedCommand",
    "is_command_like",
    "normalize",
    "parse",
    "split",
    "Session",
    "SessionError",
    "SessionState",
    "ToggleOp",
    "ToggleResult",
    "Toggler",
    "RefreshScheduler",
    "RefreshState",
]
