"""Interactive console for composing substitute commands."""

from .app import ConsoleApp

__all__ = ["ConsoleApp"]
