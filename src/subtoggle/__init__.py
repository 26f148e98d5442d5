"""Subtoggle - interactive helper for composing substitute commands."""

__version__ = "0.3.0"
