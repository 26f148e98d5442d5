"""Command-line interface for Subtoggle."""
