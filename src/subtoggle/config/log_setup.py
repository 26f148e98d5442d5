"""Logging configuration."""

import logging
import sys
from pathlib import Path


def setup_logging(log_dir: Path, level: str = "INFO", verbose: bool = False) -> None:
    """Set up logging to file, and to stderr when verbose.

    The console owns the terminal while a prompt is open, so stderr output
    is opt-in.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "subtoggle.log"

    handlers: list[logging.Handler] = [logging.FileHandler(log_file)]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Reduce noise from some libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)
