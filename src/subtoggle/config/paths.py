"""XDG-compliant path management for Subtoggle."""

from pathlib import Path

from platformdirs import user_cache_dir, user_config_dir


class SubtogglePaths:
    """
    Manages XDG-compliant paths for Subtoggle configuration and state.

    Directories:
    - config_dir: ~/.config/subtoggle/ - config.yaml
    - cache_dir: ~/.cache/subtoggle/ - console history and logs
    """

    APP_NAME = "subtoggle"
    APP_AUTHOR = "subtoggle"

    def __init__(
        self,
        config_dir: Path | None = None,
        cache_dir: Path | None = None,
    ):
        """
        Initialize Subtoggle paths.

        Args:
            config_dir: Override config directory (default: ~/.config/subtoggle)
            cache_dir: Override cache directory (default: ~/.cache/subtoggle)
        """
        self._config_dir = config_dir or Path(user_config_dir(self.APP_NAME, self.APP_AUTHOR))
        self._cache_dir = cache_dir or Path(user_cache_dir(self.APP_NAME, self.APP_AUTHOR))

    @property
    def config_dir(self) -> Path:
        """Config directory (~/.config/subtoggle/)."""
        return self._config_dir

    @property
    def cache_dir(self) -> Path:
        """Cache directory (~/.cache/subtoggle/)."""
        return self._cache_dir

    @property
    def log_dir(self) -> Path:
        """Log directory (~/.cache/subtoggle/logs/)."""
        return self._cache_dir / "logs"

    @property
    def config_file(self) -> Path:
        """Main config file (~/.config/subtoggle/config.yaml)."""
        return self._config_dir / "config.yaml"

    @property
    def console_history(self) -> Path:
        """Console input history (~/.cache/subtoggle/console_history)."""
        return self._cache_dir / "console_history"

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        for directory in [self._config_dir, self._cache_dir, self.log_dir]:
            directory.mkdir(parents=True, exist_ok=True)

    def config_exists(self) -> bool:
        """Check if the main config file exists."""
        return self.config_file.exists()

    def __repr__(self) -> str:
        return (
            f"SubtogglePaths(\n"
            f"  config_dir={self._config_dir}\n"
            f"  cache_dir={self._cache_dir}\n"
            f")"
        )
