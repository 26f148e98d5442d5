"""subtoggle console - Launch interactive console."""

from subtoggle.cli.console import ConsoleApp
from subtoggle.config.paths import SubtogglePaths

from . import load_settings


def console() -> None:
    """
    Launch the interactive Subtoggle console.

    Type a substitute command, or a word followed by the compose key, and
    use the toggle keys to rewrite it while the preview follows along.
    """
    paths = SubtogglePaths()
    app = ConsoleApp(paths=paths, settings=load_settings(paths))
    app.run()
