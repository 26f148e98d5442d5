"""Basic smoke tests for subtoggle."""

from subtoggle.config.log_setup import setup_logging
from subtoggle.config.paths import SubtogglePaths


def test_subtoggle_importable():
    """Verify the subtoggle package can be imported."""
    import subtoggle

    assert subtoggle.__version__


def test_paths_created(isolated_dirs):
    """Verify SubtogglePaths initializes without error."""
    paths = SubtogglePaths()
    assert paths.config_file.name == "config.yaml"
    assert paths.log_dir.parent == paths.cache_dir


def test_path_overrides(tmp_path):
    paths = SubtogglePaths(config_dir=tmp_path / "c", cache_dir=tmp_path / "d")
    paths.ensure_directories()
    assert paths.log_dir.is_dir()
    assert paths.console_history == tmp_path / "d" / "console_history"
    assert paths.config_exists() is False


def test_setup_logging_creates_log_dir(tmp_path):
    setup_logging(tmp_path / "logs")
    assert (tmp_path / "logs").is_dir()
