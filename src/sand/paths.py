"""Default location of the pointer file naming the active tracking file."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "sand"
APP_AUTHOR = "sand"

CONFIG_ENVVAR = "SAND_CONFIG"
POINTER_FILENAME = "tracking-file"


def get_config_dir() -> Path:
    """Per-user config directory for sand, created on first use."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    path = Path(dirs.user_config_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_pointer_path() -> Path:
    return get_config_dir() / POINTER_FILENAME
