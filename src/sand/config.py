"""Configuration: where the tracking file lives."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import AlreadyInitializedError, NotInitializedError
from .paths import get_pointer_path
from .storage import Storage

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TrackerConfig:
    """Runtime configuration, resolved once at startup.

    ``pointer_path`` names a one-line file whose content is the path of the
    active tracking file.
    """

    pointer_path: Path = field(default_factory=get_pointer_path)

    @classmethod
    def from_option(cls, pointer_path: Path | None) -> "TrackerConfig":
        if pointer_path is None:
            return cls()
        return cls(pointer_path=Path(pointer_path).expanduser())


def initialize(storage: Storage, config: TrackerConfig, tracking_path: Path) -> Path:
    """Point the configuration at ``tracking_path`` and create it if needed."""
    if storage.exists(config.pointer_path):
        raise AlreadyInitializedError(config.pointer_path)

    tracking_path = Path(tracking_path).expanduser().resolve()
    storage.write_text(config.pointer_path, str(tracking_path))
    storage.touch(tracking_path)
    logger.info("Tracking %s (pointer at %s)", tracking_path, config.pointer_path)
    return tracking_path


def resolve_tracking_path(storage: Storage, config: TrackerConfig) -> Path:
    if not storage.exists(config.pointer_path):
        raise NotInitializedError(config.pointer_path)
    contents = storage.read_text(config.pointer_path).strip()
    if not contents:
        raise NotInitializedError(config.pointer_path)
    return Path(contents)
