from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from sand.codec import DATETIME_FMT
from sand.config import TrackerConfig, initialize
from sand.engine import Tracker

POINTER_PATH = Path("/home/user/.config/sand/tracking-file")
TRACKING_PATH = Path("/home/user/test-time-file")


class InMemoryFilesystem:
    """Storage double that keeps file contents in a dict."""

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.appends: list[tuple[Path, str]] = []

    def exists(self, path: Path) -> bool:
        return Path(path) in self.files

    def read_text(self, path: Path) -> str:
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def append_text(self, path: Path, text: str) -> None:
        self.appends.append((Path(path), text))
        self.files[Path(path)] = self.files.get(Path(path), "") + text

    def write_text(self, path: Path, text: str) -> None:
        self.files[Path(path)] = text

    def touch(self, path: Path) -> None:
        self.files.setdefault(Path(path), "")


class FakeClock:
    def __init__(self, start: str = "2020-05-04 12:00:00") -> None:
        self.now = parse(start)
        self.reads = 0

    def set(self, moment: str) -> None:
        self.now = parse(moment)

    def __call__(self) -> datetime:
        self.reads += 1
        return self.now


def parse(moment: str) -> datetime:
    return datetime.strptime(moment, DATETIME_FMT)


@pytest.fixture
def filesystem() -> InMemoryFilesystem:
    return InMemoryFilesystem()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> TrackerConfig:
    return TrackerConfig(pointer_path=POINTER_PATH)


@pytest.fixture
def tracker(filesystem: InMemoryFilesystem, config: TrackerConfig, clock: FakeClock) -> Tracker:
    initialize(filesystem, config, TRACKING_PATH)
    return Tracker(filesystem, TRACKING_PATH, clock=clock)


@pytest.fixture
def at(clock: FakeClock, tracker: Tracker):
    """Run ``fn`` with the clock set to ``moment``."""

    def run(moment: str, fn):
        clock.set(moment)
        return fn()

    return run
