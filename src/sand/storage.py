"""File access for the pointer file and the tracking file."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


ENCODING = "utf-8"


class Storage(Protocol):
    """The file operations the tracker relies on."""

    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def append_text(self, path: Path, text: str) -> None: ...

    def write_text(self, path: Path, text: str) -> None: ...

    def touch(self, path: Path) -> None: ...


class Filesystem:
    """Local disk implementation of :class:`Storage`.

    Errors from the operating system are raised as-is.
    """

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def read_text(self, path: Path) -> str:
        with open(path, "r", encoding=ENCODING, newline="") as handle:
            return handle.read()

    def append_text(self, path: Path, text: str) -> None:
        with open(path, "a", encoding=ENCODING, newline="") as handle:
            handle.write(text)

    def write_text(self, path: Path, text: str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding=ENCODING, newline="") as handle:
            handle.write(text)

    def touch(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
