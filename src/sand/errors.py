"""Exceptions raised by the tracker."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SandError(Exception):
    """Base class for every error the tracker reports to the user."""


class AlreadyInitializedError(SandError):
    def __init__(self, pointer_path: Path) -> None:
        self.pointer_path = pointer_path
        super().__init__(
            f"{pointer_path} already exists. "
            "Delete it and try again if you wish to re-initialise."
        )


class NotInitializedError(SandError):
    def __init__(self, pointer_path: Path) -> None:
        self.pointer_path = pointer_path
        super().__init__(
            f"No tracking file configured in {pointer_path}. Run `sand init <file>` first."
        )


class InvalidActivityError(SandError):
    """Raised when an activity is empty, blank or spans several lines."""


class NothingRunningError(SandError):
    def __init__(self) -> None:
        super().__init__("Nothing is running")


class MalformedLineError(SandError):
    """A tracking file line that cannot be decoded into an entry."""

    def __init__(self, line: str, reason: str, lineno: Optional[int] = None) -> None:
        self.line = line
        self.reason = reason
        self.lineno = lineno
        where = f"line {lineno}" if lineno is not None else "line"
        super().__init__(f"Malformed {where} ({reason}): {line!r}")
