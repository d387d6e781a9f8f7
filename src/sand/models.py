"""Domain models for tracked activity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class EntryKind(str, Enum):
    START = "START"
    STOP = "STOP"


@dataclass(frozen=True, slots=True)
class Entry:
    """A single decoded line of the tracking file."""

    raw_date: str
    time: datetime
    kind: EntryKind
    activity: str = ""

    @property
    def is_start(self) -> bool:
        return self.kind is EntryKind.START


@dataclass(frozen=True, slots=True)
class Status:
    """An activity interval starting at ``time`` and lasting ``duration``.

    The interval is closed by the next entry in the tracking file, or is still
    running when the duration was measured against the current time.
    """

    time: datetime
    activity: str
    duration: timedelta

    @property
    def end_time(self) -> datetime:
        return self.time + self.duration

    @property
    def activity_type(self) -> str:
        return self.activity.split(" ")[0]

    @property
    def activity_description(self) -> str:
        return " ".join(self.activity.split(" ")[1:])
