"""Activity engine: derives running state and intervals from the tracking file."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from .codec import DATE_FMT, decode_log, encode_entry
from .errors import InvalidActivityError, NothingRunningError
from .models import Entry, EntryKind, Status
from .storage import Storage

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
EntryFilter = Callable[[Entry], bool]


def activity_contains(text: str) -> EntryFilter:
    return lambda entry: text in entry.activity


def date_contains(text: str) -> EntryFilter:
    return lambda entry: text in entry.raw_date


def any_of(*filters: EntryFilter) -> EntryFilter:
    return lambda entry: any(check(entry) for check in filters)


def matches_filter(text: str) -> EntryFilter:
    """Substring match against the activity text or the raw date token."""
    return any_of(activity_contains(text), date_contains(text))


def running_entry(entries: Sequence[Entry]) -> Optional[Entry]:
    """Return the START that is still open, judged by the last entry alone."""
    if not entries:
        return None
    last = entries[-1]
    return last if last.is_start else None


def build_status(entry: Entry, end_time: datetime) -> Status:
    return Status(time=entry.time, activity=entry.activity, duration=end_time - entry.time)


def collect_intervals(
    entries: Sequence[Entry], predicate: EntryFilter, now: datetime
) -> list[Status]:
    """Pair each matching START with the entry that follows it.

    Every entry terminates the START before it, matching or not. A START with
    nothing after it is measured up to ``now``.
    """
    statuses: list[Status] = []
    for index, entry in enumerate(entries):
        if not entry.is_start or not predicate(entry):
            continue
        following = entries[index + 1] if index + 1 < len(entries) else None
        end_time = following.time if following is not None else now
        statuses.append(build_status(entry, end_time))
    return statuses


class Tracker:
    """Start, stop and query activities recorded in a tracking file.

    Nothing is cached between calls: every operation re-reads the file.
    """

    def __init__(
        self,
        storage: Storage,
        tracking_path: Path,
        clock: Clock = datetime.now,
    ) -> None:
        self.storage = storage
        self.tracking_path = Path(tracking_path)
        self._clock = clock

    @property
    def tracking_file_path(self) -> Path:
        return self.tracking_path

    def entries(self) -> list[Entry]:
        entries = decode_log(self.storage.read_text(self.tracking_path))
        logger.debug("Read %d entries from %s", len(entries), self.tracking_path)
        return entries

    def status(self) -> Optional[Status]:
        """Return the running activity measured up to now, or ``None``."""
        entry = running_entry(self.entries())
        if entry is None:
            return None
        return build_status(entry, self._clock())

    def start(self, activity: str) -> Optional[Status]:
        """Start ``activity``, stopping whatever is running at the same instant.

        Returns the status of the activity that was stopped, if any. When an
        activity was running, the STOP and START lines go out in one append;
        a failed write may still leave a partial line behind.
        """
        if not activity or not activity.strip():
            raise InvalidActivityError("An activity must be given")
        if "\n" in activity or "\r" in activity:
            raise InvalidActivityError("An activity must fit on a single line")

        running = running_entry(self.entries())
        now = self._clock()
        lines: list[str] = []
        stopped: Optional[Status] = None
        if running is not None:
            stopped = build_status(running, now)
            lines.append(encode_entry(EntryKind.STOP, "", now))
        lines.append(encode_entry(EntryKind.START, activity, now))
        self._append(lines)
        return stopped

    def stop(self) -> Status:
        """Stop the running activity and return its final status."""
        running = running_entry(self.entries())
        if running is None:
            raise NothingRunningError()
        now = self._clock()
        self._append([encode_entry(EntryKind.STOP, "", now)])
        return build_status(running, now)

    def query(self, text: str) -> list[Status]:
        """Return every interval whose activity or date contains ``text``."""
        return self._query_at(text, self._clock())

    def today(self) -> list[Status]:
        now = self._clock()
        return self._query_at(now.strftime(DATE_FMT), now)

    def yesterday(self) -> list[Status]:
        now = self._clock()
        return self._query_at((now - timedelta(days=1)).strftime(DATE_FMT), now)

    def _query_at(self, text: str, now: datetime) -> list[Status]:
        return collect_intervals(self.entries(), matches_filter(text), now)

    def _append(self, lines: Iterable[str]) -> None:
        chunk = "".join(f"{line}\n" for line in lines)
        self.storage.append_text(self.tracking_path, chunk)
        logger.debug("Appended to %s: %r", self.tracking_path, chunk)
