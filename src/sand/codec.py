"""Encoding and decoding of tracking file lines."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .errors import MalformedLineError
from .models import Entry, EntryKind


DATE_FMT = "%Y-%m-%d"
TIME_FMT = "%H:%M:%S"
DATETIME_FMT = f"{DATE_FMT} {TIME_FMT}"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(DATETIME_FMT)


def encode_entry(kind: EntryKind, activity: str, time: datetime) -> str:
    """Render an entry as a single line, without the trailing newline.

    STOP lines never carry activity text.
    """
    line = f"{format_timestamp(time)} {kind.value}"
    if kind is EntryKind.START:
        line = f"{line} {activity}"
    return line


def decode_entry(line: str, lineno: Optional[int] = None) -> Entry:
    """Parse ``<date> <time> <KIND> [activity]`` into an :class:`Entry`."""
    parts = line.split(" ", 3)
    if len(parts) < 3:
        raise MalformedLineError(line, "expected date, time and kind", lineno)

    raw_date, raw_time, raw_kind = parts[:3]
    activity = parts[3] if len(parts) == 4 else ""

    try:
        kind = EntryKind(raw_kind)
    except ValueError:
        raise MalformedLineError(line, f"unknown kind {raw_kind!r}", lineno) from None

    try:
        time = datetime.strptime(f"{raw_date} {raw_time}", DATETIME_FMT)
    except ValueError:
        raise MalformedLineError(line, "invalid timestamp", lineno) from None
    if format_timestamp(time) != f"{raw_date} {raw_time}":
        raise MalformedLineError(line, "timestamp not zero-padded", lineno)

    if kind is EntryKind.START and not activity:
        raise MalformedLineError(line, "START without an activity", lineno)
    if kind is EntryKind.STOP and len(parts) == 4:
        raise MalformedLineError(line, "STOP with trailing text", lineno)

    return Entry(raw_date=raw_date, time=time, kind=kind, activity=activity)


def split_lines(text: str) -> list[str]:
    """Split on the ``\\n`` terminators the encoder writes, and nothing else."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def decode_log(text: str) -> list[Entry]:
    """Decode a whole tracking file. The first malformed line fails the read."""
    return [
        decode_entry(line, lineno)
        for lineno, line in enumerate(split_lines(text), start=1)
    ]
