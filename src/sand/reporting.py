"""Console rendering of statuses and activity totals."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional, Sequence

import typer

from .codec import format_timestamp
from .models import Status


_DURATION_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
)


@dataclass(slots=True)
class ActivityTotal:
    activity: str
    total: timedelta

    @property
    def activity_type(self) -> str:
        return self.activity.split(" ")[0]

    @property
    def activity_description(self) -> str:
        return " ".join(self.activity.split(" ")[1:])


def pluralize(unit: str, count: int) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def humanize_duration(duration: timedelta) -> str:
    """Render a duration as e.g. ``"1 day, 2 hours, 5 minutes"``."""
    remainder = max(int(duration.total_seconds()), 0)
    parts: list[str] = []
    for unit, seconds in _DURATION_UNITS:
        count, remainder = divmod(remainder, seconds)
        if count:
            parts.append(pluralize(unit, count))
    return ", ".join(parts) or "less than a minute"


def format_time(moment: datetime) -> str:
    return format_timestamp(moment)


def sum_statuses(statuses: Iterable[Status]) -> list[ActivityTotal]:
    """Total the durations per activity, keeping first-seen order."""
    totals: defaultdict[str, timedelta] = defaultdict(timedelta)
    for status in statuses:
        totals[status.activity] += status.duration
    return [ActivityTotal(activity, total) for activity, total in totals.items()]


class StatusPrinter:
    """Render statuses as colored rows in the console."""

    def __init__(self, color: Optional[bool] = None) -> None:
        self.color = color

    def print_statuses(self, statuses: Sequence[Status], summed: bool = False) -> None:
        if not statuses:
            typer.echo("No activity recorded.", color=self.color)
            return
        if summed:
            for total in sum_statuses(statuses):
                self._row(
                    (total.activity_type, "magenta"),
                    (total.activity_description, "yellow"),
                    (humanize_duration(total.total), "green"),
                )
        else:
            for status in statuses:
                self._row(
                    (format_time(status.time), "bright_black"),
                    (status.activity_type, "magenta"),
                    (status.activity_description, "yellow"),
                    (humanize_duration(status.duration), "green"),
                )

    def print_started(self, activity: str, stopped: Optional[Status] = None) -> None:
        if stopped is not None:
            self.print_stopped(stopped)
        typer.echo(f"started {typer.style(activity, fg='yellow')}", color=self.color)

    def print_stopped(self, status: Status) -> None:
        typer.echo(
            f"stopped {typer.style(status.activity, fg='yellow')} after "
            f"{typer.style(humanize_duration(status.duration), fg='green')}",
            color=self.color,
        )

    def print_idle(self) -> None:
        typer.echo("currently doing nothing", color=self.color)

    def _row(self, *cells: tuple[str, str]) -> None:
        line = " ".join(typer.style(text, fg=colour) for text, colour in cells)
        typer.echo(line, color=self.color)
