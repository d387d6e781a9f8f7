from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from sand.models import Status
from sand.reporting import StatusPrinter, humanize_duration, sum_statuses


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(seconds=30), "less than a minute"),
        (timedelta(minutes=1), "1 minute"),
        (timedelta(hours=2, minutes=1, seconds=59), "2 hours, 1 minute"),
        (timedelta(days=1, hours=1), "1 day, 1 hour"),
        (timedelta(days=400), "1 year, 1 month, 5 days"),
    ],
)
def test_humanize_duration(duration: timedelta, expected: str) -> None:
    assert humanize_duration(duration) == expected


def _status(activity: str, minutes: int, hour: int = 9) -> Status:
    return Status(time=datetime(2020, 5, 4, hour), activity=activity, duration=timedelta(minutes=minutes))


def test_sum_statuses_groups_by_activity_in_first_seen_order() -> None:
    totals = sum_statuses(
        [
            _status("code sand", 30),
            _status("email", 10, hour=10),
            _status("code sand", 45, hour=11),
        ]
    )
    assert [(t.activity, t.total) for t in totals] == [
        ("code sand", timedelta(minutes=75)),
        ("email", timedelta(minutes=10)),
    ]
    assert totals[0].activity_type == "code"
    assert totals[0].activity_description == "sand"


def test_print_statuses_rows(capsys) -> None:
    StatusPrinter(color=False).print_statuses([_status("code the tracker", 90)])
    out = capsys.readouterr().out
    assert out == "2020-05-04 09:00:00 code the tracker 1 hour, 30 minutes\n"


def test_print_summed_rows(capsys) -> None:
    StatusPrinter(color=False).print_statuses(
        [_status("email", 10), _status("email", 5, hour=10)], summed=True
    )
    assert capsys.readouterr().out == "email  15 minutes\n"


def test_print_nothing(capsys) -> None:
    StatusPrinter(color=False).print_statuses([])
    assert capsys.readouterr().out == "No activity recorded.\n"
