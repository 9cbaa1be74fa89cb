"""Tests for the local calendar adapter."""

from datetime import UTC, date, datetime

import pytest

from focus_tracker.services.calendar import LocalCalendar


def _epoch(year: int, month: int, day: int, hour: int = 0) -> int:
    return int(datetime(year, month, day, hour, tzinfo=UTC).timestamp())


def test_to_local_day_uses_configured_timezone() -> None:
    instant = _epoch(2024, 1, 5, 3)

    assert LocalCalendar("UTC").to_local_day(instant) == date(2024, 1, 5)
    assert LocalCalendar("America/New_York").to_local_day(instant) == date(2024, 1, 4)


@pytest.mark.parametrize(
    ("today", "monday"),
    [
        (date(2024, 1, 1), date(2024, 1, 1)),
        (date(2024, 1, 3), date(2024, 1, 1)),
        (date(2024, 1, 7), date(2024, 1, 1)),
        (date(2024, 1, 8), date(2024, 1, 8)),
    ],
)
def test_start_of_week_is_most_recent_monday(today: date, monday: date) -> None:
    calendar = LocalCalendar("UTC")

    expected = _epoch(monday.year, monday.month, monday.day)

    assert calendar.start_of_week(today) == expected


def test_start_of_week_is_local_midnight() -> None:
    calendar = LocalCalendar("America/New_York")

    start = calendar.start_of_week(date(2024, 1, 5))

    assert start == _epoch(2024, 1, 1, 5)


def test_day_distance_ignores_dst_shift() -> None:
    calendar = LocalCalendar("America/New_York")

    assert calendar.day_distance(date(2024, 3, 9), date(2024, 3, 10)) == 1
    assert calendar.day_distance(date(2024, 3, 10), date(2024, 3, 11)) == 1
    assert calendar.day_distance(date(2024, 11, 2), date(2024, 11, 4)) == 2


def test_now_and_today_follow_injected_clock() -> None:
    calendar = LocalCalendar("UTC", clock=lambda: _epoch(2024, 2, 29, 23) + 0.9)

    assert calendar.now() == _epoch(2024, 2, 29, 23)
    assert calendar.today() == date(2024, 2, 29)


def test_format_local_renders_wall_clock_time() -> None:
    calendar = LocalCalendar("UTC")

    assert calendar.format_local(_epoch(2024, 1, 5, 9)) == "2024-01-05 09:00:00"
