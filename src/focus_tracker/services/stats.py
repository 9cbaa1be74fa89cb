"""Statistics service for focus session logs."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from focus_tracker.domain.sessions import SessionRecord
from focus_tracker.domain.stats import DailyTotals
from focus_tracker.services.calendar import LocalCalendar
from focus_tracker.services.sessions import SessionLogRepository


@dataclass
class WeekSummary:
    """Week-to-date totals keyed by local day."""

    window_start: int
    window_end: int
    daily: dict[date, DailyTotals]

    @property
    def total_minutes(self) -> int:
        """Return the sum of every category on every day."""
        return sum(sum(totals.values()) for totals in self.daily.values())


@dataclass
class StatsService:
    """Service for computing a user's focus stats in local time."""

    repository: SessionLogRepository
    calendar: LocalCalendar

    def has_sessions(self, username: str) -> bool:
        """Return True once the user has logged at least one session."""
        return bool(self.repository.read_all(username).records)

    def get_today(self, username: str) -> DailyTotals:
        """Return today's per-category totals."""
        records = self.repository.read_all(username).records
        return daily_totals(records, self.calendar.today(), self.calendar)

    def get_week(self, username: str) -> WeekSummary:
        """Return week-to-date totals starting Monday 00:00 local."""
        records = self.repository.read_all(username).records
        now = self.calendar.now()
        start = self.calendar.start_of_week(self.calendar.to_local_day(now))
        return WeekSummary(
            window_start=start,
            window_end=now,
            daily=weekly_totals(records, start, now, self.calendar),
        )

    def get_history(self, username: str, limit: int = 10) -> list[SessionRecord]:
        """Return the most recent sessions, newest first."""
        records = self.repository.read_all(username).records
        ordered = sorted(records, key=lambda record: record.start_time, reverse=True)
        return ordered[:limit]


def daily_totals(
    records: Iterable[SessionRecord], target_day: date, calendar: LocalCalendar
) -> DailyTotals:
    """Sum minutes per category for records starting on target_day."""
    totals: dict[str, int] = defaultdict(int)
    for record in records:
        if calendar.to_local_day(record.start_time) != target_day:
            continue
        totals[record.category] += record.duration_minutes
    return dict(totals)


def weekly_totals(
    records: Iterable[SessionRecord],
    window_start: int,
    window_end: int,
    calendar: LocalCalendar,
) -> dict[date, DailyTotals]:
    """Group minutes by local day and category within [start, end]."""
    grouped: dict[date, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    for record in records:
        if not window_start <= record.start_time <= window_end:
            continue
        day = calendar.to_local_day(record.start_time)
        grouped[day][record.category] += record.duration_minutes
    return {day: dict(totals) for day, totals in grouped.items()}
