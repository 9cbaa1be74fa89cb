"""Weekly report generation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from focus_tracker.domain.sessions import SessionRecord
from focus_tracker.domain.stats import ReportRow
from focus_tracker.services.calendar import LocalCalendar
from focus_tracker.services.sessions import SessionLogRepository
from focus_tracker.services.stats import weekly_totals

logger = logging.getLogger(__name__)


class ReportWriter(Protocol):
    """Persistence interface for weekly report snapshots."""

    def write_weekly_report(self, username: str, rows: list[ReportRow]) -> str:
        """Overwrite the user's snapshot and return where it was written."""


@dataclass(frozen=True)
class WeeklyReport:
    """Generated report rows and the snapshot location."""

    rows: list[ReportRow]
    location: str


@dataclass
class ReportService:
    """Service for producing weekly report snapshots."""

    repository: SessionLogRepository
    writer: ReportWriter
    calendar: LocalCalendar

    def generate(self, username: str) -> WeeklyReport:
        """Build the week-to-date report and overwrite the user's snapshot."""
        records = self.repository.read_all(username).records
        rows = generate_weekly_report(records, self.calendar.now(), self.calendar)
        location = self.writer.write_weekly_report(username, rows)
        logger.info(
            "Weekly report written",
            extra={"username": username, "rows": len(rows), "location": location},
        )
        return WeeklyReport(rows=rows, location=location)


def generate_weekly_report(
    records: Iterable[SessionRecord], now: int, calendar: LocalCalendar
) -> list[ReportRow]:
    """Return week-to-date rows sorted by day, then category."""
    window_start = calendar.start_of_week(calendar.to_local_day(now))
    grouped = weekly_totals(records, window_start, now, calendar)
    return [
        ReportRow(day=day, category=category, total_minutes=grouped[day][category])
        for day in sorted(grouped)
        for category in sorted(grouped[day])
    ]
