"""Day-streak computation over a user's session log."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from focus_tracker.domain.sessions import SessionRecord
from focus_tracker.domain.stats import StreakState
from focus_tracker.services.calendar import LocalCalendar
from focus_tracker.services.sessions import SessionLogRepository

STALE_STREAK_NOTICE = (
    "No session recorded today. Your current streak might reset tomorrow "
    "if you don't log a session."
)


@dataclass(frozen=True)
class StreakReport:
    """Streak state plus an optional notice for the user."""

    state: StreakState
    notice: str | None


@dataclass
class StreakService:
    """Service for reporting a user's focus streaks."""

    repository: SessionLogRepository
    calendar: LocalCalendar

    def get_streaks(self, username: str) -> StreakReport:
        """Return streaks for the user, warning when today has no session.

        The current streak ends at the last logged day and is left as is
        when that day is in the past.
        """
        records = self.repository.read_all(username).records
        state = compute_streaks(records, self.calendar)
        notice = None
        if records and not state.has_session_today:
            notice = STALE_STREAK_NOTICE
        return StreakReport(state=state, notice=notice)


def active_days(
    records: Iterable[SessionRecord], calendar: LocalCalendar
) -> list[date]:
    """Return the sorted unique local days that have at least one session."""
    return sorted({calendar.to_local_day(record.start_time) for record in records})


def compute_streaks(
    records: Iterable[SessionRecord],
    calendar: LocalCalendar,
    today: date | None = None,
) -> StreakState:
    """Compute current and longest consecutive-day streaks."""
    days = active_days(records, calendar)
    if not days:
        return StreakState(current_streak=0, longest_streak=0, has_session_today=False)

    current = longest = 1
    for previous, day in zip(days, days[1:]):
        distance = calendar.day_distance(previous, day)
        if distance == 1:
            current += 1
        elif distance > 1:
            current = 1
        longest = max(longest, current)

    resolved_today = today or calendar.today()
    return StreakState(
        current_streak=current,
        longest_streak=longest,
        has_session_today=resolved_today in days,
    )
