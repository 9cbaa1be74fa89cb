"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from pathlib import Path

import pytest

from focus_tracker.config import Settings
from focus_tracker.containers import AppContainer
from focus_tracker.domain.models import UserRecord
from focus_tracker.domain.sessions import LogReadResult, SessionRecord
from focus_tracker.domain.stats import ReportRow
from focus_tracker.services.calendar import LocalCalendar
from focus_tracker.services.focus import FocusSessionService
from focus_tracker.services.pomodoro import PomodoroRunner
from focus_tracker.services.reports import ReportService, ReportWriter
from focus_tracker.services.sessions import SessionLogRepository
from focus_tracker.services.stats import StatsService
from focus_tracker.services.streaks import StreakService
from focus_tracker.services.users import UserRepository, UserService

# Friday 2024-01-05 12:00 UTC; Monday of that week is 2024-01-01.
FIXED_NOW = int(datetime(2024, 1, 5, 12, 0, tzinfo=UTC).timestamp())


def at(day: date, hour: int = 12, minute: int = 0) -> int:
    """Return epoch seconds for a UTC wall-clock time on a day."""
    return int(
        datetime(day.year, day.month, day.day, hour, minute, tzinfo=UTC).timestamp()
    )


def session(category: str, day: date, minutes: int, hour: int = 12) -> SessionRecord:
    """Build a record starting at hour:00 UTC on day."""
    start = at(day, hour)
    return SessionRecord.from_times(category, start, start + minutes * 60)


def fixed_calendar(now: int = FIXED_NOW, timezone_name: str = "UTC") -> LocalCalendar:
    return LocalCalendar(timezone_name, clock=lambda: now)


@dataclass
class InMemorySessionLogRepository(SessionLogRepository):
    """In-memory session log for tests."""

    logs: dict[str, list[SessionRecord]] = field(default_factory=dict)
    skipped: int = 0
    fail_writes: bool = False

    def append(self, username: str, record: SessionRecord) -> None:
        if self.fail_writes:
            raise PermissionError("log is read-only")
        self.logs.setdefault(username, []).append(record)

    def read_all(self, username: str) -> LogReadResult:
        return LogReadResult(
            records=list(self.logs.get(username, [])), skipped=self.skipped
        )


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)

    def get_by_username(self, username: str) -> UserRecord | None:
        return self.users.get(username)

    def create_user(self, username: str, hashed_password: str) -> UserRecord:
        user = UserRecord(username=username, hashed_password=hashed_password)
        self.users[username] = user
        return user


@dataclass
class FakeReportWriter(ReportWriter):
    """Report writer that keeps the last snapshot per user."""

    snapshots: dict[str, list[ReportRow]] = field(default_factory=dict)
    fail_writes: bool = False

    def write_weekly_report(self, username: str, rows: list[ReportRow]) -> str:
        if self.fail_writes:
            raise PermissionError("report directory is read-only")
        self.snapshots[username] = rows
        return f"memory://weekly_report_{username}.csv"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path, timezone="UTC", tick_seconds=0)


@pytest.fixture
def calendar() -> LocalCalendar:
    return fixed_calendar()


@pytest.fixture
def session_log() -> InMemorySessionLogRepository:
    return InMemorySessionLogRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def report_writer() -> FakeReportWriter:
    return FakeReportWriter()


@pytest.fixture
def container(
    settings: Settings,
    calendar: LocalCalendar,
    session_log: InMemorySessionLogRepository,
    user_repository: InMemoryUserRepository,
    report_writer: FakeReportWriter,
) -> AppContainer:
    focus_service = FocusSessionService(session_log, calendar)
    return AppContainer(
        settings=settings,
        calendar=calendar,
        user_service=UserService(user_repository),
        focus_service=focus_service,
        pomodoro_runner=PomodoroRunner(focus_service, tick_seconds=0),
        stats_service=StatsService(session_log, calendar),
        streak_service=StreakService(session_log, calendar),
        report_service=ReportService(session_log, report_writer, calendar),
    )
