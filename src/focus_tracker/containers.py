"""Dependency container wiring for the application."""

from dataclasses import dataclass

from focus_tracker.adapters.csv_report_writer import CsvReportWriter
from focus_tracker.adapters.file_session_log_repository import (
    FileSessionLogRepository,
)
from focus_tracker.adapters.file_user_repository import FileUserRepository
from focus_tracker.config import Settings
from focus_tracker.services.calendar import LocalCalendar
from focus_tracker.services.focus import FocusSessionService
from focus_tracker.services.pomodoro import PomodoroRunner
from focus_tracker.services.reports import ReportService
from focus_tracker.services.stats import StatsService
from focus_tracker.services.streaks import StreakService
from focus_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calendar: LocalCalendar
    user_service: UserService
    focus_service: FocusSessionService
    pomodoro_runner: PomodoroRunner
    stats_service: StatsService
    streak_service: StreakService
    report_service: ReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_settings.data_dir.mkdir(parents=True, exist_ok=True)
    calendar = LocalCalendar(resolved_settings.timezone)
    session_log = FileSessionLogRepository(resolved_settings.data_dir)
    user_repository = FileUserRepository(resolved_settings.users_path)
    report_writer = CsvReportWriter(resolved_settings.data_dir)
    focus_service = FocusSessionService(session_log, calendar)
    return AppContainer(
        settings=resolved_settings,
        calendar=calendar,
        user_service=UserService(user_repository),
        focus_service=focus_service,
        pomodoro_runner=PomodoroRunner(
            focus_service, tick_seconds=resolved_settings.tick_seconds
        ),
        stats_service=StatsService(session_log, calendar),
        streak_service=StreakService(session_log, calendar),
        report_service=ReportService(session_log, report_writer, calendar),
    )
