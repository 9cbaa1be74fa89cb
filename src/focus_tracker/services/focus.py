"""Recording of manual focus sessions."""

import logging
from dataclasses import dataclass

from focus_tracker.domain.sessions import SessionRecord
from focus_tracker.services.calendar import LocalCalendar
from focus_tracker.services.sessions import SessionLogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveSession:
    """A focus session that has started but not yet been logged."""

    category: str
    start_time: int


@dataclass
class FocusSessionService:
    """Service for starting, finishing and logging focus sessions."""

    repository: SessionLogRepository
    calendar: LocalCalendar

    def start(self, category: str, now: int | None = None) -> ActiveSession:
        """Begin a session for a category."""
        cleaned = validate_category(category)
        start_time = self.calendar.now() if now is None else now
        return ActiveSession(category=cleaned, start_time=start_time)

    def finish(
        self, username: str, active: ActiveSession, now: int | None = None
    ) -> SessionRecord:
        """End a session and append it to the user's log."""
        end_time = self.calendar.now() if now is None else now
        return self.record(username, active.category, active.start_time, end_time)

    def record(
        self, username: str, category: str, start_time: int, end_time: int
    ) -> SessionRecord:
        """Append a completed session, clamping negative durations to zero."""
        cleaned = validate_category(category)
        if end_time < start_time:
            logger.warning(
                "Session ends before it starts; clamping duration to 0",
                extra={"username": username, "category": cleaned},
            )
        record = SessionRecord.from_times(cleaned, start_time, end_time)
        self.repository.append(username, record)
        return record


def validate_category(category: str) -> str:
    """Return the category stripped of surrounding whitespace.

    Commas are rejected because the log format cannot escape them.
    """
    cleaned = category.strip()
    if not cleaned:
        raise ValueError("Category must not be empty.")
    if "," in cleaned or "\n" in cleaned:
        raise ValueError("Category must not contain commas or newlines.")
    return cleaned
