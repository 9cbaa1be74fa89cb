"""Session log port shared by the query and recording services."""

from typing import Protocol

from focus_tracker.domain.sessions import LogReadResult, SessionRecord


class SessionLogRepository(Protocol):
    """Persistence interface for a user's append-only session log."""

    def append(self, username: str, record: SessionRecord) -> None:
        """Durably append one record, raising OSError on failure."""

    def read_all(self, username: str) -> LogReadResult:
        """Return every valid record in log order and the skipped line count."""
