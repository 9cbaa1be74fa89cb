"""Domain models for focus sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionRecord:
    """A completed focus session as stored in the session log."""

    category: str
    start_time: int
    end_time: int
    duration_minutes: int

    @classmethod
    def from_times(
        cls, category: str, start_time: int, end_time: int
    ) -> "SessionRecord":
        """Build a record, deriving whole minutes from the two instants."""
        return cls(
            category=category,
            start_time=start_time,
            end_time=end_time,
            duration_minutes=duration_minutes(start_time, end_time),
        )


@dataclass(frozen=True)
class LogReadResult:
    """Records read from a session log plus the number of skipped lines."""

    records: list[SessionRecord]
    skipped: int = 0


def duration_minutes(start_time: int, end_time: int) -> int:
    """Return floor((end - start) / 60), clamped to zero."""
    if end_time < start_time:
        return 0
    return (end_time - start_time) // 60
