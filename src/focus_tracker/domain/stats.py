"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date

DailyTotals = dict[str, int]


@dataclass(frozen=True)
class StreakState:
    """Current and longest runs of consecutive active days."""

    current_streak: int
    longest_streak: int
    has_session_today: bool


@dataclass(frozen=True)
class ReportRow:
    """One (day, category) line of the weekly report."""

    day: date
    category: str
    total_minutes: int
