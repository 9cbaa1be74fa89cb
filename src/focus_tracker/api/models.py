"""Pydantic models for the HTTP API."""

from datetime import date

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Registration payload."""

    username: str
    password: str


class UserResponse(BaseModel):
    """Public view of a user."""

    username: str


class SessionCreate(BaseModel):
    """A completed focus session to log."""

    category: str
    start_time: int = Field(description="Epoch seconds")
    end_time: int = Field(description="Epoch seconds")


class SessionResponse(BaseModel):
    """A stored focus session."""

    category: str
    start_time: int
    end_time: int
    duration_minutes: int


class DailySummaryResponse(BaseModel):
    """Per-category minutes for one day."""

    day: date
    totals: dict[str, int]


class WeekSummaryResponse(BaseModel):
    """Week-to-date minutes per day and category."""

    window_start: int
    window_end: int
    total_minutes: int
    days: list[DailySummaryResponse]


class StreakResponse(BaseModel):
    """Current and longest streaks."""

    current_streak: int
    longest_streak: int
    has_session_today: bool
    notice: str | None = None


class ReportRowResponse(BaseModel):
    """One weekly report row."""

    day: date
    category: str
    total_minutes: int


class WeeklyReportResponse(BaseModel):
    """Generated weekly report."""

    location: str
    rows: list[ReportRowResponse]
