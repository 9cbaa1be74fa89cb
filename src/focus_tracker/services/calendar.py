"""Local-time calendar helpers for day boundaries."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, tzinfo
from datetime import time as day_time
from zoneinfo import ZoneInfo


@dataclass
class LocalCalendar:
    """Converts epoch instants to calendar days in one timezone.

    ``timezone_name=None`` uses the process's local timezone.
    """

    timezone_name: str | None = None
    clock: Callable[[], float] = time.time
    _tz: tzinfo | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        if self.timezone_name:
            self._tz = ZoneInfo(self.timezone_name)

    def now(self) -> int:
        """Return the current instant in whole epoch seconds."""
        return int(self.clock())

    def today(self) -> date:
        """Return today's calendar day."""
        return self.to_local_day(self.now())

    def to_local_day(self, instant: int) -> date:
        """Return the local calendar day containing an instant."""
        return datetime.fromtimestamp(instant, tz=self._tz).date()

    def format_local(self, instant: int) -> str:
        """Format an instant as local date and time."""
        return datetime.fromtimestamp(instant, tz=self._tz).strftime(
            "%Y-%m-%d %H:%M:%S"
        )

    def day_distance(self, first: date, second: date) -> int:
        """Return whole calendar days from first to second."""
        return (second - first).days

    def start_of_week(self, today: date) -> int:
        """Return local midnight of the most recent Monday as epoch seconds."""
        monday = today - timedelta(days=today.weekday())
        midnight = datetime.combine(monday, day_time.min, tzinfo=self._tz)
        return int(midnight.timestamp())
