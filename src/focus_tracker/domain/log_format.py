"""Line codec for the append-only session log.

Each line holds ``category,startEpochSeconds,endEpochSeconds,durationMinutes``.
Commas inside a category are not escaped, so such categories cannot be
stored; callers reject them before writing.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from focus_tracker.domain.sessions import SessionRecord

FIELD_COUNT = 4

# One day of slack on each side keeps every timezone offset inside datetime.
MIN_TIMESTAMP = int(datetime(1, 1, 2, tzinfo=UTC).timestamp())
MAX_TIMESTAMP = int(datetime(9999, 12, 30, tzinfo=UTC).timestamp())


@dataclass(frozen=True)
class ParsedLine:
    """A log line that decoded into a record."""

    record: SessionRecord
    clamped: bool = False


@dataclass(frozen=True)
class SkippedLine:
    """A log line that could not be decoded."""

    reason: str


LineResult = ParsedLine | SkippedLine


def format_line(record: SessionRecord) -> str:
    """Encode a record as one newline-terminated log line."""
    return (
        f"{record.category},{record.start_time},"
        f"{record.end_time},{record.duration_minutes}\n"
    )


def parse_line(line: str | bytes) -> LineResult:
    """Decode one log line into a record or a skip reason."""
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError:
            return SkippedLine(reason="invalid UTF-8")
    stripped = line.rstrip("\r\n")
    if not stripped.strip():
        return SkippedLine(reason="blank line")

    fields = stripped.split(",")
    if len(fields) != FIELD_COUNT:
        return SkippedLine(reason=f"expected {FIELD_COUNT} fields, got {len(fields)}")

    category, start_raw, end_raw, duration_raw = fields
    if not category:
        return SkippedLine(reason="empty category")

    try:
        start_time = int(start_raw)
        end_time = int(end_raw)
        duration = int(duration_raw)
    except ValueError:
        return SkippedLine(reason="non-numeric timestamp or duration")

    if not all(
        MIN_TIMESTAMP <= value <= MAX_TIMESTAMP for value in (start_time, end_time)
    ):
        return SkippedLine(reason="timestamp out of range")

    if end_time < start_time or duration < 0:
        record = SessionRecord(
            category=category,
            start_time=start_time,
            end_time=end_time,
            duration_minutes=0,
        )
        return ParsedLine(record=record, clamped=True)

    return ParsedLine(
        record=SessionRecord(
            category=category,
            start_time=start_time,
            end_time=end_time,
            duration_minutes=duration,
        )
    )
