"""File-backed append-only session log, one file per user."""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

from focus_tracker.domain.log_format import ParsedLine, format_line, parse_line
from focus_tracker.domain.sessions import LogReadResult, SessionRecord
from focus_tracker.services.sessions import SessionLogRepository

logger = logging.getLogger(__name__)


@dataclass
class FileSessionLogRepository(SessionLogRepository):
    """Stores each user's sessions in ``focus_log_<username>.txt``."""

    data_dir: Path
    _locks: dict[Path, threading.Lock] = field(
        init=False, default_factory=dict, repr=False
    )
    _registry_lock: threading.Lock = field(
        init=False, default_factory=threading.Lock, repr=False
    )

    def path_for(self, username: str) -> Path:
        """Return the log file path for a user."""
        return self.data_dir / f"focus_log_{username}.txt"

    def append(self, username: str, record: SessionRecord) -> None:
        """Append one record; OSError propagates to the caller."""
        path = self.path_for(username)
        with self._lock_for(path), path.open("a", encoding="utf-8") as handle:
            handle.write(format_line(record))
            handle.flush()

    def read_all(self, username: str) -> LogReadResult:
        """Return valid records in file order, counting malformed lines."""
        path = self.path_for(username)
        records: list[SessionRecord] = []
        skipped = 0
        with self._lock_for(path):
            try:
                handle = path.open("rb")
            except FileNotFoundError:
                return LogReadResult(records=[], skipped=0)
            with handle:
                for line_number, line in enumerate(handle, start=1):
                    result = parse_line(line)
                    if isinstance(result, ParsedLine):
                        if result.clamped:
                            logger.warning(
                                "Negative session duration clamped to 0",
                                extra={"path": str(path), "line_number": line_number},
                            )
                        records.append(result.record)
                        continue
                    skipped += 1
                    logger.warning(
                        "Skipping malformed log line: %s",
                        result.reason,
                        extra={"path": str(path), "line_number": line_number},
                    )
        return LogReadResult(records=records, skipped=skipped)

    def _lock_for(self, path: Path) -> threading.Lock:
        with self._registry_lock:
            return self._locks.setdefault(path, threading.Lock())
