"""CSV snapshot writer for weekly reports."""

import csv
from dataclasses import dataclass
from pathlib import Path

from focus_tracker.domain.stats import ReportRow
from focus_tracker.services.reports import ReportWriter

REPORT_HEADER = ("Date", "Category", "Total Duration (minutes)")


@dataclass
class CsvReportWriter(ReportWriter):
    """Overwrites ``weekly_report_<username>.csv`` on every generation."""

    data_dir: Path

    def path_for(self, username: str) -> Path:
        """Return the report path for a user."""
        return self.data_dir / f"weekly_report_{username}.csv"

    def write_weekly_report(self, username: str, rows: list[ReportRow]) -> str:
        """Write the header and rows, replacing any earlier snapshot."""
        path = self.path_for(username)
        with path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(REPORT_HEADER)
            for row in rows:
                writer.writerow(
                    (row.day.isoformat(), row.category, row.total_minutes)
                )
        return str(path)
