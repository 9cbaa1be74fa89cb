"""Tests for container wiring."""

from focus_tracker.config import Settings
from focus_tracker.containers import build_container


def test_build_container_uses_file_storage(settings) -> None:
    container = build_container(settings)

    record = container.focus_service.record("alice", "Study", 0, 1800)
    report = container.report_service.generate("alice")

    assert container.stats_service.repository.read_all("alice").records == [record]
    assert (settings.data_dir / "focus_log_alice.txt").exists()
    assert report.location == str(settings.data_dir / "weekly_report_alice.csv")


def test_build_container_creates_data_dir(tmp_path) -> None:
    data_dir = tmp_path / "nested" / "data"

    build_container(Settings(data_dir=data_dir))

    assert data_dir.is_dir()
