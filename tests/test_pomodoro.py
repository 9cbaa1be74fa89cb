"""Tests for the Pomodoro runner."""

import pytest

from focus_tracker.services.focus import FocusSessionService
from focus_tracker.services.pomodoro import Phase, PomodoroPlan, PomodoroRunner


def test_run_logs_one_session_per_cycle(session_log, calendar) -> None:
    runner = PomodoroRunner(FocusSessionService(session_log, calendar), tick_seconds=0)
    ticks: list[tuple[Phase, int, int]] = []

    result = runner.run(
        "alice",
        PomodoroPlan("Study", focus_minutes=2, break_minutes=1, cycles=2),
        lambda phase, cycle, remaining: ticks.append((phase, cycle, remaining)),
    )

    assert result.cancelled is False
    assert len(result.records) == 2
    assert session_log.logs["alice"] == result.records
    assert all(record.category == "Study" for record in result.records)
    assert ticks == [
        (Phase.FOCUS, 1, 2),
        (Phase.FOCUS, 1, 1),
        (Phase.BREAK, 1, 1),
        (Phase.FOCUS, 2, 2),
        (Phase.FOCUS, 2, 1),
    ]


def test_cancel_during_focus_skips_logging(session_log, calendar) -> None:
    runner = PomodoroRunner(FocusSessionService(session_log, calendar), tick_seconds=0)

    def on_tick(phase: Phase, cycle: int, remaining: int) -> None:
        if cycle == 2:
            runner.cancel()

    result = runner.run(
        "alice",
        PomodoroPlan("Study", focus_minutes=1, break_minutes=1, cycles=3),
        on_tick,
    )

    assert result.cancelled is True
    assert len(result.records) == 1
    assert len(session_log.logs["alice"]) == 1


def test_cancel_during_break_keeps_logged_focus(session_log, calendar) -> None:
    runner = PomodoroRunner(FocusSessionService(session_log, calendar), tick_seconds=0)

    def on_tick(phase: Phase, cycle: int, remaining: int) -> None:
        if phase is Phase.BREAK:
            runner.cancel()

    result = runner.run(
        "alice",
        PomodoroPlan("Study", focus_minutes=1, break_minutes=5, cycles=2),
        on_tick,
    )

    assert result.cancelled is True
    assert len(result.records) == 1


def test_runner_can_run_again_after_cancel(session_log, calendar) -> None:
    runner = PomodoroRunner(FocusSessionService(session_log, calendar), tick_seconds=0)
    runner.cancel()

    result = runner.run("alice", PomodoroPlan("Study", 1, 0, 1))

    assert result.cancelled is False
    assert len(result.records) == 1


@pytest.mark.parametrize(
    ("focus", "rest", "cycles"),
    [(0, 5, 1), (25, -1, 1), (25, 5, 0)],
)
def test_plan_rejects_invalid_settings(focus: int, rest: int, cycles: int) -> None:
    with pytest.raises(ValueError):
        PomodoroPlan("Study", focus, rest, cycles)


def test_plan_rejects_comma_category() -> None:
    with pytest.raises(ValueError):
        PomodoroPlan("Study,Work", 25, 5, 1)
