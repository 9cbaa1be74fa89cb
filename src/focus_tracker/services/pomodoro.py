"""Cancellable Pomodoro cycles that log each focus period."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from focus_tracker.domain.sessions import SessionRecord
from focus_tracker.services.focus import FocusSessionService, validate_category

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Pomodoro countdown phase."""

    FOCUS = "focus"
    BREAK = "break"


TickCallback = Callable[[Phase, int, int], None]


@dataclass(frozen=True)
class PomodoroPlan:
    """Durations in minutes and the number of focus cycles."""

    category: str
    focus_minutes: int
    break_minutes: int
    cycles: int

    def __post_init__(self) -> None:
        validate_category(self.category)
        if self.focus_minutes <= 0:
            raise ValueError("Focus duration must be a positive number of minutes.")
        if self.break_minutes < 0:
            raise ValueError("Break duration must not be negative.")
        if self.cycles <= 0:
            raise ValueError("Number of cycles must be positive.")


@dataclass
class PomodoroResult:
    """Outcome of a Pomodoro run."""

    records: list[SessionRecord] = field(default_factory=list)
    cancelled: bool = False


def _ignore_tick(phase: Phase, cycle: int, remaining: int) -> None:
    return None


@dataclass
class PomodoroRunner:
    """Runs focus/break countdowns, logging a session after each focus period.

    Waiting happens on an event so ``cancel`` stops the run at the next tick.
    A cancelled focus period is not logged.
    """

    focus_service: FocusSessionService
    tick_seconds: float = 60.0
    _cancelled: threading.Event = field(
        init=False, default_factory=threading.Event, repr=False
    )

    def cancel(self) -> None:
        """Request the running countdown to stop."""
        self._cancelled.set()

    def run(
        self,
        username: str,
        plan: PomodoroPlan,
        on_tick: TickCallback = _ignore_tick,
    ) -> PomodoroResult:
        """Run every cycle of the plan for a user."""
        self._cancelled.clear()
        result = PomodoroResult()
        for cycle in range(1, plan.cycles + 1):
            active = self.focus_service.start(plan.category)
            if not self._countdown(Phase.FOCUS, cycle, plan.focus_minutes, on_tick):
                result.cancelled = True
                break
            record = self.focus_service.finish(username, active)
            result.records.append(record)
            logger.info(
                "Pomodoro focus period logged",
                extra={"username": username, "cycle": cycle},
            )
            if cycle < plan.cycles and not self._countdown(
                Phase.BREAK, cycle, plan.break_minutes, on_tick
            ):
                result.cancelled = True
                break
        return result

    def _countdown(
        self, phase: Phase, cycle: int, minutes: int, on_tick: TickCallback
    ) -> bool:
        for remaining in range(minutes, 0, -1):
            on_tick(phase, cycle, remaining)
            if self._cancelled.wait(self.tick_seconds):
                return False
        return True
