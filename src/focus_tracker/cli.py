"""Interactive command-line menu."""

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from focus_tracker.app_logging import configure_logging
from focus_tracker.config import Settings
from focus_tracker.containers import AppContainer, build_container
from focus_tracker.domain.sessions import SessionRecord
from focus_tracker.services.pomodoro import Phase, PomodoroPlan
from focus_tracker.services.users import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
)

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


@dataclass
class FocusTrackerCli:
    """Menu loop driving the services for one logged-in user at a time."""

    container: AppContainer
    read: InputFn = input
    write: OutputFn = print

    def run(self) -> None:
        """Show the login menu, then the main menu until the user exits."""
        while True:
            username = self._login_menu()
            if username is None:
                self.write("Exiting...")
                return
            if not self._main_menu(username):
                self.write("Exiting...")
                return

    def _login_menu(self) -> str | None:
        while True:
            self.write("\n==== Welcome to Focus Tracker ====")
            self.write("1. Login\n2. Register\n3. Exit")
            choice = self.read("Enter your choice: ").strip()
            if choice == "1":
                username = self._login()
                if username:
                    return username
            elif choice == "2":
                self._register()
            elif choice == "3":
                return None
            else:
                self.write("Invalid option! Please try again.")

    def _main_menu(self, username: str) -> bool:
        """Return False on exit, True on logout."""
        actions: dict[str, Callable[[str], None]] = {
            "1": self._manual_session,
            "2": self._pomodoro,
            "3": self._daily_summary,
            "4": self._weekly_report,
            "5": self._streaks,
        }
        while True:
            self.write(f"\n==== Focus Tracker Menu ({username}) ====")
            self.write(
                "1. Start Manual Focus Session\n2. Start Pomodoro Session\n"
                "3. View Today's Summary\n4. Generate Weekly Report (CSV)\n"
                "5. Track Streaks\n6. Logout\n7. Exit"
            )
            choice = self.read("Enter your choice: ").strip()
            if choice == "6":
                self.write("Logged out successfully.")
                return True
            if choice == "7":
                return False
            action = actions.get(choice)
            if action is None:
                self.write("Invalid option! Please try again.")
                continue
            action(username)

    def _register(self) -> None:
        self.write("\n--- Register New User ---")
        username = self.read("Enter desired username: ")
        password = self.read("Enter password: ")
        try:
            user = self.container.user_service.register(username, password)
        except UserAlreadyExistsError:
            self.write("Username already exists. Please choose a different one.")
            return
        except ValueError as exc:
            self.write(str(exc))
            return
        except OSError:
            logger.exception("Failed to save users file")
            self.write("Error: Could not save the users file.")
            return
        self.write(f"User '{user.username}' registered successfully!")

    def _login(self) -> str | None:
        self.write("\n--- Login ---")
        username = self.read("Enter username: ")
        password = self.read("Enter password: ")
        try:
            user = self.container.user_service.authenticate(username, password)
        except InvalidCredentialsError:
            self.write("Invalid username or password.")
            return None
        self.write(f"Welcome, {user.username}!")
        return user.username

    def _manual_session(self, username: str) -> None:
        category = self.read("\nEnter focus category (Study/Work/Reading/etc.): ")
        try:
            active = self.container.focus_service.start(category)
        except ValueError as exc:
            self.write(str(exc))
            return
        started = self.container.calendar.format_local(active.start_time)
        self.write(f"Session started at {started}")
        self.read("Press ENTER to end session...")
        try:
            record = self.container.focus_service.finish(username, active)
        except OSError:
            logger.exception("Failed to log session")
            self.write("Error: Could not write to the session log. Session not saved.")
            return
        self.write("\nSession ended. Summary:")
        self.write(self._describe(record))

    def _pomodoro(self, username: str) -> None:
        self.write("\n--- Start Pomodoro Session ---")
        try:
            focus_minutes = int(self.read("Enter focus duration (minutes): "))
            break_minutes = int(self.read("Enter break duration (minutes): "))
            cycles = int(self.read("Enter number of cycles: "))
            category = self.read("Enter focus category for Pomodoro sessions: ")
            plan = PomodoroPlan(category.strip(), focus_minutes, break_minutes, cycles)
        except ValueError as exc:
            self.write(f"Invalid Pomodoro settings: {exc}")
            return

        runner = self.container.pomodoro_runner

        def on_tick(phase: Phase, cycle: int, remaining: int) -> None:
            if remaining == (
                plan.focus_minutes if phase is Phase.FOCUS else plan.break_minutes
            ):
                label = "Focus Time!" if phase is Phase.FOCUS else "Break Time!"
                self.write(f"\n--- Cycle {cycle}/{plan.cycles} --- {label}")
            self.write(f"Time remaining: {remaining} minutes...")

        try:
            result = runner.run(username, plan, on_tick)
        except KeyboardInterrupt:
            runner.cancel()
            self.write("\nPomodoro cancelled.")
            return
        except OSError:
            logger.exception("Failed to log Pomodoro session")
            self.write("Error: Could not write to the session log.")
            return
        if result.cancelled:
            self.write("\nPomodoro cancelled.")
            return
        self.write("\nPomodoro session completed!")

    def _daily_summary(self, username: str) -> None:
        if not self.container.stats_service.has_sessions(username):
            self.write(f"No focus sessions logged yet for {username}.")
            return
        totals = self.container.stats_service.get_today(username)
        self.write(f"\nToday's Focus Summary for {username}:")
        if not totals:
            self.write("No sessions recorded today.")
            return
        for category in sorted(totals):
            self.write(f" - {category}: {totals[category]} minutes")

    def _weekly_report(self, username: str) -> None:
        try:
            report = self.container.report_service.generate(username)
        except OSError:
            logger.exception("Failed to write weekly report")
            self.write("Error: Could not open weekly report file for writing.")
            return
        self.write(
            f"\nWeekly report generated successfully for {username} "
            f"at {report.location}"
        )

    def _streaks(self, username: str) -> None:
        report = self.container.streak_service.get_streaks(username)
        if report.state.longest_streak == 0:
            self.write("\nNo sessions recorded to track streaks.")
            return
        self.write(f"\n--- Focus Streaks for {username} ---")
        self.write(f"Current Streak: {report.state.current_streak} consecutive days")
        self.write(f"Longest Streak: {report.state.longest_streak} consecutive days")
        if report.notice:
            self.write(f"Note: {report.notice}")

    def _describe(self, record: SessionRecord) -> str:
        started = self.container.calendar.format_local(record.start_time)
        return (
            f"Category: {record.category}, "
            f"Duration: {record.duration_minutes} minutes, "
            f"Start Time: {started}"
        )


def main(argv: list[str] | None = None) -> None:
    """Run the interactive focus tracker."""
    parser = argparse.ArgumentParser(description="Focus Tracker")
    parser.add_argument("--data-dir", help="directory for logs and reports")
    parser.add_argument("--timezone", help="IANA timezone for day boundaries")
    args = parser.parse_args(argv)

    overrides: dict[str, object] = {}
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    if args.timezone:
        overrides["timezone"] = args.timezone
    settings = Settings(**overrides)
    configure_logging(settings.log_level, settings.log_format)
    container = build_container(settings)
    FocusTrackerCli(container, read=input, write=print).run()


if __name__ == "__main__":
    main()
