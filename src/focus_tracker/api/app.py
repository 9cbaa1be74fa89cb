"""FastAPI application factory."""

import logging

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status

from focus_tracker.api.models import (
    DailySummaryResponse,
    RegisterRequest,
    ReportRowResponse,
    SessionCreate,
    SessionResponse,
    StreakResponse,
    UserResponse,
    WeeklyReportResponse,
    WeekSummaryResponse,
)
from focus_tracker.app_logging import configure_logging
from focus_tracker.containers import AppContainer
from focus_tracker.domain.models import UserRecord
from focus_tracker.domain.sessions import SessionRecord
from focus_tracker.services.users import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
)

logger = logging.getLogger(__name__)


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


def require_user(
    x_username: str | None = Header(default=None),
    x_password: str | None = Header(default=None),
    container: AppContainer = Depends(_get_container),
) -> UserRecord:
    """Resolve the calling user from credential headers."""
    if not x_username or x_password is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return container.user_service.authenticate(x_username, x_password)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from exc


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level, container.settings.log_format)

    app = FastAPI(title="Focus Tracker")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/users", status_code=status.HTTP_201_CREATED)
    def register(payload: RegisterRequest, request: Request) -> UserResponse:
        """Register a new user."""
        state_container: AppContainer = request.app.state.container
        try:
            user = state_container.user_service.register(
                payload.username, payload.password
            )
        except UserAlreadyExistsError as exc:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Username already exists.",
            ) from exc
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except OSError as exc:
            logger.exception(
                "Failed to save user", extra={"username": payload.username}
            )
            raise _write_failure(state_container, exc, "Could not save user.") from exc
        return UserResponse(username=user.username)

    @app.post("/sessions", status_code=status.HTTP_201_CREATED)
    def log_session(
        payload: SessionCreate,
        request: Request,
        user: UserRecord = Depends(require_user),
    ) -> SessionResponse:
        """Append a completed session to the caller's log."""
        state_container: AppContainer = request.app.state.container
        try:
            record = state_container.focus_service.record(
                user.username, payload.category, payload.start_time, payload.end_time
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except OSError as exc:
            logger.exception("Failed to log session", extra={"username": user.username})
            raise _write_failure(
                state_container, exc, "Could not save the session."
            ) from exc
        return _session_response(record)

    @app.get("/stats/today")
    def today(
        request: Request, user: UserRecord = Depends(require_user)
    ) -> DailySummaryResponse:
        """Return today's minutes per category."""
        state_container: AppContainer = request.app.state.container
        totals = state_container.stats_service.get_today(user.username)
        return DailySummaryResponse(day=state_container.calendar.today(), totals=totals)

    @app.get("/stats/week")
    def week(
        request: Request, user: UserRecord = Depends(require_user)
    ) -> WeekSummaryResponse:
        """Return week-to-date minutes per day and category."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.stats_service.get_week(user.username)
        return WeekSummaryResponse(
            window_start=summary.window_start,
            window_end=summary.window_end,
            total_minutes=summary.total_minutes,
            days=[
                DailySummaryResponse(day=day, totals=summary.daily[day])
                for day in sorted(summary.daily)
            ],
        )

    @app.get("/stats/history")
    def history(
        request: Request, limit: int = 10, user: UserRecord = Depends(require_user)
    ) -> list[SessionResponse]:
        """Return the most recent sessions."""
        state_container: AppContainer = request.app.state.container
        records = state_container.stats_service.get_history(user.username, limit)
        return [_session_response(record) for record in records]

    @app.get("/streaks")
    def streaks(
        request: Request, user: UserRecord = Depends(require_user)
    ) -> StreakResponse:
        """Return current and longest streaks."""
        state_container: AppContainer = request.app.state.container
        report = state_container.streak_service.get_streaks(user.username)
        return StreakResponse(
            current_streak=report.state.current_streak,
            longest_streak=report.state.longest_streak,
            has_session_today=report.state.has_session_today,
            notice=report.notice,
        )

    @app.post("/reports/weekly")
    def weekly_report(
        request: Request, user: UserRecord = Depends(require_user)
    ) -> WeeklyReportResponse:
        """Write the weekly CSV snapshot and return its rows."""
        state_container: AppContainer = request.app.state.container
        try:
            report = state_container.report_service.generate(user.username)
        except OSError as exc:
            logger.exception(
                "Failed to write weekly report", extra={"username": user.username}
            )
            raise _write_failure(
                state_container, exc, "Could not write the weekly report."
            ) from exc
        return WeeklyReportResponse(
            location=report.location,
            rows=[
                ReportRowResponse(
                    day=row.day, category=row.category, total_minutes=row.total_minutes
                )
                for row in report.rows
            ],
        )

    return app


def _session_response(record: SessionRecord) -> SessionResponse:
    return SessionResponse(
        category=record.category,
        start_time=record.start_time,
        end_time=record.end_time,
        duration_minutes=record.duration_minutes,
    )


def _write_failure(
    state_container: AppContainer, exc: Exception, fallback: str
) -> HTTPException:
    """Return a 500 error with local debug info when running locally."""
    detail = fallback
    if state_container.settings.environment == "local":
        debug = f"{type(exc).__name__}: {exc}".strip()
        if debug:
            detail = f"{fallback} (debug: {debug})"
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
    )
