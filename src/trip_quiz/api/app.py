"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from trip_quiz.api.models import ErrorResponse, ScreenResponse, SelectVenueRequest
from trip_quiz.app_logging import configure_logging
from trip_quiz.containers import AppContainer
from trip_quiz.domain.errors import (
    AtStartError,
    InterviewCompleteError,
    InterviewIncompleteError,
    InvalidSelectionError,
    PersistenceWriteError,
    QuizError,
    SessionNotStartedError,
)
from trip_quiz.domain.sessions import Screen, SessionState
from trip_quiz.services.interview import InterviewService
from trip_quiz.services.screens import (
    interview_view,
    plan_view,
    result_view,
    venue_detail,
)

_ERROR_STATUS: dict[type[QuizError], int] = {
    InvalidSelectionError: 422,
    AtStartError: 409,
    SessionNotStartedError: 409,
    InterviewCompleteError: 409,
    InterviewIncompleteError: 409,
    PersistenceWriteError: 503,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies.

    The persisted session is resumed, or a new one started, before the
    app is returned.
    """
    configure_logging()
    logger = logging.getLogger(__name__)
    container.interview_service.bootstrap()

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(QuizError)
    async def quiz_error_handler(request: Request, exc: QuizError) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), 400)
        if status_code >= 500:
            logger.error("Action failed", extra={"path": request.url.path})
        body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
        return JSONResponse(status_code=status_code, content=body.model_dump())

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/session")
    async def current_screen(request: Request) -> ScreenResponse:
        """Return the screen implied by the session state."""
        return _screen_response(_service(request))

    @app.post("/session/start")
    async def start_session(request: Request) -> ScreenResponse:
        """Assign a new customer and show the first question."""
        service = _service(request)
        service.start_session()
        return _screen_response(service)

    @app.post("/session/selections")
    async def select_venue(
        body: SelectVenueRequest, request: Request
    ) -> ScreenResponse:
        """Record a venue for the current category."""
        service = _service(request)
        service.select_venue(body.venue_id)
        return _screen_response(service)

    @app.post("/session/back")
    async def go_back(request: Request) -> ScreenResponse:
        """Return to the previous category."""
        service = _service(request)
        service.go_back()
        return _screen_response(service)

    @app.post("/session/restart")
    async def restart(request: Request) -> ScreenResponse:
        """Abandon the session and return to the home screen."""
        service = _service(request)
        service.restart()
        return _screen_response(service)

    @app.get("/session/venues/{venue_id}")
    async def show_venue(venue_id: str, request: Request) -> dict[str, object]:
        """Return the detail payload for a venue."""
        container_state: AppContainer = request.app.state.container
        return asdict(venue_detail(container_state.catalog, venue_id))

    @app.get("/session/plan")
    async def show_plan(request: Request) -> ScreenResponse:
        """Return the timeline of the completed plan."""
        service = _service(request)
        view = plan_view(_require_state(service), service.catalog)
        return ScreenResponse(screen=Screen.PLAN.value, view=asdict(view))

    @app.get("/session/result")
    async def show_result(request: Request) -> ScreenResponse:
        """Score the completed plan."""
        service = _service(request)
        view = result_view(service.compute_score())
        return ScreenResponse(screen=Screen.RESULT.value, view=asdict(view))

    return app


def _service(request: Request) -> InterviewService:
    container: AppContainer = request.app.state.container
    return container.interview_service


def _require_state(service: InterviewService) -> SessionState:
    if service.state is None:
        raise SessionNotStartedError("No active session")
    return service.state


def _screen_response(service: InterviewService) -> ScreenResponse:
    """Build the payload for the screen the session is on."""
    screen = service.current_screen()
    if screen is Screen.INTERVIEW:
        view = interview_view(service)
        return ScreenResponse(screen=screen.value, view=asdict(view))
    if screen is Screen.PLAN:
        plan = plan_view(_require_state(service), service.catalog)
        return ScreenResponse(screen=screen.value, view=asdict(plan))
    return ScreenResponse(screen=screen.value)
